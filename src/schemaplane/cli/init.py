"""spl init command - create .schemaplane/config.yaml for a project."""

from pathlib import Path

import click

from schemaplane.config.loader import CONFIG_DIR_NAME
from schemaplane.config.user_config import DEFAULT_SCHEMA_PATH, UserConfig, write_user_config
from schemaplane.core.progress import get_console, status

# Checked in order when --schema is not given
_SCHEMA_CANDIDATES = (DEFAULT_SCHEMA_PATH, "schema.prisma", "prisma/schema/schema.prisma")


def detect_schema_path(repo_root: Path) -> str | None:
    for candidate in _SCHEMA_CANDIDATES:
        if (repo_root / candidate).is_file():
            return candidate
    return None


def initialize_project(
    repo_root: Path,
    *,
    force: bool = False,
    schema_path: str | None = None,
) -> bool:
    """Write the project config, returning False when it already exists.

    Args:
        repo_root: Project root
        force: Overwrite an existing config file
        schema_path: Schema location to record (detected when None)
    """
    config_dir = repo_root / CONFIG_DIR_NAME
    config_path = config_dir / "config.yaml"
    console = get_console()

    if config_path.exists() and not force:
        status(f"Already initialized: {config_dir}", style="info")
        status("Use --force to reinitialize", style="info")
        return False

    status(f"Initializing SchemaPlane in {repo_root}", style="none")

    found = schema_path or detect_schema_path(repo_root)
    if found is None:
        status(f"No schema found, defaulting to {DEFAULT_SCHEMA_PATH}", style="warning")
        found = DEFAULT_SCHEMA_PATH
    else:
        status(f"Schema: {found}", style="info")

    write_user_config(config_path, UserConfig(schema_path=found))

    console.print()
    status(f"Config created at {config_path.relative_to(repo_root)}", style="success")
    status("Ready. Run 'spl validate' to lint the schema.", style="none")
    return True


@click.command()
@click.argument("path", default=None, required=False, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Overwrite existing .schemaplane/config.yaml")
@click.option("--schema", "schema_path", default=None, help="Schema path to record, relative to PATH")
def init_command(path: Path | None, force: bool, schema_path: str | None) -> None:
    """Initialize a project for SchemaPlane.

    PATH is the project root. If not specified, auto-detects by walking
    up from the current directory.
    """
    from schemaplane.cli.utils import find_repo_root

    repo_root = path.resolve() if path else find_repo_root()
    initialize_project(repo_root, force=force, schema_path=schema_path)
