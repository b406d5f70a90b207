"""CLI utilities - repo discovery, config and schema loading, file output."""

from pathlib import Path

import click
import structlog

from schemaplane.config.loader import CONFIG_DIR_NAME, load_config
from schemaplane.config.models import SchemaPlaneConfig
from schemaplane.core.errors import ConfigError, SourceError
from schemaplane.core.logging import configure_logging
from schemaplane.schema.models import ParsedSchema
from schemaplane.schema.parser import parse

log = structlog.get_logger(__name__)

schema_option = click.option(
    "--schema",
    "schema_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Schema file (default: paths.schema_path from config)",
)


def find_repo_root(start_path: Path | None = None) -> Path:
    """Find the project root from the given path.

    Walks up the directory tree looking for a .schemaplane or .git
    directory. Falls back to the start path when neither is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    current = start
    while True:
        if (current / CONFIG_DIR_NAME).is_dir() or (current / ".git").exists():
            return current
        if current == current.parent:
            return start
        current = current.parent


def load_cli_config(ctx: click.Context, repo_root: Path) -> SchemaPlaneConfig:
    """Load config and apply its logging section unless --verbose was given."""
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    verbose = bool(ctx.find_root().obj and ctx.find_root().obj.get("verbose"))
    if not verbose:
        configure_logging(config=config.logging)
    return config


def resolve_path(repo_root: Path, path: str | Path) -> Path:
    p = Path(path).expanduser()
    return p if p.is_absolute() else repo_root / p


def read_schema(path: Path) -> str:
    """Read schema text, raising SourceError when missing or unreadable."""
    if not path.is_file():
        raise SourceError.not_found(str(path))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError.unreadable(str(path), str(e)) from e


def load_schema(
    repo_root: Path,
    config: SchemaPlaneConfig,
    schema_path: Path | None,
) -> tuple[ParsedSchema, Path]:
    """Resolve, read and parse the schema; config and I/O errors become ClickExceptions."""
    if schema_path is None and not config.paths.schema_path.strip():
        raise click.ClickException(str(ConfigError.missing_required("paths.schema_path")))
    path = resolve_path(repo_root, schema_path or config.paths.schema_path)
    try:
        text = read_schema(path)
    except SourceError as e:
        raise click.ClickException(str(e)) from e
    schema = parse(text)
    log.debug("schema_loaded", path=str(path), models=len(schema.models), enums=len(schema.enumerations))
    return schema, path


def write_output(path: Path, content: str) -> None:
    """Write a generated artifact, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise click.ClickException(str(SourceError.output_failed(str(path), str(e)))) from e


def display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
