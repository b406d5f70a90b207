"""spl docs command - write markdown documentation."""

from datetime import date
from pathlib import Path

import click

from schemaplane.cli.utils import (
    display_path,
    find_repo_root,
    load_cli_config,
    load_schema,
    resolve_path,
    schema_option,
    write_output,
)
from schemaplane.core.formatting import format_name_list, pluralize
from schemaplane.core.progress import spinner, status
from schemaplane.docs.generator import ERD_NAME, INDEX_NAME, generate_docs


@click.command()
@schema_option
@click.option(
    "--out",
    "out_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory (default: paths.docs_dir from config)",
)
@click.option("--only", default=None, help="Comma-separated model names to document")
@click.option("--category", default=None, help="Only document models in this category")
@click.option("--date/--no-date", "with_date", default=True, help="Stamp today's date into the index")
@click.pass_context
def docs_command(
    ctx: click.Context,
    schema_path: Path | None,
    out_dir: Path | None,
    only: str | None,
    category: str | None,
    with_date: bool,
) -> None:
    """Generate per-model pages, README.md index and ERD.md diagrams."""
    repo_root = find_repo_root()
    config = load_cli_config(ctx, repo_root)
    schema, source = load_schema(repo_root, config, schema_path)
    target = resolve_path(repo_root, out_dir or config.paths.docs_dir)

    only_names = [n.strip() for n in only.split(",") if n.strip()] if only else None
    if only_names:
        known = {m.name.lower() for m in schema.models}
        missing = [n for n in only_names if n.lower() not in known]
        if missing:
            status(f"Unknown models ignored: {format_name_list(missing)}", style="warning")

    with spinner("Rendering documentation"):
        bundle = generate_docs(
            schema,
            config.docs,
            only=only_names,
            category=category,
            source=display_path(source, repo_root),
            generated=date.today().isoformat() if with_date else None,
        )
        for rel_path, content in bundle.files.items():
            write_output(target / rel_path, content)

    status(f"Documentation generated in {display_path(target, repo_root)}/", style="success")
    status(f"{pluralize(len(bundle.model_pages), 'model doc')} generated", indent=2)
    status(f"{INDEX_NAME} (index) generated", indent=2)
    status(f"{ERD_NAME} (diagrams) generated", indent=2)
