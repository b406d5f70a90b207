"""spl types command - write TypeScript type definitions."""

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
from schemaplane.core.progress import status, task
from schemaplane.typegen import generate_types, render_typescript


@click.command()
@schema_option
@click.option(
    "--out",
    "out_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Output file (default: paths.types_path from config)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print to stdout instead of writing a file")
@click.pass_context
def types_command(ctx: click.Context, schema_path: Path | None, out_path: Path | None, to_stdout: bool) -> None:
    """Generate Scalar, CreateInput, UpdateInput and WithRelations types per model."""
    repo_root = find_repo_root()
    config = load_cli_config(ctx, repo_root)
    schema, _ = load_schema(repo_root, config, schema_path)

    bundle = generate_types(schema, config.typegen)
    content = render_typescript(bundle, config.typegen)

    unresolved = bundle.unresolved
    if unresolved:
        names = sorted({raw for _, _, raw in unresolved})
        status(f"Unresolved types kept as-is: {format_name_list(names)}", style="warning")

    if to_stdout:
        click.echo(content, nl=False)
        return

    target = resolve_path(repo_root, out_path or config.paths.types_path)
    with task(f"Writing {display_path(target, repo_root)}"):
        write_output(target, content)
    status(
        f"{pluralize(len(bundle.models), 'model')}, {pluralize(len(bundle.enums), 'enum')}",
        indent=2,
    )
