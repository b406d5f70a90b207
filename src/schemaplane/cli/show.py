"""spl show command - browse models by category."""

import json
from pathlib import Path

import click
from rich.table import Table

from schemaplane.cli.utils import find_repo_root, load_cli_config, load_schema, schema_option
from schemaplane.core.formatting import pluralize, truncate_at_word
from schemaplane.core.progress import get_console
from schemaplane.viewer.projection import ModelView, SchemaView, find_model, project

_KIND_STYLES = {"scalar": "white", "enum": "magenta", "relation": "cyan"}


def _overview_table(view: SchemaView) -> Table:
    table = Table(title="Models by category", show_lines=False)
    table.add_column("Category", style="bold")
    table.add_column("Model", style="cyan")
    table.add_column("Fields", justify="right")
    table.add_column("Relations", justify="right")
    table.add_column("Line", justify="right", style="dim")
    for group in view.groups:
        for i, m in enumerate(group.models):
            label = f"{group.icon} {group.label}" if i == 0 else ""
            table.add_row(label, m.name, str(m.scalar_count), str(m.relation_count), str(m.line))
    return table


def _model_table(model: ModelView) -> Table:
    title = f"{model.name} ({model.category})"
    if model.mapped_name:
        title += f" → {model.mapped_name}"
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Type")
    table.add_column("Req", justify="center")
    table.add_column("Key")
    table.add_column("Default")
    table.add_column("Relation")
    table.add_column("Notes", style="dim")
    for f in model.fields:
        table.add_row(
            f.name,
            f"[{_KIND_STYLES.get(f.kind, 'white')}]{f.type_label}[/]",
            "✓" if f.required else "",
            f.key,
            f.default,
            f.relation,
            truncate_at_word(f.notes, 40),
        )
    return table


@click.command()
@click.argument("model", required=False)
@schema_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def show_command(ctx: click.Context, model: str | None, schema_path: Path | None, as_json: bool) -> None:
    """Show models grouped by category, or one MODEL in detail.

    MODEL matches case-insensitively; a unique prefix is enough.
    """
    repo_root = find_repo_root()
    config = load_cli_config(ctx, repo_root)
    schema, _ = load_schema(repo_root, config, schema_path)
    view = project(schema)
    console = get_console()

    if model is None:
        if as_json:
            payload = {
                "categories": [
                    {"label": g.label, "models": [m.name for m in g.models]} for g in view.groups
                ],
                "enums": {e.name: list(e.members) for e in view.enumerations},
            }
            click.echo(json.dumps(payload, indent=2))
            return
        console.print(_overview_table(view))
        console.print(
            f"{pluralize(len(view.models), 'model')}, {pluralize(len(view.enumerations), 'enum')}",
            highlight=False,
        )
        return

    found = find_model(view, model)
    if found is None:
        raise click.ClickException(f"Model not found: {model}")

    if as_json:
        click.echo(json.dumps(found.to_dict(), indent=2))
        return

    console.print(_model_table(found))
    for attr in found.attributes:
        console.print(f"  [dim]{attr}[/dim]", highlight=False)
