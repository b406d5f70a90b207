"""spl validate command - lint the schema."""

import json
from pathlib import Path

import click

from schemaplane.cli.utils import find_repo_root, load_cli_config, load_schema, schema_option
from schemaplane.core.formatting import summarize_counts
from schemaplane.core.progress import get_console, status
from schemaplane.lint import Issue, Severity, validate_schema

_HEADINGS = {
    Severity.ERROR: "[red]Errors[/red]",
    Severity.WARNING: "[yellow]Warnings[/yellow]",
    Severity.INFO: "[blue]Info[/blue]",
}


def _location(issue: Issue) -> str:
    where = issue.model + (f".{issue.field}" if issue.field else "")
    if issue.line:
        where += f" (line {issue.line})"
    return where


@click.command()
@schema_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--fail-on",
    type=click.Choice([s.value for s in Severity]),
    default=None,
    help="Lowest severity that fails the run (default: lint.fail_on from config)",
)
@click.pass_context
def validate_command(ctx: click.Context, schema_path: Path | None, as_json: bool, fail_on: str | None) -> None:
    """Check the schema for missing indexes, broken relations and conventions.

    Exits with status 1 when an issue reaches the --fail-on severity.
    """
    repo_root = find_repo_root()
    config = load_cli_config(ctx, repo_root)
    schema, _ = load_schema(repo_root, config, schema_path)

    report = validate_schema(schema, config.lint)
    threshold = Severity(fail_on or config.lint.fail_on)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        console = get_console()
        issues = report.issues
        for severity in Severity:
            group = [i for i in issues if i.severity is severity]
            if not group:
                continue
            console.print()
            console.print(f"{_HEADINGS[severity]} ({len(group)})")
            for issue in group:
                console.print(
                    f"  {_location(issue)}: {issue.message}", highlight=False, markup=False, soft_wrap=True
                )
                if issue.suggestion:
                    console.print(f"    → {issue.suggestion}", highlight=False, markup=False, soft_wrap=True)
        console.print()
        summary = summarize_counts(report.counts())
        if report.fails(threshold):
            status(f"Schema has issues: {summary}", style="error")
        elif issues:
            status(f"Schema passed with {summary}", style="warning")
        else:
            status(f"Schema is clean ({len(schema.models)} models checked)", style="success")

    if report.fails(threshold):
        ctx.exit(1)
