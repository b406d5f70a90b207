"""SchemaPlane CLI - spl command."""

import click

from schemaplane import __version__
from schemaplane.cli.docs import docs_command
from schemaplane.cli.init import init_command
from schemaplane.cli.show import show_command
from schemaplane.cli.types import types_command
from schemaplane.cli.validate import validate_command
from schemaplane.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="spl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """SchemaPlane - Prisma schema browser, docs, linter and type generator."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_run_id()
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(init_command, name="init")
cli.add_command(show_command, name="show")
cli.add_command(docs_command, name="docs")
cli.add_command(validate_command, name="validate")
cli.add_command(types_command, name="types")


if __name__ == "__main__":
    cli()
