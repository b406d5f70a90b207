"""Tests for the spl command group."""

from click.testing import CliRunner

from schemaplane import __version__
from schemaplane.cli.main import cli

runner = CliRunner()


class TestCliGroup:
    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"spl, version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "show", "docs", "validate", "types"):
            assert name in result.output

    def test_unknown_command(self) -> None:
        result = runner.invoke(cli, ["migrate"])
        assert result.exit_code == 2
