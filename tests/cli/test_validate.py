"""Tests for spl validate command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from schemaplane.cli.main import cli

runner = CliRunner()


@pytest.fixture
def in_project(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(project_dir)
    return project_dir


class TestValidateCommand:
    """spl validate command tests."""

    def test_given_infos_only_when_validate_then_passes(self, in_project: Path) -> None:
        # When
        result = runner.invoke(cli, ["validate"])

        # Then
        assert result.exit_code == 0, result.output
        assert "Info (5)" in result.output
        assert "Company.email (line 29)" in result.output
        assert "Schema passed with 5 infos" in result.output

    def test_given_fail_on_info_when_validate_then_fails(self, in_project: Path) -> None:
        result = runner.invoke(cli, ["validate", "--fail-on", "info"])

        assert result.exit_code == 1
        assert "Schema has issues: 5 infos" in result.output

    def test_given_errors_when_validate_then_fails(self, in_project: Path, issues_schema_text: str) -> None:
        # Given
        (in_project / "bad.prisma").write_text(issues_schema_text)

        # When
        result = runner.invoke(cli, ["validate", "--schema", "bad.prisma"])

        # Then
        assert result.exit_code == 1
        assert "Errors (1)" in result.output
        assert "Warnings (2)" in result.output
        assert "Relation target `NonExistentModel` does not exist as a model." in result.output
        assert "→ @@index([parentId])" in result.output

    def test_given_clean_schema_when_validate_then_success(self, in_project: Path, pair_schema_text: str) -> None:
        (in_project / "pair.prisma").write_text(pair_schema_text)

        result = runner.invoke(cli, ["validate", "--schema", "pair.prisma"])

        assert result.exit_code == 0, result.output
        assert "Schema is clean (2 models checked)" in result.output

    def test_given_json_when_validate_then_report(self, in_project: Path, issues_schema_text: str) -> None:
        (in_project / "bad.prisma").write_text(issues_schema_text)

        result = runner.invoke(cli, ["validate", "--schema", "bad.prisma", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["counts"] == {"error": 1, "warning": 2, "info": 5}
        assert data["rules"] == ["missing-fk-index", "potential-unique", "relation-integrity", "missing-timestamps"]
        assert {"severity", "model", "field", "message", "suggestion", "line", "rule"} == set(data["issues"][0])

    def test_given_config_fail_on_when_validate_then_respected(self, in_project: Path) -> None:
        config_dir = in_project / ".schemaplane"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("lint:\n  fail_on: info\n")

        result = runner.invoke(cli, ["validate"])

        assert result.exit_code == 1

    def test_given_disabled_rule_when_validate_then_skipped(self, in_project: Path) -> None:
        config_dir = in_project / ".schemaplane"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(
            "lint:\n  disabled_rules: [potential-unique, missing-timestamps]\n"
        )

        result = runner.invoke(cli, ["validate", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["issues"] == []

    def test_given_invalid_config_when_validate_then_error(self, in_project: Path) -> None:
        config_dir = in_project / ".schemaplane"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("lint:\n  fail_on: fatal\n")

        result = runner.invoke(cli, ["validate"])

        assert result.exit_code == 1
        assert "CONFIG_INVALID_VALUE" in result.output
