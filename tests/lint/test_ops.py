"""Tests for lint/ops.py - running the rule set."""

from __future__ import annotations

from schemaplane.config.models import LintConfig
from schemaplane.lint.models import Severity
from schemaplane.lint.ops import run_rules, validate, validate_schema
from schemaplane.lint.rules import LintContext
from schemaplane.schema.models import ParsedSchema
from schemaplane.schema.parser import parse


class TestValidateSchema:
    """End-to-end validation over the shared fixtures."""

    def test_mini_schema_only_infos(self, mini_schema: ParsedSchema) -> None:
        report = validate_schema(mini_schema)
        assert report.counts() == {"error": 0, "warning": 0, "info": 5}
        assert report.has_errors is False

    def test_issues_schema(self, issues_schema: ParsedSchema) -> None:
        report = validate_schema(issues_schema)
        assert report.counts() == {"error": 1, "warning": 2, "info": 5}
        warnings = {i.field for i in report.issues if i.severity is Severity.WARNING}
        assert warnings == {"parentId", "targetId"}

    def test_pair_schema_is_clean(self, pair_schema: ParsedSchema) -> None:
        assert validate_schema(pair_schema).issues == []

    def test_empty_schema(self) -> None:
        report = validate_schema(parse(""))
        assert report.issues == []
        assert len(report.rules_run) == 4


class TestRunRules:
    def test_disabled_rules_skipped(self, issues_schema: ParsedSchema) -> None:
        config = LintConfig(disabled_rules=["missing-timestamps", "potential-unique"])
        report = run_rules(LintContext(issues_schema, config))
        assert [r.rule_id for r in report.rules_run] == ["missing-fk-index", "relation-integrity"]
        assert report.counts() == {"error": 1, "warning": 2, "info": 0}

    def test_issues_grouped_by_rule_order(self, issues_schema: ParsedSchema) -> None:
        rules = [i.rule for i in run_rules(LintContext(issues_schema)).issues]
        order = ["missing-fk-index", "potential-unique", "relation-integrity", "missing-timestamps"]
        assert rules == sorted(rules, key=order.index)

    def test_durations_recorded(self, mini_schema: ParsedSchema) -> None:
        report = run_rules(LintContext(mini_schema))
        assert report.duration_seconds >= 0
        assert all(r.duration_seconds >= 0 for r in report.rules_run)


def test_validate_returns_flat_list(issues_schema: ParsedSchema) -> None:
    issues = validate(issues_schema.models, issues_schema.enum_names)
    assert len(issues) == 8
