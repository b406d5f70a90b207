"""Tests for lint/rules.py - rule registry and context."""

from __future__ import annotations

from schemaplane.lint.models import Issue, Severity
from schemaplane.lint.rules import LintContext, LintRule, RuleRegistry, registry
from schemaplane.schema.models import Model, ParsedSchema


def _always(ctx: LintContext) -> list[Issue]:
    return [Issue(severity=Severity.INFO, model=m.name, message="seen", rule="always") for m in ctx.models]


class TestRuleRegistry:
    """Tests for RuleRegistry."""

    def test_register_and_get(self) -> None:
        reg = RuleRegistry()
        reg.register(LintRule("always", "Always", "Flags every model"), check=_always)
        rule = reg.get("always")
        assert rule is not None
        assert rule.run(LintContext.from_parts([Model(name="A")], ())) != []

    def test_get_nonexistent(self) -> None:
        assert RuleRegistry().get("nope") is None

    def test_registration_order_kept(self) -> None:
        reg = RuleRegistry()
        for rule_id in ("b", "a", "c"):
            reg.register(LintRule(rule_id, rule_id, ""))
        assert [r.rule_id for r in reg.all()] == ["b", "a", "c"]

    def test_enabled_skips_disabled(self) -> None:
        reg = RuleRegistry()
        reg.register(LintRule("a", "A", ""))
        reg.register(LintRule("b", "B", ""))
        assert [r.rule_id for r in reg.enabled(["a"])] == ["b"]

    def test_clear(self) -> None:
        reg = RuleRegistry()
        reg.register(LintRule("a", "A", ""))
        reg.clear()
        assert reg.all() == []

    def test_rule_without_check_reports_nothing(self) -> None:
        assert LintRule("x", "X", "").run(LintContext.from_parts([Model(name="A")], ())) == []


class TestGlobalRegistry:
    """The global registry holds the built-in rules."""

    def test_built_in_rules_in_order(self) -> None:
        assert [r.rule_id for r in registry.all()] == [
            "missing-fk-index",
            "potential-unique",
            "relation-integrity",
            "missing-timestamps",
        ]

    def test_all_rules_have_required_fields(self) -> None:
        for rule in registry.all():
            assert rule.name
            assert rule.description
            assert isinstance(rule.severity, Severity)


class TestLintContext:
    def test_get_model_first_wins(self) -> None:
        first = Model(name="A", line=1)
        ctx = LintContext.from_parts([first, Model(name="A", line=5)], ())
        assert ctx.get_model("A") is first
        assert ctx.get_model("B") is None

    def test_given_parsed_schema_when_wrapped_then_lookups_shared(self, mini_schema: ParsedSchema) -> None:
        # Given
        ctx = LintContext(mini_schema)

        # When
        company = ctx.get_model("Company")

        # Then
        assert company is mini_schema.get_model("Company")
        assert ctx.models is mini_schema.models
        assert ctx.enum_names == mini_schema.enum_names

    def test_from_parts_keeps_enum_names(self) -> None:
        ctx = LintContext.from_parts([], {"Role", "Status"})
        assert ctx.enum_names == frozenset({"Role", "Status"})
