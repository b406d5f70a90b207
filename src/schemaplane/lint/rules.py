"""Lint rule registry - definitions for all validator rules."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, field

from schemaplane.config.models import LintConfig
from schemaplane.lint.models import Issue, Severity
from schemaplane.schema.models import Enumeration, Model, ParsedSchema


@dataclass(frozen=True)
class LintContext:
    """Read-only input shared by every rule.

    Model lookups go through the parsed schema's own name table.
    """

    schema: ParsedSchema
    config: LintConfig = field(default_factory=LintConfig)

    @classmethod
    def from_parts(
        cls,
        models: Iterable[Model],
        enum_names: Collection[str],
        config: LintConfig | None = None,
    ) -> LintContext:
        """Context for callers holding bare models and enum names."""
        schema = ParsedSchema(
            models=tuple(models),
            enumerations=tuple(Enumeration(name) for name in sorted(enum_names)),
        )
        return cls(schema, config or LintConfig())

    @property
    def models(self) -> tuple[Model, ...]:
        return self.schema.models

    @property
    def enum_names(self) -> frozenset[str]:
        return self.schema.enum_names

    def get_model(self, name: str) -> Model | None:
        return self.schema.get_model(name)


CheckFn = Callable[[LintContext], list[Issue]]


@dataclass
class LintRule:
    """Definition of a validator rule."""

    rule_id: str
    name: str
    description: str
    # Most severe level the rule can emit
    severity: Severity = Severity.WARNING

    # Check function (set by register)
    _check: CheckFn | None = None

    def run(self, ctx: LintContext) -> list[Issue]:
        if self._check is None:
            return []
        return self._check(ctx)


class RuleRegistry:
    """Registry of available rules, kept in registration order."""

    def __init__(self) -> None:
        self._rules: dict[str, LintRule] = {}

    def register(self, rule: LintRule, check: CheckFn | None = None) -> None:
        """Register a rule."""
        if check is not None:
            rule._check = check
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> LintRule | None:
        """Get rule by ID."""
        return self._rules.get(rule_id)

    def all(self) -> list[LintRule]:
        """Get all registered rules."""
        return list(self._rules.values())

    def enabled(self, disabled: Collection[str] = ()) -> list[LintRule]:
        return [r for r in self._rules.values() if r.rule_id not in disabled]

    def clear(self) -> None:
        """Clear all registered rules."""
        self._rules.clear()


# Global registry
registry = RuleRegistry()
