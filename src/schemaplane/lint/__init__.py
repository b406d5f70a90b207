"""Lint module - schema validator rules."""

# Import definitions to register all rules
from schemaplane.lint import definitions as _definitions  # noqa: F401
from schemaplane.lint.models import Issue, LintReport, RuleResult, Severity
from schemaplane.lint.ops import run_rules, validate, validate_schema
from schemaplane.lint.rules import LintContext, LintRule, registry

__all__ = [
    "Issue",
    "LintContext",
    "LintReport",
    "LintRule",
    "RuleResult",
    "Severity",
    "registry",
    "run_rules",
    "validate",
    "validate_schema",
]
