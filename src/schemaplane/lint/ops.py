"""Validator operations."""

from __future__ import annotations

import time
from collections.abc import Collection, Sequence

import structlog

from schemaplane.config.models import LintConfig
from schemaplane.lint.models import Issue, LintReport, RuleResult
from schemaplane.lint.rules import LintContext, registry
from schemaplane.schema.models import Model, ParsedSchema

log = structlog.get_logger(__name__)


def run_rules(ctx: LintContext) -> LintReport:
    """Run every enabled rule and collect the results in registration order.

    Never raises for schema content; unresolved references become issues.
    """
    report = LintReport()
    start = time.perf_counter()

    for rule in registry.enabled(ctx.config.disabled_rules):
        rule_start = time.perf_counter()
        issues = rule.run(ctx)
        result = RuleResult(
            rule_id=rule.rule_id,
            issues=issues,
            duration_seconds=time.perf_counter() - rule_start,
        )
        report.rules_run.append(result)
        log.debug("lint_rule_completed", rule=rule.rule_id, issues=len(issues))

    report.duration_seconds = time.perf_counter() - start
    log.debug("lint_completed", issues=len(report.issues), duration_s=report.duration_seconds)
    return report


def validate(
    models: Sequence[Model],
    enum_names: Collection[str],
    config: LintConfig | None = None,
) -> list[Issue]:
    """Flat issue list from all rules."""
    return run_rules(LintContext.from_parts(models, enum_names, config)).issues


def validate_schema(schema: ParsedSchema, config: LintConfig | None = None) -> LintReport:
    return run_rules(LintContext(schema, config or LintConfig()))
