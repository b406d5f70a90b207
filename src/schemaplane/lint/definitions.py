"""Rule definitions - register all validator rules.

Each check only reads the LintContext and returns its own issues; no
rule depends on another rule's output.
"""

from __future__ import annotations

import re

from schemaplane.lint.models import Issue, Severity
from schemaplane.lint.rules import LintContext, LintRule, registry

# =============================================================================
# Indexes
# =============================================================================


def check_missing_fk_index(ctx: LintContext) -> list[Issue]:
    """Foreign keys not covered by an index, unique constraint, @id or @unique."""
    issues: list[Issue] = []
    for model in ctx.models:
        fk_fields: list[str] = []
        for f in model.relation_fields:
            for fk in f.foreign_keys:
                if fk not in fk_fields:
                    fk_fields.append(fk)

        covered = {a.lead_field for a in (*model.indexes, *model.unique_constraints) if a.lead_field}
        covered.update(f.name for f in model.fields if f.is_id or f.is_unique)

        for fk in fk_fields:
            if fk in covered:
                continue
            fk_field = model.get_field(fk)
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    model=model.name,
                    field=fk,
                    message=f"Foreign key `{fk}` has no index. JOINs and WHERE clauses on this field will be slow.",
                    suggestion=f"@@index([{fk}])",
                    line=fk_field.line if fk_field else None,
                    rule="missing-fk-index",
                )
            )
    return issues


def check_potential_unique(ctx: LintContext) -> list[Issue]:
    """Conventionally unique field names without a uniqueness constraint."""
    candidates = {c.lower() for c in ctx.config.unique_candidates}
    issues: list[Issue] = []
    for model in ctx.models:
        for f in model.fields:
            if f.is_relation or f.is_id or f.is_unique:
                continue
            if f.name.lower() not in candidates:
                continue
            if any(f.name in uc.lead_fields for uc in model.unique_constraints):
                continue
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    model=model.name,
                    field=f.name,
                    message=f"Field `{f.name}` might need a @unique constraint based on its naming pattern.",
                    suggestion=f"Add @unique to `{f.name}` or verify it intentionally allows duplicates.",
                    line=f.line,
                    rule="potential-unique",
                )
            )
    return issues


# =============================================================================
# Relations
# =============================================================================


def check_relation_integrity(ctx: LintContext) -> list[Issue]:
    """Relation targets, foreign-key fields, referenced fields and back-relations."""
    issues: list[Issue] = []
    rule = "relation-integrity"

    for model in ctx.models:
        for f in model.relation_fields:
            if f.base_type in ctx.enum_names:
                continue

            target = ctx.get_model(f.base_type)
            if target is None:
                issues.append(
                    Issue(
                        severity=Severity.ERROR,
                        model=model.name,
                        field=f.name,
                        message=f"Relation target `{f.base_type}` does not exist as a model.",
                        line=f.line,
                        rule=rule,
                    )
                )
                continue

            if not f.is_list and f.foreign_keys:
                has_back = any(b.base_type == model.name for b in target.relation_fields)
                if not has_back:
                    issues.append(
                        Issue(
                            severity=Severity.WARNING,
                            model=model.name,
                            field=f.name,
                            message=f"Relation to `{f.base_type}` has no back-relation in the target model.",
                            suggestion=f"Add a field in `{f.base_type}` that references `{model.name}`.",
                            line=f.line,
                            rule=rule,
                        )
                    )

            for fk in f.foreign_keys:
                if model.get_field(fk) is None:
                    issues.append(
                        Issue(
                            severity=Severity.ERROR,
                            model=model.name,
                            field=f.name,
                            message=f"Relation FK field `{fk}` referenced in @relation does not exist.",
                            line=f.line,
                            rule=rule,
                        )
                    )

            references = f.relation.references if f.relation else ()
            for ref in references:
                if target.get_field(ref) is None:
                    issues.append(
                        Issue(
                            severity=Severity.ERROR,
                            model=model.name,
                            field=f.name,
                            message=f"Referenced field `{ref}` does not exist in `{f.base_type}`.",
                            line=f.line,
                            rule=rule,
                        )
                    )
    return issues


# =============================================================================
# Conventions
# =============================================================================


def check_missing_timestamps(ctx: LintContext) -> list[Issue]:
    """Models above the size threshold with neither timestamp field."""
    created, updated = ctx.config.timestamp_fields
    skip = [re.compile(p) for p in ctx.config.join_table_patterns]
    issues: list[Issue] = []
    for model in ctx.models:
        if any(p.search(model.name) for p in skip):
            continue
        names = model.field_names
        if created in names or updated in names:
            continue
        if len(model.fields) <= ctx.config.min_fields_for_timestamps:
            continue
        issues.append(
            Issue(
                severity=Severity.INFO,
                model=model.name,
                message=f"Model has no `{created}`/`{updated}` timestamps.",
                suggestion=(
                    f"Consider adding: {created} DateTime @default(now()) and {updated} DateTime @updatedAt"
                ),
                line=model.line,
                rule="missing-timestamps",
            )
        )
    return issues


registry.register(
    LintRule(
        rule_id="missing-fk-index",
        name="Missing foreign-key index",
        description="Foreign-key fields should lead an index or unique constraint.",
        severity=Severity.WARNING,
    ),
    check=check_missing_fk_index,
)

registry.register(
    LintRule(
        rule_id="potential-unique",
        name="Potential missing uniqueness",
        description="Fields named like email/slug/code are usually unique.",
        severity=Severity.INFO,
    ),
    check=check_potential_unique,
)

registry.register(
    LintRule(
        rule_id="relation-integrity",
        name="Relation referential integrity",
        description="Relation targets and the fields a @relation names must exist.",
        severity=Severity.ERROR,
    ),
    check=check_relation_integrity,
)

registry.register(
    LintRule(
        rule_id="missing-timestamps",
        name="Missing timestamps",
        description="Non-trivial models should carry created/updated timestamps.",
        severity=Severity.INFO,
    ),
    check=check_missing_timestamps,
)
