"""Model categorizer - ordered name patterns, first match wins.

Patterns overlap on purpose. A name matching several rules belongs to
the earliest one, so reordering CATEGORY_RULES changes results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

OTHER = "Other"


@dataclass(frozen=True, slots=True)
class CategoryRule:
    label: str
    pattern: re.Pattern[str]
    exclude: re.Pattern[str] | None = None

    def matches(self, lowered: str) -> bool:
        if not self.pattern.search(lowered):
            return False
        return self.exclude is None or not self.exclude.search(lowered)


def _rule(label: str, pattern: str, exclude: str | None = None) -> CategoryRule:
    return CategoryRule(label, re.compile(pattern), re.compile(exclude) if exclude else None)


# Matched against the lowercased model name.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    _rule(
        "Core",
        r"^(company$|companysettings|companymodule|companyviewconfig"
        r"|companysettingscosting|companytemplate)",
    ),
    _rule("Auth", r"^(user$|useroncompany|userpermission|role$|rolepermission|session)"),
    _rule("Organization", r"^(area|sector|zone|plantzone|line)$"),
    _rule(
        "Costs",
        r"cost|recipe|input|indirect|monthlyproduction|monthlyindirect|productstandard"
        r"|productioncost|productionmethod|costsystem|monthlycostconsolidation",
        exclude=r"purchase|maintenance",
    ),
    _rule(
        "Maintenance",
        r"machine|workstation|component|subcomponent|failure|symptom|corrective|checklist"
        r"|downtime|workorder|maintenance|loto|permit|fmea|quality|sparepartreservation"
        r"|template|solution|rootcause|activity",
    ),
    _rule("Tasks", r"^(task|fixedtask|fixedtaskexecution|taskattachment|taskcomment)"),
    _rule(
        "Sales",
        r"^(sale|quote|client(?!p)|invoice|delivery|remito|acopio|price|discount|load"
        r"|collection|salesconfig|salesprice|salesinvoice|salescredit)",
    ),
    _rule("Products", r"^(product|category)"),
    _rule(
        "Purchases",
        r"purchase|supplier|goods|warehouse|creditdebitnote$|match|sod|stocktransfer|stockadjust",
    ),
    _rule(
        "Payroll",
        r"payroll|salary|agreement|payrollunion|worksector|workposition|holiday|employee",
    ),
    _rule("Treasury", r"bank|cash|cheque|treasury|payment|idempotency"),
    _rule("Logistics", r"truck|loadorder|zone|transport|kilometraje|unidadmovil"),
    _rule("AI", r"assistant|embedding|\bai\b|^ai"),
    _rule("Automation", r"automation"),
    _rule("Billing", r"subscription|billing|plan"),
    _rule("Portal", r"portal|clientportal|clientcontact"),
    _rule("Notifications", r"notification|reminder|outbox"),
    _rule("Documents", r"document|attachment|image"),
    _rule("Workers", r"worker|skill|certification"),
    _rule("Tax", r"tax|control"),
    _rule("Tools", r"tool"),
    _rule("Integrations", r"discord"),
    _rule("Dashboard", r"dashboard|widget|usercolorpreference|userdashboardconfig"),
    _rule("Ideas", r"idea"),
)

CATEGORY_ICONS: dict[str, str] = {
    "Core": "🏢",
    "Auth": "🔐",
    "Organization": "🏗️",
    "Costs": "💰",
    "Maintenance": "🔧",
    "Tasks": "📋",
    "Sales": "🛒",
    "Products": "📦",
    "Purchases": "🛍️",
    "Payroll": "💵",
    "Treasury": "🏦",
    "Logistics": "🚚",
    "AI": "🤖",
    "Automation": "⚙️",
    "Billing": "💳",
    "Portal": "🌐",
    "Notifications": "🔔",
    "Documents": "📄",
    "Workers": "👷",
    "Tax": "🧾",
    "Tools": "🛠️",
    "Integrations": "🔌",
    "Dashboard": "📊",
    "Ideas": "💡",
    OTHER: "📁",
}


def categorize(model_name: str) -> str:
    """Category label for a model name; OTHER when no rule matches."""
    lowered = model_name.lower()
    for rule in CATEGORY_RULES:
        if rule.matches(lowered):
            return rule.label
    return OTHER


def category_icon(label: str) -> str:
    return CATEGORY_ICONS.get(label, CATEGORY_ICONS[OTHER])
