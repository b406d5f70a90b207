"""Lint models - issues and reports."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Issue severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Higher is more severe."""
        return _RANKS[self]


_RANKS = {Severity.INFO: 0, Severity.WARNING: 1, Severity.ERROR: 2}


@dataclass(frozen=True, slots=True)
class Issue:
    """A single validator finding."""

    severity: Severity
    model: str
    message: str
    rule: str  # rule that produced this
    field: str | None = None
    suggestion: str | None = None
    line: int | None = None  # 1-based

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "model": self.model,
            "field": self.field,
            "message": self.message,
            "suggestion": self.suggestion,
            "line": self.line,
            "rule": self.rule,
        }


@dataclass
class RuleResult:
    """Result from running a single rule."""

    rule_id: str
    issues: list[Issue] = field(default_factory=list)
    duration_seconds: float = 0.0


@dataclass
class LintReport:
    """Aggregated result of a validation run."""

    rules_run: list[RuleResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def issues(self) -> list[Issue]:
        return [i for r in self.rules_run for i in r.issues]

    @property
    def has_errors(self) -> bool:
        return any(i.severity is Severity.ERROR for i in self.issues)

    def counts(self) -> dict[str, int]:
        """Issue count per severity, most severe first."""
        tally = Counter(i.severity for i in self.issues)
        return {s.value: tally.get(s, 0) for s in Severity}

    def fails(self, threshold: Severity) -> bool:
        """True when any issue is at least as severe as `threshold`."""
        return any(i.severity.rank >= threshold.rank for i in self.issues)

    def to_dict(self) -> dict[str, Any]:
        return {
            "issues": [i.to_dict() for i in self.issues],
            "counts": self.counts(),
            "rules": [r.rule_id for r in self.rules_run],
        }
