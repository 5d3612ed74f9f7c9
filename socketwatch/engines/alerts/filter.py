"""Finding filter — decide which findings are worth a notification."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from socketwatch.engines.resolver.models import Finding


@dataclass(frozen=True)
class AlertFilter:
    severity: str
    categories: Collection[str] | None = None


def is_actionable(finding: Finding, alert_filter: AlertFilter) -> bool:
    """Return True if *finding* passes every configured predicate.

    Severity is an exact match, not a threshold: ``high`` excludes
    ``medium`` and ``low``.  With a category filter active, a finding
    without a category never passes.
    """
    if finding.severity != alert_filter.severity:
        return False
    if alert_filter.categories:
        if not finding.category or finding.category not in alert_filter.categories:
            return False
    return True
