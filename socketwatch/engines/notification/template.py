"""Slack message rendering for new alerts."""

from __future__ import annotations

from socketwatch.engines.resolver.models import Finding


def render_alert(purl: str, finding: Finding) -> str:
    """Return Slack mrkdwn text describing one finding on one package."""
    lines = [
        f"*⚠️ Alert:* {_esc(finding.type)}",
        f"*Package:* {_esc(purl)}",
        f"*Severity:* {_esc(finding.severity or 'unknown')}",
        f"*Category:* {_esc(finding.category or 'unknown')}",
        f"*Detail:* {_esc(finding.detail)}",
    ]
    if finding.identifier and finding.identifier != finding.detail:
        lines.append(f"*Key:* {_esc(finding.identifier)}")
    return "\n".join(lines) + "\n"


def _esc(text: str) -> str:
    """Escape the three characters Slack treats as control sequences."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
