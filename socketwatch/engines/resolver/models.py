"""Data models for the package resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from socketwatch.engines.resolver.purl import to_purl


@dataclass(frozen=True)
class Finding:
    """A single security alert attached to a resolved package."""

    type: str
    severity: str | None = None
    category: str | None = None
    key: str | None = None
    id: str | None = None
    title: str | None = None
    description: str | None = None

    @property
    def identifier(self) -> str | None:
        """Stable key for deduplication: ``key``, then ``id``, then ``title``."""
        return self.key or self.id or self.title

    @property
    def detail(self) -> str:
        """Human-readable summary: ``title``, then ``description``, then ``type``."""
        return self.title or self.description or self.type

    @classmethod
    def from_alert(cls, alert: dict[str, Any]) -> Finding:
        return cls(
            type=str(alert.get("type") or "unknown"),
            severity=_opt_str(alert.get("severity")),
            category=_opt_str(alert.get("category")),
            key=_opt_str(alert.get("key")),
            id=_opt_str(alert.get("id")),
            title=_opt_str(alert.get("title")),
            description=_opt_str(alert.get("description")),
        )


@dataclass
class ResolvedPackage:
    """One package returned by the batched lookup, with its findings."""

    type: str
    name: str
    version: str
    findings: list[Finding] = field(default_factory=list)

    @property
    def purl(self) -> str:
        return to_purl(self.type, self.name, self.version)


def _opt_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
