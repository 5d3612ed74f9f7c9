"""Data models for the inventory fetcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DependencyRecord:
    """One row of the account's dependency inventory.

    Transient — lives only for the duration of one poll cycle.
    """

    type: str  # ecosystem: npm / pypi / maven / nuget / gem / golang
    name: str
    version: str
    repo: str | None = None

    @classmethod
    def from_row(cls, row: Any) -> DependencyRecord | None:
        """Build a record from an API row; ``None`` if required fields are missing."""
        if not isinstance(row, dict):
            return None
        ecosystem, name, version = row.get("type"), row.get("name"), row.get("version")
        if not (ecosystem and name and version):
            return None
        repo = row.get("repo") or row.get("repository")
        return cls(
            type=str(ecosystem),
            name=str(name),
            version=str(version),
            repo=str(repo) if repo else None,
        )
