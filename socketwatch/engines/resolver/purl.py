"""Package URL (PURL) construction and batching helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

from socketwatch.engines.inventory.models import DependencyRecord

T = TypeVar("T")

# Inventory ecosystem name -> PURL type.  Unknown ecosystems pass through.
ECOSYSTEM_TO_PURL_TYPE: dict[str, str] = {
    "npm": "npm",
    "pypi": "pypi",
    "maven": "maven",
    "nuget": "nuget",
    "gem": "rubygems",
    "golang": "golang",
}


def to_purl(ecosystem: str, name: str, version: str) -> str:
    """Return ``pkg:<type>/<name>@<version>`` for one package version."""
    purl_type = ECOSYSTEM_TO_PURL_TYPE.get(ecosystem, ecosystem)
    return f"pkg:{purl_type}/{name}@{version}"


def unique_purls(records: Iterable[DependencyRecord]) -> list[str]:
    """Collapse records into distinct PURLs, keeping first-seen order."""
    seen: dict[str, None] = {}
    for rec in records:
        seen.setdefault(to_purl(rec.type, rec.name, rec.version), None)
    return list(seen)


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield successive slices of at most *size* items."""
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])
