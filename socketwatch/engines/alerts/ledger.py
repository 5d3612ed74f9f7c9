"""Dedup ledger — remembers which findings were already notified."""

from __future__ import annotations

from typing import NamedTuple

from socketwatch.engines.resolver.models import Finding, ResolvedPackage


class FindingIdentity(NamedTuple):
    purl: str
    kind: str
    key: str | None

    def __str__(self) -> str:
        return f"{self.purl}::{self.kind}::{self.key}"


def identity_for(package: ResolvedPackage, finding: Finding) -> FindingIdentity:
    return FindingIdentity(package.purl, finding.type, finding.identifier)


class DedupLedger:
    """In-memory set of finding identities seen by this process.

    Grows for the life of the process and is never pruned; its size is
    bounded in practice by the dependency graph.  Not thread-safe, and
    does not need to be: only the poll loop touches it.
    """

    def __init__(self) -> None:
        self._seen: set[FindingIdentity] = set()

    def is_new(self, identity: FindingIdentity) -> bool:
        """Record *identity* and return True if it had not been seen before."""
        if identity in self._seen:
            return False
        self._seen.add(identity)
        return True

    def __contains__(self, identity: object) -> bool:
        return identity in self._seen

    def __len__(self) -> int:
        return len(self._seen)
