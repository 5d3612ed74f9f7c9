"""Package resolver — batched PURL lookup with per-line parse tolerance."""

from __future__ import annotations

import json
from collections.abc import Sequence

import structlog

from socketwatch.core.socket_client import SocketClient
from socketwatch.engines.resolver.models import Finding, ResolvedPackage
from socketwatch.errors import BatchLookupError, LineParseError

log = structlog.get_logger("socketwatch.resolver")


async def resolve_batch(client: SocketClient, purls: Sequence[str]) -> list[ResolvedPackage]:
    """Resolve one batch of PURLs to their current findings.

    A failed request yields an empty result for this batch only; the
    failure is logged and never propagated.
    """
    if not purls:
        return []

    try:
        body = await client.lookup_purls(purls)
    except BatchLookupError as exc:
        log.error(
            "resolver.batch_failed",
            packages=exc.size,
            sample=list(purls[:3]),
            error=str(exc),
        )
        return []

    packages = parse_ndjson(body)
    log.info("resolver.batch_resolved", requested=len(purls), resolved=len(packages))
    return packages


def parse_ndjson(body: str) -> list[ResolvedPackage]:
    """Parse a newline-delimited lookup response, skipping malformed lines."""
    packages: list[ResolvedPackage] = []
    for lineno, line in enumerate(body.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            packages.append(parse_package_line(line))
        except LineParseError as exc:
            log.warning("resolver.line_skipped", lineno=lineno, line=exc.line[:200], error=str(exc))
    return packages


def parse_package_line(line: str) -> ResolvedPackage:
    """Parse one NDJSON line into a :class:`ResolvedPackage`.

    Raises :class:`LineParseError` when the line is not a JSON object or
    lacks the package coordinates.
    """
    try:
        obj = json.loads(line)
    except ValueError as exc:
        raise LineParseError(line, f"invalid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise LineParseError(line, f"expected object, got {type(obj).__name__}")

    ecosystem, name, version = obj.get("type"), obj.get("name"), obj.get("version")
    if not (ecosystem and name and version):
        raise LineParseError(line, "missing type/name/version")

    alerts = obj.get("alerts")
    if alerts is None:
        alerts = []
    elif not isinstance(alerts, list):
        raise LineParseError(line, "alerts is not a list")

    findings = [Finding.from_alert(alert) for alert in alerts if isinstance(alert, dict)]
    return ResolvedPackage(
        type=str(ecosystem), name=str(name), version=str(version), findings=findings
    )
