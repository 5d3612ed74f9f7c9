"""Builders for Socket API payloads used across tests."""

from __future__ import annotations

import json


def dep_row(ecosystem: str, name: str, version: str, repo: str = "web") -> dict:
    return {"type": ecosystem, "name": name, "version": version, "repo": repo}


def package_line(ecosystem: str, name: str, version: str, alerts: list[dict] | None = None) -> str:
    obj: dict = {"type": ecosystem, "name": name, "version": version}
    if alerts is not None:
        obj["alerts"] = alerts
    return json.dumps(obj)


def alert(
    severity: str = "high",
    *,
    type: str = "vuln",
    category: str | None = "vulnerability",
    key: str | None = "CVE-X",
    **extra: str,
) -> dict:
    obj: dict = {"type": type, "severity": severity, **extra}
    if category is not None:
        obj["category"] = category
    if key is not None:
        obj["key"] = key
    return obj
