"""Process configuration, read from environment variables."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from socketwatch.errors import ConfigError

SEVERITIES = ("low", "medium", "high")

DEFAULT_API_URL = "https://api.socket.dev/v0"
DEFAULT_POLL_INTERVAL_MS = 600_000

# Value shipped in the sample .env; treated the same as "not configured".
WEBHOOK_PLACEHOLDER = "<SLACK_WEBHOOK_URL>"


@dataclass(frozen=True)
class Settings:
    api_key: str
    webhook_url: str | None = None
    api_url: str = DEFAULT_API_URL
    poll_interval: float = DEFAULT_POLL_INTERVAL_MS / 1000
    severity: str = "high"
    repos: frozenset[str] | None = None
    categories: frozenset[str] | None = None
    batch_size: int = 10
    batch_delay: float = 1.0
    page_size: int = 1000
    request_timeout: float = 30.0


def split_csv(value: str | None) -> frozenset[str] | None:
    """Split a comma-separated list; ``None`` when nothing usable is left."""
    if not value:
        return None
    items = frozenset(part.strip() for part in value.split(",") if part.strip())
    return items or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Raises :class:`ConfigError` when the API key is missing, the severity is
    not one of ``low``/``medium``/``high``, or a numeric value is invalid.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("SOCKET_KEY", "").strip()
    if not api_key:
        raise ConfigError("SOCKET_KEY is required")

    severity = env.get("SEVERITY_FILTER", "high").strip().lower() or "high"
    if severity not in SEVERITIES:
        raise ConfigError(
            f"SEVERITY_FILTER must be one of {', '.join(SEVERITIES)}, got {severity!r}"
        )

    webhook = env.get("SLACK_WEBHOOK", "").strip()
    if webhook == WEBHOOK_PLACEHOLDER:
        webhook = ""

    return Settings(
        api_key=api_key,
        webhook_url=webhook or None,
        api_url=env.get("SOCKET_API_URL", DEFAULT_API_URL).rstrip("/"),
        poll_interval=_env_number(env, "POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS) / 1000,
        severity=severity,
        repos=split_csv(env.get("REPO_FILTER")),
        categories=split_csv(env.get("CATEGORY_FILTER")),
        batch_size=_env_int(env, "SOCKETWATCH_BATCH_SIZE", 10),
        batch_delay=_env_number(env, "SOCKETWATCH_BATCH_DELAY", 1.0, allow_zero=True),
        page_size=_env_int(env, "SOCKETWATCH_PAGE_SIZE", 1000),
        request_timeout=_env_number(env, "SOCKETWATCH_TIMEOUT", 30.0),
    )


def _env_number(
    env: Mapping[str, str], key: str, default: float, *, allow_zero: bool = False
) -> float:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return float(default)
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be finite, got {raw!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{key} must be positive, got {raw!r}")
    return value


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a whole number, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{key} must be at least 1, got {raw!r}")
    return value
