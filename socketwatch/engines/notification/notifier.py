"""SlackNotifier — post alert text to an incoming webhook."""

from __future__ import annotations

from typing import Literal

import httpx
import structlog

from socketwatch.errors import NotificationDeliveryError

log = structlog.get_logger("socketwatch.engine.notification")

NotifyOutcome = Literal["sent", "skipped", "failed"]


class SlackNotifier:
    """Deliver messages to a Slack incoming webhook.

    :meth:`notify` never raises: with no webhook configured it is a logged
    no-op, and delivery failures are logged and dropped (no retry).
    """

    def __init__(self, webhook_url: str | None, *, timeout: float = 10.0) -> None:
        self.webhook_url = webhook_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> SlackNotifier:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    @property
    def configured(self) -> bool:
        return bool(self.webhook_url)

    async def notify(self, text: str) -> NotifyOutcome:
        if not self.configured:
            log.info("notification.skipped", reason="webhook not configured")
            return "skipped"

        try:
            await self._post(text)
        except NotificationDeliveryError as exc:
            log.error("notification.failed", error=str(exc))
            return "failed"
        return "sent"

    async def _post(self, text: str) -> None:
        try:
            resp = await self._client.post(
                self.webhook_url,  # type: ignore[arg-type]
                json={"text": text},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NotificationDeliveryError(f"{type(exc).__name__}: {exc}") from exc
        if not resp.is_success:
            raise NotificationDeliveryError(f"webhook returned HTTP {resp.status_code}")
