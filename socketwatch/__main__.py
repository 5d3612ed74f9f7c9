"""Process entry point: ``python -m socketwatch`` or the ``socketwatch`` script.

Exit status: 0 after a graceful stop (SIGINT/SIGTERM), 1 when the poll loop
crashes, 2 on invalid configuration.
"""

from __future__ import annotations

import asyncio
import signal
import sys

import structlog

from socketwatch.config import Settings, load_settings
from socketwatch.core.logging import setup_logging
from socketwatch.core.socket_client import SocketClient
from socketwatch.engines.notification.notifier import SlackNotifier
from socketwatch.errors import ConfigError, SchedulerFatalError
from socketwatch.scheduler import PollScheduler

log = structlog.get_logger("socketwatch")


async def run(settings: Settings) -> None:
    async with SocketClient(
        settings.api_key, base_url=settings.api_url, timeout=settings.request_timeout
    ) as client, SlackNotifier(settings.webhook_url) as notifier:
        scheduler = PollScheduler(client, notifier, settings)

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, scheduler.stop)
            except NotImplementedError:  # Windows event loops
                pass

        await scheduler.run_forever()


def main() -> int:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        log.error("config.invalid", error=str(exc))
        return 2

    try:
        asyncio.run(run(settings))
    except SchedulerFatalError:
        log.exception("poller.crashed")
        return 1
    except Exception:
        log.exception("poller.startup_failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
