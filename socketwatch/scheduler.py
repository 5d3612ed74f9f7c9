"""Poll scheduler — drives fetch → resolve → filter → notify, then sleeps."""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass

import structlog

from socketwatch.config import Settings
from socketwatch.core.socket_client import SocketClient
from socketwatch.engines.alerts.filter import AlertFilter, is_actionable
from socketwatch.engines.alerts.ledger import DedupLedger, identity_for
from socketwatch.engines.inventory.fetcher import fetch_all_dependencies
from socketwatch.engines.notification.notifier import SlackNotifier
from socketwatch.engines.notification.template import render_alert
from socketwatch.engines.resolver.models import ResolvedPackage
from socketwatch.engines.resolver.purl import chunked, unique_purls
from socketwatch.engines.resolver.resolver import resolve_batch
from socketwatch.errors import SchedulerFatalError

logger = structlog.get_logger("socketwatch.scheduler")


@dataclass
class CycleResult:
    """Counters for one poll cycle."""

    dependencies: int = 0
    packages: int = 0
    batches: int = 0
    findings: int = 0
    notified: int = 0
    failed_deliveries: int = 0


class PollScheduler:
    """Sequential poll loop owning the dedup ledger.

    Batches are resolved strictly one after another with a fixed cooldown
    in between; findings are filtered and notified per batch.
    """

    def __init__(
        self,
        client: SocketClient,
        notifier: SlackNotifier,
        settings: Settings,
        *,
        ledger: DedupLedger | None = None,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self._settings = settings
        self._filter = AlertFilter(settings.severity, settings.categories)
        self.ledger = ledger if ledger is not None else DedupLedger()
        self.cycles = 0
        self._stop = asyncio.Event()

    async def run_forever(self) -> None:
        """Run a cycle now, then one every ``poll_interval`` until stopped.

        Raises :class:`SchedulerFatalError` if anything escapes a cycle.
        """
        logger.info(
            "poller.started",
            interval_seconds=self._settings.poll_interval,
            notifications=self._notifier.configured,
        )
        while not self._stop.is_set():
            try:
                await self.run_cycle()
            except Exception as exc:
                raise SchedulerFatalError(f"poll cycle crashed: {exc}") from exc

            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self._settings.poll_interval)
            except asyncio.TimeoutError:
                pass
        logger.info("poller.stopped", cycles=self.cycles, seen=len(self.ledger))

    def stop(self) -> None:
        """Stop after the current cycle, or immediately if sleeping."""
        self._stop.set()

    async def run_cycle(self) -> CycleResult:
        """One full poll cycle."""
        settings = self._settings
        result = CycleResult()
        logger.info(
            "poller.cycle_start",
            cycle=self.cycles + 1,
            severity=settings.severity,
            repos=sorted(settings.repos) if settings.repos else "all",
            categories=sorted(settings.categories) if settings.categories else "all",
        )

        deps = await fetch_all_dependencies(
            self._client, settings.repos, page_size=settings.page_size
        )
        result.dependencies = len(deps)

        purls = unique_purls(deps)
        result.packages = len(purls)
        logger.info(
            "poller.inventory",
            dependencies=len(deps),
            packages=len(purls),
            ecosystems=dict(Counter(d.type for d in deps)),
        )

        batches = list(chunked(purls, settings.batch_size))
        for index, batch in enumerate(batches, start=1):
            packages = await resolve_batch(self._client, batch)
            await self._process_packages(packages, result)
            result.batches += 1
            logger.debug(
                "poller.batch_done",
                batch=index,
                total=len(batches),
                notified_so_far=result.notified,
            )
            if index < len(batches) and settings.batch_delay > 0:
                await asyncio.sleep(settings.batch_delay)

        self.cycles += 1
        logger.info(
            "poller.cycle_complete",
            cycle=self.cycles,
            packages=result.packages,
            findings=result.findings,
            notified=result.notified,
            failed_deliveries=result.failed_deliveries,
            seen_total=len(self.ledger),
        )
        return result

    async def _process_packages(
        self, packages: list[ResolvedPackage], result: CycleResult
    ) -> None:
        for package in packages:
            for finding in package.findings:
                result.findings += 1
                if not is_actionable(finding, self._filter):
                    continue
                identity = identity_for(package, finding)
                # Marked seen before delivery: a dropped message is never resent.
                if not self.ledger.is_new(identity):
                    continue

                outcome = await self._notifier.notify(render_alert(package.purl, finding))
                if outcome == "failed":
                    result.failed_deliveries += 1
                    continue
                result.notified += 1
                logger.info("poller.alert", identity=str(identity), delivery=outcome)
