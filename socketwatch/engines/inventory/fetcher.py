"""Inventory fetcher — follow the dependency search cursor to the end."""

from __future__ import annotations

from collections.abc import Collection

import structlog

from socketwatch.core.socket_client import SocketClient
from socketwatch.engines.inventory.models import DependencyRecord
from socketwatch.errors import PageFetchError

log = structlog.get_logger("socketwatch.inventory")

DEFAULT_PAGE_SIZE = 1000


async def fetch_all_dependencies(
    client: SocketClient,
    repos: Collection[str] | None = None,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[DependencyRecord]:
    """Fetch every dependency row, page by page, until the server sets ``end``.

    *repos* (when non-empty) restricts the search server-side.

    A failed page does not abort the cycle: the failure is logged and the
    rows accumulated so far are returned.  Later pages are not requested.
    """
    records: list[DependencyRecord] = []
    offset = 0
    pages = 0

    while True:
        try:
            page = await client.search_dependencies(limit=page_size, offset=offset, repos=repos)
            rows = _page_rows(page, offset)
        except PageFetchError as exc:
            log.error(
                "inventory.page_failed",
                offset=exc.offset,
                pages_fetched=pages,
                rows_kept=len(records),
                error=str(exc),
            )
            return records

        pages += 1
        for row in rows:
            record = DependencyRecord.from_row(row)
            if record is None:
                log.warning("inventory.row_skipped", offset=offset, row=row)
                continue
            records.append(record)

        if page.get("end"):
            break
        offset += _page_step(page.get("limit"), page_size)

    log.info("inventory.fetched", pages=pages, dependencies=len(records))
    return records


def _page_step(reported: object, fallback: int) -> int:
    """Advance by the server-reported page size, or *fallback* if unusable."""
    if isinstance(reported, int) and not isinstance(reported, bool) and reported > 0:
        return reported
    return fallback


def _page_rows(page: dict, offset: int) -> list:
    """Return the page's rows; a non-list ``rows`` counts as a failed page."""
    rows = page.get("rows")
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise PageFetchError(offset, f"rows is {type(rows).__name__}, expected list")
    return rows
