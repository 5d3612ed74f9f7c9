"""Async Socket API client: dependency search and batched PURL lookup."""

from __future__ import annotations

import asyncio
from collections.abc import Collection, Sequence
from typing import Any

import httpx
import structlog

from socketwatch.config import DEFAULT_API_URL
from socketwatch.errors import BatchLookupError, PageFetchError

log = structlog.get_logger("socketwatch.client")

_LOOKUP_PARAMS = {"alerts": "true", "compact": "false", "fixable": "false"}


class SocketClient:
    """Thin async wrapper around the Socket REST API.

    Requests are never retried here; the next poll cycle is the retry.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
    ) -> None:
        # httpx applies *timeout* per phase (connect, read, ...); _post adds
        # an overall deadline so no request outlives it.
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> SocketClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def search_dependencies(
        self,
        *,
        limit: int,
        offset: int,
        repos: Collection[str] | None = None,
    ) -> dict[str, Any]:
        """POST /dependencies/search — one page of the dependency inventory.

        Returns the decoded page ``{"rows": [...], "end": bool, "limit": int}``.
        Raises :class:`PageFetchError` on any transport, status or decoding
        failure.
        """
        body: dict[str, Any] = {"limit": limit, "offset": offset}
        if repos:
            body["repos"] = sorted(repos)

        try:
            resp = await self._post("/dependencies/search", json=body)
            page = resp.json()
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise PageFetchError(offset, f"timeout after {self._timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise PageFetchError(offset, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise PageFetchError(offset, f"{type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            raise PageFetchError(offset, f"invalid JSON body: {exc}") from exc

        if not isinstance(page, dict):
            raise PageFetchError(offset, f"unexpected body type {type(page).__name__}")
        return page

    async def lookup_purls(self, purls: Sequence[str]) -> str:
        """POST /purl — look up alerts for a batch of package URLs.

        Returns the raw newline-delimited JSON body, one package per line.
        Raises :class:`BatchLookupError` on any transport or status failure.
        """
        components = [{"purl": purl} for purl in purls]
        log.debug("client.lookup", packages=len(purls), sample=list(purls[:3]))

        try:
            resp = await self._post(
                "/purl", params=_LOOKUP_PARAMS, json={"components": components}
            )
            return resp.text
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise BatchLookupError(len(purls), f"timeout after {self._timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            raise BatchLookupError(len(purls), f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise BatchLookupError(len(purls), f"{type(exc).__name__}: {exc}") from exc

    # ── internal ───────────────────────────────────────────────────────────

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        resp = await asyncio.wait_for(self._client.post(path, **kwargs), timeout=self._timeout)
        resp.raise_for_status()
        return resp
