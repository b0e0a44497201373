"""Bounded-concurrency page fetching using httpx's async client."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from core.errors import TransportError
from core.http_client import Session

_log = logging.getLogger(__name__)


async def fetch(url: str, *, client: httpx.AsyncClient) -> str:
    _log.debug("GET %s (async)", url)
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to fetch {url}: {e}", context={"url": url}) from e
    return resp.text


async def fetch_all(urls: Sequence[str], *, session: Session, limit: int) -> list[str]:
    """Fetch ``urls`` with at most ``limit`` requests in flight.

    Results come back in the order of ``urls``. The first failure propagates
    and the remaining requests are cancelled.
    """
    semaphore = asyncio.Semaphore(max(1, limit))
    async with session.async_client() as client:

        async def _one(url: str) -> str:
            async with semaphore:
                return await fetch(url, client=client)

        tasks = [asyncio.ensure_future(_one(u)) for u in urls]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise


def fetch_all_blocking(urls: Sequence[str], *, session: Session, limit: int) -> list[str]:
    """Synchronous wrapper; must not be called while an event loop is running
    in this thread (``asyncio.run`` refuses). See :func:`loop_running`.
    """
    return asyncio.run(fetch_all(urls, session=session, limit=limit))


def loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True
