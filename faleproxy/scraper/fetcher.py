"""Async HTTP fetcher for the remote document."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from faleproxy.config import settings
from faleproxy.errors import FetchError
from faleproxy.scraper.models import FetchedDocument

logger = logging.getLogger(__name__)


def build_client() -> httpx.AsyncClient:
    """Return an ``httpx.AsyncClient`` configured from :data:`settings`."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    )


async def _get(client: httpx.AsyncClient, url: str) -> FetchedDocument:
    response = await client.get(url)
    response.raise_for_status()
    return FetchedDocument(
        url=url,
        html=response.text,
        content_type=response.headers.get("content-type", ""),
        status_code=response.status_code,
    )


async def fetch_document(
    url: str, client: Optional[httpx.AsyncClient] = None
) -> FetchedDocument:
    """Fetch *url* once and return a :class:`FetchedDocument`.

    Uses *client* when given (the app shares one connection pool), otherwise a
    short-lived client built from settings.  There are no retries.

    Raises:
        FetchError: On any transport failure or a 4xx/5xx status code.
    """
    try:
        if client is not None:
            return await _get(client, url)
        async with build_client() as own_client:
            return await _get(own_client, url)
    except httpx.HTTPError as exc:
        logger.error("Error fetching URL %s: %s", url, exc)
        raise FetchError(exc) from exc
