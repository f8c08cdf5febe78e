"""Fetch-and-transform pipeline.

``fetch_and_transform`` orchestrates one request from a caller-supplied URL
to a response envelope:

    validate → fetch → gate → transform → envelope

Every stage runs exactly once.  Any terminal error moves the request to the
failed state and is reported as a failure envelope, never raised.
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

import httpx

from faleproxy.errors import FetchError, ProxyError
from faleproxy.scraper.fetcher import fetch_document
from faleproxy.scraper.gate import ensure_html
from faleproxy.scraper.models import ResponseEnvelope
from faleproxy.scraper.transformer import transform_document
from faleproxy.scraper.urls import parse_base_url

logger = logging.getLogger(__name__)


class Stage(str, enum.Enum):
    VALIDATING = "validating"
    FETCHING = "fetching"
    GATING = "gating"
    TRANSFORMING = "transforming"


async def fetch_and_transform(
    url: Optional[str], client: Optional[httpx.AsyncClient] = None
) -> ResponseEnvelope:
    """Run the whole pipeline for *url* and return the envelope.

    Args:
        url: The caller-supplied URL (may be ``None`` when absent).
        client: Optional shared ``httpx.AsyncClient`` for the fetch.

    Returns:
        A success envelope with the rewritten document, or a failure envelope
        whose ``status_code`` is 400 for bad input / non-HTML content and 500
        for fetch failures.
    """
    stage = Stage.VALIDATING
    try:
        base_url = parse_base_url(url)

        stage = Stage.FETCHING
        logger.debug("Fetching %s", base_url)
        document = await fetch_document(base_url, client=client)

        stage = Stage.GATING
        ensure_html(document.content_type)

        stage = Stage.TRANSFORMING
        result = transform_document(document.html, base_url)
    except ProxyError as exc:
        logger.info("Request for %r failed while %s: %s", url, stage.value, exc.message)
        return ResponseEnvelope.failure(exc.message, exc.status_code)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error while %s %r", stage.value, url)
        error = FetchError(exc)
        return ResponseEnvelope.failure(error.message, error.status_code)

    logger.debug("Transformed %s (title=%r)", base_url, result.title)
    return ResponseEnvelope.ok(result, original_url=url or base_url)
