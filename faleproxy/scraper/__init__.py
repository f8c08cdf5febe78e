"""Scraper package — fetch, gate & transform a remote HTML document."""

from faleproxy.scraper.fetcher import fetch_document
from faleproxy.scraper.gate import ensure_html
from faleproxy.scraper.models import FetchedDocument, ResponseEnvelope, TransformResult
from faleproxy.scraper.transformer import transform_document
from faleproxy.scraper.urls import parse_base_url, resolve_url, rewrite_style_urls

__all__ = [
    "fetch_document",
    "ensure_html",
    "transform_document",
    "parse_base_url",
    "resolve_url",
    "rewrite_style_urls",
    "FetchedDocument",
    "TransformResult",
    "ResponseEnvelope",
]
