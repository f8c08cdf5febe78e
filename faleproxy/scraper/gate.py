"""Content-type gate: only HTML payloads are transformed."""

from __future__ import annotations

import logging
from typing import Optional

from faleproxy.errors import UnsupportedContentType

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html"


def ensure_html(content_type: Optional[str]) -> None:
    """Raise :class:`UnsupportedContentType` unless *content_type* is HTML.

    A missing header counts as non-HTML.
    """
    if not content_type or HTML_MEDIA_TYPE not in content_type.lower():
        logger.warning("Content type is not HTML: %r", content_type)
        raise UnsupportedContentType("Invalid content type")
