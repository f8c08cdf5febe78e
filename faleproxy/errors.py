"""Request-level failures of the fetch-and-transform pipeline.

Each error knows the HTTP status it maps to.  The pipeline catches these and
turns them into a failure envelope; they never reach the caller as raw
exceptions.
"""

from __future__ import annotations


class ProxyError(Exception):
    """Base class for terminal pipeline errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidURL(ProxyError):
    """The caller-supplied URL is missing or cannot be parsed (HTTP 400)."""

    status_code = 400


class UnsupportedContentType(ProxyError):
    """The fetched resource is not an HTML document (HTTP 400)."""

    status_code = 400


class FetchError(ProxyError):
    """Retrieval of the remote document failed (HTTP 500).

    The message carries the underlying transport error text.
    """

    status_code = 500

    def __init__(self, cause: BaseException | str) -> None:
        super().__init__(f"Failed to fetch content: {cause}")
        self.cause = cause
