"""Data models for the fetch-and-transform pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class FetchedDocument:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    content_type: str
    status_code: int


@dataclass
class TransformResult:
    """The rewritten document and its (rewritten) title."""

    html: str
    title: str


@dataclass
class ResponseEnvelope:
    """Uniform result returned for every request, successful or not.

    ``status_code`` is the HTTP status the envelope maps to; it is not part of
    the serialized body.
    """

    success: bool
    content: Optional[str] = None
    title: Optional[str] = None
    original_url: Optional[str] = None
    error: Optional[str] = None
    status_code: int = 200

    @classmethod
    def ok(cls, result: TransformResult, original_url: str) -> ResponseEnvelope:
        return cls(
            success=True,
            content=result.html,
            title=result.title,
            original_url=original_url,
        )

    @classmethod
    def failure(cls, error: str, status_code: int) -> ResponseEnvelope:
        return cls(success=False, error=error, status_code=status_code)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, omitting absent fields."""
        body: dict[str, Any] = {"success": self.success}
        if self.success:
            body["content"] = self.content
            body["title"] = self.title
            body["originalUrl"] = self.original_url
        else:
            body["error"] = self.error
        return body
