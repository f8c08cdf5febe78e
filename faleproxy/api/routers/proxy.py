"""Fetch-and-rewrite endpoint.

Routes
------
POST /fetch    Body: {"url": "https://..."}    → fetch_and_transform
               (JSON or ``application/x-www-form-urlencoded``)
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from faleproxy.pipeline import fetch_and_transform

router = APIRouter()

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class FetchRequest(BaseModel):
    # Optional so a missing URL is answered with the envelope, not a 422.
    url: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_url(request: Request) -> Optional[str]:
    """Return the ``url`` field of a form-encoded or JSON request body.

    Raises:
        RequestValidationError: If a JSON body is malformed or ``url`` is not
            a string.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.lower().startswith(_FORM_CONTENT_TYPE):
        form = await request.form()
        value = form.get("url")
        return value if isinstance(value, str) else None

    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return FetchRequest.model_validate_json(raw).url
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/fetch")
async def fetch_endpoint(request: Request) -> JSONResponse:
    """Fetch the body's ``url``, rewrite it and return the response envelope.

    The status code is 200 on success, 400 for a missing/invalid URL, a
    malformed body or a non-HTML resource and 500 when the fetch itself fails.
    """
    url = await _read_url(request)
    client = getattr(request.app.state, "http_client", None)
    envelope = await fetch_and_transform(url, client=client)
    return JSONResponse(envelope.to_dict(), status_code=envelope.status_code)
