"""Front-end page.

Routes
------
GET /    → the bundled ``public/index.html``
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from faleproxy.config import settings

router = APIRouter()


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the single-page front end."""
    page = settings.public_dir / "index.html"
    if not page.is_file():
        raise HTTPException(status_code=404, detail="Front-end page not found.")
    return FileResponse(page, media_type="text/html")
