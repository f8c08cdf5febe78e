"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single ``httpx.AsyncClient`` (shared across all
requests via ``request.app.state.http_client``) so outbound fetches reuse one
connection pool.  On shutdown it closes the client cleanly.  No other state
is shared between requests.

Routers
-------
    /        — the bundled front-end page
    /fetch   — fetch a remote page and return the rewritten document
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from faleproxy import __version__
from faleproxy.scraper.fetcher import build_client

from faleproxy.api.routers import pages as pages_router
from faleproxy.api.routers import proxy as proxy_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the outbound HTTP client on startup and close it on shutdown."""
    client = build_client()
    app.state.http_client = client
    try:
        yield
    finally:
        await client.aclose()


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Faleproxy",
        description=(
            "Fetches a web page, rewrites its relative URLs to absolute ones "
            "and replaces Yale with Fale in its visible text."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _invalid_body_handler)  # type: ignore[arg-type]

    app.include_router(pages_router.router, tags=["pages"])
    app.include_router(proxy_router.router, tags=["proxy"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn faleproxy.api.app:app --reload
app = create_app()
