"""Faleproxy CLI — entry-point for the service and one-off rewrites.

Usage:
    python cli/main.py --help

Commands:
    serve    → run the HTTP service (uvicorn)
    fetch    → fetch & rewrite a single URL from the terminal
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from faleproxy.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import logging
from typing import Optional

import typer

from faleproxy.config import settings

app = typer.Typer(
    name="faleproxy",
    help="Faleproxy CLI.",
    no_args_is_help=True,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# HTTP service
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes (development)."),
) -> None:
    """Run the Faleproxy HTTP service."""
    import uvicorn  # noqa: PLC0415

    _configure_logging(settings.log_level)
    typer.echo(f"[serve] Faleproxy server running at http://{host}:{port}")
    uvicorn.run(
        "faleproxy.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# One-off rewrite
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    url: str = typer.Argument(..., help="URL of the page to rewrite."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the rewritten HTML here instead of stdout."
    ),
) -> None:
    """Fetch a page, rewrite it and print the result."""
    from faleproxy.pipeline import fetch_and_transform  # noqa: PLC0415

    _configure_logging(settings.log_level)
    envelope = asyncio.run(fetch_and_transform(url))
    if not envelope.success:
        typer.echo(f"[fetch] Error ({envelope.status_code}): {envelope.error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[fetch] Title  : {envelope.title or '(none)'}", err=True)
    if output is not None:
        output.write_text(envelope.content or "", encoding="utf-8")
        typer.echo(f"[fetch] Written: {output}", err=True)
    else:
        typer.echo(envelope.content)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
