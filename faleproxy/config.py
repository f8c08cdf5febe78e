"""Centralised settings for the Faleproxy service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("FALEPROXY_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("FALEPROXY_PORT", "3001"))
    )

    @property
    def public_dir(self) -> Path:
        """Directory holding the bundled front-end page."""
        return Path(__file__).resolve().parent.parent / "public"

    # ------------------------------------------------------------------
    # Outbound fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "FALEPROXY_USER_AGENT",
            "Mozilla/5.0 (compatible; Faleproxy/1.0)",
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: _env_bool("FALEPROXY_FOLLOW_REDIRECTS", "true")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("FALEPROXY_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from faleproxy.config import settings
settings = Settings()
