"""URL validation and resolution against a page's base URL."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from faleproxy.errors import InvalidURL

# Schemes whose URLs must carry a host and whose empty path means "/".
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# ``url(...)`` inside an inline style; the inner token may be quoted.
_STYLE_URL = re.compile(r"""url\(['"]?([^'")]+)['"]?\)""")


def _normalize(url: str) -> str:
    """Return *url* in canonical absolute form.

    Raises:
        ValueError: If *url* is not an absolute URL.
    """
    parts = urlsplit(url.strip())
    if not parts.scheme:
        raise ValueError(f"URL has no scheme: {url!r}")

    scheme = parts.scheme.lower()
    netloc = parts.netloc
    path = parts.path
    if scheme in _HIERARCHICAL_SCHEMES:
        if not parts.hostname:
            raise ValueError(f"URL has no host: {url!r}")
        parts.port  # raises ValueError on a malformed port
        userinfo, at, hostport = netloc.rpartition("@")
        netloc = f"{userinfo}{at}{hostport.lower()}"
        path = path or "/"

    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def parse_base_url(url: Optional[str]) -> str:
    """Validate the caller-supplied *url* and return its normalized form.

    Raises:
        InvalidURL: ``"URL is required"`` when *url* is missing or empty,
            ``"Invalid URL"`` when it is not an absolute URL.
    """
    if not url:
        raise InvalidURL("URL is required")
    try:
        return _normalize(url)
    except ValueError as exc:
        raise InvalidURL("Invalid URL") from exc


def resolve_url(ref: str, base: str) -> Optional[str]:
    """Resolve *ref* against *base*.

    Returns ``None`` when *ref* cannot be resolved; callers leave the original
    value in place in that case.
    """
    try:
        return _normalize(urljoin(base, ref.strip()))
    except ValueError:
        return None


def rewrite_style_urls(style: str, base: str) -> str:
    """Absolutize every ``url(...)`` reference in an inline *style* value.

    Only the matched ``url(...)`` fragments change; an occurrence that cannot
    be resolved is kept byte-for-byte.
    """
    if "url(" not in style:
        return style

    def _replace(match: re.Match[str]) -> str:
        resolved = resolve_url(match.group(1), base)
        if resolved is None:
            return match.group(0)
        return f"url('{resolved}')"

    return _STYLE_URL.sub(_replace, style)
