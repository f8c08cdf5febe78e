"""A mutable, request-local HTML tree with an explicit walk interface."""

from __future__ import annotations

from typing import Iterator, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import RubyParenthesisString, RubyTextString

# Exact string types that carry visible character data.
_TEXT_TYPES = (NavigableString, RubyTextString, RubyParenthesisString)


class DocumentTree:
    """One parsed HTML document.

    Wraps a BeautifulSoup tree built with the permissive ``html.parser``
    builder, so malformed markup never fails to parse.  Instances are created
    per request and must not be shared.
    """

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    # ------------------------------------------------------------------
    # Elements & attributes
    # ------------------------------------------------------------------

    def iter_elements(self) -> Iterator[Tag]:
        """Yield every element in document order."""
        yield from self._soup.find_all(True)

    @staticmethod
    def get_attribute(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):  # multi-valued attributes such as ``rel``
            return " ".join(value)
        return value

    @staticmethod
    def set_attribute(element: Tag, name: str, value: str) -> None:
        element[name] = value

    # ------------------------------------------------------------------
    # Text nodes
    # ------------------------------------------------------------------

    def iter_text_nodes(self) -> Iterator[NavigableString]:
        """Yield the visible text nodes of the body in document order.

        Comments, doctypes, CDATA and script/style/template contents are
        other NavigableString subclasses and are skipped.  When the markup
        has no ``<body>``, everything outside ``<head>`` counts as body.  The
        document title is handled separately; other ``<title>`` elements
        (SVG titles, say) are ordinary text.
        """
        root = self._soup.body or self._soup
        title = self._soup.title
        # Materialize first: callers replace nodes while iterating.
        nodes = [
            node
            for node in root.descendants
            if type(node) in _TEXT_TYPES
            and node.parent is not title
            and not _inside_head(node)
        ]
        yield from nodes

    @staticmethod
    def set_text(node: NavigableString, text: str) -> None:
        node.replace_with(text)

    # ------------------------------------------------------------------
    # Title
    # ------------------------------------------------------------------

    def get_title(self) -> str:
        title = self._soup.title
        return title.get_text() if title is not None else ""

    def set_title(self, text: str) -> None:
        title = self._soup.title
        if title is not None:
            title.string = text

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Return the whole tree as an HTML string."""
        return str(self._soup)


def _inside_head(node: NavigableString) -> bool:
    return any(parent.name == "head" for parent in node.parents)
