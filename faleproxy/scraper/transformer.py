"""Rewrites a fetched HTML document.

Two passes run over one :class:`DocumentTree`, in this order:

1. URL absolutization touches only ``href``/``src`` attributes and
   ``url(...)`` references inside inline ``style`` attributes.
2. Text substitution touches only text nodes and the ``<title>``.

Because the passes work on disjoint parts of the tree, substitution can never
alter a URL and absolutization can never alter visible prose.
"""

from __future__ import annotations

import logging

from faleproxy.scraper.document import DocumentTree
from faleproxy.scraper.models import TransformResult
from faleproxy.scraper.substitution import replace_token
from faleproxy.scraper.urls import resolve_url, rewrite_style_urls

logger = logging.getLogger(__name__)

URL_ATTRIBUTES = ("href", "src")


def absolutize_urls(tree: DocumentTree, base_url: str) -> int:
    """Rewrite relative references in *tree* against *base_url*.

    Returns the number of attribute values that changed.  Values that cannot
    be resolved are left untouched.
    """
    changed = 0
    for element in tree.iter_elements():
        for attr in URL_ATTRIBUTES:
            value = tree.get_attribute(element, attr)
            if not value:
                continue
            absolute = resolve_url(value, base_url)
            if absolute is None:
                logger.debug("Could not resolve %s=%r against %s", attr, value, base_url)
                continue
            if absolute != value:
                tree.set_attribute(element, attr, absolute)
                changed += 1

        style = tree.get_attribute(element, "style")
        if style and "url(" in style:
            updated = rewrite_style_urls(style, base_url)
            if updated != style:
                tree.set_attribute(element, "style", updated)
                changed += 1
    return changed


def substitute_text(tree: DocumentTree) -> str:
    """Apply the token substitution to body text nodes and the title.

    Returns the rewritten title.
    """
    for node in tree.iter_text_nodes():
        text = str(node)
        new_text = replace_token(text)
        if new_text != text:
            tree.set_text(node, new_text)

    title = replace_token(tree.get_title())
    tree.set_title(title)
    return title


def transform_document(html: str, base_url: str) -> TransformResult:
    """Parse *html*, run both passes and serialize the result."""
    tree = DocumentTree(html)
    changed = absolutize_urls(tree, base_url)
    title = substitute_text(tree)
    logger.debug("Absolutized %d URL attribute(s) for %s", changed, base_url)
    return TransformResult(html=tree.serialize(), title=title)
