"""The fixed, case-preserving text substitution applied to visible text."""

from __future__ import annotations

# Applied in order, each globally.
REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("Yale", "Fale"),
    ("yale", "fale"),
    ("YALE", "FALE"),
)


def replace_token(text: str) -> str:
    """Return *text* with every cased form of the token replaced."""
    for match, replacement in REPLACEMENTS:
        text = text.replace(match, replacement)
    return text
