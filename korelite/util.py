"""Small helpers: random hex identifiers and HTML escaping."""

from __future__ import annotations

import secrets

_HTML_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
    }
)


def generate_random_string(length: int) -> str:
    """Return a cryptographically random lowercase hex string of *length* characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_hex((length + 1) // 2)[:length]


def sanitize_html(text: str | None) -> str | None:
    """Escape the characters that are special in HTML; ``None`` stays ``None``."""
    if text is None:
        return None
    return text.translate(_HTML_ESCAPES)