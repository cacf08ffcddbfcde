"""Page title normalization and main page detection."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Normalize a page title the way the wiki does for comparison.

    Underscores become spaces, whitespace runs collapse, and the first
    character is upper-cased: ``"main_page"`` -> ``"Main page"``.
    """
    text = _WHITESPACE.sub(" ", title.replace("_", " ")).strip()
    return text[:1].upper() + text[1:]


def is_main_page(title: str | None, main_page_title: str) -> bool:
    """Return True if *title* names the configured main page."""
    if not title:
        return False
    return normalize_title(title) == normalize_title(main_page_title)
