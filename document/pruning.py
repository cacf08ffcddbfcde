"""Removal-list filter.

Removes every element matched by a list of CSS selectors before the
mobile transforms run.  Which selectors are unwanted is configuration
(see ``models.options.RemovalConfig``); this module only executes the
removal.

Selectors are matched with soupsieve through ``Tag.select``, so anything
soupsieve understands works: ``table``, ``.navbox``, ``#toc``,
``div.metadata``, ``sup.reference``.
"""

from __future__ import annotations

from collections.abc import Iterable

import soupsieve
from bs4 import Tag

from transform.errors import InvalidConfiguration

# Document structure is never removed, whatever a selector matches.
_STRUCTURAL_TAGS = {"html", "head", "body"}


def validate_selectors(selectors: Iterable[str]) -> list[str]:
    """Return *selectors* as a list after checking that each one compiles.

    Raises:
        InvalidConfiguration: If a selector is not a string or does not
            parse as CSS.
    """
    checked: list[str] = []
    for selector in selectors:
        if not isinstance(selector, str) or not selector.strip():
            raise InvalidConfiguration(f"Invalid removal selector: {selector!r}")
        try:
            soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            raise InvalidConfiguration(
                f"Invalid removal selector {selector!r}: {exc}"
            ) from exc
        checked.append(selector.strip())
    return checked


def remove_elements(root: Tag, selectors: Iterable[str]) -> int:
    """Decompose every element under *root* matched by *selectors*.

    Elements already destroyed together with a matched ancestor are
    skipped, as are ``<html>``, ``<head>`` and ``<body>`` themselves.
    This function **mutates** the tree in place.

    Returns:
        The number of matched elements removed.
    """
    removed = 0
    for selector in selectors:
        for tag in root.select(selector):
            if tag.decomposed or tag.name in _STRUCTURAL_TAGS:
                continue
            tag.decompose()
            removed += 1
    return removed
