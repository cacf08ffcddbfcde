"""Heading-rank section partitioning.

Three steps run on a generic (non main page) document when expandable
sections are enabled:

    1. ``find_top_heading()`` -- picks the first tag of the caller's ranked
       list that occurs anywhere in the document.
    2. ``partition_sections()`` -- wraps the content between top-rank
       headings of ``<body>`` in ``<div>`` elements so a client can toggle
       each section.
    3. ``mark_subheadings_editable()`` -- adds the ``in-block`` class to
       every other heading so it can be edited on its own.

Example with ``["h1", "h2"]``::

    <h1>Foo</h1><h2>Bar</h2>
    => <h1>Foo</h1><div><h2 class="in-block">Bar</h2></div>
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bs4 import BeautifulSoup, Tag

from document.tree import get_body
from transform.errors import InvalidConfiguration

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

EDITABLE_HEADING_CLASS = "in-block"


def validate_top_heading_tags(tags: Sequence[str]) -> list[str]:
    """Check a ranked list of top heading tags and return it as a list.

    Tag names are lower-cased.  Order is kept: the first entry is the most
    significant rank.

    Raises:
        InvalidConfiguration: If the list is empty or holds anything other
            than ``h1`` .. ``h6``.
    """
    if not isinstance(tags, (list, tuple)):
        raise InvalidConfiguration("Top heading tags must be a list of tag names")

    checked: list[str] = []
    for tag in tags:
        name = tag.strip().lower() if isinstance(tag, str) else tag
        if name not in HEADING_TAGS:
            raise InvalidConfiguration(f"Not a heading tag: {tag!r}")
        checked.append(name)

    if not checked:
        raise InvalidConfiguration("Top heading tags must not be empty")
    return checked


def find_top_heading(root: Tag, tags: Iterable[str]) -> str | None:
    """Return the first tag in *tags* present anywhere under *root*.

    Returns ``None`` when *tags* is empty or none of them occurs.  That is
    not an error: with no top rank, no sections are wrapped and every
    heading counts as a sub-heading.
    """
    for tag in tags:
        if root.find(tag) is not None:
            return tag
    return None


def partition_sections(soup: BeautifulSoup, top_heading: str | None) -> int:
    """Wrap the sections of ``<body>`` in ``<div>`` elements.

    Walks a snapshot of the body's direct children once.  Content is moved
    into the currently open wrapper; a top-rank heading stays where it is
    and closes the wrapper, which is inserted right before it.

    * Content before the first top-rank heading gets its own leading
      ``<div>``, emitted only when it is non-empty.
    * A wrapper closed by a later top-rank heading is always emitted, so two
      adjacent top-rank headings have an empty ``<div>`` between them.
    * The trailing wrapper is appended to the body only when non-empty.

    Nothing happens when *top_heading* is ``None``.  This function
    **mutates** the tree in place.

    Returns:
        The number of wrapper ``<div>`` elements inserted.
    """
    if top_heading is None:
        return 0

    body = get_body(soup)
    wrapper = soup.new_tag("div")
    in_section = False
    inserted = 0

    for child in list(body.contents):
        if isinstance(child, Tag) and child.name == top_heading:
            if in_section or wrapper.contents:
                child.insert_before(wrapper)
                inserted += 1
            wrapper = soup.new_tag("div")
            in_section = True
        else:
            wrapper.append(child)

    if wrapper.contents:
        body.append(wrapper)
        inserted += 1
    return inserted


def _class_tokens(tag: Tag) -> list[str]:
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for token in value if token]


def mark_subheadings_editable(root: Tag, top_heading: str | None) -> int:
    """Add the ``in-block`` class to every heading not of *top_heading* rank.

    All six heading levels are considered, whatever the ranked list was.
    With *top_heading* ``None`` every heading is marked.  Existing class
    tokens keep their order and the marker is never added twice.

    Returns:
        The number of headings that received the marker.
    """
    marked = 0
    for heading in root.find_all(HEADING_TAGS):
        if heading.name == top_heading:
            continue
        tokens = _class_tokens(heading)
        if EDITABLE_HEADING_CLASS in tokens:
            continue
        heading["class"] = tokens + [EDITABLE_HEADING_CLASS]
        marked += 1
    return marked
