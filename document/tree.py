"""Document tree provider and serializer.

Wraps HTML fragments so they form a complete document, parses them with
``BeautifulSoup`` (lxml backend) and serializes nodes back to markup.

Serialization escapes only ``&``, ``<`` and ``>`` in text (plus quotes in
attribute values), keeps attribute order, and writes void elements without
a closing slash, e.g. ``<br clear="all">``.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

_DOCUMENT_TEMPLATE = (
    '<!doctype html><html><head><meta charset="UTF-8"/></head>'
    "<body>{}</body></html>"
)

_BODY_TAG = re.compile(r"<body[\s>]", re.IGNORECASE)
_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)


class OrderedHTMLFormatter(HTMLFormatter):
    """HTML formatter that writes attributes in document order."""

    def attributes(self, tag: Tag):
        # bs4 sorts attributes by name unless told otherwise.
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


OUTPUT_FORMATTER = OrderedHTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def wrap_html(html: str) -> str:
    """Wrap *html* so that it forms a complete document.

    Markup that already has a ``<body>`` tag outside of comments is
    returned unchanged.
    """
    if _BODY_TAG.search(_COMMENT.sub("", html)):
        return html
    return _DOCUMENT_TEMPLATE.format(html)


def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* (always wrapped first) into a ``BeautifulSoup`` tree."""
    return BeautifulSoup(wrap_html(html), "lxml")


def get_body(soup: BeautifulSoup) -> Tag:
    """Return the ``<body>`` of *soup*, creating one if the tree has none."""
    body = soup.body
    if body is not None:
        return body

    body = soup.new_tag("body")
    root = soup.html or soup
    for child in list(root.contents):
        if isinstance(child, Tag) and child.name == "head":
            continue
        body.append(child)
    root.append(body)
    return body


def serialize(node: Tag) -> str:
    """Return the outer HTML of *node*."""
    return node.decode(formatter=OUTPUT_FORMATTER)


def serialize_contents(node: Tag) -> str:
    """Return the inner HTML of *node*."""
    return node.decode_contents(formatter=OUTPUT_FORMATTER)
