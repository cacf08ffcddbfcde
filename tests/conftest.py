"""Shared fixtures for the mobile formatter tests."""

import pytest

from document.tree import get_body, parse_document, serialize_contents
from transform.messages import FEATURED_ARTICLE, MISSING_IMAGE, NEWS_ITEMS, MessageProvider


@pytest.fixture
def messages():
    """Message provider with short, predictable labels."""
    return MessageProvider(
        overrides={
            MISSING_IMAGE: "no image",
            FEATURED_ARTICLE: "Featured",
            NEWS_ITEMS: "News",
        }
    )


@pytest.fixture
def body_html():
    """Return the inner HTML of a soup's <body>."""

    def _body_html(soup):
        return serialize_contents(get_body(soup))

    return _body_html


@pytest.fixture
def soup_of():
    """Parse an HTML fragment into a complete document."""
    return parse_document
