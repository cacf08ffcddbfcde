"""Main page content assembly.

The wiki's main page has no meaningful heading structure.  Instead, its
content is picked out by element id and moved into a single
``<div id="mainpage">`` container, in this order:

    1. ``#mp-tfa`` (featured article) under a synthesized ``<h2>``
    2. ``#mp-itn`` (news) under a synthesized ``<h2>``
    3. every ``[id^="mf-"]`` element in document order, each preceded by
       an ``<h2>`` made from its ``title`` attribute (when non-empty) and
       followed by ``<br clear="all">``
    4. ``#central-auth-images`` (1x1 tracking images), unmodified

Elements are moved, never copied.  A region nested inside another one is
moved out of it, so the container lists every region once, flat.  When
steps 1-3 find nothing, no container is produced and the caller keeps the
whole page.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger("formatter")

MAIN_PAGE_ID = "mainpage"
FEATURED_ARTICLE_ID = "mp-tfa"
NEWS_ID = "mp-itn"
CENTRAL_AUTH_IMAGES_ID = "central-auth-images"
MOBILE_SECTION_PREFIX = "mf-"

# Handled before the generic mf- scan.
_SPECIAL_IDS = {FEATURED_ARTICLE_ID, NEWS_ID}


def _heading(soup: BeautifulSoup, text: str) -> Tag:
    h2 = soup.new_tag("h2")
    h2.string = text
    return h2


def assemble_main_page(
    soup: BeautifulSoup,
    featured_article_label: str,
    news_label: str,
) -> Tag | None:
    """Build the curated main page container from *soup*.

    Args:
        soup: Parsed main page.  Matched regions are moved out of it.
        featured_article_label: Text of the heading above ``#mp-tfa``.
        news_label: Text of the heading above ``#mp-itn``.

    Returns:
        The detached ``<div id="mainpage">`` container, or ``None`` when no
        featured article, news or ``mf-`` region exists (the tree is then
        left untouched).
    """
    featured_article = soup.find(id=FEATURED_ARTICLE_ID)
    news_items = soup.find(id=NEWS_ID)
    central_auth_images = soup.find(id=CENTRAL_AUTH_IMAGES_ID)
    sections = [
        element
        for element in soup.find_all(id=re.compile("^" + re.escape(MOBILE_SECTION_PREFIX)))
        if element["id"] not in _SPECIAL_IDS
    ]

    content = soup.new_tag("div", attrs={"id": MAIN_PAGE_ID})

    if featured_article is not None:
        content.append(_heading(soup, featured_article_label))
        content.append(featured_article)

    if news_items is not None:
        content.append(_heading(soup, news_label))
        content.append(news_items)

    for element in sections:
        section_title = element.get("title") or ""
        if section_title:
            del element["title"]
            content.append(_heading(soup, section_title))
        content.append(element)
        content.append(soup.new_tag("br", attrs={"clear": "all"}))

    if not content.contents:
        logger.debug("no main page regions found")
        return None

    # Tracking images never count towards the emptiness check above.
    if central_auth_images is not None:
        content.append(central_auth_images)

    logger.debug(
        "assembled main page",
        extra={"sections": len(sections)},
    )
    return content
