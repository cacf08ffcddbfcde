"""Mobile formatter pipeline.

Turns the HTML of a rendered wiki page into its mobile variant:

    1. Removal-list filter (configured selector groups + per-call extras)
    2. Image placeholders (when ``remove_media`` is set)
    3. Either the heading pipeline (generic pages, when
       ``expandable_sections`` is set) or main page assembly
    4. Serialization

Which pipeline runs is a ``FormatterKind`` chosen once per page, usually by
``formatter_for()`` from the page title.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

from document.pruning import remove_elements, validate_selectors
from document.tree import get_body, parse_document, serialize, serialize_contents
from models.options import FormatOptions, FormatterKind, RemovalConfig
from transform.config import Settings
from transform.headings import (
    find_top_heading,
    mark_subheadings_editable,
    partition_sections,
    validate_top_heading_tags,
)
from transform.main_page import assemble_main_page
from transform.media import replace_images
from transform.messages import FEATURED_ARTICLE, MISSING_IMAGE, NEWS_ITEMS, MessageProvider
from transform.titles import is_main_page

logger = logging.getLogger("formatter")


def transform(
    soup: BeautifulSoup,
    options: FormatOptions,
    *,
    kind: FormatterKind = FormatterKind.GENERIC,
    messages: MessageProvider | None = None,
    removal: RemovalConfig | None = None,
    extra_selectors: Iterable[str] = (),
) -> Tag:
    """Run the mobile transform pipeline on *soup* in place.

    The tree is single-use: running the pipeline again on its own output
    wraps the wrapper ``<div>`` elements a second time.

    Returns:
        The main page container when main page assembly found regions,
        otherwise the document's ``<body>``.
    """
    kind = FormatterKind(kind)
    messages = messages or MessageProvider()

    removed = 0
    if options.remove_defaults:
        removed += remove_elements(soup, (removal or RemovalConfig()).selectors())
    removed += remove_elements(soup, extra_selectors)

    images_replaced = 0
    if options.remove_media:
        images_replaced = replace_images(soup, messages.msg(MISSING_IMAGE))

    body = get_body(soup)

    if kind is FormatterKind.MAIN_PAGE:
        content = assemble_main_page(
            soup,
            messages.msg(FEATURED_ARTICLE),
            messages.msg(NEWS_ITEMS),
        )
        logger.info(
            "main page formatted",
            extra={
                "formatter": kind.value,
                "removed": removed,
                "images_replaced": images_replaced,
                "main_page_fallback": content is None,
            },
        )
        return body if content is None else content

    top_heading = None
    if options.expandable_sections:
        top_heading = find_top_heading(soup, options.top_heading_tags)
        partition_sections(soup, top_heading)
        mark_subheadings_editable(body, top_heading)

    logger.info(
        "page formatted",
        extra={
            "formatter": kind.value,
            "top_heading": top_heading,
            "removed": removed,
            "images_replaced": images_replaced,
        },
    )
    return body


class MobileFormatter:
    """Formats one page of HTML for mobile devices.

    The HTML is always wrapped so that it forms a complete document.
    Configure with the setters, then call ``get_text()``::

        formatter = MobileFormatter("<h1>Foo</h1><h2>Bar</h2>")
        formatter.enable_expandable_sections()
        formatter.set_top_heading_tags(["h1", "h2"])
        formatter.get_text()
        # => '<h1>Foo</h1><div><h2 class="in-block">Bar</h2></div>'
    """

    def __init__(
        self,
        html: str,
        options: FormatOptions | None = None,
        *,
        kind: FormatterKind = FormatterKind.GENERIC,
        messages: MessageProvider | None = None,
        removal: RemovalConfig | None = None,
    ) -> None:
        self.soup: BeautifulSoup = parse_document(html)
        self.options = options.model_copy(deep=True) if options else FormatOptions()
        self.kind = FormatterKind(kind)
        self.messages = messages or MessageProvider()
        self.removal = removal or RemovalConfig()
        self.main_page_fallback = False
        self._extra_selectors: list[str] = []
        self._text: str | None = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def enable_expandable_sections(self, flag: bool = True) -> None:
        self.options.expandable_sections = flag

    def set_remove_media(self, flag: bool = True) -> None:
        self.options.remove_media = flag

    def set_top_heading_tags(self, tags: list[str]) -> None:
        """Set the ranked heading tags that may start a top-level section.

        The first tag of the list found in the document becomes the top
        rank; every other heading is marked as a sub-heading.

        Raises:
            InvalidConfiguration: If *tags* is empty or holds a tag other
                than ``h1`` .. ``h6``.
        """
        self.options.top_heading_tags = validate_top_heading_tags(tags)

    def remove(self, selectors: str | Iterable[str]) -> None:
        """Remove elements matching *selectors* in addition to the defaults."""
        if isinstance(selectors, str):
            selectors = [selectors]
        self._extra_selectors.extend(validate_selectors(selectors))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_text(self) -> str:
        """Run the pipeline (once) and return the resulting HTML.

        For a generic page, or a main page without any known regions, this
        is the inner HTML of ``<body>``.  Otherwise it is the outer HTML of
        the ``<div id="mainpage">`` container.
        """
        if self._text is None:
            root = transform(
                self.soup,
                self.options,
                kind=self.kind,
                messages=self.messages,
                removal=self.removal,
                extra_selectors=self._extra_selectors,
            )
            if root is get_body(self.soup):
                self.main_page_fallback = self.kind is FormatterKind.MAIN_PAGE
                self._text = serialize_contents(root)
            else:
                self._text = serialize(root)
        return self._text


def formatter_for(
    html: str,
    title: str | None,
    special_case_main_page: bool | None = None,
    *,
    settings: Settings | None = None,
    options: FormatOptions | None = None,
) -> MobileFormatter:
    """Return a formatter for the page *title*.

    A main page formatter is returned when *title* is the configured main
    page and the main page is treated as a special case
    (*special_case_main_page*, defaulting to the settings).  Otherwise a
    generic formatter is returned.
    """
    settings = settings or Settings()
    if special_case_main_page is None:
        special_case_main_page = settings.special_case_main_page

    kind = FormatterKind.GENERIC
    if special_case_main_page and is_main_page(title, settings.main_page_title):
        kind = FormatterKind.MAIN_PAGE

    return MobileFormatter(
        html,
        options if options is not None else settings.default_options,
        kind=kind,
        messages=settings.messages(),
        removal=settings.removal,
    )
