"""Interface message lookup for text the formatter inserts into pages."""

from __future__ import annotations

MISSING_IMAGE = "mobile-frontend-missing-image"
FEATURED_ARTICLE = "mobile-frontend-featured-article"
NEWS_ITEMS = "mobile-frontend-news-items"

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        MISSING_IMAGE: "Image",
        FEATURED_ARTICLE: "Today's featured article",
        NEWS_ITEMS: "In the news",
    },
}


class MessageProvider:
    """Resolves message keys to text in one language.

    Lookup order: *overrides*, then the table for *language*, then English.
    Unknown keys resolve to ``⧼key⧽`` rather than raising, so a missing
    translation shows up in the output instead of breaking the page.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        overrides: dict[str, str] | None = None,
    ) -> None:
        self.language = language
        self.overrides: dict[str, str] = dict(overrides or {})

    def msg(self, key: str) -> str:
        if key in self.overrides:
            return self.overrides[key]
        for table in (MESSAGES.get(self.language, {}), MESSAGES[DEFAULT_LANGUAGE]):
            if key in table:
                return table[key]
        return f"⧼{key}⧽"
