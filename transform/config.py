"""Environment-driven formatter settings.

Read once at service start-up (after ``load_dotenv``).  Every variable is
optional:

    MF_LANGUAGE                 message language (default ``en``)
    MF_MAIN_PAGE_TITLE          title of the wiki's main page (``Main Page``)
    MF_SPECIAL_CASE_MAIN_PAGE   use the main page pipeline (``true``)
    MF_REMOVABLE_BASE           comma-separated selectors, ``base`` group
    MF_REMOVABLE_HTML           comma-separated selectors, ``HTML`` group
    MF_TOP_HEADING_TAGS         comma-separated ranked heading tags
    MF_EXPANDABLE_SECTIONS      default for ``FormatOptions`` (``false``)
    MF_REMOVE_MEDIA             default for ``FormatOptions`` (``false``)
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from models.options import FormatOptions, RemovalConfig
from transform.messages import DEFAULT_LANGUAGE, MessageProvider

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_list(name: str) -> list[str] | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    """Process-wide formatter settings."""

    model_config = ConfigDict(extra="forbid")

    language: str = DEFAULT_LANGUAGE
    main_page_title: str = "Main Page"
    special_case_main_page: bool = True
    removal: RemovalConfig = Field(default_factory=RemovalConfig)
    default_options: FormatOptions = Field(default_factory=FormatOptions)

    def messages(self) -> MessageProvider:
        return MessageProvider(self.language)


def load_settings() -> Settings:
    """Build ``Settings`` from ``MF_*`` environment variables.

    Raises:
        pydantic.ValidationError: If a heading tag or removal selector in
            the environment is invalid.
    """
    options: dict = {
        "expandable_sections": _env_bool("MF_EXPANDABLE_SECTIONS", False),
        "remove_media": _env_bool("MF_REMOVE_MEDIA", False),
    }
    top_heading_tags = _env_list("MF_TOP_HEADING_TAGS")
    if top_heading_tags is not None:
        options["top_heading_tags"] = top_heading_tags

    return Settings(
        language=os.getenv("MF_LANGUAGE", DEFAULT_LANGUAGE).strip() or DEFAULT_LANGUAGE,
        main_page_title=os.getenv("MF_MAIN_PAGE_TITLE", "Main Page"),
        special_case_main_page=_env_bool("MF_SPECIAL_CASE_MAIN_PAGE", True),
        removal=RemovalConfig(
            groups={
                "base": _env_list("MF_REMOVABLE_BASE") or [],
                "HTML": _env_list("MF_REMOVABLE_HTML") or [],
            }
        ),
        default_options=FormatOptions(**options),
    )
