"""Formatter options as Pydantic v2 models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from document.pruning import validate_selectors
from transform.headings import HEADING_TAGS, validate_top_heading_tags


class FormatterKind(str, Enum):
    """Which transform pipeline runs on a page."""

    GENERIC = "generic"
    MAIN_PAGE = "main_page"


class FormatOptions(BaseModel):
    """Switches for a single transform call.

    ``top_heading_tags`` is ranked, most significant first.  It is checked
    with the same rule as ``MobileFormatter.set_top_heading_tags``.
    """

    model_config = ConfigDict(extra="forbid")

    expandable_sections: bool = False
    remove_media: bool = False
    remove_defaults: bool = True
    top_heading_tags: list[str] = Field(default_factory=lambda: list(HEADING_TAGS))

    @field_validator("top_heading_tags", mode="before")
    @classmethod
    def check_top_heading_tags(cls, v):
        return validate_top_heading_tags(v)


class RemovalConfig(BaseModel):
    """Named groups of CSS selectors whose matches are removed from pages."""

    model_config = ConfigDict(extra="forbid")

    groups: dict[str, list[str]] = Field(
        default_factory=lambda: {"base": [], "HTML": []}
    )

    @field_validator("groups")
    @classmethod
    def check_selectors(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {name: validate_selectors(selectors) for name, selectors in v.items()}

    def selectors(self) -> list[str]:
        """All selectors, group by group, in declaration order."""
        return [selector for group in self.groups.values() for selector in group]
