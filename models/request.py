"""FormatRequest Pydantic model with strict validation (extra=forbid)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from document.pruning import validate_selectors
from models.options import FormatOptions


class FormatRequest(BaseModel):
    """Incoming request body for the POST /format endpoint.

    ``title`` selects the main page pipeline when it names the configured
    main page and the main page is treated as a special case
    (``special_case_main_page``, defaulting to ``MF_SPECIAL_CASE_MAIN_PAGE``).
    ``remove`` holds selectors removed in addition to the configured
    defaults.  Without ``options`` the service defaults (``MF_*`` settings)
    apply.
    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    html: str
    title: Optional[str] = None
    special_case_main_page: Optional[bool] = None
    options: Optional[FormatOptions] = None
    remove: list[str] = []

    @field_validator("remove")
    @classmethod
    def check_remove(cls, v: list[str]) -> list[str]:
        return validate_selectors(v)
