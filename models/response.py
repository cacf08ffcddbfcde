"""FormatResponse Pydantic model."""

from pydantic import BaseModel

from models.options import FormatterKind


class FormatResponse(BaseModel):
    """Response body for the POST /format endpoint.

    ``main_page_fallback`` is true when the main page pipeline found no
    regions and ``html`` is the whole (filtered) page instead.
    """

    html: str
    formatter: FormatterKind
    main_page_fallback: bool = False
