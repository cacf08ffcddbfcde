"""Public re-exports of all model types."""

from models.options import FormatOptions, FormatterKind, RemovalConfig
from models.request import FormatRequest
from models.response import FormatResponse

__all__ = [
    # Options
    "FormatOptions",
    "FormatterKind",
    "RemovalConfig",
    # Request/Response
    "FormatRequest",
    "FormatResponse",
]
