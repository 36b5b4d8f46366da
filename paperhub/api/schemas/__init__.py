from .paper import (
    AuthorSummary,
    PaperSummary,
    PaperResponse,
    PaperListResponse,
)
from .author import (
    AuthorResponse,
    AuthorListResponse,
)

__all__ = [
    "AuthorSummary",
    "PaperSummary",
    "PaperResponse",
    "PaperListResponse",
    "AuthorResponse",
    "AuthorListResponse",
]
