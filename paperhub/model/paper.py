from typing import List, Optional

from pydantic import BaseModel, Field

from .author import DEFAULT_LIMIT, DEFAULT_OFFSET, AuthorInput


class PaperInput(BaseModel):
    """
    Validated paper body handed to the data-access layer.

    Built only after ``validate_paper_input`` returned no errors, so the
    required fields are known to be present and well-formed.
    """

    title: str
    published_in: str = Field(alias="publishedIn")
    year: int
    authors: List[AuthorInput]

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
    }


class PaperQuery(BaseModel):
    """Parsed query string of GET /api/papers."""

    year: Optional[int] = None
    published_in: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIMIT)
    offset: int = Field(default=DEFAULT_OFFSET)
