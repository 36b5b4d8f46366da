from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


class AuthorInput(BaseModel):
    """
    Author fields as accepted by POST/PUT bodies.

    Values are kept verbatim (no trimming) so that the dedup rule compares
    exactly what the client sent.
    """

    name: str
    email: Optional[str] = None
    affiliation: Optional[str] = None

    model_config = {
        "extra": "ignore",
    }


class AuthorQuery(BaseModel):
    """Parsed query string of GET /api/authors."""

    name: Optional[str] = None
    affiliation: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIMIT)
    offset: int = Field(default=DEFAULT_OFFSET)
