from __future__ import annotations

from typing import List

from paperhub.api.schemas.common import ApiModel
from paperhub.api.schemas.paper import AuthorSummary, PaperSummary
from paperhub.database.db.models import AuthorRow


class AuthorResponse(AuthorSummary):
    papers: List[PaperSummary]

    @classmethod
    def from_row(cls, row: AuthorRow) -> AuthorResponse:
        return cls(
            **AuthorSummary.fields_of(row),
            papers=[PaperSummary.from_row(p) for p in row.papers],
        )


class AuthorListResponse(ApiModel):
    authors: List[AuthorResponse]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_page(cls, page: dict) -> AuthorListResponse:
        return cls(
            authors=[AuthorResponse.from_row(a) for a in page["authors"]],
            total=page["total"],
            limit=page["limit"],
            offset=page["offset"],
        )
