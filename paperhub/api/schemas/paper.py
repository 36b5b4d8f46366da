from __future__ import annotations

from typing import List, Optional

from paperhub.api.schemas.common import ApiModel, TimestampedModel
from paperhub.database.db.models import AuthorRow, PaperRow


# --- Nested shapes (no back-references) ---

class AuthorSummary(TimestampedModel):
    id: int
    name: str
    email: Optional[str] = None
    affiliation: Optional[str] = None

    @staticmethod
    def fields_of(row: AuthorRow) -> dict:
        return {
            "id": row.id,
            "name": row.name,
            "email": row.email,
            "affiliation": row.affiliation,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }

    @classmethod
    def from_row(cls, row: AuthorRow) -> AuthorSummary:
        return cls(**AuthorSummary.fields_of(row))


class PaperSummary(TimestampedModel):
    id: int
    title: str
    published_in: str
    year: int

    @staticmethod
    def fields_of(row: PaperRow) -> dict:
        return {
            "id": row.id,
            "title": row.title,
            "published_in": row.published_in,
            "year": row.year,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }

    @classmethod
    def from_row(cls, row: PaperRow) -> PaperSummary:
        return cls(**PaperSummary.fields_of(row))


# --- Paper (with authors) ---

class PaperResponse(PaperSummary):
    authors: List[AuthorSummary]

    @classmethod
    def from_row(cls, row: PaperRow) -> PaperResponse:
        return cls(
            **PaperSummary.fields_of(row),
            authors=[AuthorSummary.from_row(a) for a in row.authors],
        )


class PaperListResponse(ApiModel):
    papers: List[PaperResponse]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_page(cls, page: dict) -> PaperListResponse:
        return cls(
            papers=[PaperResponse.from_row(p) for p in page["papers"]],
            total=page["total"],
            limit=page["limit"],
            offset=page["offset"],
        )
