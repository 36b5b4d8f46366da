from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from paperhub.model.author import AuthorInput
from paperhub.model.paper import DEFAULT_LIMIT, DEFAULT_OFFSET, PaperInput
from paperhub.database.author_repository import AuthorRepository
from paperhub.database.db.models import AuthorRow, PaperRow, utcnow

logger = logging.getLogger(__name__)


class PaperRepository:
    """
    Paper CRUD over an explicit, request-scoped SQLAlchemy session.

    Authors supplied with a paper go through the dedup rule of
    ``AuthorRepository.find_or_create_author``; the author set of a paper is
    always replaced as a whole, never merged.
    """

    def __init__(self, db: Session, authors: Optional[AuthorRepository] = None):
        self.db = db
        self.authors = authors or AuthorRepository(db)

    # =====================================================
    # Helpers
    # =====================================================

    def _resolve_authors(self, inputs: List[AuthorInput]) -> List[AuthorRow]:
        """
        Find-or-create every author, collapse repeats, order by id.
        """
        resolved: Dict[int, AuthorRow] = {}
        for data in inputs:
            author = self.authors.find_or_create_author(data)
            resolved.setdefault(author.id, author)
        return [resolved[i] for i in sorted(resolved)]

    def _base_query(self):
        return self.db.query(PaperRow).options(selectinload(PaperRow.authors))

    # =====================================================
    # Basic CRUD
    # =====================================================

    def create_paper(self, data: PaperInput) -> PaperRow:
        """
        Create a paper and link its (deduplicated) authors in one transaction.
        """
        try:
            authors = self._resolve_authors(data.authors)

            now = utcnow()
            paper = PaperRow(
                title=data.title,
                published_in=data.published_in,
                year=data.year,
                created_at=now,
                updated_at=now,
            )
            paper.authors = authors
            self.db.add(paper)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            "Paper %s created with authors %s",
            paper.id,
            [a.id for a in paper.authors],
        )
        return paper

    def get_paper_by_id(self, paper_id: int) -> Optional[PaperRow]:
        return self._base_query().filter(PaperRow.id == paper_id).first()

    def get_all_papers(
        self,
        year: Optional[int] = None,
        published_in: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> Dict[str, Any]:
        """
        List papers with filters and pagination.

        Args:
            year: exact match
            published_in: case-insensitive substring match
            limit: page size
            offset: rows to skip

        ``total`` applies the filters but not the pagination. Both queries
        run on the same session, i.e. inside one transaction.
        """
        query = self.db.query(PaperRow)

        if year is not None:
            query = query.filter(PaperRow.year == year)
        if published_in:
            query = query.filter(
                PaperRow.published_in.icontains(published_in, autoescape=True)
            )

        total = query.count()
        papers = (
            query
            .options(selectinload(PaperRow.authors))
            .order_by(PaperRow.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        return {
            "papers": papers,
            "total": total,
            "limit": limit,
            "offset": offset,
        }

    def update_paper(self, paper_id: int, data: PaperInput) -> Optional[PaperRow]:
        """
        Replace the editable fields and the full author set of a paper.

        Returns None when the paper does not exist (nothing is written,
        no authors are created).
        """
        paper = self.db.get(PaperRow, paper_id)
        if not paper:
            return None

        try:
            paper.authors = self._resolve_authors(data.authors)
            paper.title = data.title
            paper.published_in = data.published_in
            paper.year = data.year
            paper.updated_at = utcnow()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Paper %s updated", paper_id)
        return paper

    def delete_paper(self, paper_id: int) -> bool:
        """
        Returns:
            True if deleted, False if the paper does not exist
        """
        paper = self.db.get(PaperRow, paper_id)
        if not paper:
            return False

        self.db.delete(paper)
        self.db.commit()
        logger.info("Paper %s deleted", paper_id)
        return True
