from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session, selectinload

from paperhub.model.author import DEFAULT_LIMIT, DEFAULT_OFFSET, AuthorInput
from paperhub.database.db.models import AuthorRow, PaperRow, utcnow
from paperhub.database.exceptions import AuthorConstraintError

logger = logging.getLogger(__name__)


class AuthorRepository:
    """
    Author CRUD over an explicit, request-scoped SQLAlchemy session.

    Mutating methods commit their own transaction; the session itself is
    owned (and closed) by whoever created it.
    """

    def __init__(self, db: Session):
        self.db = db

    # =====================================================
    # Dedup (shared with PaperRepository)
    # =====================================================

    def find_or_create_author(self, data: AuthorInput) -> AuthorRow:
        """
        Return the lowest-id author whose name, email and affiliation all
        match exactly, creating one if none exists.

        Does not commit: the caller's transaction decides.
        """
        existing = (
            self.db.query(AuthorRow)
            .filter(
                AuthorRow.name == data.name,
                AuthorRow.email == data.email,  # None compiles to IS NULL
                AuthorRow.affiliation == data.affiliation,
            )
            .order_by(AuthorRow.id.asc())
            .first()
        )
        if existing:
            return existing

        now = utcnow()
        author = AuthorRow(
            name=data.name,
            email=data.email,
            affiliation=data.affiliation,
            created_at=now,
            updated_at=now,
        )
        self.db.add(author)
        # autoflush is off; flush so the next lookup in this transaction sees it
        self.db.flush()
        logger.debug("Created author %s (%s)", author.id, author.name)
        return author

    def find_or_create_author_id(self, data: AuthorInput) -> int:
        return self.find_or_create_author(data).id

    # =====================================================
    # Basic CRUD
    # =====================================================

    def create_author(self, data: AuthorInput) -> AuthorRow:
        now = utcnow()
        author = AuthorRow(
            name=data.name,
            email=data.email,
            affiliation=data.affiliation,
            created_at=now,
            updated_at=now,
        )
        self.db.add(author)
        self.db.commit()
        logger.info("Author %s created", author.id)
        return author

    def get_author_by_id(self, author_id: int) -> Optional[AuthorRow]:
        return (
            self.db.query(AuthorRow)
            .options(selectinload(AuthorRow.papers))
            .filter(AuthorRow.id == author_id)
            .first()
        )

    def get_all_authors(
        self,
        name: Optional[str] = None,
        affiliation: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> Dict[str, Any]:
        """
        List authors with case-insensitive substring filters.

        ``total`` applies the filters but not the pagination.
        """
        query = self.db.query(AuthorRow)

        if name:
            query = query.filter(AuthorRow.name.icontains(name, autoescape=True))
        if affiliation:
            query = query.filter(
                AuthorRow.affiliation.icontains(affiliation, autoescape=True)
            )

        total = query.count()
        authors = (
            query
            .options(selectinload(AuthorRow.papers))
            .order_by(AuthorRow.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        return {
            "authors": authors,
            "total": total,
            "limit": limit,
            "offset": offset,
        }

    def update_author(self, author_id: int, data: AuthorInput) -> Optional[AuthorRow]:
        """
        Overwrite name, email and affiliation.

        Returns None when the author does not exist.
        """
        author = self.db.get(AuthorRow, author_id)
        if not author:
            return None

        author.name = data.name
        author.email = data.email
        author.affiliation = data.affiliation
        author.updated_at = utcnow()

        self.db.commit()
        logger.info("Author %s updated", author_id)
        return author

    def delete_author(self, author_id: int) -> bool:
        """
        Delete an author.

        Returns:
            True if deleted, False if the author does not exist

        Raises:
            AuthorConstraintError: the author is the sole author of at least
                one paper
        """
        author = (
            self.db.query(AuthorRow)
            .options(selectinload(AuthorRow.papers).selectinload(PaperRow.authors))
            .filter(AuthorRow.id == author_id)
            .first()
        )
        if not author:
            return False

        orphaned = [p.id for p in author.papers if len(p.authors) <= 1]
        if orphaned:
            logger.info(
                "Refused to delete author %s: sole author of papers %s",
                author_id,
                orphaned,
            )
            raise AuthorConstraintError(author_id, orphaned)

        self.db.delete(author)
        self.db.commit()
        logger.info("Author %s deleted", author_id)
        return True
