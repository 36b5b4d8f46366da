from sqlalchemy import (
    Column,
    Text,
    DateTime,
    ForeignKey,
    Integer,
    Table,
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime, timezone


Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp (what both SQLite and Postgres columns store)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


paper_authors = Table(
    "paper_authors",
    Base.metadata,
    Column("paper_id", Integer, ForeignKey("papers.id", ondelete="CASCADE"), primary_key=True),
    Column("author_id", Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True),
)


class PaperRow(Base):
    __tablename__ = "papers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    published_in = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    authors = relationship(
        "AuthorRow",
        secondary=paper_authors,
        back_populates="papers",
        order_by="AuthorRow.id",
    )


class AuthorRow(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=True)
    affiliation = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    papers = relationship(
        "PaperRow",
        secondary=paper_authors,
        back_populates="authors",
        order_by="PaperRow.id",
    )
