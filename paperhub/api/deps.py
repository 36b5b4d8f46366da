from typing import Any, Generator, Optional

from fastapi import Body, Depends, Path, Query
from pydantic import ValidationError
from sqlalchemy.orm import Session

from paperhub.api.errors import INVALID_BODY, BodyValidationFailed, RequestValidationFailed
from paperhub.api.validation import (
    parse_author_query,
    parse_paper_query,
    parse_resource_id,
    validate_author_input,
    validate_paper_input,
)
from paperhub.database.db.session import SessionLocal
from paperhub.database.author_repository import AuthorRepository
from paperhub.database.paper_repository import PaperRepository
from paperhub.model import AuthorInput, AuthorQuery, PaperInput, PaperQuery


def get_db() -> Generator[Session, None, None]:
    """Yield one SQLAlchemy session per request."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_paper_repo(db: Session = Depends(get_db)) -> PaperRepository:
    return PaperRepository(db)


def get_author_repo(db: Session = Depends(get_db)) -> AuthorRepository:
    return AuthorRepository(db)


# --- Path / query parameters ---

def require_resource_id(resource_id: str = Path(alias="id")) -> int:
    """Parsed ``{id}`` path parameter (positive integer)."""
    return parse_resource_id(resource_id)


def paper_query_params(
    year: Optional[str] = Query(default=None),
    published_in: Optional[str] = Query(default=None, alias="publishedIn"),
    limit: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
) -> PaperQuery:
    return parse_paper_query(year, published_in, limit, offset)


def author_query_params(
    name: Optional[str] = Query(default=None),
    affiliation: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
) -> AuthorQuery:
    return parse_author_query(name, affiliation, limit, offset)


# --- Bodies ---

def paper_body(payload: Any = Body(default=None)) -> PaperInput:
    errors = validate_paper_input(payload)
    if errors:
        raise BodyValidationFailed(errors)
    try:
        return PaperInput.model_validate(payload)
    except ValidationError as exc:
        # Optional fields of the wrong type (e.g. email: 123)
        raise RequestValidationFailed(INVALID_BODY) from exc


def author_body(payload: Any = Body(default=None)) -> AuthorInput:
    errors = validate_author_input(payload)
    if errors:
        raise BodyValidationFailed(errors)
    try:
        return AuthorInput.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationFailed(INVALID_BODY) from exc
