"""
Request validation.

Body validators return ordered lists of human-readable messages (empty means
valid); the order is part of the API contract. Path and query parsers return
typed values or raise ``RequestValidationFailed``.
"""

import re
from decimal import Decimal
from typing import Any, List, Mapping, Optional

from paperhub.api.errors import (
    INVALID_ID_FORMAT,
    INVALID_QUERY_FORMAT,
    RequestValidationFailed,
)
from paperhub.model.author import DEFAULT_LIMIT, DEFAULT_OFFSET, AuthorQuery
from paperhub.model.paper import PaperQuery

MIN_YEAR_EXCLUSIVE = 1900
MAX_LIMIT = 100
# Largest value an INTEGER column holds (Postgres int4; ids, years, offsets)
MAX_DB_INT = 2**31 - 1

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _as_mapping(body: Any) -> Mapping[str, Any]:
    return body if isinstance(body, Mapping) else {}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return False


# =====================================================
# Bodies
# =====================================================

def validate_paper_input(body: Any) -> List[str]:
    """
    Check a paper body. Title, venue, year and authors are checked
    independently and in that order; only the per-author name check stops
    at the first offender.
    """
    paper = _as_mapping(body)
    errors: List[str] = []

    if _is_blank(paper.get("title")):
        errors.append("Title is required")

    if _is_blank(paper.get("publishedIn")):
        errors.append("Published venue is required")

    year = paper.get("year")
    if year is None:
        errors.append("Published year is required")
    elif not _is_integer(year) or not MIN_YEAR_EXCLUSIVE < year <= MAX_DB_INT:
        errors.append(f"Valid year after {MIN_YEAR_EXCLUSIVE} is required")

    authors = paper.get("authors")
    if not isinstance(authors, list) or len(authors) == 0:
        errors.append("At least one author is required")
    else:
        for author in authors:
            if _is_blank(_as_mapping(author).get("name")):
                errors.append("Author name is required")
                break

    return errors


def validate_author_input(body: Any) -> List[str]:
    errors: List[str] = []
    if _is_blank(_as_mapping(body).get("name")):
        errors.append("Name is required")
    return errors


# =====================================================
# Path / query parameters
# =====================================================

def _parse_int(raw: str) -> Optional[int]:
    """
    Integer value of a finite decimal numeric string (``"7"``, ``" 7 "``,
    ``"2.0"``, ``"1e3"``), or None when the text is not numeric, not a
    whole number, or beyond the INTEGER column range.
    """
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = Decimal(text)
    if value.copy_abs() > MAX_DB_INT or value != value.to_integral_value():
        return None
    return int(value)


def parse_resource_id(raw: Any) -> int:
    """Positive integer id, else 400 Invalid ID format."""
    value = _parse_int(str(raw))
    if value is None or value <= 0:
        raise RequestValidationFailed(INVALID_ID_FORMAT)
    return value


def _optional_int(raw: Optional[str], minimum: int, maximum: Optional[int] = None) -> Optional[int]:
    # Absent and empty parameters are treated alike: not validated.
    if not raw:
        return None
    value = _parse_int(raw)
    if value is None or value < minimum or (maximum is not None and value > maximum):
        raise RequestValidationFailed(INVALID_QUERY_FORMAT)
    return value


def _pagination(limit: Optional[str], offset: Optional[str]):
    parsed_limit = _optional_int(limit, minimum=1, maximum=MAX_LIMIT)
    parsed_offset = _optional_int(offset, minimum=0)
    return (
        DEFAULT_LIMIT if parsed_limit is None else parsed_limit,
        DEFAULT_OFFSET if parsed_offset is None else parsed_offset,
    )


def parse_paper_query(
    year: Optional[str] = None,
    published_in: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> PaperQuery:
    parsed_year = _optional_int(year, minimum=MIN_YEAR_EXCLUSIVE + 1)
    parsed_limit, parsed_offset = _pagination(limit, offset)
    return PaperQuery(
        year=parsed_year,
        published_in=published_in or None,
        limit=parsed_limit,
        offset=parsed_offset,
    )


def parse_author_query(
    name: Optional[str] = None,
    affiliation: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> AuthorQuery:
    parsed_limit, parsed_offset = _pagination(limit, offset)
    return AuthorQuery(
        name=name or None,
        affiliation=affiliation or None,
        limit=parsed_limit,
        offset=parsed_offset,
    )
