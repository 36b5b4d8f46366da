from fastapi import APIRouter, Depends, Response

from paperhub.api.deps import author_body, author_query_params, get_author_repo, require_resource_id
from paperhub.api.errors import EntityNotFound
from paperhub.api.schemas.author import AuthorListResponse, AuthorResponse
from paperhub.database.author_repository import AuthorRepository
from paperhub.model import AuthorInput, AuthorQuery

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=AuthorListResponse)
def list_authors(
    query: AuthorQuery = Depends(author_query_params),
    repo: AuthorRepository = Depends(get_author_repo),
):
    """List authors, filtered by name / affiliation and paginated."""
    page = repo.get_all_authors(
        name=query.name,
        affiliation=query.affiliation,
        limit=query.limit,
        offset=query.offset,
    )
    return AuthorListResponse.from_page(page)


@router.get("/{id}", response_model=AuthorResponse)
def get_author(
    author_id: int = Depends(require_resource_id),
    repo: AuthorRepository = Depends(get_author_repo),
):
    author = repo.get_author_by_id(author_id)
    if not author:
        raise EntityNotFound("Author")
    return AuthorResponse.from_row(author)


@router.post("", response_model=AuthorResponse, status_code=201)
def create_author(
    data: AuthorInput = Depends(author_body),
    repo: AuthorRepository = Depends(get_author_repo),
):
    author = repo.create_author(data)
    return AuthorResponse.from_row(author)


@router.put("/{id}", response_model=AuthorResponse)
def update_author(
    author_id: int = Depends(require_resource_id),
    data: AuthorInput = Depends(author_body),
    repo: AuthorRepository = Depends(get_author_repo),
):
    author = repo.update_author(author_id, data)
    if not author:
        raise EntityNotFound("Author")
    return AuthorResponse.from_row(author)


@router.delete("/{id}", status_code=204)
def delete_author(
    author_id: int = Depends(require_resource_id),
    repo: AuthorRepository = Depends(get_author_repo),
):
    """
    Delete an author.

    Refused with 400 Constraint Error (raised by the repository) when the
    author is the only author of any paper.
    """
    if not repo.delete_author(author_id):
        raise EntityNotFound("Author")
    return Response(status_code=204)
