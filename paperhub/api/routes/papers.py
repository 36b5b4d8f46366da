from fastapi import APIRouter, Depends, Response

from paperhub.api.deps import get_paper_repo, paper_body, paper_query_params, require_resource_id
from paperhub.api.errors import EntityNotFound
from paperhub.api.schemas.paper import PaperListResponse, PaperResponse
from paperhub.database.paper_repository import PaperRepository
from paperhub.model import PaperInput, PaperQuery

router = APIRouter(prefix="/api/papers", tags=["papers"])


@router.get("", response_model=PaperListResponse)
def list_papers(
    query: PaperQuery = Depends(paper_query_params),
    repo: PaperRepository = Depends(get_paper_repo),
):
    """List papers, filtered by year / venue and paginated."""
    page = repo.get_all_papers(
        year=query.year,
        published_in=query.published_in,
        limit=query.limit,
        offset=query.offset,
    )
    return PaperListResponse.from_page(page)


@router.get("/{id}", response_model=PaperResponse)
def get_paper(
    paper_id: int = Depends(require_resource_id),
    repo: PaperRepository = Depends(get_paper_repo),
):
    """Get a single paper by ID."""
    paper = repo.get_paper_by_id(paper_id)
    if not paper:
        raise EntityNotFound("Paper")
    return PaperResponse.from_row(paper)


@router.post("", response_model=PaperResponse, status_code=201)
def create_paper(
    data: PaperInput = Depends(paper_body),
    repo: PaperRepository = Depends(get_paper_repo),
):
    """Create a paper, reusing identical existing authors."""
    paper = repo.create_paper(data)
    return PaperResponse.from_row(paper)


@router.put("/{id}", response_model=PaperResponse)
def update_paper(
    paper_id: int = Depends(require_resource_id),
    data: PaperInput = Depends(paper_body),
    repo: PaperRepository = Depends(get_paper_repo),
):
    """Replace a paper's fields and its whole author list."""
    paper = repo.update_paper(paper_id, data)
    if not paper:
        raise EntityNotFound("Paper")
    return PaperResponse.from_row(paper)


@router.delete("/{id}", status_code=204)
def delete_paper(
    paper_id: int = Depends(require_resource_id),
    repo: PaperRepository = Depends(get_paper_repo),
):
    if not repo.delete_paper(paper_id):
        raise EntityNotFound("Paper")
    return Response(status_code=204)
