"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.request import SearchRequest
from ..models.response import SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search documents",
    description="Free-text search over indexed documents, ranked by TF-IDF"
)
def search_documents(
    q: str = Query(..., min_length=1, description="Free-text query"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=100,
        description="Maximum number of results to return"
    ),
    include_suggestions: bool = Query(
        True,
        description="Whether to include term suggestions when nothing matches"
    ),
    engine: SearchEngine = Depends(get_search_engine)
) -> SearchResponse:
    """
    Search indexed documents.

    Results come back by descending score with a snippet of the content
    around the first matching query term.
    """
    _check_query_length(q)

    try:
        return engine.search_with_metadata(
            query=q,
            max_results=max_results or settings.max_results,
            include_suggestions=include_suggestions
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search documents using a structured request body"
)
def search_with_body(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_search_engine)
) -> SearchResponse:
    """Search documents using a JSON request body."""
    _check_query_length(request.query)

    try:
        return engine.search_with_metadata(
            query=request.query,
            max_results=request.max_results or settings.max_results,
            include_suggestions=request.include_suggestions
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/suggestions",
    response_model=list[str],
    summary="Get term suggestions",
    description="Get indexed terms close to query terms the index does not contain"
)
def get_suggestions(
    q: str = Query(..., min_length=1, description="Query to get suggestions for"),
    engine: SearchEngine = Depends(get_search_engine)
) -> list[str]:
    """Get 'did you mean' suggestions for a query."""
    _check_query_length(q)

    try:
        return engine.suggest(q)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )
