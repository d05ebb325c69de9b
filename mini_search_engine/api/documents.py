"""Document ingestion and lookup API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path

from ..core.engine import SearchEngine
from ..core.exceptions import DocumentNotFoundError, DocumentStoreFullError
from ..engine_instance import get_search_engine
from ..models.document import Document
from ..models.request import AddDocumentRequest, BatchLoadRequest
from ..models.response import BatchLoadResponse

router = APIRouter(prefix="/api/v1", tags=["documents"])


def _store_full(error: DocumentStoreFullError) -> HTTPException:
    return HTTPException(status_code=507, detail=str(error))


@router.post(
    "/documents",
    response_model=Document,
    status_code=201,
    summary="Add a document",
    description="Index a single document and return it with its assigned identifier"
)
def add_document(
    request: AddDocumentRequest,
    engine: SearchEngine = Depends(get_search_engine)
) -> Document:
    """Add one document to the index."""
    try:
        doc_id = engine.add_document(request.title, request.content, request.url)
        return engine.get_document(doc_id)
    except DocumentStoreFullError as e:
        raise _store_full(e)


@router.post(
    "/documents/batch",
    response_model=BatchLoadResponse,
    summary="Load documents in batch",
    description="Index pipe-delimited title|content|url lines; lines without a delimiter are skipped"
)
def load_batch(
    request: BatchLoadRequest,
    engine: SearchEngine = Depends(get_search_engine)
) -> BatchLoadResponse:
    """Load a batch of pipe-delimited document lines."""
    try:
        result = engine.load_batch_report(request.lines)
    except DocumentStoreFullError as e:
        raise _store_full(e)

    return BatchLoadResponse(
        added=result.added,
        skipped=result.skipped,
        document_count=engine.get_stats()["document_count"]
    )


@router.get(
    "/documents/{doc_id}",
    response_model=Document,
    summary="Get a document",
    description="Get a stored document by identifier"
)
def get_document(
    doc_id: int = Path(..., ge=0, description="Document identifier"),
    engine: SearchEngine = Depends(get_search_engine)
) -> Document:
    """Get a stored document."""
    try:
        return engine.get_document(doc_id)
    except DocumentNotFoundError:
        raise HTTPException(
            status_code=404,
            detail=f"Document {doc_id} not found"
        )
