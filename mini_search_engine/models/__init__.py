"""Data models for the mini search engine."""

from .document import Document
from .response import (
    SearchResult,
    SearchResponse,
    StatsResponse,
    BatchLoadResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest, AddDocumentRequest, BatchLoadRequest

__all__ = [
    "Document",
    "SearchResult",
    "SearchResponse",
    "StatsResponse",
    "BatchLoadResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
    "AddDocumentRequest",
    "BatchLoadRequest",
]
