"""Response models for the engine and API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(BaseModel):
    """Individual ranked search result."""

    document_id: int = Field(..., ge=0, description="Identifier of the matched document")
    score: float = Field(..., ge=0.0, description="Accumulated TF-IDF relevance score")
    title: str = Field(..., description="Document title")
    snippet: str = Field(..., description="Content preview around the first query term match")
    url: str = Field(default="", description="Document URL, empty if none")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    query_terms: List[str] = Field(..., description="Terms the query tokenized into")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Number of results returned")
    results: List[SearchResult] = Field(..., description="Results ordered by descending score")
    suggestions: Optional[List[str]] = Field(None, description="Indexed terms close to the query, for empty results")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class StatsResponse(BaseModel):
    """Index and query statistics."""

    document_count: int = Field(..., description="Number of indexed documents")
    unique_term_count: int = Field(..., description="Number of distinct indexed terms")
    total_queries: int = Field(default=0, description="Queries served since start")
    zero_result_queries: int = Field(default=0, description="Queries that returned nothing")
    average_execution_time_ms: float = Field(default=0.0, description="Average query time")


class BatchLoadResponse(BaseModel):
    """Response for batch document loading."""

    added: int = Field(..., description="Documents added from the batch")
    skipped: int = Field(..., description="Lines skipped for lacking a delimiter")
    document_count: int = Field(..., description="Documents in the index after loading")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Component status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average query time")
    zero_result_rate: float = Field(..., description="Share of queries with no results")
    memory_usage_mb: float = Field(..., description="Resident memory of this process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
