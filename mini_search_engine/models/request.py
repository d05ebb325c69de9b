"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, description="Free-text search query")
    max_results: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of results to return"
    )
    include_suggestions: bool = Field(
        default=True, description="Whether to include suggestions for empty results"
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries."""
        if not v.strip():
            raise ValueError("Query cannot be empty")
        return v


class AddDocumentRequest(BaseModel):
    """Request model for adding a single document."""

    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Document body")
    url: str = Field(default="", description="Optional source URL")


class BatchLoadRequest(BaseModel):
    """Request model for loading pipe-delimited document lines."""

    lines: List[str] = Field(..., min_length=1, description="Lines in title|content|url form")
