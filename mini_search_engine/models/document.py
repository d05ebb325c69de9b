"""Stored document model."""

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A searchable document. Immutable once stored."""

    model_config = ConfigDict(frozen=True)

    doc_id: int = Field(..., ge=0, description="Sequential identifier, equal to insertion order")
    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Document body")
    url: str = Field(default="", description="Optional source URL")
