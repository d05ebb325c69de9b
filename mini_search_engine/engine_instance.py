"""Process-wide search engine used by the API."""

from functools import lru_cache

from .config import get_settings
from .core.engine import SearchEngine


@lru_cache()
def get_search_engine() -> SearchEngine:
    """Get the cached engine, built from settings on first use."""
    settings = get_settings()
    return SearchEngine(
        max_documents=settings.max_documents,
        suggestion_threshold=settings.suggestion_threshold,
        max_suggestions=settings.max_suggestions
    )
