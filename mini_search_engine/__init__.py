"""
Mini Search Engine - in-memory full-text search with TF-IDF ranking.

Documents are tokenized into an inverted index; free-text queries are
scored with TF-IDF, ranked, and returned with a snippet of the matching
content.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.document import Document
from .models.response import SearchResult, SearchResponse

__all__ = [
    "SearchEngine",
    "Document",
    "SearchResult",
    "SearchResponse",
]
