"""Core search engine functionality."""

from .engine import SearchEngine
from .exceptions import DocumentNotFoundError, DocumentStoreFullError, SearchEngineError
from .fuzzy_matcher import FuzzyMatcher
from .index import DocumentStore, IndexManager, InvertedIndex, TermFrequencyIndex
from .normalizer import TextNormalizer

__all__ = [
    "SearchEngine",
    "SearchEngineError",
    "DocumentNotFoundError",
    "DocumentStoreFullError",
    "FuzzyMatcher",
    "DocumentStore",
    "IndexManager",
    "InvertedIndex",
    "TermFrequencyIndex",
    "TextNormalizer",
]
