"""Index data structures for term-level document retrieval."""

import threading
import time
from collections import Counter
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Sequence, Set

from ..models.document import Document
from .exceptions import DocumentNotFoundError, DocumentStoreFullError


class DocumentStore:
    """Append-only store of documents keyed by sequential identifier."""

    def __init__(self, max_documents: Optional[int] = None) -> None:
        """
        Initialize the document store.

        Args:
            max_documents: Optional capacity; None means unbounded
        """
        self.max_documents = max_documents
        self._documents: List[Document] = []
        self._stats = {
            "total_documents": 0,
            "last_updated": None
        }

    def check_capacity(self, count: int = 1) -> None:
        """Raise DocumentStoreFullError if ``count`` more documents cannot be stored."""
        if self.max_documents is not None and len(self._documents) + count > self.max_documents:
            raise DocumentStoreFullError(self.max_documents)

    def append(self, title: str, content: str, url: str = "") -> Document:
        """
        Store a new document under the next identifier.

        Args:
            title: Document title
            content: Document body
            url: Optional source URL

        Returns:
            The stored document
        """
        self.check_capacity()

        document = Document(
            doc_id=len(self._documents),
            title=title,
            content=content,
            url=url
        )
        self._documents.append(document)

        self._stats["total_documents"] = len(self._documents)
        self._stats["last_updated"] = time.time()

        return document

    def get(self, doc_id: int) -> Document:
        """
        Get a document by identifier.

        Raises:
            DocumentNotFoundError: If no document has this identifier
        """
        if not 0 <= doc_id < len(self._documents):
            raise DocumentNotFoundError(doc_id)
        return self._documents[doc_id]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents))

    def clear(self) -> None:
        """Remove all documents."""
        self._documents.clear()
        self._stats = {
            "total_documents": 0,
            "last_updated": None
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        return self._stats.copy()


class InvertedIndex:
    """Maps each term to the set of documents containing it."""

    def __init__(self) -> None:
        """Initialize the inverted index."""
        self._postings: Dict[str, Set[int]] = {}
        self._document_frequency: Dict[str, int] = {}

    def add_document(self, doc_id: int, tokens: Sequence[str]) -> None:
        """
        Record the postings for one document's token stream.

        Document frequency is bumped once per distinct term, however often
        the term repeats in the stream.

        Args:
            doc_id: Identifier of the document being indexed
            tokens: The document's full token stream
        """
        for token in tokens:
            self._postings.setdefault(token, set()).add(doc_id)

        for term in set(tokens):
            self._document_frequency[term] = self._document_frequency.get(term, 0) + 1

    def get_postings(self, term: str) -> FrozenSet[int]:
        """Get the posting set for a term (empty if the term is unknown)."""
        return frozenset(self._postings.get(term, ()))

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return self._document_frequency.get(term, 0)

    def get_all_terms(self) -> List[str]:
        """Get all indexed terms."""
        return list(self._postings.keys())

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def clear(self) -> None:
        """Clear all postings."""
        self._postings.clear()
        self._document_frequency.clear()


class TermFrequencyIndex:
    """Per-document term occurrence counts."""

    def __init__(self) -> None:
        """Initialize the term frequency table."""
        self._frequencies: Dict[int, Dict[str, int]] = {}

    def add_document(self, doc_id: int, tokens: Sequence[str]) -> None:
        """
        Count term occurrences for a document.

        Args:
            doc_id: Identifier of the document being indexed
            tokens: The document's full token stream
        """
        counts = self._frequencies.setdefault(doc_id, {})
        for term, count in Counter(tokens).items():
            counts[term] = counts.get(term, 0) + count

    def frequency(self, doc_id: int, term: str) -> int:
        """Occurrences of a term in a document (0 if absent)."""
        return self._frequencies.get(doc_id, {}).get(term, 0)

    def get_frequencies(self, doc_id: int) -> Dict[str, int]:
        """Get a copy of all term counts for a document."""
        return dict(self._frequencies.get(doc_id, {}))

    def clear(self) -> None:
        """Clear all counts."""
        self._frequencies.clear()


class IndexManager:
    """Keeps the document store and all index tables consistent."""

    def __init__(self, max_documents: Optional[int] = None) -> None:
        """
        Initialize the index manager.

        Args:
            max_documents: Optional document store capacity
        """
        self.document_store = DocumentStore(max_documents=max_documents)
        self.inverted_index = InvertedIndex()
        self.term_frequency = TermFrequencyIndex()
        # Held for a whole ingestion, and by readers for a whole query
        self.lock = threading.RLock()

    def add_document(
        self,
        title: str,
        content: str,
        url: str,
        tokens: Sequence[str]
    ) -> Document:
        """
        Store a document and index its token stream in one step.

        Args:
            title: Document title
            content: Document body
            url: Optional source URL
            tokens: Combined token stream to index

        Returns:
            The stored document

        Raises:
            DocumentStoreFullError: If the store is at capacity; nothing is
                modified in that case
        """
        with self.lock:
            document = self.document_store.append(title, content, url)
            self.inverted_index.add_document(document.doc_id, tokens)
            self.term_frequency.add_document(document.doc_id, tokens)
            return document

    def clear(self) -> None:
        """Clear the store and all indexes."""
        with self.lock:
            self.document_store.clear()
            self.inverted_index.clear()
            self.term_frequency.clear()

    def get_stats(self) -> Dict[str, Any]:
        """Get combined statistics."""
        with self.lock:
            return {
                "document_count": len(self.document_store),
                "unique_term_count": len(self.inverted_index),
                "document_store": self.document_store.get_stats(),
            }
