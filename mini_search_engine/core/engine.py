"""Main search engine implementation."""

import math
import time
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Sequence

import structlog

from ..models.document import Document
from ..models.response import SearchResult, SearchResponse
from .batch import BatchLoadResult, parse_batch_line
from .fuzzy_matcher import FuzzyMatcher
from .index import IndexManager
from .normalizer import TextNormalizer
from .snippet import extract_snippet

logger = structlog.get_logger(__name__)


class SearchEngine:
    """In-memory full-text search engine with TF-IDF ranking."""

    def __init__(
        self,
        max_documents: Optional[int] = None,
        suggestion_threshold: float = 0.6,
        max_suggestions: int = 5
    ) -> None:
        """
        Initialize the search engine.

        Args:
            max_documents: Optional document store capacity
            suggestion_threshold: Similarity cutoff for term suggestions
            max_suggestions: Maximum suggestions for an empty result
        """
        self.normalizer = TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher(suggestion_threshold)
        self.index_manager = IndexManager(max_documents=max_documents)
        self.max_suggestions = max_suggestions

        # Query tracking
        self._stats = self._empty_stats()

    def add_document(self, title: str, content: str, url: str = "") -> int:
        """
        Add a document to the index.

        Title terms are counted twice so title matches weigh double.

        Args:
            title: Document title
            content: Document body
            url: Optional source URL

        Returns:
            The identifier assigned to the document

        Raises:
            DocumentStoreFullError: If the configured capacity is reached
        """
        title_tokens = self.normalizer.tokenize(title)
        content_tokens = self.normalizer.tokenize(content)
        tokens = title_tokens + title_tokens + content_tokens

        document = self.index_manager.add_document(title, content, url, tokens)

        logger.debug(
            "Document indexed",
            doc_id=document.doc_id,
            tokens=len(tokens)
        )
        return document.doc_id

    def load_batch(self, lines: Iterable[str]) -> int:
        """
        Load documents from ``title|content|url`` lines.

        Lines without a delimiter are skipped.

        Returns:
            Number of documents added
        """
        return self.load_batch_report(lines).added

    def load_batch_report(self, lines: Iterable[str]) -> BatchLoadResult:
        """
        Load documents from ``title|content|url`` lines.

        Args:
            lines: Batch lines

        Returns:
            BatchLoadResult with the added and skipped line counts

        Raises:
            DocumentStoreFullError: If the store cannot hold every parsed
                line; no document from the batch is added in that case
        """
        parsed_lines = []
        skipped = 0

        for line in lines:
            parsed = parse_batch_line(line)
            if parsed is None:
                skipped += 1
            else:
                parsed_lines.append(parsed)

        with self.index_manager.lock:
            self.index_manager.document_store.check_capacity(len(parsed_lines))
            for parsed in parsed_lines:
                self.add_document(parsed.title, parsed.content, parsed.url)

        added = len(parsed_lines)
        logger.info("Batch loaded", added=added, skipped=skipped)
        return BatchLoadResult(added=added, skipped=skipped)

    def compute_tfidf(self, term: str, doc_id: int) -> float:
        """
        Score one term against one document.

        Args:
            term: Index term
            doc_id: Document identifier

        Returns:
            Raw term count times ln(N / document frequency), or 0.0 if the
            document does not contain the term
        """
        with self.index_manager.lock:
            tf = self.index_manager.term_frequency.frequency(doc_id, term)
            if tf == 0:
                return 0.0

            # df >= 1 whenever tf > 0
            df = self.index_manager.inverted_index.document_frequency(term)
            total_documents = len(self.index_manager.document_store)
            idf = math.log(total_documents / df)

            return tf * idf

    def search(self, query: str, max_results: int = 10) -> List[SearchResult]:
        """
        Search for documents matching a free-text query.

        Every occurrence of a query term adds its TF-IDF score, so repeated
        query terms count repeatedly. Documents with a total score of zero
        are left out.

        Args:
            query: Search query
            max_results: Maximum number of results to return

        Returns:
            Results by descending score, ties by ascending document id
        """
        start_time = time.time()
        query_terms = self.normalizer.tokenize(query)

        results: List[SearchResult] = []
        if query_terms and max_results > 0:
            results = self._rank(query_terms, max_results)

        execution_time = (time.time() - start_time) * 1000
        self._record_query(len(results), execution_time)

        logger.debug(
            "Search completed",
            query=query,
            total_results=len(results),
            execution_time_ms=round(execution_time, 3)
        )
        return results

    def search_with_metadata(
        self,
        query: str,
        max_results: int = 10,
        include_suggestions: bool = True
    ) -> SearchResponse:
        """
        Search and wrap the results with timing and suggestions.

        Args:
            query: Search query
            max_results: Maximum number of results to return
            include_suggestions: Whether to suggest terms when nothing matches

        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.time()

        results = self.search(query, max_results)

        suggestions = None
        if not results and include_suggestions:
            suggestions = self.suggest(query)

        return SearchResponse(
            query=query,
            query_terms=self.normalizer.tokenize(query),
            execution_time_ms=(time.time() - start_time) * 1000,
            total_results=len(results),
            results=results,
            suggestions=suggestions
        )

    def generate_snippet(self, document: Document, query_terms: Sequence[str]) -> str:
        """
        Build a preview of a document's content for the given query terms.

        Args:
            document: Stored document
            query_terms: Tokenized query terms

        Returns:
            Snippet text
        """
        return extract_snippet(document.content, query_terms, self.normalizer)

    def suggest(self, query: str) -> List[str]:
        """
        Suggest indexed terms for query terms the index does not contain.

        Args:
            query: Search query

        Returns:
            Up to max_suggestions distinct terms
        """
        with self.index_manager.lock:
            inverted_index = self.index_manager.inverted_index
            vocabulary = inverted_index.get_all_terms()

            suggestions: List[str] = []
            for term in self.normalizer.tokenize(query):
                if term in inverted_index:
                    continue
                for candidate in self.fuzzy_matcher.suggest_corrections(
                    term, vocabulary, self.max_suggestions
                ):
                    if candidate not in suggestions:
                        suggestions.append(candidate)

        return suggestions[:self.max_suggestions]

    def get_document(self, doc_id: int) -> Document:
        """
        Get a stored document.

        Raises:
            DocumentNotFoundError: If no document has this identifier
        """
        return self.index_manager.document_store.get(doc_id)

    def get_stats(self) -> Dict[str, Any]:
        """Get index and query statistics."""
        stats = self.index_manager.get_stats()
        stats.update(self._stats)

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time_ms"] / stats["total_queries"]
            )
            stats["zero_result_rate"] = (
                stats["zero_result_queries"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["zero_result_rate"] = 0.0

        return stats

    def clear(self) -> None:
        """Clear all documents and reset statistics."""
        with self.index_manager.lock:
            self.index_manager.clear()
            self._stats = self._empty_stats()

    def _rank(self, query_terms: List[str], max_results: int) -> List[SearchResult]:
        with self.index_manager.lock:
            scores: Dict[int, float] = defaultdict(float)
            for term in query_terms:
                for doc_id in self.index_manager.inverted_index.get_postings(term):
                    scores[doc_id] += self.compute_tfidf(term, doc_id)

            results = []
            for doc_id, score in scores.items():
                if score == 0.0:
                    continue
                document = self.index_manager.document_store.get(doc_id)
                results.append(SearchResult(
                    document_id=doc_id,
                    score=score,
                    title=document.title,
                    snippet=self.generate_snippet(document, query_terms),
                    url=document.url
                ))

        results.sort(key=lambda r: (-r.score, r.document_id))
        return results[:max_results]

    def _record_query(self, total_results: int, execution_time: float) -> None:
        with self.index_manager.lock:
            self._stats["total_queries"] += 1
            self._stats["total_execution_time_ms"] += execution_time
            if total_results == 0:
                self._stats["zero_result_queries"] += 1

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "zero_result_queries": 0,
            "total_execution_time_ms": 0.0,
        }
