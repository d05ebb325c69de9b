"""Fuzzy matching of query terms against the indexed vocabulary."""

from typing import List, Sequence

from rapidfuzz import fuzz, process


class FuzzyMatcher:
    """Suggests indexed terms close to terms the index does not know."""

    def __init__(self, threshold: float = 0.6) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            threshold: Minimum similarity (0-1) for a suggestion
        """
        self.threshold = threshold

    def suggest_corrections(
        self,
        term: str,
        candidates: Sequence[str],
        max_suggestions: int = 5
    ) -> List[str]:
        """
        Suggest indexed terms for a term.

        Args:
            term: Normalized query term
            candidates: Indexed terms
            max_suggestions: Maximum number of suggestions

        Returns:
            Suggested terms, most similar first
        """
        if not term or not candidates or max_suggestions <= 0:
            return []

        suggestions = process.extract(
            term,
            candidates,
            scorer=fuzz.ratio,
            score_cutoff=self.threshold * 100,
            limit=None
        )

        # Equal scores are ordered alphabetically before the cut
        ranked = sorted(suggestions, key=lambda s: (-s[1], s[0]))
        return [suggestion[0] for suggestion in ranked[:max_suggestions]]
