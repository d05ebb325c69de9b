"""Snippet extraction for search result previews.

The window is centred on the first query term (in query order) that occurs
anywhere in the normalized content. Matching is plain substring search, so
a term may match inside a longer word.
"""

from typing import Sequence

from .normalizer import TextNormalizer

# Total snippet length and the context kept before the match
SNIPPET_LENGTH = 150
SNIPPET_LEAD = 75
ELLIPSIS = "..."


def find_best_position(normalized_content: str, query_terms: Sequence[str]) -> int:
    """
    Find the position of the first query term that occurs in the content.

    Args:
        normalized_content: Content already run through the normalizer
        query_terms: Query terms in query order

    Returns:
        Match position, or 0 if no term occurs
    """
    for term in query_terms:
        position = normalized_content.find(term)
        if position != -1:
            return position
    return 0


def extract_snippet(
    content: str,
    query_terms: Sequence[str],
    normalizer: TextNormalizer
) -> str:
    """
    Build a preview of ``content`` around the first query term match.

    Args:
        content: Original document content
        query_terms: Tokenized query terms
        normalizer: Normalizer used to build the index

    Returns:
        Up to SNIPPET_LENGTH characters of the original content, with an
        ellipsis on each side that was cut
    """
    best_pos = find_best_position(normalizer.normalize(content), query_terms)

    start = best_pos - SNIPPET_LEAD if best_pos > SNIPPET_LEAD else 0
    length = min(SNIPPET_LENGTH, len(content) - start)
    end = start + length

    snippet = content[start:end]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet += ELLIPSIS

    return snippet
