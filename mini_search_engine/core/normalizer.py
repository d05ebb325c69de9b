"""Text normalization and tokenization shared by ingestion and querying."""

from typing import List


# Tokens must be strictly longer than this to become index terms
MIN_TERM_LENGTH = 2


class TextNormalizer:
    """Turns raw text into index terms."""

    def __init__(self, min_term_length: int = MIN_TERM_LENGTH) -> None:
        """
        Initialize the normalizer.

        Args:
            min_term_length: Tokens of this length or shorter are discarded
        """
        self.min_term_length = min_term_length

    def normalize(self, text: str) -> str:
        """
        Normalize text for indexing and snippet matching.

        Every character that is neither alphanumeric nor whitespace becomes
        a single space, letters are lowercased and whitespace is kept as is.
        The output always has the same length as the input, so positions
        found in normalized text are valid in the original.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if not text:
            return ""

        return "".join(self._normalize_char(char) for char in text)

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into index terms.

        Args:
            text: Input text

        Returns:
            Terms in source order, duplicates retained
        """
        if not text:
            return []

        normalized = self.normalize(text)

        return [
            token for token in normalized.split()
            if len(token) > self.min_term_length
        ]

    @staticmethod
    def _normalize_char(char: str) -> str:
        if char.isalnum():
            lowered = char.lower()
            # Some code points expand when lowercased (e.g. U+0130)
            return lowered if len(lowered) == 1 else char
        if char.isspace():
            return char
        return " "
