"""Unit tests for text normalization and tokenization."""

import pytest
from mini_search_engine.core.normalizer import TextNormalizer


class TestNormalize:
    """Test cases for TextNormalizer.normalize."""

    @pytest.fixture
    def normalizer(self):
        """Create a normalizer instance for testing."""
        return TextNormalizer()

    def test_lowercases_letters(self, normalizer):
        """Test that letters are lowercased."""
        assert normalizer.normalize("Hello WORLD") == "hello world"

    def test_punctuation_becomes_single_space(self, normalizer):
        """Test that each punctuation character becomes exactly one space."""
        assert normalizer.normalize("Hello, World!") == "hello  world "
        assert normalizer.normalize("C++") == "c  "

    def test_whitespace_passed_through(self, normalizer):
        """Test that whitespace is neither replaced nor collapsed."""
        assert normalizer.normalize("a\tb\n\nc  d") == "a\tb\n\nc  d"

    def test_digits_kept(self, normalizer):
        """Test that digits count as alphanumeric."""
        assert normalizer.normalize("Route 66!") == "route 66 "

    def test_empty_input(self, normalizer):
        """Test that empty input yields empty output."""
        assert normalizer.normalize("") == ""

    @pytest.mark.parametrize("text", [
        "Hello, World!",
        "scikit-learn & PyTorch",
        "İstanbul straße",
        "tabs\tand\nnewlines",
    ])
    def test_length_preserving(self, normalizer, text):
        """Test that normalized text has the same length as the input."""
        assert len(normalizer.normalize(text)) == len(text)


class TestTokenize:
    """Test cases for TextNormalizer.tokenize."""

    @pytest.fixture
    def normalizer(self):
        """Create a normalizer instance for testing."""
        return TextNormalizer()

    def test_short_tokens_discarded(self, normalizer):
        """Test that tokens of two characters or fewer are dropped."""
        assert normalizer.tokenize("The cat sat on a mat") == ["the", "cat", "sat", "mat"]

    def test_punctuation_splits_tokens(self, normalizer):
        """Test that punctuation separates words."""
        assert normalizer.tokenize("scikit-learn, PyTorch!") == ["scikit", "learn", "pytorch"]

    def test_symbols_only_word_vanishes(self, normalizer):
        """Test that 'C++' tokenizes to nothing."""
        assert normalizer.tokenize("C++ is great") == ["great"]

    def test_duplicates_and_order_retained(self, normalizer):
        """Test that tokens keep source order and repeats."""
        assert normalizer.tokenize("dog cat dog dog") == ["dog", "cat", "dog", "dog"]

    def test_whitespace_runs_collapse(self, normalizer):
        """Test that leading, trailing and repeated whitespace is ignored."""
        assert normalizer.tokenize("  alpha \t\n beta   ") == ["alpha", "beta"]

    def test_empty_and_blank_input(self, normalizer):
        """Test that empty or blank input yields no tokens."""
        assert normalizer.tokenize("") == []
        assert normalizer.tokenize("   ") == []
        assert normalizer.tokenize("a an of") == []

    def test_deterministic(self, normalizer):
        """Test that tokenizing the same text twice gives the same tokens."""
        text = "Search algorithms are fundamental in computer science."
        assert normalizer.tokenize(text) == normalizer.tokenize(text)
        assert TextNormalizer().tokenize(text) == normalizer.tokenize(text)
