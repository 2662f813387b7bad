"""
Text normalization for medication search.

Queries and catalog text go through the same folding so that comparisons
are made between like forms. Only Unicode form, case and surrounding
whitespace are folded; punctuation and inner whitespace are kept as typed.
"""

import re
import unicodedata
from typing import List

# Increment when folding rules change
NORMALIZATION_VERSION = 1

# Word separators used for word-boundary matching
WORD_SPLIT_PATTERN = re.compile(r'[\s\-]')


class TextNormalizer:
    """
    Normalizes medication names and user queries for matching.

    Handles:
    - Unicode normalization (NFKC), so full-width and composed forms compare equal
    - Case folding (lowercase)
    - Leading/trailing whitespace trim (queries only)
    """

    def normalize(self, text: str) -> str:
        """
        Normalize a raw user query.

        Pipeline order:
        1. Unicode normalization (NFKC)
        2. Trim surrounding whitespace
        3. Lowercase

        Args:
            text: Raw query as typed

        Returns:
            Normalized query ('' for blank or non-string input)

        Examples:
            >>> TextNormalizer().normalize("  Mirataz ")
            'mirataz'
        """
        if not text or not isinstance(text, str):
            return ''

        text = self._unicode_normalize(text)
        return self._case_fold(text.strip())

    def fold(self, text: str) -> str:
        """
        Fold catalog text (names, brands, aliases) for comparison.

        Same as ``normalize`` without the trim, so stored names are compared
        exactly as they appear in the dataset.
        """
        if not text or not isinstance(text, str):
            return ''
        return self._case_fold(self._unicode_normalize(text))

    def split_words(self, text: str) -> List[str]:
        """
        Split folded text on whitespace and hyphens.

        Empty fragments between consecutive separators are kept, which never
        affects matching since queries are never empty.
        """
        return WORD_SPLIT_PATTERN.split(text)

    def _unicode_normalize(self, text: str) -> str:
        return unicodedata.normalize('NFKC', text)

    def _case_fold(self, text: str) -> str:
        return text.lower()


# Module-level instance for the convenience function
_normalizer_instance = None


def _get_normalizer() -> TextNormalizer:
    """Get or create the module-level TextNormalizer."""
    global _normalizer_instance
    if _normalizer_instance is None:
        _normalizer_instance = TextNormalizer()
    return _normalizer_instance


def normalize_text(text: str) -> str:
    """
    Convenience function for query normalization.

    Args:
        text: Raw query text

    Returns:
        Normalized query string
    """
    return _get_normalizer().normalize(text)
