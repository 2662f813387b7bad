"""
Lexical scoring for medication search.

Two scorers with different jobs live here and are not interchangeable:

- RelevanceScorer ranks catalog entries against a query. Its tiers are
  field-aware: brands outrank the generic name, which outranks aliases,
  inside every tier.
- MatchScorer rates how well one string matches a query. It is symmetric
  across fields and only used to compare brand-side against generic-side
  matches when deciding intent.

Both expect the query to be normalized already (see TextNormalizer.normalize).
"""

from typing import Optional

from medsearch.catalog.models import MedicationCatalogEntry
from medsearch.normalization.text_normalizer import TextNormalizer


class MatchScorer:
    """
    Tiered score for a single text against a query.

    Tiers:
    - Exact: 1000
    - Starts with: 600
    - Contains: 300
    - Word starts with: 150
    - Word contains: 100
    """

    EXACT = 1000
    STARTS_WITH = 600
    CONTAINS = 300
    WORD_STARTS_WITH = 150
    WORD_CONTAINS = 100

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()

    def score(self, text: str, query: str) -> int:
        """
        Score ``text`` against a normalized query.

        Returns:
            Tier score, 0 if no match
        """
        folded = self.normalizer.fold(text)
        if not folded or not query:
            return 0

        if folded == query:
            return self.EXACT
        if folded.startswith(query):
            return self.STARTS_WITH
        if query in folded:
            return self.CONTAINS

        return word_boundary_score(
            self.normalizer.split_words(folded), query,
            self.WORD_STARTS_WITH, self.WORD_CONTAINS,
        )


def word_boundary_score(words, query: str, starts_score: int, contains_score: int) -> int:
    """Score of the first word of a split name that starts with or contains the query."""
    for word in words:
        if word.startswith(query):
            return starts_score
        if query in word:
            return contains_score
    return 0


class RelevanceScorer:
    """
    Ranking score of a catalog entry for a query.

    Tiers are evaluated in strict priority order and the first hit wins,
    so a lower tier can never outrank a higher one whichever field matched:

    TIER 1 (exact, 900-1100): generic 1000, primary brand 1100,
        other brand 1050, alias 900
    TIER 2 (starts with, 550-700): primary brand 700, other brand 650,
        generic 600, alias 550
    TIER 3 (contains, 250-400): primary brand 400, other brand 350,
        generic 300, alias 250
    TIER 4 (word boundary on the generic name, 100-150): word starts with 150,
        word contains 100

    Only real brands take part; placeholder brands never match.
    """

    EXACT_PRIMARY_BRAND = 1100
    EXACT_BRAND = 1050
    EXACT_GENERIC = 1000
    EXACT_ALIAS = 900

    STARTS_WITH_PRIMARY_BRAND = 700
    STARTS_WITH_BRAND = 650
    STARTS_WITH_GENERIC = 600
    STARTS_WITH_ALIAS = 550

    CONTAINS_PRIMARY_BRAND = 400
    CONTAINS_BRAND = 350
    CONTAINS_GENERIC = 300
    CONTAINS_ALIAS = 250

    WORD_STARTS_WITH = 150
    WORD_CONTAINS = 100

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()

    def calculate_relevance(self, entry: MedicationCatalogEntry, query: str) -> int:
        """
        Calculate the ranking score of an entry.

        Args:
            entry: Catalog entry
            query: Normalized query

        Returns:
            Relevance score, 0 if the entry does not match at all
        """
        if not query:
            return 0

        fold = self.normalizer.fold
        generic = fold(entry.name)
        brands = [(fold(brand.name), brand.primary) for brand in entry.real_brands]
        aliases = [fold(alias.text) for alias in entry.search_aliases or ()]

        # TIER 1: exact
        if generic == query:
            return self.EXACT_GENERIC
        for brand, primary in brands:
            if brand == query:
                return self.EXACT_PRIMARY_BRAND if primary else self.EXACT_BRAND
        if query in aliases:
            return self.EXACT_ALIAS

        # TIER 2: starts with
        for brand, primary in brands:
            if brand.startswith(query):
                return self.STARTS_WITH_PRIMARY_BRAND if primary else self.STARTS_WITH_BRAND
        if generic.startswith(query):
            return self.STARTS_WITH_GENERIC
        if any(alias.startswith(query) for alias in aliases):
            return self.STARTS_WITH_ALIAS

        # TIER 3: contains
        for brand, primary in brands:
            if query in brand:
                return self.CONTAINS_PRIMARY_BRAND if primary else self.CONTAINS_BRAND
        if query in generic:
            return self.CONTAINS_GENERIC
        if any(query in alias for alias in aliases):
            return self.CONTAINS_ALIAS

        # TIER 4: word boundary (generic name only)
        return word_boundary_score(
            self.normalizer.split_words(generic), query,
            self.WORD_STARTS_WITH, self.WORD_CONTAINS,
        )
