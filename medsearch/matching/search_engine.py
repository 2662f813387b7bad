"""
Medication search engine.

Resolves a partial free-text query into ranked catalog matches:

  Step 1: Normalize the query (blank queries return immediately)
  Step 2: Score every entry with RelevanceScorer (0 = excluded)
  Step 3: Classify brand/generic intent; ambiguous matches yield both forms
  Step 4: Sort by score (descending), then generic name (ascending)
  Step 5: Truncate to max_results

Search is synchronous, read-only and never raises.
"""

import logging
from typing import List, Optional

from medsearch.catalog.loader import MedicationCatalog
from medsearch.catalog.models import MedicationCatalogEntry, SearchIntent
from medsearch.matching.intent import IntentDetector
from medsearch.matching.scoring import MatchScorer, RelevanceScorer
from medsearch.matching.types import SearchResult
from medsearch.normalization.text_normalizer import TextNormalizer

logger = logging.getLogger(__name__)

MAX_RESULTS = 10


class MedicationSearchEngine:
    """
    Offline search over the CKD medication catalog.

    Construct one instance at application start and hand it to consumers;
    the catalog it wraps is loaded once via ``initialize()``.
    """

    def __init__(self,
                 catalog: MedicationCatalog,
                 normalizer: Optional[TextNormalizer] = None,
                 relevance_scorer: Optional[RelevanceScorer] = None,
                 intent_detector: Optional[IntentDetector] = None,
                 max_results: int = MAX_RESULTS):
        """
        Initialize the search engine.

        Args:
            catalog: Medication catalog to search (may still be uninitialized)
            normalizer: TextNormalizer instance (creates new if None)
            relevance_scorer: RelevanceScorer instance (creates new if None)
            intent_detector: IntentDetector instance (creates new if None)
            max_results: Maximum number of results per search
        """
        if max_results < 1:
            raise ValueError(f"max_results must be a positive integer, got {max_results}")

        self.catalog = catalog
        self.normalizer = normalizer or TextNormalizer()
        self.relevance_scorer = relevance_scorer or RelevanceScorer(self.normalizer)
        self.intent_detector = intent_detector or IntentDetector(MatchScorer(self.normalizer))
        self.max_results = max_results

    def initialize(self) -> None:
        """Load the underlying catalog (idempotent, never raises)."""
        self.catalog.initialize()

    @property
    def is_initialized(self) -> bool:
        return self.catalog.is_initialized

    @property
    def entry_count(self) -> int:
        return self.catalog.entry_count

    def search(self, query: str) -> List[SearchResult]:
        """
        Search the catalog for medications matching a query.

        Matching is case-insensitive over generic names, real brand names
        and search aliases. When a query matches an entry's brand and
        generic names equally well (e.g. "mir" against a brand and a
        generic that both start with it), two results are returned for
        that entry, one per intent, and both count toward ``max_results``.

        Args:
            query: Raw text as typed by the user

        Returns:
            Ranked results; empty if the query is blank, the catalog is not
            initialized or nothing matches
        """
        normalized_query = self.normalizer.normalize(query)
        if not normalized_query:
            return []

        if not self.catalog.is_initialized:
            return []

        results = []
        for medication in self.catalog.entries:
            try:
                results.extend(self._results_for_entry(medication, normalized_query))
            except (AttributeError, TypeError, ValueError) as e:
                logger.debug(f"Skipping malformed catalog entry {medication!r}: {e}")

        # Stable sort keeps brand-before-generic order for ambiguous pairs
        results.sort(key=lambda r: (-r.relevance_score, r.medication.name))

        return results[:self.max_results]

    def _results_for_entry(self, medication: MedicationCatalogEntry, query: str) -> List[SearchResult]:
        score = self.relevance_scorer.calculate_relevance(medication, query)
        if score <= 0:
            return []

        detector = self.intent_detector

        if detector.is_ambiguous_match(medication, query):
            return [
                SearchResult(
                    medication=medication,
                    intent=SearchIntent.BRAND,
                    relevance_score=score,
                    matched_brand=detector.resolve_matched_brand(medication, query),
                ),
                SearchResult(
                    medication=medication,
                    intent=SearchIntent.GENERIC,
                    relevance_score=score,
                ),
            ]

        intent = detector.detect_intent(medication, query)
        matched_brand = None
        if intent is SearchIntent.BRAND:
            matched_brand = detector.resolve_matched_brand(medication, query)

        return [SearchResult(
            medication=medication,
            intent=intent,
            relevance_score=score,
            matched_brand=matched_brand,
        )]

    def calculate_relevance(self, medication: MedicationCatalogEntry, query: str) -> int:
        """Ranking score of one entry for a raw query (0 = no match)."""
        return self.relevance_scorer.calculate_relevance(medication, self.normalizer.normalize(query))

    def detect_intent(self, medication: MedicationCatalogEntry, query: str) -> SearchIntent:
        return self.intent_detector.detect_intent(medication, self.normalizer.normalize(query))

    def is_ambiguous_match(self, medication: MedicationCatalogEntry, query: str) -> bool:
        return self.intent_detector.is_ambiguous_match(medication, self.normalizer.normalize(query))

    def find_by_exact_name(self, name: str) -> Optional[MedicationCatalogEntry]:
        """Exact, case-insensitive generic-name lookup (delegates to the catalog)."""
        return self.catalog.find_by_exact_name(name)
