"""
Brand vs generic intent detection.

Decides which name form a match should be shown under, and whether a query
matches both forms equally well so that both should be shown. Uses
MatchScorer, never the ranking scores.
"""

from typing import Optional

from medsearch.catalog.models import AliasType, MedicationCatalogEntry, SearchIntent
from medsearch.matching.scoring import MatchScorer
from medsearch.matching.types import NameScores


class IntentDetector:
    """
    Classifies brand/generic intent per catalog entry.

    Brand side: real brand names and brand-typed aliases.
    Generic side: the generic name and generic-typed aliases.
    """

    def __init__(self, match_scorer: Optional[MatchScorer] = None):
        self.match_scorer = match_scorer or MatchScorer()

    def name_scores(self, entry: MedicationCatalogEntry, query: str) -> NameScores:
        """
        Best brand-side and generic-side match scores for an entry.

        Args:
            entry: Catalog entry
            query: Normalized query

        Returns:
            NameScores with the real brand that produced the best brand-name
            score (first one on ties, None if no brand matched)
        """
        score = self.match_scorer.score

        generic_score = score(entry.name, query)

        best_brand_score = 0
        best_brand = None
        for brand in entry.real_brands:
            brand_score = score(brand.name, query)
            if brand_score > best_brand_score:
                best_brand_score = brand_score
                best_brand = brand.name

        best_brand_alias = 0
        best_generic_alias = 0
        for alias in entry.search_aliases or ():
            alias_score = score(alias.text, query)
            if alias.type is AliasType.BRAND:
                best_brand_alias = max(best_brand_alias, alias_score)
            elif alias.type is AliasType.GENERIC:
                best_generic_alias = max(best_generic_alias, alias_score)

        return NameScores(
            brand_related=max(best_brand_score, best_brand_alias),
            generic_related=max(generic_score, best_generic_alias),
            best_brand=best_brand,
        )

    def detect_intent(self, entry: MedicationCatalogEntry, query: str) -> SearchIntent:
        """Brand if the brand side scores strictly higher, generic otherwise."""
        scores = self.name_scores(entry, query)
        if scores.brand_related > scores.generic_related:
            return SearchIntent.BRAND
        return SearchIntent.GENERIC

    def is_ambiguous_match(self, entry: MedicationCatalogEntry, query: str) -> bool:
        """
        Check whether the query matches brand and generic forms equally well.

        Requires at least one real brand, equal non-zero best scores on both
        sides, and a best-matching brand that is not just the generic name
        again (e.g. "Cerenia" listed as both).
        """
        if not entry.has_real_brands:
            return False

        scores = self.name_scores(entry, query)

        if scores.brand_related != scores.generic_related:
            return False
        if scores.brand_related == 0:
            return False
        if scores.best_brand is not None and scores.best_brand.lower() == entry.name.lower():
            return False

        return True

    def resolve_matched_brand(self, entry: MedicationCatalogEntry, query: str) -> Optional[str]:
        """
        Pick the brand to show for a brand-intent result.

        First real brand containing the query, else the first real brand,
        else the first brand of any kind, else None.
        """
        fold = self.match_scorer.normalizer.fold
        real_brands = entry.real_brands

        for brand in real_brands:
            if query in fold(brand.name):
                return brand.name

        if real_brands:
            return real_brands[0].name
        if entry.brand_names:
            return entry.brand_names[0].name
        return None
