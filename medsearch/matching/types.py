"""
Type definitions for the medication search engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional

from medsearch.catalog.models import MedicationCatalogEntry, SearchIntent


@dataclass(frozen=True)
class SearchResult:
    """
    A single candidate returned for a query.

    Several results may share the same catalog entry: an ambiguous match
    yields one brand-intent and one generic-intent result.

    Attributes:
        medication: Matched catalog entry (shared, read-only)
        intent: Name form the result should be displayed under
        relevance_score: Ranking score; only meaningful relative to other results
        matched_brand: Brand that triggered a brand-intent match (None for generic intent)
    """
    medication: MedicationCatalogEntry
    intent: SearchIntent
    relevance_score: int
    matched_brand: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.medication.get_display_name(self.intent, matched_brand=self.matched_brand)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.medication.name,
            "display_name": self.display_name,
            "intent": self.intent.value,
            "matched_brand": self.matched_brand,
            "relevance_score": self.relevance_score,
        }


class NameScores(NamedTuple):
    """Best match scores on each side of the brand/generic split for one entry."""
    brand_related: int
    generic_related: int
    best_brand: Optional[str]
