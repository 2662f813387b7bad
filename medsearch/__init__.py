"""
CKD Medication Search - offline medication lookup for feline CKD care

Main modules:
- catalog: Bundled medication dataset loading and validation
- normalization: Query and name folding
- matching: Relevance ranking and brand/generic intent resolution
- utils: Configuration management
"""

from medsearch.catalog import MedicationCatalog, MedicationCatalogEntry, SearchIntent
from medsearch.matching import MedicationSearchEngine, SearchResult, build_search_engine

__version__ = "1.0.0"

__all__ = [
    'MedicationCatalog',
    'MedicationCatalogEntry',
    'MedicationSearchEngine',
    'SearchIntent',
    'SearchResult',
    'build_search_engine',
]
