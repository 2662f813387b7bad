"""
Medication search engine package.

Ranks catalog entries against partial free-text queries using:
- A four-tier relevance scorer (exact > starts with > contains > word boundary)
- A symmetric match scorer for brand vs generic intent
- Ambiguity detection that surfaces both name forms when they tie
"""

import logging
from typing import Optional

from medsearch.catalog.loader import MedicationCatalog
from medsearch.catalog.models import SearchIntent
from medsearch.catalog.sources import AssetSource, FileAssetSource, PackageAssetSource
from medsearch.matching.intent import IntentDetector
from medsearch.matching.scoring import MatchScorer, RelevanceScorer
from medsearch.matching.search_engine import MAX_RESULTS, MedicationSearchEngine
from medsearch.matching.types import NameScores, SearchResult
from medsearch.utils.config_manager import ConfigManager

_logger = logging.getLogger(__name__)


def build_search_engine(
    config: Optional[ConfigManager] = None,
    asset_source: Optional[AssetSource] = None,
    initialize: bool = True,
) -> MedicationSearchEngine:
    """
    Build a MedicationSearchEngine wired to its catalog.

    Reads the dataset location and result cap from configuration. The
    bundled dataset is used unless ``catalog.data_dir`` is set or an
    explicit ``asset_source`` is passed.

    Args:
        config: ConfigManager (loaded from config/search_config.yaml if None)
        asset_source: Overrides the configured dataset location
        initialize: Load the catalog before returning

    Returns:
        Engine instance to be shared by all consumers
    """
    if config is None:
        config = ConfigManager.from_default_path()

    for error in config.validate_config():
        _logger.warning(f"Invalid configuration: {error}")

    if asset_source is None:
        data_dir = config.get_catalog_param('data_dir')
        if isinstance(data_dir, str) and data_dir.strip():
            asset_source = FileAssetSource(data_dir)
        else:
            asset_source = PackageAssetSource()

    max_results = config.get_search_param('max_results')
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
        max_results = MAX_RESULTS

    catalog = MedicationCatalog(
        asset_source=asset_source,
        asset_path=config.get_catalog_param('asset_path'),
    )
    engine = MedicationSearchEngine(catalog, max_results=max_results)

    if initialize:
        engine.initialize()
        _logger.info(f"Medication search ready: {engine.entry_count} entries from {asset_source!r}")

    return engine


__all__ = [
    'IntentDetector',
    'MAX_RESULTS',
    'MatchScorer',
    'MedicationSearchEngine',
    'NameScores',
    'RelevanceScorer',
    'SearchIntent',
    'SearchResult',
    'build_search_engine',
]
