"""
Pytest configuration and shared fixtures for medication search tests.

Provides:
- Catalogs and search engines built over the sample catalog
- Scorers and normalizers
- Performance tracking utilities
"""

import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator, List

import pytest

from medsearch.catalog.loader import MedicationCatalog
from medsearch.matching.intent import IntentDetector
from medsearch.matching.scoring import MatchScorer, RelevanceScorer
from medsearch.matching.search_engine import MedicationSearchEngine
from medsearch.normalization.text_normalizer import TextNormalizer
from tests.fixtures.fakes import FakeAssetSource
from tests.fixtures.test_data import SAMPLE_CATALOG


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def make_catalog() -> Callable[..., MedicationCatalog]:
    """Factory: initialized catalog over the given records."""
    def _make(records: List[Any], initialize: bool = True) -> MedicationCatalog:
        catalog = MedicationCatalog(asset_source=FakeAssetSource.from_records(records))
        if initialize:
            catalog.initialize()
        return catalog
    return _make


@pytest.fixture(scope="function")
def sample_catalog(make_catalog) -> MedicationCatalog:
    """Initialized catalog over the sample CKD records."""
    return make_catalog(SAMPLE_CATALOG)


@pytest.fixture(scope="function")
def make_engine(make_catalog) -> Callable[..., MedicationSearchEngine]:
    """Factory: search engine over an initialized catalog of the given records."""
    def _make(records: List[Any], **kwargs) -> MedicationSearchEngine:
        return MedicationSearchEngine(make_catalog(records), **kwargs)
    return _make


@pytest.fixture(scope="function")
def search_engine(sample_catalog) -> MedicationSearchEngine:
    """Search engine over the sample catalog."""
    return MedicationSearchEngine(sample_catalog)


# ============================================================================
# NORMALIZATION / SCORING FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def text_normalizer() -> TextNormalizer:
    """Fresh text normalizer instance."""
    return TextNormalizer()


@pytest.fixture(scope="function")
def relevance_scorer(text_normalizer) -> RelevanceScorer:
    return RelevanceScorer(text_normalizer)


@pytest.fixture(scope="function")
def match_scorer(text_normalizer) -> MatchScorer:
    return MatchScorer(text_normalizer)


@pytest.fixture(scope="function")
def intent_detector(match_scorer) -> IntentDetector:
    return IntentDetector(match_scorer)


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# PERFORMANCE TRACKING FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def performance_tracker():
    """Simple performance tracking for benchmarks."""
    import time

    class PerformanceTracker:
        def __init__(self):
            self.measurements = []

        def measure(self, func, *args, **kwargs):
            """Measure execution time of a function."""
            start = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.measurements.append(elapsed_ms)
            return result, elapsed_ms

        def avg_time(self):
            return sum(self.measurements) / len(self.measurements) if self.measurements else 0

        def max_time(self):
            return max(self.measurements) if self.measurements else 0

    return PerformanceTracker()
