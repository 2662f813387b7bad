"""
Performance benchmarks for medication search.

Tests:
- Single query latency over a catalog ten times the bundled size (target: <100ms)
- Catalog load time
"""

import pytest

from tests.fixtures.test_data import SAMPLE_CATALOG, med_record


def large_catalog(size: int = 332):
    """Sample records padded with synthetic entries up to ``size``."""
    records = list(SAMPLE_CATALOG)
    index = 0
    while len(records) < size:
        records.append(med_record(
            f'Synthetic medication {index}',
            brands=[f'Synthbrand{index}', f'Altbrand{index}'],
            aliases=[{'text': f'synthmed {index}', 'type': 'generic'}],
        ))
        index += 1
    return records


# ============================================================================
# SEARCH LATENCY
# ============================================================================

class TestSearchPerformance:
    """Search runs on every keystroke and must stay interactive."""

    @pytest.mark.parametrize("query", ["m", "bena", "synth", "xyz-nonexistent", "altbrand33"])
    def test_search_speed(self, make_engine, performance_tracker, query):
        engine = make_engine(large_catalog())
        assert engine.entry_count == 332

        for _ in range(20):
            performance_tracker.measure(engine.search, query)

        avg_time = performance_tracker.avg_time()
        max_time = performance_tracker.max_time()

        print(f"\nSearch '{query}' over {engine.entry_count} entries:")
        print(f"  Average: {avg_time:.2f}ms")
        print(f"  Max: {max_time:.2f}ms")

        assert avg_time < 100, f"Average search time {avg_time:.2f}ms exceeds 100ms target"

    def test_result_cap_holds_on_large_catalog(self, make_engine):
        engine = make_engine(large_catalog())

        results = engine.search('synth')

        assert len(results) == 10


# ============================================================================
# LOAD TIME
# ============================================================================

class TestLoadPerformance:

    def test_catalog_load_speed(self, make_catalog, performance_tracker):
        catalog = make_catalog(large_catalog(), initialize=False)

        _, elapsed = performance_tracker.measure(catalog.initialize)

        print(f"\nCatalog load ({catalog.entry_count} entries): {elapsed:.2f}ms")

        assert catalog.entry_count == 332
        assert elapsed < 1000
