"""
Interactive / one-shot medication search CLI.

Runs queries against the bundled CKD medication catalog (or a dataset
directory given on the command line) and prints the ranked results with
their detected brand/generic intent.

Usage:
    python scripts/search_medications.py mir
    python scripts/search_medications.py "fortekor" "bena" --json
    python scripts/search_medications.py --data-dir data/catalogs --asset custom.json
    python scripts/search_medications.py            # interactive prompt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from medsearch.catalog.sources import FileAssetSource
from medsearch.matching import MedicationSearchEngine, SearchResult, build_search_engine
from medsearch.utils.config_manager import ConfigManager

logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def format_results(query: str, results: List[SearchResult]) -> str:
    """Render results as an aligned text table."""
    lines = [f"Query: '{query}' ({len(results)} results)"]
    if not results:
        lines.append("  no matches - enter the medication manually")
        return "\n".join(lines)

    for rank, result in enumerate(results, 1):
        lines.append(
            f"  {rank:>2}. [{result.relevance_score:>4}] {result.intent.value:<7} {result.display_name}"
        )
    return "\n".join(lines)


def run_query(engine: MedicationSearchEngine, query: str, as_json: bool) -> None:
    results = engine.search(query)
    if as_json:
        print(json.dumps({'query': query, 'results': [r.to_dict() for r in results]}, indent=2))
    else:
        print(format_results(query, results))


def interactive_loop(engine: MedicationSearchEngine, as_json: bool) -> None:
    print(f"Loaded {engine.entry_count} medications. Empty line to quit.")
    while True:
        try:
            query = input("search> ")
        except EOFError:
            break
        if not query.strip():
            break
        run_query(engine, query, as_json)


def main():
    """Main entry point for the medication search CLI."""
    parser = argparse.ArgumentParser(
        description="Search the offline CKD medication catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/search_medications.py mir
  python scripts/search_medications.py cerenia --json
        """
    )

    parser.add_argument('queries', nargs='*', help='Queries to run (interactive prompt if none)')
    parser.add_argument('--config', '-c', type=Path, help='Path to YAML config (default: config/search_config.yaml)')
    parser.add_argument('--data-dir', '-d', help='Directory containing the dataset (default: bundled data)')
    parser.add_argument('--asset', '-a', help='Dataset file name inside the data directory')
    parser.add_argument('--max-results', '-n', type=int, help='Override the configured result cap')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable info logging')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    config = ConfigManager(args.config) if args.config else ConfigManager.from_default_path()
    if args.asset:
        config.config['catalog']['asset_path'] = args.asset
    if args.max_results is not None:
        if args.max_results < 1:
            logger.error(f"--max-results must be positive, got {args.max_results}")
            sys.exit(1)
        config.update_search_param('max_results', args.max_results)

    asset_source = FileAssetSource(args.data_dir) if args.data_dir else None
    engine = build_search_engine(config, asset_source=asset_source)

    if engine.entry_count == 0:
        logger.warning("Medication catalog is empty; searches will return no results")

    if args.queries:
        for query in args.queries:
            run_query(engine, query, args.json)
    else:
        interactive_loop(engine, args.json)


if __name__ == "__main__":
    main()
