"""
Validate a medication dataset before bundling it.

Parses the dataset exactly as the catalog loader does and reports every
record that would be dropped, plus a few data-quality warnings (duplicate
generic names, entries without any real brand, brand names that only repeat
the generic name).

Usage:
    python scripts/validate_catalog.py
    python scripts/validate_catalog.py path/to/ckd_medications.json

Exit code is 1 when any record is rejected or the file cannot be parsed.
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from medsearch.catalog.errors import CatalogLoadError
from medsearch.catalog.loader import DEFAULT_ASSET_PATH, parse_catalog

DEFAULT_DATASET = project_root / 'medsearch' / 'data' / DEFAULT_ASSET_PATH


def setup_logging(verbose: bool):
    """Configure loguru logger for the validation run."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else "INFO"
    )


def validate_dataset(path: Path) -> int:
    """
    Validate one dataset file.

    Returns:
        Number of rejected records, or -1 if the file could not be parsed
    """
    try:
        json_text = path.read_text(encoding='utf-8')
        entries, rejected = parse_catalog(json_text)
    except (OSError, CatalogLoadError) as e:
        logger.error(f"Cannot load {path}: {e}")
        return -1

    for index, errors in rejected:
        for error in errors:
            logger.error(f"Record #{index}: {error}")

    name_counts = Counter(entry.name.lower() for entry in entries)
    for name, count in sorted(name_counts.items()):
        if count > 1:
            logger.debug(f"'{name}' appears {count} times (exact-name lookup returns the first)")

    for entry in entries:
        if not entry.has_real_brands:
            logger.debug(f"'{entry.name}' has no real brands; only generic matches possible")
        for brand in entry.real_brands:
            if brand.name.lower() == entry.name.lower():
                logger.debug(f"'{entry.name}' lists itself as a brand; never shown as ambiguous")

    logger.info(f"{path.name}: {len(entries)} valid, {len(rejected)} rejected")
    return len(rejected)


def main():
    parser = argparse.ArgumentParser(description="Validate a CKD medication dataset")
    parser.add_argument('dataset', nargs='?', type=Path, default=DEFAULT_DATASET,
                        help=f'Dataset JSON file (default: {DEFAULT_DATASET.relative_to(project_root)})')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show data-quality notes')

    args = parser.parse_args()
    setup_logging(args.verbose)

    rejected = validate_dataset(args.dataset)
    sys.exit(0 if rejected == 0 else 1)


if __name__ == "__main__":
    main()
