"""
Loader for the bundled CKD medication catalog.

Reads the JSON dataset once, drops records that fail validation and keeps
the survivors in memory for the lifetime of the process. A dataset that
cannot be read or parsed never raises to the caller: the catalog is marked
ready with zero entries so that manual medication entry keeps working.
"""

import json
import threading
from enum import Enum
from typing import List, Optional, Tuple

from loguru import logger

from medsearch.catalog.errors import CatalogEntryError, CatalogLoadError
from medsearch.catalog.models import MedicationCatalogEntry
from medsearch.catalog.sources import AssetSource, PackageAssetSource

DEFAULT_ASSET_PATH = 'ckd_medications_eu_us.json'


class CatalogState(Enum):
    """Lifecycle of a MedicationCatalog."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


# (record index, validation errors) for each dropped record
Rejection = Tuple[int, List[str]]


def parse_catalog(json_text: str) -> Tuple[List[MedicationCatalogEntry], List[Rejection]]:
    """
    Parse and validate a medication dataset.

    Args:
        json_text: Raw dataset contents (a JSON array of objects)

    Returns:
        Tuple of (valid entries in dataset order, rejected records)

    Raises:
        CatalogLoadError: If the text is not JSON or not a top-level array
    """
    try:
        records = json.loads(json_text)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError, oversized integer literals and runaway nesting
        raise CatalogLoadError(f"Medication dataset is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise CatalogLoadError(
            f"Medication dataset must be a JSON array, got {type(records).__name__}"
        )

    entries = []
    rejected = []

    for index, record in enumerate(records):
        try:
            entry = MedicationCatalogEntry.from_dict(record)
        except CatalogEntryError as e:
            rejected.append((index, [str(e)]))
            continue

        errors = entry.validate()
        if errors:
            rejected.append((index, errors))
            continue

        entries.append(entry)

    return entries, rejected


class MedicationCatalog:
    """
    Read-only, in-memory catalog of CKD medications.

    ``initialize()`` is idempotent and single-flight: concurrent callers wait
    for the one load in progress instead of parsing the dataset again. All
    read accessors are lock-free once the catalog is ready.
    """

    def __init__(self, asset_source: Optional[AssetSource] = None,
                 asset_path: str = DEFAULT_ASSET_PATH):
        """
        Initialize the catalog (does not load anything yet).

        Args:
            asset_source: Where to read the dataset from (bundled package data if None)
            asset_path: Dataset name relative to the source
        """
        self.asset_source = asset_source or PackageAssetSource()
        self.asset_path = asset_path

        self._entries: Tuple[MedicationCatalogEntry, ...] = ()
        self._state = CatalogState.UNINITIALIZED
        self._lock = threading.Lock()

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is CatalogState.READY

    @property
    def entry_count(self) -> int:
        """Number of loaded entries (0 before initialization or after a failed load)."""
        return len(self._entries)

    @property
    def entries(self) -> Tuple[MedicationCatalogEntry, ...]:
        return self._entries

    def initialize(self) -> None:
        """
        Load the dataset if it has not been loaded yet.

        Safe to call any number of times from any thread. Never raises:
        read and parse failures leave an empty, ready catalog behind.
        """
        if self._state is CatalogState.READY:
            return

        with self._lock:
            if self._state is CatalogState.READY:
                return

            self._state = CatalogState.LOADING
            entries = []
            try:
                entries = self._load()
            except CatalogLoadError as e:
                logger.error(f"Failed to load medication catalog from {self.asset_path}: {e}")
            except Exception as e:
                logger.exception(f"Unexpected error loading medication catalog from {self.asset_path}: {e}")
            finally:
                self._entries = tuple(entries)
                self._state = CatalogState.READY

    def _load(self) -> List[MedicationCatalogEntry]:
        try:
            json_text = self.asset_source.read_text(self.asset_path)
        except Exception as e:
            raise CatalogLoadError(f"Could not read {self.asset_path} from {self.asset_source!r}: {e}") from e

        entries, rejected = parse_catalog(json_text)

        for index, errors in rejected:
            logger.debug(f"Dropped medication record #{index}: {'; '.join(errors)}")

        logger.info(
            f"Loaded {len(entries)} medications from {self.asset_path}"
            + (f" ({len(rejected)} invalid records dropped)" if rejected else "")
        )
        return entries

    def find_by_exact_name(self, name: str) -> Optional[MedicationCatalogEntry]:
        """
        Find a medication by its generic name (case-insensitive, exact).

        Brands and aliases are not consulted.

        Args:
            name: Generic name to look up

        Returns:
            First entry with that name, or None if absent or not initialized
        """
        if not self.is_initialized or not isinstance(name, str):
            return None

        normalized_name = name.lower()
        for entry in self._entries:
            if entry.name.lower() == normalized_name:
                return entry
        return None
