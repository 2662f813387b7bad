"""
Medication catalog package.

Loads the bundled CKD medication dataset into an immutable in-memory
collection and exposes exact-name lookup over it.
"""

from medsearch.catalog.errors import CatalogEntryError, CatalogLoadError
from medsearch.catalog.loader import (
    DEFAULT_ASSET_PATH,
    CatalogState,
    MedicationCatalog,
    parse_catalog,
)
from medsearch.catalog.models import (
    AliasType,
    BrandName,
    MedicationCatalogEntry,
    SearchAlias,
    SearchIntent,
)
from medsearch.catalog.sources import AssetSource, FileAssetSource, PackageAssetSource

__all__ = [
    'AliasType',
    'AssetSource',
    'BrandName',
    'CatalogEntryError',
    'CatalogLoadError',
    'CatalogState',
    'DEFAULT_ASSET_PATH',
    'FileAssetSource',
    'MedicationCatalog',
    'MedicationCatalogEntry',
    'PackageAssetSource',
    'SearchAlias',
    'SearchIntent',
    'parse_catalog',
]
