"""
Exceptions raised while reading the medication catalog.

Neither exception escapes MedicationCatalog.initialize(): load errors degrade
the catalog to empty, entry errors drop the offending record.
"""


class CatalogLoadError(Exception):
    """The dataset as a whole could not be read or parsed."""

    pass


class CatalogEntryError(ValueError):
    """A single dataset record is structurally malformed."""

    pass
