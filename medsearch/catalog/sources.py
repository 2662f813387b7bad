"""
Asset sources for the medication dataset.

A source is anything with ``read_text(path) -> str``. The bundled dataset
ships inside the ``medsearch.data`` package; a directory on disk can be used
instead for custom or updated catalogs.
"""

from importlib import resources
from pathlib import Path
from typing import Protocol, Union


class AssetSource(Protocol):
    """Reads a named text asset."""

    def read_text(self, path: str) -> str:
        ...


class PackageAssetSource:
    """Reads assets bundled inside a Python package (default: medsearch.data)."""

    def __init__(self, package: str = 'medsearch.data'):
        self.package = package

    def read_text(self, path: str) -> str:
        return resources.files(self.package).joinpath(path).read_text(encoding='utf-8')

    def __repr__(self) -> str:
        return f"PackageAssetSource({self.package!r})"


class FileAssetSource:
    """Reads assets relative to a directory on disk."""

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)

    def read_text(self, path: str) -> str:
        with open(self.base_dir / path, 'r', encoding='utf-8') as f:
            return f.read()

    def __repr__(self) -> str:
        return f"FileAssetSource({str(self.base_dir)!r})"
