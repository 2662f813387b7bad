"""
Test doubles for catalog asset sources.
"""

import json
from typing import Any, List


class FakeAssetSource:
    """In-memory asset source standing in for the bundled dataset."""

    def __init__(self, text: str = '[]', error: Exception = None):
        self.text = text
        self.error = error
        self.reads: List[str] = []

    @classmethod
    def from_records(cls, records: List[Any]) -> 'FakeAssetSource':
        return cls(json.dumps(records))

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        if self.error is not None:
            raise self.error
        return self.text
