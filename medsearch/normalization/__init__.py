"""
Text normalization package for medication queries and catalog names.
"""

from .text_normalizer import NORMALIZATION_VERSION, TextNormalizer, normalize_text

__all__ = [
    'NORMALIZATION_VERSION',
    'TextNormalizer',
    'normalize_text',
]
