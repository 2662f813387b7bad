"""
Tests for query and catalog-name normalization.
"""

import pytest

from medsearch.normalization.text_normalizer import TextNormalizer, normalize_text


class TestTextNormalizer:
    """Tests for TextNormalizer class."""

    def test_normalize_basic(self, text_normalizer):
        assert text_normalizer.normalize("Mirataz") == "mirataz"

    @pytest.mark.parametrize("raw,expected", [
        ("  Benazepril  ", "benazepril"),
        ("Benazepril\t\n", "benazepril"),
        ("  Tumil K ", "tumil k"),
    ])
    def test_normalize_trims(self, text_normalizer, raw, expected):
        assert text_normalizer.normalize(raw) == expected

    def test_inner_whitespace_preserved(self, text_normalizer):
        assert text_normalizer.normalize("lactated  ringer") == "lactated  ringer"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None, 42])
    def test_blank_or_non_string_is_empty(self, text_normalizer, raw):
        assert text_normalizer.normalize(raw) == ""

    def test_unicode_normalization(self, text_normalizer):
        # Full-width letters fold to ASCII under NFKC
        assert text_normalizer.normalize("ＭＩＲ") == "mir"

    def test_punctuation_kept(self, text_normalizer):
        assert text_normalizer.normalize("ben@zepril") == "ben@zepril"
        assert text_normalizer.normalize("Renal K+") == "renal k+"

    def test_fold_does_not_trim(self, text_normalizer):
        assert text_normalizer.fold(" Renal K+ ") == " renal k+ "

    def test_split_words_on_whitespace_and_hyphen(self, text_normalizer):
        assert text_normalizer.split_words("tumil-k gel") == ["tumil", "k", "gel"]

    def test_module_level_helper(self):
        assert normalize_text("  FORTEKOR ") == "fortekor"
        assert normalize_text("") == ""

    def test_idempotent(self, text_normalizer):
        once = text_normalizer.normalize("  Aluminium Hydroxide ")
        assert text_normalizer.normalize(once) == once

    def test_instance_independent(self):
        assert TextNormalizer().normalize("Cerenia") == TextNormalizer().normalize("CERENIA")
