"""
Unit tests for width, similarity and delegated helpers
"""

import pytest

from textcell.text import external
from textcell.text.similarity import similar_chars, similarity_percent
from textcell.text.width import char_width, display_width, trim_to_width


class TestWidth:
    """Test display width measurement"""

    @pytest.mark.parametrize(
        "char,expected",
        [("a", 1), ("\u00e9", 1), ("\u65e5", 2), ("\uff21", 2), ("\u0301", 0), ("\u200b", 0)],
    )
    def test_char_width(self, char, expected):
        assert char_width(char) == expected

    def test_display_width(self):
        assert display_width("") == 0
        assert display_width("é") == 1
        assert display_width("ab日本") == 6

    def test_non_printable_counts_one_column(self):
        assert char_width("\x07") == 1
        assert display_width("a\x07b") == 3

    def test_trim_to_width(self):
        assert trim_to_width("日本語", 4) == "日本"
        assert trim_to_width("日本語", 5) == "日本"
        assert trim_to_width("abc", 10) == "abc"
        assert trim_to_width("abc", 0) == ""


class TestSimilarText:
    """Test the similar-text measure"""

    def test_similar_chars(self):
        assert similar_chars("World", "Word") == 4
        assert similar_chars("bafoobar", "barfoo") == 5
        assert similar_chars("barfoo", "bafoobar") == 3
        assert similar_chars("abc", "xyz") == 0

    def test_percent(self):
        assert similarity_percent("World", "Word") == pytest.approx(88.8888888)
        assert similarity_percent("abc", "abc") == 100.0
        assert similarity_percent("", "abc") == 0.0
        assert similarity_percent("", "") == 0.0


class TestExternal:
    """Test wrappers around hashlib, secrets, json, base64 and phpserialize"""

    def test_digest_algorithms(self):
        algorithms = external.digest_algorithms()
        assert "md5" in algorithms
        assert "sha256" in algorithms
        assert not any(name.startswith("shake_") for name in algorithms)

    def test_digest(self):
        assert external.digest(b"", "sha1") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
        assert external.digest(b"", "nope") is None
        assert len(external.digest(b"", "sha1", raw_output=True)) == 20

    def test_random_index_bounds(self):
        assert all(0 <= external.random_index(3) < 3 for _ in range(50))

    def test_secure_shuffle_keeps_items(self):
        assert sorted(external.secure_shuffle([3, 1, 2])) == [1, 2, 3]

    def test_json_rejects_constants(self):
        assert external.is_well_formed_json("[1.5]") is True
        assert external.is_well_formed_json("[NaN]") is False

    def test_php_serialized(self):
        assert external.is_php_serialized(b"d:0.5;") is True
        assert external.is_php_serialized(b"") is False
