"""
Unit tests for classification predicates, comparisons and counts
"""

import base64

import pytest

from textcell.core.config.settings import settings
from textcell.text.value import TextValue


class TestCharacterClasses:
    """Test the character-class predicates"""

    @pytest.mark.parametrize(
        "method,accepted,rejected",
        [
            ("is_ascii", "abc", "é"),
            ("is_alphanumeric", "abc123", "abc 123"),
            ("is_alpha", "héllo", "h1"),
            ("is_blank", "  \t\n", " a "),
            ("is_digit", "123", "12a"),
            ("is_lower", "abc", "aBc"),
            ("is_upper", "ABC", "AbC"),
            ("is_hexadecimal", "deadBEEF09", "xyz"),
            ("is_printable", "abc def", "a\nb"),
            ("is_punctuation", "!?.,", "a!"),
        ],
    )
    def test_accepts_and_rejects(self, method, accepted, rejected):
        assert getattr(TextValue(accepted), method)() is True
        assert getattr(TextValue(rejected), method)() is False

    @pytest.mark.parametrize(
        "method", ["is_alpha", "is_alphanumeric", "is_digit", "is_lower", "is_upper"]
    )
    def test_empty_content_is_vacuously_true(self, method):
        assert getattr(TextValue(""), method)() is True

    def test_is_empty(self):
        assert TextValue("").is_empty() is True
        assert TextValue(" ").is_empty() is False

    @pytest.mark.parametrize("text", ["12", "-1.5", "1e3", " 42 ", ".5", "+3."])
    def test_is_numeric(self, text):
        assert TextValue(text).is_numeric() is True

    @pytest.mark.parametrize("text", ["abc", "1.2.3", "", "0x1A", "1e"])
    def test_is_not_numeric(self, text):
        assert TextValue(text).is_numeric() is False

    def test_predicates_do_not_mutate(self):
        value = TextValue("abc")
        value.is_alpha()
        value.is_json()
        value.contains("b")
        assert value.to_string() == "abc"


class TestFormats:
    """Test is_json(), is_base64() and is_serialized()"""

    @pytest.mark.parametrize("text", ['{"a": 1}', "[1, 2]", '"x"', "3", "null"])
    def test_is_json(self, text):
        assert TextValue(text).is_json() is True

    @pytest.mark.parametrize("text", ["{a:1}", "", "NaN", "[1,", "Infinity"])
    def test_is_not_json(self, text):
        assert TextValue(text).is_json() is False

    def test_deeply_nested_json_is_not_json(self):
        assert TextValue("[" * 100000 + "]" * 100000).is_json() is False

    def test_is_base64(self):
        assert TextValue("aGVsbG8=").is_base64() is True
        assert TextValue("aGVsbG8").is_base64() is False
        assert TextValue("not base64 at all!").is_base64() is False
        assert TextValue("").is_base64() is False

    @pytest.mark.parametrize("text", ["hello", "héllo wörld", "日本語", "a"])
    def test_encoded_text_is_base64(self, text):
        """Test base64 output is always recognised as base64"""
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        assert TextValue(encoded).is_base64() is True

    @pytest.mark.parametrize(
        "text", ['a:1:{i:0;s:3:"foo";}', "b:0;", "i:5;", 's:3:"foo";', "N;"]
    )
    def test_is_serialized(self, text):
        assert TextValue(text).is_serialized() is True

    @pytest.mark.parametrize("text", ["hello", "", "i:five;"])
    def test_is_not_serialized(self, text):
        assert TextValue(text).is_serialized() is False

    def test_is_serialized_with_unrepresentable_content(self):
        assert TextValue("a", "latin-1").append("\u20ac").is_serialized() is False
        payload = TextValue('s:3:"', "ascii").append('\u20ac";')
        assert payload.is_serialized() is True


class TestComparisons:
    """Test is_equal(), contains*, starts_with() and ends_with()"""

    def test_is_equal(self):
        assert TextValue("abc").is_equal("abc") is True
        assert TextValue("abc").is_equal("ABC") is False

    def test_contains(self):
        value = TextValue("Hello World")
        assert value.contains("World") is True
        assert value.contains("world") is False
        assert value.contains("world", False) is True
        assert value.contains(["x", "World"]) is True
        assert value.contains("") is False

    def test_contains_all_and_any(self):
        value = TextValue("Hello World")
        assert value.contains_all(["Hello", "World"]) is True
        assert value.contains_all(["Hello", "x"]) is False
        assert value.contains_any(["x", "World"]) is True
        assert value.contains_any(["x", "y"]) is False

    def test_starts_and_ends_with(self):
        value = TextValue("Hello World")
        assert value.starts_with("Hello") is True
        assert value.starts_with(["x", "He"]) is True
        assert value.starts_with("") is False
        assert value.ends_with("World") is True
        assert value.ends_with(["Hello"]) is False


class TestCounts:
    """Test length(), count(), width(), count_substring() and count_words()"""

    def test_length_in_codepoints(self):
        value = TextValue("ünï")
        assert value.length() == 3
        assert value.count() == 3
        assert len(value) == 3

    def test_width(self):
        assert TextValue("日本").width() == 4
        assert TextValue("é").width() == 1
        assert TextValue("abc").width() == 3

    def test_count_substring(self):
        assert TextValue("hello hello").count_substring("ll") == 2
        assert TextValue("Hello hello").count_substring("HELLO", False) == 2
        assert TextValue("hello").count_substring("") == 0

    def test_count_words_formats(self):
        value = TextValue("Hello fri3nd, you're looking good today!")
        assert value.count_words() == 7
        assert value.count_words(1) == [
            "Hello", "fri", "nd", "you're", "looking", "good", "today",
        ]
        assert value.count_words(2) == {
            0: "Hello", 6: "fri", 10: "nd", 14: "you're",
            21: "looking", 29: "good", 34: "today",
        }

    def test_count_words_charlist(self):
        value = TextValue("Hello fri3nd, you're looking good today!")
        assert value.count_words(1, "3")[1] == "fri3nd"
        assert value.count_words(0, "3") == 6

    def test_count_words_hyphens(self):
        assert TextValue("well- done").count_words(1) == ["well", "done"]
        assert TextValue("-abc").count_words(1) == ["abc"]
        assert TextValue("re-enter").count_words(1) == ["re-enter"]


class TestSimilarity:
    """Test similarity() and is_similar()"""

    def test_similarity(self):
        assert TextValue("World").similarity("Word") == pytest.approx(88.8888888)
        assert TextValue("same").similarity("same") == 100.0
        assert TextValue("").similarity("") == 0.0

    def test_is_similar_default_threshold(self):
        assert settings.SIMILARITY_THRESHOLD == 80.0
        assert TextValue("World").is_similar("Worl") is True
        assert TextValue("World").is_similar("xyz") is False

    def test_is_similar_explicit_threshold(self):
        assert TextValue("World").is_similar("Word", 90) is False
        assert TextValue("World").is_similar("Word", 85) is True
