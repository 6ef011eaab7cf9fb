"""
Classification predicates and comparisons.

Every method here is a pure query: it reads the content and returns a plain
value without mutating anything. Character-class predicates test every
character of the content, so they are vacuously true for empty content;
use :meth:`PredicateMixin.is_empty` to test emptiness.
"""

import re
import string
import unicodedata
from typing import Dict, Iterable, List, Optional, Union

from textcell.core.config.settings import settings
from textcell.text import external
from textcell.text.extraction import ExtractionMixin
from textcell.text.similarity import similarity_percent
from textcell.text.width import display_width

Needles = Union[str, Iterable[str]]

NUMERIC = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")
_HEX_DIGITS = frozenset(string.hexdigits)
_ASCII_PUNCTUATION = frozenset(string.punctuation)


def _as_needles(needles: Needles) -> List[str]:
    if isinstance(needles, str):
        return [needles]
    return [str(needle) for needle in needles]


def _is_punctuation(char: str) -> bool:
    return char in _ASCII_PUNCTUATION or unicodedata.category(char).startswith("P")


class PredicateMixin(ExtractionMixin):
    """Character-class membership tests, comparisons and counts."""

    def _every(self, test) -> bool:
        return all(test(char) for char in self._content)

    def is_empty(self) -> bool:
        return self._content == ""

    def is_ascii(self) -> bool:
        return self._content.isascii()

    def is_alphanumeric(self) -> bool:
        return self._every(str.isalnum)

    def is_alpha(self) -> bool:
        return self._every(str.isalpha)

    def is_blank(self) -> bool:
        return self._every(str.isspace)

    def is_numeric(self) -> bool:
        """True for integer, decimal and exponent notation, surrounding whitespace allowed."""
        return NUMERIC.fullmatch(self._content) is not None

    def is_digit(self) -> bool:
        return self._every(str.isdecimal)

    def is_lower(self) -> bool:
        return self._every(str.islower)

    def is_upper(self) -> bool:
        return self._every(str.isupper)

    def is_hexadecimal(self) -> bool:
        return self._every(_HEX_DIGITS.__contains__)

    def is_printable(self) -> bool:
        return self._every(str.isprintable)

    def is_punctuation(self) -> bool:
        return self._every(_is_punctuation)

    def is_json(self) -> bool:
        return external.is_well_formed_json(self._content)

    def is_base64(self) -> bool:
        """True when decoding then re-encoding gives back the exact content."""
        return external.is_base64_round_trip(self._content)

    def is_serialized(self) -> bool:
        """True when the content is a PHP ``serialize()`` payload."""
        return external.is_php_serialized(self._encoded())

    def is_equal(self, other: str) -> bool:
        return str(other) == self._content

    def contains(self, needles: Needles, case_sensitive: bool = True) -> bool:
        """
        True when any of ``needles`` occurs in the content.

        Args:
            needles (Union[str, Iterable[str]]): One needle or several
            case_sensitive (bool): Compare case-sensitively. Default is True.
        """
        return any(
            needle != "" and self.index_of(needle, 0, case_sensitive) is not None
            for needle in _as_needles(needles)
        )

    def contains_all(self, needles: Iterable[str], case_sensitive: bool = True) -> bool:
        return all(self.contains(needle, case_sensitive) for needle in _as_needles(needles))

    def contains_any(self, needles: Iterable[str], case_sensitive: bool = True) -> bool:
        return self.contains(needles, case_sensitive)

    def starts_with(self, needles: Needles) -> bool:
        return any(
            needle != "" and self._content.startswith(needle)
            for needle in _as_needles(needles)
        )

    def ends_with(self, needles: Needles) -> bool:
        return any(
            needle != "" and self._content.endswith(needle)
            for needle in _as_needles(needles)
        )

    def length(self) -> int:
        return len(self._content)

    def count(self) -> int:
        return self.length()

    def width(self) -> int:
        """Display width in terminal columns."""
        return display_width(self._content)

    def count_substring(self, substring: str, case_sensitive: bool = True) -> int:
        if substring == "":
            return 0
        if case_sensitive:
            return self._content.count(substring)
        return self._content.lower().count(substring.lower())

    def count_words(
        self, fmt: int = 0, charlist: str = ""
    ) -> Union[int, List[str], Dict[int, str]]:
        """
        Word statistics for the content.

        Words are runs of letters which may contain, but not start with,
        ``'`` or ``-`` and never end with ``-``. Characters listed in
        ``charlist`` count as letters.

        Args:
            fmt (int): 0 returns the word count, 1 a list of words and
                2 a mapping of codepoint offset to word
            charlist (str): Extra characters treated as part of words

        Returns:
            Union[int, List[str], Dict[int, str]]: Depends on ``fmt``
        """
        extra = "".join(re.escape(char) for char in charlist)
        letter = r"[^\W\d_]"
        if extra:
            letter = r"(?:[^\W\d_]|[%s])" % extra
        pattern = re.compile(r"%s(?:%s|['-])*" % (letter, letter))

        found = {}
        for match in pattern.finditer(self._content):
            word = match.group()
            if "-" not in charlist:
                word = word.rstrip("-")
            found[match.start()] = word

        if fmt == 1:
            return list(found.values())
        if fmt == 2:
            return found
        return len(found)

    def similarity(self, other: str) -> float:
        """Similar-text percentage between the content and ``other``."""
        return similarity_percent(self._content, str(other))

    def is_similar(self, other: str, min_percent: Optional[float] = None) -> bool:
        if min_percent is None:
            min_percent = settings.SIMILARITY_THRESHOLD
        return self.similarity(other) >= min_percent
