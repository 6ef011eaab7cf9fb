"""
TextValue: a chainable, encoding-aware wrapper around a string.

TextValue assembles the operation groups of the engine into one class.
Transformations mutate the wrapped content in place and return the same
instance, so calls chain; queries and terminal conversions return plain
Python values and leave the content alone.

Example:
    >>> from textcell import TextValue
    >>> TextValue.create("  hello_world  ").trim().studly().append("!").to_string()
    'HelloWorld!'
    >>> TextValue.create("hello").index_of("z") is None
    True
    >>> TextValue.create("page_1").increment().to_string()
    'page_2'

Concurrency:
    Instances carry a per-instance memo table and no locking. Share values
    across threads only by giving each thread its own instance.
"""

import math
import re
from typing import Any, List, Optional

from textcell.text.casing import CaseMixin
from textcell.text.layout import WHITESPACE_MASK, LayoutMixin
from textcell.text.predicates import NUMERIC, PredicateMixin

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")
_TRUE_WORDS = {"1", "true", "on", "yes"}
_FALSE_WORDS = {"0", "false", "off", "no", ""}


class TextValue(PredicateMixin, CaseMixin, LayoutMixin):
    """
    Chainable text value.

    Args:
        value (Any): Anything convertible to text. Strings are used as is,
            bytes are decoded with ``encoding``, ``None`` becomes ``""`` and
            other objects go through ``str()`` provided they define
            ``__str__``. Lists, tuples, sets and dicts are rejected.
        encoding (Optional[str]): Encoding label. Defaults to ``"UTF-8"``;
            ``None`` selects the configured process-wide default.

    Raises:
        InvalidInputError: If the value cannot be treated as text
    """

    @classmethod
    def create(cls, value: Any = "", encoding: Optional[str] = "UTF-8") -> "TextValue":
        return cls(value, encoding)

    def to_string(self) -> str:
        return self._content

    def to_integer(self) -> int:
        """Leading number of the content truncated to int, 0 if there is none."""
        text = self._leading_number()
        if text is None:
            return 0
        if _INTEGER.fullmatch(text):
            return int(text)
        number = float(text)
        return int(number) if math.isfinite(number) else 0

    def to_float(self) -> float:
        text = self._leading_number()
        return 0.0 if text is None else float(text)

    def _leading_number(self) -> Optional[str]:
        match = _LEADING_NUMBER.match(self._content)
        return None if match is None else match.group().strip()

    def to_boolean(self) -> bool:
        """
        Interpret the content as a logical value.

        ``true``, ``1``, ``on`` and ``yes`` are True; ``false``, ``0``,
        ``off`` and ``no`` are False, ignoring case and surrounding
        whitespace. Other numeric strings are True when positive. Blank
        content is False; anything else is True.
        """
        word = self._content.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        if NUMERIC.fullmatch(self._content):
            return float(self._content) > 0
        return bool(word)

    def to_array(self, delimiter: Optional[str] = None) -> List[str]:
        """
        Split the trimmed content on ``delimiter`` and trim every piece.

        Without a delimiter the result is a one-element list holding the
        trimmed content.
        """
        content = self._content.strip(WHITESPACE_MASK)
        if delimiter is None:
            return [content]
        return [piece.strip(WHITESPACE_MASK) for piece in self._spawn(content).segments(delimiter)]


def create(value: Any = "", encoding: Optional[str] = "UTF-8") -> TextValue:
    """Shortcut for :meth:`TextValue.create`."""
    return TextValue(value, encoding)
