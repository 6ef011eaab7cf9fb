"""
Padding, truncation and reassembly operations.

Lengths here are codepoint counts, except for :meth:`LayoutMixin.limit`,
which measures display width so that wide characters are not overrun.
Like the rest of the engine, nothing in this module raises when a search
target is missing.
"""

import re
import string
from typing import Iterable

from textcell.core.logging.logger import get_logger
from textcell.text import external
from textcell.text.base import TextValueBase
from textcell.text.extraction import slice_codepoints
from textcell.text.width import display_width, trim_to_width

logger = get_logger(__name__)

# Default character mask for the trim family
WHITESPACE_MASK = " \t\n\r\0\x0b"
ALPHANUMERIC_KEYSPACE = string.digits + string.ascii_letters

_WHITESPACE = re.compile(r"\s+")
_REPEATED_SLASHES = re.compile(r"(?<!:)//+")
_QUOTE_ENTITIES = str.maketrans({"'": "&#39;", '"': "&quot;"})


def _fill(pad: str, size: int) -> str:
    """``pad`` repeated and cut to exactly ``size`` characters."""
    if size <= 0:
        return ""
    return (pad * (size // len(pad) + 1))[:size]


class LayoutMixin(TextValueBase):
    """Width-aware truncation, padding and splicing."""

    def limit(self, limit: int = 100, append: str = "..."):
        """
        Truncate to ``limit`` display columns and add ``append``.

        Content that already fits is left unchanged. Otherwise the cut text
        has trailing whitespace removed before the marker is added.

        Args:
            limit (int): Maximum display width before truncation
            append (str): Marker added when the text is cut
        """
        if display_width(self._content) <= limit:
            return self
        cut = trim_to_width(self._content, limit)
        return self._set(cut.rstrip(WHITESPACE_MASK) + append)

    def words(self, words: int = 100, append: str = "..."):
        """
        Keep the first ``words`` whitespace-delimited tokens.

        Leading whitespace is kept. When the tokens already cover the whole
        content nothing changes; otherwise trailing whitespace is trimmed and
        ``append`` is added.
        """
        if words < 1:
            return self

        match = re.match(r"\s*(?:\S+\s*){1,%d}" % words, self._content)
        if match is None or len(match.group()) == len(self._content):
            return self
        return self._set(match.group().rstrip(WHITESPACE_MASK) + append)

    def pad_left(self, length: int, pad: str = " "):
        missing = length - len(self._content)
        if missing <= 0 or pad == "":
            return self
        return self._set(_fill(pad, missing) + self._content)

    def pad_right(self, length: int, pad: str = " "):
        missing = length - len(self._content)
        if missing <= 0 or pad == "":
            return self
        return self._set(self._content + _fill(pad, missing))

    def pad_both(self, length: int, pad: str = " "):
        """Pad both sides; an odd remainder goes to the right."""
        missing = length - len(self._content)
        if missing <= 0 or pad == "":
            return self
        left = missing // 2
        return self._set(_fill(pad, left) + self._content + _fill(pad, missing - left))

    def replace_first(self, search: str, replace: str, *, preserve_on_miss: bool = False):
        """
        Replace the first occurrence of ``search``.

        When ``search`` does not occur, the whole content becomes ``search``
        itself. Pass ``preserve_on_miss=True`` to leave the content untouched
        instead.
        """
        position = self._content.find(search)
        return self._splice_replacement(position, search, replace, preserve_on_miss)

    def replace_last(self, search: str, replace: str, *, preserve_on_miss: bool = False):
        """Replace the last occurrence of ``search``; same miss rule as replace_first."""
        position = self._content.rfind(search)
        return self._splice_replacement(position, search, replace, preserve_on_miss)

    def _splice_replacement(
        self, position: int, search: str, replace: str, preserve_on_miss: bool
    ):
        if position == -1:
            if preserve_on_miss:
                return self
            logger.debug("Search not found, content replaced by search", search=search)
            return self._set(search)
        content = self._content
        return self._set(content[:position] + replace + content[position + len(search):])

    def replace_array(self, search: str, replace: Iterable[str]):
        """
        Replace each ``search`` in turn with the next item of ``replace``.

        Once ``replace`` runs out, remaining gaps keep ``search``.

        Example:
            >>> TextValue("?/?/?").replace_array("?", ["a", "b"])
            TextValue('a/b/?', encoding='UTF-8')
        """
        if search == "":
            return self

        replacements = iter(replace)
        parts = self._content.split(search)
        result = parts[0]
        for part in parts[1:]:
            result += str(next(replacements, search)) + part
        return self._set(result)

    def move(self, start: int, length: int, destination: int):
        """
        Move the ``length``-character window at ``start`` to ``destination``.

        ``destination`` is an offset in the original content. Nothing changes
        when ``destination <= length`` or when it falls inside the window.
        """
        if destination <= length:
            return self

        content = self._content
        if start < 0:
            start = max(len(content) + start, 0)
        window = slice_codepoints(content, start, length)
        window_end = start + len(window)
        if window == "" or start < destination < window_end:
            return self

        moved = content[:destination] + window + content[destination:]
        if destination <= start:
            start += len(window)
        return self._set(moved[:start] + moved[start + len(window):])

    def insert(self, substring: str, index: int):
        content = self._content
        return self._set(
            slice_codepoints(content, 0, index) + substring + slice_codepoints(content, index)
        )

    def start(self, prefix: str):
        """Begin with exactly one ``prefix``, collapsing any repeated ones."""
        if prefix == "":
            return self
        stripped = re.sub("^(?:%s)+" % re.escape(prefix), "", self._content)
        return self._set(prefix + stripped)

    def finish(self, cap: str):
        """End with exactly one ``cap``, collapsing any repeated ones."""
        if cap == "":
            return self
        stripped = re.sub(r"(?:%s)+\Z" % re.escape(cap), "", self._content)
        return self._set(stripped + cap)

    def prepend(self, *values: str):
        return self._set("".join(str(v) for v in values) + self._content)

    def append(self, *values: str):
        return self._set(self._content + "".join(str(v) for v in values))

    def reverse(self):
        return self._set(self._content[::-1])

    def repeat(self, multiplier: int):
        return self._set(self._content * max(multiplier, 0))

    def shuffle(self):
        """Uniform random permutation of the characters, from a secure source."""
        return self._set("".join(external.secure_shuffle(self._content)))

    def random(self, length: int = 64, keyspace: str = ALPHANUMERIC_KEYSPACE):
        """Replace the content with ``length`` secure random picks from ``keyspace``."""
        if keyspace == "":
            return self
        length = max(length, 1)
        return self._set(
            "".join(keyspace[external.random_index(len(keyspace))] for _ in range(length))
        )

    def increment(self, first: int = 1, separator: str = "_"):
        """
        Add ``separator + first``, or bump an existing numeric suffix.

        Example:
            >>> TextValue("page_1").increment()
            TextValue('page_2', encoding='UTF-8')
        """
        match = re.match(r"(.+)%s([0-9]+)$" % re.escape(separator), self._content, re.S)
        if match:
            return self._set(f"{match.group(1)}{separator}{int(match.group(2)) + 1}")
        return self._set(f"{self._content}{separator}{first}")

    def hash(self, algorithm: str = "md5", raw_output: bool = False):
        """Replace the content with its digest; unknown algorithms leave it unchanged."""
        result = external.digest(self._encoded(), algorithm, raw_output)
        if result is None:
            logger.debug("Unknown digest algorithm, value unchanged", algorithm=algorithm)
            return self
        return self._set(result)

    def strip_spaces(self):
        return self._set(_WHITESPACE.sub("", self._content))

    def normalize_spaces(self):
        return self._set(_WHITESPACE.sub(" ", self._content))

    def normalize_new_lines(self):
        return self._set(self._content.replace("\r\n", "\n").replace("\r", "\n"))

    def reduce_slashes(self):
        """Collapse repeated slashes, except right after a colon (``http://``)."""
        return self._set(_REPEATED_SLASHES.sub("/", self._content))

    def strip_quotes(self):
        return self._set(self._content.replace('"', "").replace("'", ""))

    def quotes_to_entities(self):
        return self._set(self._content.translate(_QUOTE_ENTITIES))

    def trim(self, character_mask: str = WHITESPACE_MASK):
        return self._set(self._content.strip(character_mask))

    def trim_left(self, character_mask: str = WHITESPACE_MASK):
        return self._set(self._content.lstrip(character_mask))

    def trim_right(self, character_mask: str = WHITESPACE_MASK):
        return self._set(self._content.rstrip(character_mask))

    def trim_slashes(self):
        return self.trim("/")
