"""
Case and format transformations.

Case mapping uses Python's full Unicode case tables. The delimiter-based
style conversions (studly, camel, snake, kebab) are memoized per instance,
keyed by the content they were computed from, so repeated conversions of
the same text inside one chain are free.
"""

import re

from textcell.text.base import TextValueBase

# First non-space character of every whitespace-separated word
_WORD_START = re.compile(r"(^|\s)(\S)")
_WHITESPACE = re.compile(r"\s+")
# Gap between two codepoints, capturing both neighbours
_GAP = re.compile(r"(?<=(.))(?=(.))", re.DOTALL)
_TITLE_WORD = re.compile(r"[^\W_](?:[^\W_]|['’](?=[^\W_]))*")


def upper_words(text: str) -> str:
    """Upper-case the first character of each whitespace-delimited word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def mark_case_boundaries(text: str, delimiter: str) -> str:
    """Insert ``delimiter`` wherever an upper-case codepoint follows a non-upper-case one."""

    def _boundary(match):
        left, right = match.group(1), match.group(2)
        return delimiter if right.isupper() and not left.isupper() else ""

    return _GAP.sub(_boundary, text)


class CaseMixin(TextValueBase):
    """Case folding and identifier-style conversions."""

    def lower(self):
        return self._set(self._content.lower())

    def upper(self):
        return self._set(self._content.upper())

    def ucfirst(self):
        """Upper-case the first character only; the rest is left as is."""
        content = self._content
        return self._set(content[:1].upper() + content[1:])

    def capitalize(self):
        """Title-case every word: first letter title-cased, the rest lowered."""
        return self._set(
            _TITLE_WORD.sub(
                lambda m: m.group()[:1].title() + m.group()[1:].lower(),
                self._content,
            )
        )

    def studly(self):
        """
        Convert ``-``/``_`` separated runs into StudlyCase.

        Example:
            >>> TextValue("foo_bar").studly()
            TextValue('FooBar', encoding='UTF-8')
        """
        cached = self._memo_get("studly")
        if cached is not None:
            return self._set(cached)

        source = self._content
        words = upper_words(source.replace("-", " ").replace("_", " "))
        return self._set(self._memo_put("studly", source, words.replace(" ", "")))

    def camel(self):
        """StudlyCase with the first character lower-cased."""
        cached = self._memo_get("camel")
        if cached is not None:
            return self._set(cached)

        source = self._content
        studly = str(self._spawn(source).studly())
        return self._set(self._memo_put("camel", source, studly[:1].lower() + studly[1:]))

    def snake(self, delimiter: str = "_"):
        """
        Convert to snake case using ``delimiter``.

        Content without any upper-case codepoint is returned unchanged, so
        ``"foo bar"`` stays ``"foo bar"``. Otherwise words are capitalized,
        whitespace removed, ``delimiter`` inserted wherever an upper-case
        codepoint follows a non-upper-case one, and the result lower-cased.

        Example:
            >>> TextValue("fooBar").snake()
            TextValue('foo_bar', encoding='UTF-8')
            >>> TextValue("fooÉtat").snake()
            TextValue('foo_état', encoding='UTF-8')
        """
        cached = self._memo_get("snake", delimiter)
        if cached is not None:
            return self._set(cached)

        source = self._content
        if not any(char.isupper() for char in source):
            result = source
        else:
            joined = _WHITESPACE.sub("", upper_words(source))
            result = mark_case_boundaries(joined, delimiter).lower()

        return self._set(self._memo_put("snake", source, result, delimiter))

    def kebab(self):
        return self.snake("-")
