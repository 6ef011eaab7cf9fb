"""
Indexing and extraction operations.

All offsets are codepoint offsets. Negative offsets count from the end of
the content. None of these operations raise on a miss: a missing delimiter
leaves the content untouched, an out-of-range index yields an empty string,
and the index searches return ``None`` for "not found" so that offset 0 is
never ambiguous.
"""

import re
from typing import List, Optional

from textcell.text.base import TextValueBase


def slice_codepoints(text: str, start: int, length: Optional[int] = None) -> str:
    """
    Codepoint slice with negative-offset conventions.

    Args:
        text (str): Source text
        start (int): Start offset, negative counts from the end
        length (Optional[int]): Characters to take; ``None`` means to the
            end, a negative value stops that many characters from the end

    Returns:
        str: The slice, or ``""`` when ``start`` lies past the end
    """
    size = len(text)
    if start < 0:
        start = max(size + start, 0)
    if start > size:
        return ""

    if length is None:
        end = size
    elif length < 0:
        end = size + length
    else:
        end = start + length

    return text[start:end] if end > start else ""


class ExtractionMixin(TextValueBase):
    """Substring, search, segment and boundary operations."""

    def substr(self, start: int, length: Optional[int] = None):
        return self._set(slice_codepoints(self._content, start, length))

    def at(self, index: int):
        """Keep only the character at ``index``."""
        return self.substr(index, 1)

    def index_of(
        self, needle: str, offset: int = 0, case_sensitive: bool = True
    ) -> Optional[int]:
        """
        Offset of the first occurrence of ``needle`` at or after ``offset``.

        Args:
            needle (str): Text to find
            offset (int): Where to start searching; negative counts from the end
            case_sensitive (bool): Compare case-sensitively. Default is True.

        Returns:
            Optional[int]: Codepoint offset, or None when not found
        """
        needle = str(needle)
        haystack = self._content
        if needle == "" or haystack == "":
            return None

        if offset < 0:
            offset += len(haystack)
        if offset < 0 or offset > len(haystack):
            return None

        if not case_sensitive:
            match = re.compile(re.escape(needle), re.IGNORECASE).search(haystack, offset)
            return None if match is None else match.start()

        position = haystack.find(needle, offset)
        return None if position == -1 else position

    def index_of_last(
        self, needle: str, offset: int = 0, case_sensitive: bool = True
    ) -> Optional[int]:
        """
        Offset of the last occurrence of ``needle`` starting at or after ``offset``.

        Negative offsets are converted to ``length + offset`` first; an offset
        outside ``[0, length]`` yields None.
        """
        needle = str(needle)
        haystack = self._content
        if needle == "" or haystack == "":
            return None

        size = len(haystack)
        if offset < 0:
            offset = size - abs(offset)
        if offset > size or offset < 0:
            return None

        if not case_sensitive:
            # Lookahead so overlapping occurrences are all seen
            pattern = re.compile(f"(?=(?:{re.escape(needle)}))", re.IGNORECASE)
            starts = [match.start() for match in pattern.finditer(haystack, offset)]
            return starts[-1] if starts else None

        position = haystack.rfind(needle, offset)
        return None if position == -1 else position

    def segments(self, delimiter: str = " ") -> List[str]:
        """Split on every ``delimiter``, keeping empty segments."""
        if delimiter == "":
            return [self._content]
        return self._content.split(delimiter)

    def segment(self, index: int, delimiter: str = " "):
        """
        Keep one segment by position.

        A negative index counts from the last segment. An index past either
        end leaves an empty string.
        """
        parts = self.segments(delimiter)
        if index < 0:
            parts.reverse()
            index = abs(index) - 1
        return self._set(parts[index] if index < len(parts) else "")

    def first_segment(self, delimiter: str = " "):
        return self.segment(0, delimiter)

    def last_segment(self, delimiter: str = " "):
        return self.segment(-1, delimiter)

    def before(self, search: str):
        """Text before the first ``search``; the whole content if absent."""
        if search == "":
            return self
        return self._set(self._content.split(search, 1)[0])

    def after(self, search: str):
        """Text after the first ``search``; the whole content if absent."""
        if search == "":
            return self
        return self._set(self._content.split(search, 1)[-1])

    def before_last(self, search: str):
        if search == "":
            return self
        position = self._content.rfind(search)
        if position == -1:
            return self
        return self._set(self._content[:position])

    def after_last(self, search: str):
        if search == "":
            return self
        position = self._content.rfind(search)
        if position == -1:
            return self
        return self._set(self._content[position + len(search):])

    def between(self, start: str, end: str):
        """
        Portion between the first ``start`` and the last ``end``.

        Example:
            >>> TextValue("SG-1 returns from an off-world mission").between("SG-1", "from")
            TextValue(' returns ', encoding='UTF-8')
        """
        if start == "" or end == "":
            return self
        return self.after(start).before_last(end)
