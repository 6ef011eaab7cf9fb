"""
Display width helpers.

Width is counted in terminal columns using wcwidth: East Asian wide and
fullwidth codepoints take two columns, combining marks and zero-width
characters take none. wcwidth reports -1 for non-printable codepoints
(control characters); those are counted as one column each.
"""

from wcwidth import wcswidth, wcwidth


def char_width(char: str) -> int:
    width = wcwidth(char)
    # wcwidth returns -1 for non-printable characters
    return width if width >= 0 else 1


def display_width(text: str) -> int:
    """Return the number of columns ``text`` occupies when rendered."""
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(char_width(char) for char in text)


def trim_to_width(text: str, width: int) -> str:
    """
    Cut ``text`` to the longest prefix whose display width fits ``width``.

    A wide character that would straddle the boundary is dropped rather than
    split, so the result can be one column narrower than requested.
    """
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text

    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > width:
            return text[:index]
    return text
