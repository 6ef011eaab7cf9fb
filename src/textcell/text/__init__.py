"""
textcell text engine.

The engine is split by responsibility, one mixin per operation group, all
sharing the value cell defined in :mod:`textcell.text.base`:

    - extraction: codepoint slicing, index search, segments, boundaries
    - casing: case folding and studly/camel/snake/kebab conversions
    - layout: truncation, padding, splicing and clean-up transforms
    - predicates: character classes, comparisons, counts, similarity

:class:`textcell.text.value.TextValue` combines them and adds the terminal
conversions (to_string, to_integer, to_float, to_boolean, to_array).
"""

from .value import TextValue, create

__all__ = [
    "TextValue",
    "create",
]
