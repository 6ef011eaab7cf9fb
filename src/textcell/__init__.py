"""
textcell - chainable, encoding-aware text manipulation.

textcell wraps a string in a TextValue whose transformation methods mutate
it in place and return the same handle, so operations chain without
restating the subject string. Indexing is by codepoint, truncation by
display width, and search misses never raise.

Modules:
    core: Configuration, logging and exception hierarchy
    text: The TextValue engine
    recipes: Named operation chains loaded from YAML/JSON
    cli: Command-line interface tools

Example:
    >>> from textcell import TextValue
    >>> TextValue.create("foo_bar").studly().to_string()
    'FooBar'
    >>> TextValue.create("fooBar").snake().to_string()
    'foo_bar'
"""

__version__ = "0.1.0"
__description__ = (
    "Chainable, encoding-aware string value with extraction, case "
    "conversion, width-aware truncation and classification operations."
)

from textcell.core.config.settings import Settings
from textcell.core.exceptions.custom_exceptions import InvalidInputError, TextCellError
from textcell.core.logging.logger import get_logger
from textcell.text.value import TextValue, create

__all__ = [
    "TextValue",
    "create",
    "InvalidInputError",
    "TextCellError",
    "Settings",
    "get_logger",
]
