"""
Exception hierarchy for textcell error handling.

textcell follows a strict two-class failure model. Construction of a
TextValue is the only engine operation that raises; everything else that
cannot find its target (missing delimiter, out-of-range index, unknown
digest algorithm) returns the original value or a well-defined sentinel.
The exceptions below therefore cover construction, configuration and the
recipe/CLI layer built on top of the engine.

Exception Hierarchy:
    TextCellError (base)
    ├── InvalidInputError: Value cannot be treated as text
    ├── ConfigurationError: Settings or recipe file problems
    └── RecipeError: A recipe step cannot be executed

Error Context:
    Each exception carries:
    - Human-readable error message
    - Machine-readable error code
    - Contextual details dictionary

Example:
    >>> from textcell import TextValue
    >>> try:
    ...     TextValue.create(["not", "text"])
    ... except InvalidInputError as e:
    ...     logger.error("Rejected input",
    ...                  error_code=e.error_code,
    ...                  details=e.details)
"""

from typing import Any, Dict, Optional


class TextCellError(Exception):
    """
    Base exception class for all textcell errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier
        details (Dict[str, Any]): Additional contextual information

    The error_code defaults to the class name when not given, so callers
    can always group failures by code.

    Example:
        >>> raise TextCellError(
        ...     "Encoding label not recognised",
        ...     error_code="UNKNOWN_ENCODING",
        ...     details={"encoding": "UTF-99"}
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class InvalidInputError(TextCellError):
    """
    Raised when a value cannot be wrapped as text.

    This is the only failure the engine itself produces. It is raised at
    construction time and no partially built value is ever returned.

    Common scenarios:
        - Lists, tuples, sets or dicts (ambiguous stringification)
        - Objects that only inherit the default object.__str__
        - Bytes that do not decode under the declared encoding
        - Unknown encoding labels
        - Content that cannot be represented in the declared encoding

    Example:
        >>> raise InvalidInputError(
        ...     "Passed value cannot be a sequence or mapping",
        ...     error_code="INPUT_COMPOSITE_VALUE",
        ...     details={"type": "list"}
        ... )
    """

    pass


class ConfigurationError(TextCellError):
    """
    Raised when configuration or a recipe file is invalid.

    Common scenarios:
        - Recipe file missing or in an unsupported format
        - YAML/JSON parsing errors
        - Schema validation failures on recipe steps
    """

    pass


class RecipeError(TextCellError):
    """Raised when a recipe step cannot be applied"""

    pass
