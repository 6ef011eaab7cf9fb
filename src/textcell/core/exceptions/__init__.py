from .custom_exceptions import (
    ConfigurationError,
    InvalidInputError,
    RecipeError,
    TextCellError,
)

__all__ = [
    "TextCellError",
    "InvalidInputError",
    "ConfigurationError",
    "RecipeError",
]
