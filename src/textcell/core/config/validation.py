"""
Recipe validation utilities for textcell.

A recipe is a named, ordered list of TextValue operations that can be kept
in a YAML or JSON file and replayed from the command line. This module holds
the Pydantic schemas for recipes together with the loader that reads and
validates recipe files.

Validation Rules:
    - Every step names a known TextValue operation (snake_case)
    - Query operations (which return plain values) may only be the last step
    - A recipe has at least one step
    - The encoding label must be known to the codec registry

Recipe Format (YAML):
    name: slugify-title
    encoding: UTF-8
    steps:
      - op: trim
      - op: lower
      - op: kebab
      - op: limit
        args: [40]
        kwargs: {append: ""}

Example Usage:
    >>> recipe = RecipeValidator.validate_file("slugify.yaml")
    >>> [step.op for step in recipe.steps]
    ['trim', 'lower', 'kebab', 'limit']
"""

import codecs
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from textcell.core.exceptions.custom_exceptions import ConfigurationError

CHAINABLE_OPERATIONS = frozenset(
    {
        # Indexing & extraction
        "substr", "at", "segment", "first_segment", "last_segment",
        "before", "after", "before_last", "after_last", "between",
        # Case & format
        "lower", "upper", "ucfirst", "capitalize",
        "studly", "camel", "snake", "kebab",
        # Padding, truncation & reassembly
        "limit", "words", "pad_left", "pad_right", "pad_both",
        "replace_first", "replace_last", "replace_array",
        "move", "insert", "start", "finish", "prepend", "append",
        "reverse", "repeat", "shuffle", "random", "increment", "hash",
        "strip_spaces", "normalize_spaces", "normalize_new_lines",
        "reduce_slashes", "strip_quotes", "quotes_to_entities",
        "trim", "trim_left", "trim_right", "trim_slashes",
    }
)

QUERY_OPERATIONS = frozenset(
    {
        "index_of", "index_of_last", "segments",
        "is_empty", "is_ascii", "is_alphanumeric", "is_alpha", "is_blank",
        "is_numeric", "is_digit", "is_lower", "is_upper", "is_hexadecimal",
        "is_printable", "is_punctuation", "is_json", "is_base64",
        "is_serialized", "is_equal", "is_similar",
        "contains", "contains_all", "contains_any", "starts_with", "ends_with",
        "length", "count", "width", "count_substring", "count_words",
        "similarity",
        "to_string", "to_integer", "to_float", "to_boolean", "to_array",
    }
)


class RecipeStep(BaseModel):
    """One operation call within a recipe"""

    op: str
    args: List[Any] = []
    kwargs: Dict[str, Any] = {}

    @field_validator("op")
    @classmethod
    def validate_operation(cls, v):
        if v not in CHAINABLE_OPERATIONS and v not in QUERY_OPERATIONS:
            raise ValueError(f"unknown operation '{v}'")
        return v

    @property
    def is_query(self) -> bool:
        return self.op in QUERY_OPERATIONS


class RecipeConfig(BaseModel):
    """Main recipe schema"""

    name: str = "recipe"
    encoding: Optional[str] = "UTF-8"
    steps: List[RecipeStep]

    @field_validator("steps")
    @classmethod
    def validate_steps_not_empty(cls, v):
        if not v:
            raise ValueError("steps cannot be empty")
        return v

    @field_validator("steps")
    @classmethod
    def validate_query_is_last(cls, v):
        for step in v[:-1]:
            if step.is_query:
                raise ValueError(
                    f"query operation '{step.op}' can only be the last step"
                )
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        if v is not None:
            try:
                codecs.lookup(v)
            except LookupError:
                raise ValueError(f"unknown encoding '{v}'")
        return v


class RecipeValidator:
    """Loader and validator for recipe files"""

    @staticmethod
    def load_config(file_path: str) -> Dict[str, Any]:
        """Load a recipe from a YAML or JSON file"""
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                f"Recipe file not found: {file_path}",
                error_code="RECIPE_NOT_FOUND",
                details={"path": str(path)},
            )

        suffix = path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                error_code="RECIPE_UNSUPPORTED_FORMAT",
                details={"path": str(path)},
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load recipe: {e}",
                error_code="RECIPE_LOAD_ERROR",
                details={"path": str(path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Recipe file must contain a mapping",
                error_code="RECIPE_NOT_A_MAPPING",
                details={"path": str(path)},
            )
        return data

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> RecipeConfig:
        """Validate a recipe mapping"""
        try:
            return RecipeConfig(**config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Recipe validation failed: {e}",
                error_code="RECIPE_INVALID",
            ) from e

    @staticmethod
    def validate_file(file_path: str) -> RecipeConfig:
        """Load and validate recipe file"""
        config = RecipeValidator.load_config(file_path)
        return RecipeValidator.validate_config(config)


class RecipeGenerator:
    """Generate recipe templates"""

    @staticmethod
    def generate_basic_recipe() -> Dict[str, Any]:
        """Generate a slug-style recipe template"""
        return {
            "name": "slugify-title",
            "encoding": "UTF-8",
            "steps": [
                {"op": "normalize_spaces"},
                {"op": "trim"},
                {"op": "snake", "args": ["-"]},
                {"op": "limit", "args": [40], "kwargs": {"append": ""}},
                {"op": "trim_right", "args": ["-"]},
            ],
        }
