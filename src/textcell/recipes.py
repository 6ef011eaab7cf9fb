"""
Replay named chains of TextValue operations.

Recipes come either from a file (see :mod:`textcell.core.config.validation`)
or from the command-line shorthand ``name`` / ``name:arg1,arg2``, where each
argument is converted to the type the operation declares for it.

Example:
    >>> steps = [parse_step("studly"), parse_step("limit:3,")]
    >>> apply_recipe("foo_bar", steps)
    'Foo'
"""

import inspect
import typing
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from textcell.core.config.validation import RecipeConfig, RecipeStep, RecipeValidator
from textcell.core.exceptions.custom_exceptions import ConfigurationError, RecipeError
from textcell.core.logging.logger import get_logger
from textcell.text.value import TextValue

logger = get_logger(__name__)

_SCALAR_TYPES = (bool, int, float)


def _target_type(hint: Any) -> type:
    if hint in _SCALAR_TYPES:
        return hint
    for member in typing.get_args(hint):
        if member in _SCALAR_TYPES:
            return member
    return str


def _convert_argument(raw: str, target: type) -> Any:
    if target is bool:
        return TextValue.create(raw).to_boolean()
    return target(raw.strip()) if target is not str else raw


def coerce_arguments(op: str, raw_args: Sequence[str]) -> List[Any]:
    """
    Convert shorthand arguments to the types the operation declares.

    Parameters annotated ``int``, ``float`` or ``bool`` (optionally wrapped
    in ``Optional``) are converted; everything else stays a string. Extra
    arguments take the type of a trailing ``*values`` parameter.
    """
    method = getattr(TextValue, op)
    hints = typing.get_type_hints(method)
    params = [
        param
        for param in inspect.signature(method).parameters.values()
        if param.name != "self" and param.kind is not param.KEYWORD_ONLY
    ]

    converted = []
    for position, raw in enumerate(raw_args):
        if position < len(params):
            param = params[position]
        elif params and params[-1].kind is params[-1].VAR_POSITIONAL:
            param = params[-1]
        else:
            converted.append(raw)
            continue
        converted.append(_convert_argument(raw, _target_type(hints.get(param.name))))
    return converted


def parse_step(expression: str) -> RecipeStep:
    """
    Parse the ``name[:arg,arg...]`` shorthand into a validated step.

    Everything after the first colon is split on commas; an empty argument
    list after the colon yields one empty-string argument. Arguments are
    converted with :func:`coerce_arguments`.

    Raises:
        ConfigurationError: If the operation name is unknown or an argument
            does not convert to the declared type
    """
    name, colon, raw_args = expression.partition(":")
    raw = raw_args.split(",") if colon else []

    try:
        step = RecipeStep(op=name.strip(), args=raw)
        step.args = coerce_arguments(step.op, raw)
        return step
    except (ValidationError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid step '{expression}'",
            error_code="RECIPE_INVALID_STEP",
            details={"expression": expression},
        ) from e


def apply_recipe(
    value: Any, steps: Sequence[RecipeStep], encoding: Optional[str] = "UTF-8"
) -> Any:
    """
    Run ``steps`` against a new TextValue built from ``value``.

    Returns:
        Any: The final string, or the result of a trailing query operation

    Raises:
        InvalidInputError: If ``value`` cannot be wrapped
        RecipeError: If a step rejects its arguments
    """
    subject = TextValue.create(value, encoding)

    for position, step in enumerate(steps):
        if step.is_query and position != len(steps) - 1:
            raise RecipeError(
                f"Query operation '{step.op}' must be the last step",
                error_code="RECIPE_QUERY_NOT_LAST",
                details={"position": position, "op": step.op},
            )

        operation = getattr(subject, step.op)
        try:
            result = operation(*step.args, **step.kwargs)
        except (TypeError, ValueError) as e:
            logger.error("Recipe step failed", op=step.op, position=position, error=str(e))
            raise RecipeError(
                f"Step '{step.op}' failed: {e}",
                error_code="RECIPE_STEP_FAILED",
                details={"position": position, "op": step.op, "args": step.args},
            ) from e

        if step.is_query:
            return result

    return subject.to_string()


def run_recipe(value: Any, recipe: RecipeConfig) -> Any:
    """Apply a validated recipe, using its declared encoding."""
    logger.debug("Running recipe", name=recipe.name, steps=len(recipe.steps))
    return apply_recipe(value, recipe.steps, recipe.encoding)


def steps_from_expressions(expressions: List[str]) -> List[RecipeStep]:
    return [parse_step(expression) for expression in expressions]


def load_recipe(path) -> RecipeConfig:
    """Read and validate a YAML or JSON recipe file."""
    return RecipeValidator.validate_file(str(path))
