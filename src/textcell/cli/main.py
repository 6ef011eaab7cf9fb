"""
textcell CLI - Main entry point
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from textcell.core.config.settings import settings
from textcell.core.config.validation import RecipeGenerator
from textcell.core.exceptions.custom_exceptions import TextCellError
from textcell.core.logging.logger import get_logger
from textcell.recipes import apply_recipe, load_recipe, steps_from_expressions
from textcell.text.value import TextValue

# Initialize CLI app
app = typer.Typer(
    name="textcell",
    help="Chainable, encoding-aware text manipulation",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

PREDICATES = [
    ("ASCII", "is_ascii"),
    ("Alphanumeric", "is_alphanumeric"),
    ("Alphabetic", "is_alpha"),
    ("Blank", "is_blank"),
    ("Numeric", "is_numeric"),
    ("Digits", "is_digit"),
    ("Lower case", "is_lower"),
    ("Upper case", "is_upper"),
    ("Hexadecimal", "is_hexadecimal"),
    ("Printable", "is_printable"),
    ("Punctuation", "is_punctuation"),
    ("JSON", "is_json"),
    ("Base64", "is_base64"),
    ("Serialized", "is_serialized"),
]


def _fail(error: TextCellError) -> None:
    console.print(f"[bold red]Error:[/bold red] {error.message}")
    logger.debug("Command failed", error_code=error.error_code, details=error.details)
    raise typer.Exit(code=1)


def _version_table() -> Table:
    table = Table(title="textcell Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Environment", style="yellow")

    table.add_row("textcell", settings.APP_VERSION, settings.ENVIRONMENT)
    table.add_row("Python", "3.9+", "Required")
    table.add_row("Default encoding", settings.DEFAULT_ENCODING, "Configured")
    return table


def version_callback(value: bool) -> None:
    """Handle version callback"""
    if value:
        console.print(_version_table())
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show textcell version and exit",
    ),
) -> None:
    """
    textcell CLI - Chainable, encoding-aware text manipulation

    Run 'textcell --help' for available commands.
    """
    if verbose:
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        for handler in root.handlers:
            handler.setLevel(logging.DEBUG)
        logger.info("Verbose logging enabled")


@app.command()
def version() -> None:
    """Show textcell version information"""
    console.print(_version_table())


@app.command()
def apply(
    value: str = typer.Argument(..., help="Text to transform"),
    op: List[str] = typer.Option(
        [], "--op", "-o", help="Operation as name or name:arg1,arg2 (repeatable)"
    ),
    recipe: Optional[Path] = typer.Option(
        None, "--recipe", "-r", help="YAML or JSON recipe file"
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="Encoding label (default: configured default)"
    ),
) -> None:
    """Apply a chain of operations to VALUE and print the result"""
    if not op and recipe is None:
        console.print("[bold red]Error:[/bold red] give at least one --op or a --recipe")
        raise typer.Exit(code=1)

    try:
        steps = []
        if recipe is not None:
            config = load_recipe(recipe)
            steps.extend(config.steps)
            if encoding is None:
                encoding = config.encoding
        steps.extend(steps_from_expressions(op))
        result = apply_recipe(value, steps, encoding)
    except TextCellError as e:
        _fail(e)

    if isinstance(result, (list, dict)):
        console.print_json(data=result)
    elif result is None:
        console.print("not found", markup=False, highlight=False)
    else:
        console.print(str(result), markup=False, highlight=False, soft_wrap=True)


@app.command()
def inspect(
    value: str = typer.Argument(..., help="Text to inspect"),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="Encoding label (default: configured default)"
    ),
) -> None:
    """Show classification predicates and measurements for VALUE"""
    try:
        subject = TextValue.create(value, encoding)
    except TextCellError as e:
        _fail(e)

    table = Table(title="Text Inspection")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Encoding", subject.encoding)
    table.add_row("Length", str(subject.length()))
    table.add_row("Display width", str(subject.width()))
    table.add_row("Words", str(subject.count_words()))
    for label, method in PREDICATES:
        table.add_row(label, "yes" if getattr(subject, method)() else "no")

    console.print(table)


@app.command()
def similarity(
    first: str = typer.Argument(..., help="First text"),
    second: str = typer.Argument(..., help="Second text"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Minimum percentage to count as similar"
    ),
) -> None:
    """Compare two texts with the similar-text percentage"""
    if threshold is None:
        threshold = settings.SIMILARITY_THRESHOLD

    subject = TextValue.create(first)
    percent = subject.similarity(second)
    verdict = "similar" if subject.is_similar(second, threshold) else "different"

    console.print(f"Similarity: [bold]{percent:.2f}%[/bold] ({verdict}, threshold {threshold:g}%)")


@app.command()
def template(
    path: Path = typer.Argument(..., help="Where to write the recipe template"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write an example recipe file (YAML or JSON by suffix)"""
    if path.exists() and not force:
        console.print(f"[bold red]Error:[/bold red] {path} already exists (use --force)")
        raise typer.Exit(code=1)

    recipe = RecipeGenerator.generate_basic_recipe()
    if path.suffix.lower() == ".json":
        path.write_text(json.dumps(recipe, indent=2), encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(recipe, sort_keys=False), encoding="utf-8")

    console.print(f"[bold green]Created recipe template[/bold green] {path}")


if __name__ == "__main__":
    app()
