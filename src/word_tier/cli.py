"""Command-line interface for Word Tier."""

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from word_tier import __version__
from word_tier.config import get_settings
from word_tier.core.session import AnalysisResult, AnalysisSession
from word_tier.presentation import (
    WINDOW_TITLE,
    render_definition,
    render_legend,
    render_ruler,
    render_sentence,
)

app = typer.Typer(
    name="word-tier",
    help=f"{WINDOW_TITLE}: mark medium and hard words by corpus frequency.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Word Tier v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def show_click(session: AnalysisSession, offset: int) -> bool:
    """Resolve a click offset and print its definition. Returns True on a hit."""
    definition = session.define_at(offset)
    if definition is None:
        return False
    console.print(render_definition(definition))
    return True


def interactive_loop(session: AnalysisSession) -> None:
    """Prompt for click offsets until an empty answer."""
    console.print("[dim]Enter an offset to define the word there (blank to quit).[/dim]")
    while True:
        answer = typer.prompt("Offset", default="", show_default=False)
        if not answer.strip():
            return
        try:
            offset = int(answer)
        except ValueError:
            console.print(f"[yellow]Not an offset:[/yellow] {answer}")
            continue
        if not show_click(session, offset):
            console.print(f"[dim]No marked word at {offset}.[/dim]")


def print_result(result: AnalysisResult, legend: bool) -> None:
    rendered = render_sentence(result)
    console.print(rendered, soft_wrap=True)
    console.print(render_ruler(len(rendered)), soft_wrap=True)
    if legend:
        console.print(render_legend())


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Mark the medium and hard words of a sentence and define them on demand.

    Examples:

        python tier.py analyze "The cat sat on an obfuscated windowsill"

        python tier.py analyze "..." --click 19  # Define the word at offset 19

        python tier.py analyze "..." --interactive  # Keep defining words

        python tier.py define windowsill
    """
    configure_logging(verbose)


@app.command()
def analyze(
    sentence: str = typer.Argument(..., help="Sentence to analyze"),
    click: Optional[list[int]] = typer.Option(
        None,
        "--click",
        "-c",
        help="Rendered offset to define, as if clicked (repeatable)",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Prompt for offsets to define after rendering",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print tokens and tiers as JSON instead of styled text",
    ),
    legend: bool = typer.Option(
        False,
        "--legend",
        "-l",
        help="Print a key of the tier styles",
    ),
) -> None:
    """Analyze a sentence and mark its medium and hard words."""
    try:
        session = AnalysisSession.from_settings(get_settings())
        result = session.analyze(sentence)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps([t.to_dict() for t in result.tokens]))
    else:
        print_result(result, legend)

    for offset in click or []:
        show_click(session, offset)

    if interactive:
        interactive_loop(session)


@app.command()
def define(
    word: str = typer.Argument(..., help="Word to look up"),
) -> None:
    """Look up the definition of a single word."""
    try:
        session = AnalysisSession.from_settings(get_settings())
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    definition = session.define(word)
    console.print(render_definition(definition))
    if not definition.found:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
