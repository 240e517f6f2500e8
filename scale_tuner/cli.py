"""Command-line interface for Scale Tuner.

Provides commands for:
- match: Resolve a frequency to the closest note
- notes: Show the octave-0 scale table
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .analysis import closest_note
from .core import InvalidFrequencyError, ScaleNote, TOLERANCE_CENTS

app = typer.Typer(
    name="scale-tuner",
    help="Frequency to equal-temperament note matching",
    rich_markup_mode="markdown",
)
console = Console()


def _version_callback(value: bool):
    if value:
        console.print(f"scale-tuner {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
):
    """Frequency to equal-temperament note matching."""


@app.command()
def match(
    frequency: float = typer.Argument(..., help="Frequency in Hz"),
    json_output: bool = typer.Option(
        False, "--json", help="Output result as JSON"
    ),
):
    """Find the closest note to a frequency.

    Examples:
        scale-tuner match 440
        scale-tuner match 261.0 --json
    """
    try:
        result = closest_note(frequency)
    except InvalidFrequencyError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    _show_match_table(frequency, result)


@app.command()
def notes():
    """Show the scale notes and their octave-0 frequencies."""
    table = Table(title="Scale Notes (octave 0)")
    table.add_column("Note", style="cyan")
    table.add_column("Names", style="green")
    table.add_column("Frequency (Hz)", style="yellow")

    for note in ScaleNote:
        table.add_row(
            note.display_name,
            " / ".join(note.names),
            f"{note.frequency.hz:.3f}",
        )

    console.print(table)


def _show_match_table(frequency, result):
    """Display a match in a table."""
    table = Table(title=f"Closest Note to {frequency:.2f} Hz")
    table.add_column("Note", style="cyan")
    table.add_column("Names", style="green")
    table.add_column("Octave", style="blue")
    table.add_column("Cents", style="yellow")
    table.add_column("In Tune", style="magenta")
    table.add_column("Note Frequency (Hz)")

    in_tune = "yes" if result.is_within_tolerance else f"no (>= {TOLERANCE_CENTS:g} cents)"
    table.add_row(
        result.name,
        " / ".join(result.note.names),
        str(result.octave),
        f"{result.distance_cents:+.2f}",
        in_tune,
        f"{result.frequency.hz:.3f}",
    )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
