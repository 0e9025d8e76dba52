"""CLI for the activitybox programming activity system.

Usage:
    python -m activitybox                            # Interactive main menu
    python -m activitybox menu --max-height 10       # Same, smaller triangles
    python -m activitybox list                       # Show available activities
    python -m activitybox start grade_evaluator      # Run a single activity
    python -m activitybox rates                      # Today's exchange rates
    python -m activitybox convert 1000 --yes         # One-shot conversion
    python -m activitybox grade 85 90 78 88          # One-shot grade evaluation
    python -m activitybox triangle 5 --shape both    # Print triangles
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from activitybox.activities import list_activities, load_activity
from activitybox.activities.currency import convert, fee_disclosure, render_quote, render_rates
from activitybox.activities.grade_evaluator import evaluate_grades, render_report
from activitybox.activities.triangle import render_shape
from activitybox.config import DEFAULT_CONFIG, AppConfig
from activitybox.log_config import setup_logging
from activitybox.models import GradeRecord, TriangleShape
from activitybox.program import run_program
from activitybox.prompts import read_yes_no
from activitybox.ui import Terminal

app = typer.Typer(
    name="activitybox",
    help="Programming activity system: four console exercises behind one menu",
)
console = Console(highlight=False)

_SHAPES = ", ".join(s.value for s in TriangleShape)


def _config(max_height: Optional[int] = None) -> AppConfig:
    """DEFAULT_CONFIG, optionally with a different triangle height cap."""
    if max_height is None:
        return DEFAULT_CONFIG
    return replace(
        DEFAULT_CONFIG,
        triangle=replace(DEFAULT_CONFIG.triangle, max_height=max_height),
    )


def _interactive(session: Callable[[Terminal], object]) -> None:
    """Run a prompt-driven session; closed or interrupted input exits 1."""
    terminal = Terminal(console=console)
    try:
        session(terminal)
    except (EOFError, KeyboardInterrupt):
        console.print("\n[yellow]Input closed, exiting.[/yellow]")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """Run the interactive menu when no command is given."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        _interactive(lambda t: run_program(t, DEFAULT_CONFIG))


@app.command("menu")
def cmd_menu(
    max_height: Optional[int] = typer.Option(None, "--max-height", min=1, help="Largest triangle height allowed"),
) -> None:
    """Start the interactive main menu."""
    config = _config(max_height)
    _interactive(lambda t: run_program(t, config))


@app.command("list")
def cmd_list() -> None:
    """Show available activities."""
    table = Table(title="Activities", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name", style="green", min_width=15)
    table.add_column("Title", min_width=20)
    table.add_column("Description", min_width=30)

    for index, a in enumerate(list_activities(), 1):
        table.add_row(str(index), a.name, a.title, a.description)

    console.print()
    console.print(table)
    console.print()


@app.command("start")
def cmd_start(
    name: str = typer.Argument(help="Activity name (e.g., 'currency')"),
    max_height: Optional[int] = typer.Option(None, "--max-height", min=1, help="Largest triangle height allowed"),
) -> None:
    """Run a single activity, then exit."""
    activity = load_activity(name)
    if activity is None:
        names = ", ".join(a.name for a in list_activities())
        console.print(f"[red]Unknown activity: {escape(name)}[/red]. Choose: {names}")
        raise typer.Exit(1)
    config = _config(max_height)
    _interactive(lambda t: activity.run(t, config))


@app.command("rates")
def cmd_rates() -> None:
    """Show today's exchange rates and transaction limits."""
    render_rates(Terminal(console=console), DEFAULT_CONFIG.exchange, DEFAULT_CONFIG.rule_width)


@app.command("convert")
def cmd_convert(
    amount: float = typer.Argument(
        help="Amount in PHP",
        min=DEFAULT_CONFIG.exchange.min_amount,
        max=DEFAULT_CONFIG.exchange.max_amount,
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept the transaction fee without asking"),
) -> None:
    """Convert a PHP amount to every supported currency."""
    policy = DEFAULT_CONFIG.exchange
    # FloatRange lets nan through, so convert() has the final say.
    try:
        quote = convert(amount, policy)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    def _session(terminal: Terminal) -> None:
        console.print(fee_disclosure(policy), markup=False)
        if not yes and not read_yes_no(terminal, "Would you like to proceed?"):
            console.print("Transaction cancelled.", markup=False)
            return
        render_quote(terminal, quote, policy, DEFAULT_CONFIG.rule_width)

    _interactive(_session)


@app.command("grade")
def cmd_grade(
    scores: List[float] = typer.Argument(help="Prelim, Midterm, PreFinal and Final grades"),
) -> None:
    """Evaluate four grades against the passing mark."""
    policy = DEFAULT_CONFIG.grades
    if len(scores) != len(policy.labels):
        console.print(
            f"[red]Expected {len(policy.labels)} grades ({', '.join(policy.labels)}), got {len(scores)}[/red]"
        )
        raise typer.Exit(1)
    for label, score in zip(policy.labels, scores):
        if not policy.min_grade <= score <= policy.max_grade:
            console.print(
                f"[red]{label} grade must be between {policy.min_grade:g} and {policy.max_grade:g}[/red]"
            )
            raise typer.Exit(1)

    records = [GradeRecord(label, score) for label, score in zip(policy.labels, scores)]
    report = evaluate_grades(records, policy)
    render_report(Terminal(console=console), report, policy, DEFAULT_CONFIG.rule_width)


@app.command("triangle")
def cmd_triangle(
    height: int = typer.Argument(help="Number of rows"),
    shape: str = typer.Option("both", "--shape", "-s", help=f"Shape: {_SHAPES}"),
    max_height: Optional[int] = typer.Option(None, "--max-height", min=1, help="Largest triangle height allowed"),
) -> None:
    """Print a right, inverted or both triangles."""
    try:
        s = TriangleShape(shape)
    except ValueError:
        console.print(f"[red]Invalid shape: {escape(shape)}[/red]. Choose: {_SHAPES}")
        raise typer.Exit(1)

    policy = _config(max_height).triangle
    if not policy.min_height <= height <= policy.max_height:
        console.print(f"[red]Height must be {policy.min_height}-{policy.max_height}[/red]")
        raise typer.Exit(1)
    render_shape(Terminal(console=console), s, height, policy.marker)


if __name__ == "__main__":
    app()
