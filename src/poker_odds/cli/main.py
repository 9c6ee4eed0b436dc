"""Poker Odds CLI — Typer-based command line interface."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from poker_odds import config

app = typer.Typer(
    name="poker-odds",
    help="Deal random poker hands and count how often each category comes up",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level",
                                  help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
):
    """Configure logging before any command runs."""
    from poker_odds.logging_utils import setup_logging
    setup_logging(log_level)


@app.command()
def simulate(
    hand_size: int = typer.Option(config.DEFAULT_HAND_SIZE, "--hand-size", "-k",
                                  help="Cards per hand (5-52)"),
    hands: int = typer.Option(config.DEFAULT_HAND_COUNT, "--hands", "-n",
                              help="Number of hands to deal"),
    output: Optional[Path] = typer.Option(None, "--output", "-o",
                                          help="Report file (default: POKER_REPORT_PATH)"),
    report: bool = typer.Option(True, "--report/--no-report",
                                help="Write the summary report file"),
    seed: Optional[int] = typer.Option(config.DEFAULT_SEED, "--seed",
                                       help="Seed for a reproducible run"),
    plain: bool = typer.Option(False, "--plain",
                               help="Print plain text instead of a table"),
):
    """Deal many hands and report how often each category was dealt."""
    from poker_odds.export.report import ReportExporter, ReportExportError
    from poker_odds.formatters.table import TableFormatter
    from poker_odds.formatters.text import TextFormatter
    from poker_odds.simulation.engine import Simulator

    simulator = Simulator(seed=seed)
    try:
        with console.status(f"Dealing {hands} hands..."):
            tally = simulator.run(hand_size, hands)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if plain:
        typer.echo(TextFormatter().format_tally(tally))
    else:
        TableFormatter(console).print_tally(tally, hand_size)

    if report:
        try:
            path = ReportExporter.write(tally, output or config.DEFAULT_REPORT_PATH)
        except ReportExportError as e:
            console.print(f"[red]Error writing report:[/red] {e}")
            raise typer.Exit(1)
        console.print(f"[green]Report written to[/green] [cyan]{path}[/cyan]")


@app.command()
def deal(
    hand_size: int = typer.Option(config.DEFAULT_HAND_SIZE, "--hand-size", "-k",
                                  help="Cards per hand (5-52)"),
    seed: Optional[int] = typer.Option(config.DEFAULT_SEED, "--seed",
                                       help="Seed for a reproducible deal"),
    plain: bool = typer.Option(False, "--plain",
                               help="Print one card per line instead of a table"),
):
    """Deal a single hand and show its category."""
    from poker_odds.formatters.table import TableFormatter
    from poker_odds.formatters.text import TextFormatter
    from poker_odds.simulation.engine import Simulator

    try:
        hand, category = Simulator(seed=seed).deal(hand_size)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if plain:
        typer.echo(TextFormatter().format_hand(hand, category))
    else:
        TableFormatter(console).print_hand(hand, category)


if __name__ == "__main__":
    app()
