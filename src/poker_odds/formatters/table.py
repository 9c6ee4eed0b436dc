"""Rich table formatting for terminal output."""

from rich.console import Console
from rich.table import Table

from poker_odds.models.hand import Hand
from poker_odds.models.tally import HandCategory, Tally


class TableFormatter:
    """Format simulation results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_tally(self, tally: Tally, hand_size: int) -> None:
        """Print per-category counts and frequencies."""
        if not tally.total:
            self.console.print("[dim]No hands dealt.[/dim]")
            return

        table = Table(title=f"{tally.total} hands of {hand_size} cards")
        table.add_column("Hand", style="cyan")
        table.add_column("Count", justify="right", style="green")
        table.add_column("Frequency", justify="right")

        for category in HandCategory.by_priority():
            table.add_row(
                category.label,
                str(tally.count(category)),
                f"{tally.frequency(category):.3f}%",
            )
        table.add_section()
        table.add_row("Total", str(tally.total), "100.000%")

        self.console.print(table)

    def print_hand(self, hand: Hand, category: HandCategory) -> None:
        """Print each card in a hand followed by its category."""
        table = Table(title=f"{len(hand)}-card hand")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Card", style="cyan")
        table.add_column("Short", justify="center")

        for i, card in enumerate(hand, 1):
            table.add_row(str(i), str(card), card.to_short())

        self.console.print(table)
        self.console.print(f"[bold green]{category.label}[/bold green]")
