"""Plain text formatting for terminal output."""

from typing import Optional

from poker_odds.models.hand import Hand
from poker_odds.models.tally import HandCategory, Tally


class TextFormatter:
    """Format hands and tallies as plain text for terminal display."""

    def format_hand(self, hand: Hand, category: Optional[HandCategory] = None) -> str:
        """One card per line, e.g. 'Ace of Spades', then the category if given."""
        lines = [str(card) for card in hand]
        if category is not None:
            lines.append(f"=> {category.label}")
        return "\n".join(lines)

    def format_tally(self, tally: Tally) -> str:
        if not tally.total:
            return "No hands dealt."

        width = max(len(label) for label, _ in tally.rows())
        lines = []
        for category in HandCategory.by_priority():
            lines.append(f"{category.label:<{width}}  {tally.count(category):>8}  "
                         f"{tally.frequency(category):7.3f}%")
        lines.append(f"{'Total':<{width}}  {tally.total:>8}")
        return "\n".join(lines)
