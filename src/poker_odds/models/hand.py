"""Hand model: the cards drawn for one deal."""

from typing import Iterator, List, Optional

from poker_odds.config import MAX_HAND_SIZE, MIN_HAND_SIZE
from poker_odds.models.card import Card


def validate_hand_size(hand_size: int) -> int:
    """Reject hand sizes that cannot be dealt from one deck or classified."""
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        raise ValueError(f"Hand size must be an integer, got {hand_size!r}")
    if not MIN_HAND_SIZE <= hand_size <= MAX_HAND_SIZE:
        raise ValueError(
            f"Hand size must be between {MIN_HAND_SIZE} and {MAX_HAND_SIZE}, got {hand_size}"
        )
    return hand_size


class Hand:
    """Cards held for one deal, kept sorted by rank from high to low."""

    def __init__(self, cards: Optional[List[Card]] = None):
        self.cards: List[Card] = list(cards) if cards else []

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def sort(self) -> None:
        """Sort by rank descending. Suit order among equal ranks is irrelevant."""
        self.cards.sort(key=lambda c: c.rank, reverse=True)

    def clear(self) -> None:
        self.cards.clear()

    @property
    def ranks(self) -> List[int]:
        return [int(c.rank) for c in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __repr__(self) -> str:
        return f"Hand({' '.join(c.to_short() for c in self.cards)})"
