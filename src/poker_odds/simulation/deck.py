"""Deck management for hand simulation."""

import random
from typing import List, Optional

from poker_odds.models.card import Card, Rank, Suit
from poker_odds.models.hand import Hand


class Deck:
    """A standard 52-card deck."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize a new deck with all 52 cards.

        Args:
            rng: Random source used for shuffling. A private, unseeded
                ``random.Random`` is created when omitted.
        """
        self.rng = rng or random.Random()
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        """Reset the deck to all 52 cards."""
        self.cards = []
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank, suit))

    def shuffle(self):
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def reset(self):
        """Reset and shuffle the deck."""
        self._reset()
        self.shuffle()

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > self.remaining:
            raise ValueError(f"Not enough cards in deck. Need {count}, have {self.remaining}")

        return [self.draw() for _ in range(count)]

    def draw(self) -> Card:
        """Remove and return the card at the top of the deck."""
        if not self.cards:
            raise ValueError("Cannot draw from an empty deck")
        return self.cards.pop(0)

    def draw_hand(self, hand_size: int) -> Hand:
        """Draw ``hand_size`` cards one at a time and sort them high to low.

        Args:
            hand_size: Number of cards. Callers check the 5-52 range.

        Returns:
            The populated, sorted hand.
        """
        hand = Hand(self.deal(hand_size))
        hand.sort()
        return hand

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
