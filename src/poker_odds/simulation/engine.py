"""Simulation engine: deal, classify and tally repeated hands."""

import random
from typing import Optional, Tuple

from poker_odds.logging_utils import get_logger
from poker_odds.models.hand import Hand, validate_hand_size
from poker_odds.models.tally import HandCategory, Tally
from poker_odds.simulation.classifier import classify
from poker_odds.simulation.deck import Deck

logger = get_logger(__name__)


class Simulator:
    """Deals hands from a freshly shuffled deck and counts their categories.

    Each instance owns its random source, deck and tally. Two simulators
    created with the same seed produce identical tallies.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)
        self.deck = Deck(self.rng)
        self.hand = Hand()
        self.tally = Tally()

    def deal(self, hand_size: int) -> Tuple[Hand, HandCategory]:
        """Reset the deck, draw one sorted hand and classify it."""
        validate_hand_size(hand_size)
        return self._deal(hand_size)

    def _deal(self, hand_size: int) -> Tuple[Hand, HandCategory]:
        self.deck.reset()
        self.hand = self.deck.draw_hand(hand_size)
        category = classify(self.hand)
        logger.debug("Dealt %r -> %s", self.hand, category.label)
        return self.hand, category

    def run(self, hand_size: int, iterations: int) -> Tally:
        """Deal ``iterations`` hands of ``hand_size`` cards.

        Args:
            hand_size: Cards per hand, between 5 and 52.
            iterations: Number of hands to deal.

        Returns:
            The tally for this run. It is also kept on ``self.tally``.
        """
        validate_hand_size(hand_size)
        if iterations < 0:
            raise ValueError(f"Number of hands must be non-negative, got {iterations}")

        logger.info("Simulating %d hands of %d cards", iterations, hand_size)
        self.tally = Tally()
        for _ in range(iterations):
            _, category = self._deal(hand_size)
            self.tally.record(category)
            self.hand.clear()

        logger.info("Simulation complete: %d hands dealt", self.tally.total)
        return self.tally

    def __repr__(self) -> str:
        return f"Simulator(hands={self.tally.total})"
