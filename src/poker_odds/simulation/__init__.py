"""Hand simulation module."""

from poker_odds.simulation.deck import Deck
from poker_odds.simulation.classifier import CATEGORY_CHECKS, classify
from poker_odds.simulation.engine import Simulator

__all__ = ["Deck", "CATEGORY_CHECKS", "classify", "Simulator"]
