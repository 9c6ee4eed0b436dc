"""Data models for poker odds simulation."""

from poker_odds.models.card import Card, Rank, Suit
from poker_odds.models.hand import Hand, validate_hand_size
from poker_odds.models.tally import HandCategory, Tally

__all__ = [
    "Card", "Rank", "Suit",
    "Hand", "validate_hand_size",
    "HandCategory", "Tally",
]
