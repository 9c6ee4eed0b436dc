"""Poker Odds - deal random poker hands and tally their categories."""

__version__ = "0.1.0"
