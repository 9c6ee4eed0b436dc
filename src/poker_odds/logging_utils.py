"""Logging setup shared by the CLI and library modules."""

import logging

from poker_odds.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cli/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
