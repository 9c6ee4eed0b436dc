"""Hand categories and the per-run tally of dealt hands."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple


class HandCategory(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return {
            HandCategory.HIGH_CARD: "High Card",
            HandCategory.PAIR: "Pair",
            HandCategory.TWO_PAIR: "Two Pair",
            HandCategory.THREE_OF_A_KIND: "Three of a Kind",
            HandCategory.STRAIGHT: "Straight",
            HandCategory.FLUSH: "Flush",
            HandCategory.FULL_HOUSE: "Full House",
            HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
            HandCategory.STRAIGHT_FLUSH: "Straight Flush",
            HandCategory.ROYAL_FLUSH: "Royal Flush",
        }[self]

    @classmethod
    def by_priority(cls) -> List["HandCategory"]:
        """All categories, best first."""
        return sorted(cls, reverse=True)


def _empty_counts() -> Dict[HandCategory, int]:
    return {category: 0 for category in HandCategory}


@dataclass
class Tally:
    """Count of dealt hands per category."""
    counts: Dict[HandCategory, int] = field(default_factory=_empty_counts)
    total: int = 0

    def record(self, category: HandCategory) -> None:
        self.counts[category] += 1
        self.total += 1

    def count(self, category: HandCategory) -> int:
        return self.counts.get(category, 0)

    def frequency(self, category: HandCategory) -> float:
        """Percentage of all hands that landed in ``category``."""
        return self.count(category) / self.total * 100 if self.total else 0.0

    def rows(self) -> List[Tuple[str, int]]:
        """(label, count) pairs, best category first."""
        return [(c.label, self.count(c)) for c in HandCategory.by_priority()]

    def summary_dict(self) -> Dict[str, int]:
        d = dict(self.rows())
        d["Total"] = self.total
        return d
