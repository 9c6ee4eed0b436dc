"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(str, Enum):
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {
            "Hearts": "♥", "Diamonds": "♦", "Clubs": "♣", "Spades": "♠",
        }[self.value]


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        """Single-character form: '2'-'9', 'T', 'J', 'Q', 'K', 'A'."""
        return {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}.get(self.value, str(self.value))

    @property
    def display_name(self) -> str:
        return {11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}.get(self.value, str(self.value))

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.char == c.upper():
                return r
        if c == "10":
            return cls.TEN
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True, repr=False)
class Card:
    """A single playing card. Immutable once constructed."""
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit: {self.suit!r}")
        object.__setattr__(self, "rank", Rank(self.rank))

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10c' or '9♦'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    def __repr__(self) -> str:
        return f"Card({self.to_short()})"

    def __str__(self) -> str:
        return f"{self.rank.display_name} of {self.suit.value}"

    def to_short(self) -> str:
        """Return short string like 'A♠'."""
        return f"{self.rank.char}{self.suit.symbol}"
