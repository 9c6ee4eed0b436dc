"""Hand classification by poker category.

Every predicate expects cards sorted by rank from high to low. With that
ordering, cards of equal rank sit next to each other and a straight is a
contiguous run dropping by one per step, so each check is a single pass
over adjacent pairs.

Five-card hands use exact positional checks. Larger hands look for the
category anywhere in the hand by counting and scanning.
"""

from collections import Counter
from typing import Callable, List, Sequence, Tuple

from poker_odds.models.card import Card, Rank
from poker_odds.models.tally import HandCategory

Predicate = Callable[[Sequence[Card]], bool]

ROYAL_RANKS = (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN)


def _equal_run(cards: Sequence[Card], length: int) -> int:
    """Rank of the first run of ``length`` equal ranks, or 0 if there is none."""
    count = 0
    for i in range(len(cards) - 1):
        if cards[i].rank == cards[i + 1].rank:
            count += 1
        else:
            count = 0
        if count == length - 1:
            return int(cards[i].rank)
    return 0


def _has_pair_other_than(cards: Sequence[Card], excluded: int) -> bool:
    for i in range(len(cards) - 1):
        if cards[i].rank != excluded and cards[i].rank == cards[i + 1].rank:
            return True
    return False


def is_flush(cards: Sequence[Card]) -> bool:
    if len(cards) == 5:
        return all(c.suit == cards[0].suit for c in cards)

    suit_counts = Counter(c.suit for c in cards)
    return any(n >= 5 for n in suit_counts.values())


def is_straight(cards: Sequence[Card]) -> bool:
    """Five consecutive descending ranks. Ace is always high."""
    count = 0
    for i in range(len(cards) - 1):
        if cards[i].rank - 1 == cards[i + 1].rank:
            count += 1
        else:
            count = 0
        if count == 4:
            return True
    return False


def is_straight_flush(cards: Sequence[Card]) -> bool:
    """Straight and flush together.

    For more than five cards the suit check covers the whole hand, not just
    the five cards of the straight.
    """
    if len(cards) == 5:
        return is_straight(cards) and is_flush(cards)

    count = 0
    found_run = False
    same_suit = True
    for i in range(len(cards) - 1):
        if cards[i].rank - 1 == cards[i + 1].rank:
            count += 1
        else:
            count = 0
        if count == 4:
            found_run = True
        if cards[i].suit != cards[i + 1].suit:
            same_suit = False
    return found_run and same_suit


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return _equal_run(cards, 4) != 0


def is_full_house(cards: Sequence[Card]) -> bool:
    three_rank = _equal_run(cards, 3)
    if not three_rank:
        return False
    return _has_pair_other_than(cards, three_rank)


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    return _equal_run(cards, 3) != 0


def is_two_pair(cards: Sequence[Card]) -> bool:
    first_pair = _equal_run(cards, 2)
    if not first_pair:
        return False
    return _has_pair_other_than(cards, first_pair)


def is_pair(cards: Sequence[Card]) -> bool:
    return _equal_run(cards, 2) != 0


def is_royal_flush(cards: Sequence[Card]) -> bool:
    if len(cards) == 5:
        if tuple(c.rank for c in cards) != ROYAL_RANKS:
            return False
        return is_flush(cards)

    # first card of each of A, K, Q, J, 10
    found = {}
    for card in cards:
        if card.rank in ROYAL_RANKS and card.rank not in found:
            found[card.rank] = card
    if len(found) < len(ROYAL_RANKS):
        return False

    suit = found[Rank.ACE].suit
    return all(card.suit == suit for card in found.values())


# Highest category first; the first matching predicate wins.
CATEGORY_CHECKS: List[Tuple[HandCategory, Predicate]] = [
    (HandCategory.ROYAL_FLUSH, is_royal_flush),
    (HandCategory.STRAIGHT_FLUSH, is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandCategory.FULL_HOUSE, is_full_house),
    (HandCategory.FLUSH, is_flush),
    (HandCategory.STRAIGHT, is_straight),
    (HandCategory.THREE_OF_A_KIND, is_three_of_a_kind),
    (HandCategory.TWO_PAIR, is_two_pair),
    (HandCategory.PAIR, is_pair),
]


def classify(cards: Sequence[Card]) -> HandCategory:
    """Return the highest category a rank-sorted hand satisfies."""
    for category, predicate in CATEGORY_CHECKS:
        if predicate(cards):
            return category
    return HandCategory.HIGH_CARD
