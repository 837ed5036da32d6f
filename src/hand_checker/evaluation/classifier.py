"""Five-card hand classification."""
from collections import Counter
from typing import List, Sequence, Tuple

from hand_checker.core.card import Card, Suit
from hand_checker.evaluation.exceptions import InvalidHandSize
from hand_checker.evaluation.types import HandCategory, HandDescriptor

HAND_SIZE = 5

# Ace plays low in A-2-3-4-5
WHEEL = (14, 5, 4, 3, 2)
WHEEL_HIGH = 5

_SUIT_INDEX = {suit: index for index, suit in enumerate(Suit)}


def classify(cards: Sequence[Card]) -> HandDescriptor:
    """
    Classify exactly five cards.

    Duplicate cards are the caller's responsibility; they never raise here
    but the resulting descriptor is meaningless.

    Args:
        cards: The five cards to classify (any order, left untouched)

    Returns:
        HandDescriptor with category, primary keys and kickers

    Raises:
        InvalidHandSize: If cards does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(len(cards))

    sorted_cards = tuple(sorted(
        cards, key=lambda c: (c.value, _SUIT_INDEX[c.suit]), reverse=True
    ))
    values = [card.value for card in sorted_cards]

    is_flush = len({card.suit for card in sorted_cards}) == 1
    is_straight, straight_high = _check_straight(values)
    groups = _group_ranks(values)
    counts = [count for _, count in groups]

    def result(category: HandCategory, primary: Sequence[int], kickers: Sequence[int] = ()) -> HandDescriptor:
        return HandDescriptor(category, tuple(primary), tuple(kickers), sorted_cards)

    if is_flush and is_straight and values[0] == 14 and values[1] == 13:
        return result(HandCategory.ROYAL_FLUSH, [14])

    if is_flush and is_straight:
        return result(HandCategory.STRAIGHT_FLUSH, [straight_high])

    if counts[0] == 4:
        return result(HandCategory.FOUR_OF_A_KIND, [groups[0][0]], [groups[1][0]])

    if counts[0] == 3 and counts[1] == 2:
        return result(HandCategory.FULL_HOUSE, [groups[0][0], groups[1][0]])

    if is_flush:
        return result(HandCategory.FLUSH, values)

    if is_straight:
        return result(HandCategory.STRAIGHT, [straight_high])

    if counts[0] == 3:
        return result(HandCategory.THREE_OF_A_KIND, [groups[0][0]],
                      [groups[1][0], groups[2][0]])

    if counts[0] == 2 and counts[1] == 2:
        return result(HandCategory.TWO_PAIR, [groups[0][0], groups[1][0]], [groups[2][0]])

    if counts[0] == 2:
        return result(HandCategory.ONE_PAIR, [groups[0][0]],
                      [value for value, _ in groups[1:]])

    return result(HandCategory.HIGH_CARD, values)


def _check_straight(values: List[int]) -> Tuple[bool, int]:
    """
    Check whether descending rank values form a straight.

    Returns:
        (is_straight, highest_card_value); the wheel's high card is 5
    """
    if len(set(values)) != HAND_SIZE:
        return False, 0

    if values[0] - values[-1] == HAND_SIZE - 1:
        return True, values[0]

    if tuple(values) == WHEEL:
        return True, WHEEL_HIGH

    return False, 0


def _group_ranks(values: List[int]) -> List[Tuple[int, int]]:
    """(value, count) pairs sorted by count descending, then value descending."""
    return sorted(Counter(values).items(), key=lambda x: (x[1], x[0]), reverse=True)
