"""Best five-card hand from community and hole cards."""
import logging
from typing import Iterator, List, Sequence, TypeVar

from hand_checker.core.card import Card
from hand_checker.evaluation.classifier import HAND_SIZE, classify
from hand_checker.evaluation.comparator import Ordering, compare
from hand_checker.evaluation.exceptions import InvalidPoolShape
from hand_checker.evaluation.types import HandCategory, HandDescriptor

logger = logging.getLogger(__name__)

HOLE_SIZE = 2
MAX_COMMUNITY = 5

# Loses to every real hand
WEAKEST_HAND = HandDescriptor(HandCategory.HIGH_CARD, (0,))

T = TypeVar('T')


def combinations(items: Sequence[T], k: int) -> Iterator[List[T]]:
    """
    Yield every k-element subset of items exactly once.

    Subsets holding items[0] come first, followed by those without it.
    """
    if k == 0:
        yield []
        return
    if len(items) < k:
        return

    first, rest = items[0], items[1:]
    for combo in combinations(rest, k - 1):
        yield [first] + combo
    yield from combinations(rest, k)


def validate_pool(community: Sequence[Card], hole: Sequence[Card]) -> List[Card]:
    """
    Check the shape of a community/hole pool and return the combined cards.

    Raises:
        InvalidPoolShape: If hole is not two cards, community holds more than
            five, fewer than five cards are available, or a card repeats
    """
    if len(hole) != HOLE_SIZE:
        raise InvalidPoolShape(f"Hole must hold exactly {HOLE_SIZE} cards, got {len(hole)}")
    if len(community) > MAX_COMMUNITY:
        raise InvalidPoolShape(
            f"Community holds at most {MAX_COMMUNITY} cards, got {len(community)}"
        )

    all_cards = list(community) + list(hole)
    if len(all_cards) < HAND_SIZE:
        raise InvalidPoolShape(
            f"Need at least {HAND_SIZE} cards to form a hand, got {len(all_cards)}"
        )
    if len(set(all_cards)) != len(all_cards):
        raise InvalidPoolShape("Duplicate cards in pool")

    return all_cards


def best_hand(community: Sequence[Card], hole: Sequence[Card]) -> HandDescriptor:
    """
    Find the strongest five-card hand from community plus hole cards.

    Args:
        community: 0-5 shared cards
        hole: The player's 2 private cards

    Returns:
        Descriptor of the best hand; among equal hands the first found wins

    Raises:
        InvalidPoolShape: If the pool cannot form a valid hand
    """
    all_cards = validate_pool(community, hole)

    if len(all_cards) == HAND_SIZE:
        return classify(all_cards)

    best = WEAKEST_HAND
    evaluated = 0
    for combo in combinations(all_cards, HAND_SIZE):
        candidate = classify(combo)
        evaluated += 1
        if compare(candidate, best) == Ordering.GREATER:
            best = candidate

    logger.debug(
        f"Best hand from {len(all_cards)} cards ({evaluated} combinations): "
        f"{best.category.name} {list(best.primary_keys)}"
    )
    return best
