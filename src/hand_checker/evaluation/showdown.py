"""Winner determination across several players sharing one board."""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from hand_checker.core.card import Card
from hand_checker.evaluation.comparator import Ordering, compare
from hand_checker.evaluation.exceptions import InvalidPoolShape
from hand_checker.evaluation.hand_description import HandDescriber
from hand_checker.evaluation.selector import best_hand
from hand_checker.evaluation.types import HandDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerResult:
    """
    One player's showdown outcome.

    Attributes:
        index: Seat index (0-based)
        hole: The player's hole cards
        descriptor: Best hand the player can make
        is_winner: Whether the hand ties for the strongest
    """
    index: int
    hole: Tuple[Card, ...]
    descriptor: HandDescriptor
    is_winner: bool = False

    def to_dict(self, describer: Optional[HandDescriber] = None) -> dict:
        describer = describer or HandDescriber()
        return {
            'player': self.index,
            'hole': [str(card) for card in self.hole],
            'hand': self.descriptor.to_dict(),
            'name': describer.describe(self.descriptor),
            'description': describer.describe_detailed(self.descriptor),
            'is_winner': self.is_winner,
        }


@dataclass(frozen=True)
class ShowdownResult:
    """Results for every player plus the winning seat indices."""
    results: List[PlayerResult] = field(default_factory=list)
    winners: List[int] = field(default_factory=list)

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1

    def to_dict(self, describer: Optional[HandDescriber] = None) -> dict:
        describer = describer or HandDescriber()
        return {
            'results': [result.to_dict(describer) for result in self.results],
            'winners': list(self.winners),
        }


def evaluate_showdown(community: Sequence[Card], holes: Sequence[Sequence[Card]]) -> ShowdownResult:
    """
    Evaluate every player's best hand and find the winners.

    Args:
        community: Shared cards (0-5)
        holes: Each player's two hole cards, in seat order

    Returns:
        ShowdownResult; winners lists every seat tying for the strongest hand

    Raises:
        InvalidPoolShape: If there are no players, a card appears twice
            anywhere on the table, or a player's pool is malformed
    """
    if not holes:
        raise InvalidPoolShape("Showdown needs at least one player")

    all_cards = list(community) + [card for hole in holes for card in hole]
    if len(set(all_cards)) != len(all_cards):
        raise InvalidPoolShape("Duplicate cards across community and players")

    descriptors = [best_hand(community, hole) for hole in holes]

    best: Optional[HandDescriptor] = None
    winners: List[int] = []
    for index, descriptor in enumerate(descriptors):
        if best is None or compare(descriptor, best) == Ordering.GREATER:
            best = descriptor
            winners = [index]
        elif compare(descriptor, best) == Ordering.EQUAL:
            winners.append(index)

    results = [
        PlayerResult(index, tuple(hole), descriptor, index in winners)
        for index, (hole, descriptor) in enumerate(zip(holes, descriptors))
    ]
    logger.debug(f"Showdown among {len(holes)} player(s): winners {winners}")
    return ShowdownResult(results, winners)
