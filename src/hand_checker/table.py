"""Card selection state for a hand-checking session."""
import logging
from typing import List, Union

from hand_checker.core.card import Card
from hand_checker.core.deck import Deck
from hand_checker.evaluation.selector import HOLE_SIZE, MAX_COMMUNITY
from hand_checker.evaluation.showdown import ShowdownResult, evaluate_showdown

logger = logging.getLogger(__name__)

COMMUNITY = 'community'
DEFAULT_MAX_PLAYERS = 10

# Three board cards give every two-card hole at least five cards
MIN_COMMUNITY_TO_CHECK = 3

Target = Union[str, int]


class CheckerTable:
    """
    Tracks which cards are on the board and in each player's hole.

    A card may be selected only once across the whole table.

    Attributes:
        community: Board cards (at most five)
        players: Hole cards per seat (at most two each)
        max_players: Seat limit
    """

    def __init__(self, max_players: int = DEFAULT_MAX_PLAYERS):
        if max_players < 1:
            raise ValueError("A table needs at least one seat")
        self.max_players = max_players
        self.community: List[Card] = []
        self.players: List[List[Card]] = [[]]

    def _target_cards(self, target: Target) -> List[Card]:
        if target == COMMUNITY:
            return self.community
        if isinstance(target, int) and not isinstance(target, bool) and 0 <= target < len(self.players):
            return self.players[target]
        raise ValueError(f"Unknown target: {target}")

    def _capacity(self, target: Target) -> int:
        return MAX_COMMUNITY if target == COMMUNITY else HOLE_SIZE

    def add_card(self, card: Card, target: Target = COMMUNITY) -> None:
        """
        Add a card to the board or a player's hole.

        Raises:
            ValueError: If the card is already selected, the target is full,
                or the target is unknown
        """
        cards = self._target_cards(target)
        if card in self.selected_cards():
            raise ValueError(f"Card {card} is already selected")
        if len(cards) >= self._capacity(target):
            raise ValueError(f"{self._target_name(target)} already holds {len(cards)} cards")
        cards.append(card)
        logger.debug(f"Added {card} to {self._target_name(target)}")

    def remove_card(self, card: Card, target: Target = COMMUNITY) -> Card:
        """
        Remove a card from the board or a player's hole.

        Raises:
            ValueError: If the card is not held by the target
        """
        cards = self._target_cards(target)
        try:
            cards.remove(card)
        except ValueError:
            raise ValueError(f"Card {card} not in {self._target_name(target)}")
        return card

    def add_player(self) -> int:
        """
        Open a new, empty seat.

        Returns:
            Index of the new seat

        Raises:
            ValueError: If the table is full
        """
        if len(self.players) >= self.max_players:
            raise ValueError(f"Table is full ({self.max_players} players)")
        self.players.append([])
        return len(self.players) - 1

    def reset(self) -> None:
        """Clear the board and go back to a single empty seat."""
        self.community = []
        self.players = [[]]

    def selected_cards(self) -> List[Card]:
        """Every card on the table, board first."""
        return self.community + [card for hole in self.players for card in hole]

    def available_cards(self) -> List[Card]:
        """Cards that can still be selected, in deck order."""
        selected = set(self.selected_cards())
        return [card for card in Deck().get_cards() if card not in selected]

    def is_ready(self) -> bool:
        """True when every seat has two cards and the board can complete a hand."""
        return (
            len(self.community) >= MIN_COMMUNITY_TO_CHECK
            and all(len(hole) == HOLE_SIZE for hole in self.players)
        )

    def check(self) -> ShowdownResult:
        """
        Evaluate every seat against the board.

        Raises:
            ValueError: If the selection is incomplete
        """
        if not self.is_ready():
            raise ValueError("Selection incomplete: every player needs 2 cards and the board at least 3")
        return evaluate_showdown(self.community, self.players)

    @staticmethod
    def _target_name(target: Target) -> str:
        return 'community' if target == COMMUNITY else f"player {target + 1}"
