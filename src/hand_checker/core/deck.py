"""Deck implementation."""
from typing import Iterable, List, Optional
import random

from .card import Card, Rank, Suit


class Deck:
    """
    The standard 52-card universe.

    Attributes:
        cards: List of cards in the deck
    """

    def __init__(self):
        """Initialize a new, ordered deck."""
        self.cards: List[Card] = []
        self._initialize_deck()

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards, suit by suit."""
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank=rank, suit=suit))

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            random.shuffle(self.cards)

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.

        Raises:
            ValueError: If card not in deck
        """
        try:
            self.cards.remove(card)
        except ValueError:
            raise ValueError(f"Card {card} not in deck")
        return card

    def remove_cards(self, cards: Iterable[Card]) -> List[Card]:
        """Remove specific cards from the deck."""
        return [self.remove_card(card) for card in cards]

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards
