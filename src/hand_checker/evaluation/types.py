# src/hand_checker/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

from hand_checker.core.card import Card


class HandCategory(IntEnum):
    """Hand categories from weakest to strongest."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


@dataclass(frozen=True)
class HandDescriptor:
    """
    Result of classifying exactly five cards.

    Attributes:
        category: Hand category
        primary_keys: Rank values defining the category's strength, most
            significant first
        kicker_keys: Remaining rank values, used only to break ties
        cards: The five cards behind this descriptor, highest rank first.
            Not part of equality.
    """
    category: HandCategory
    primary_keys: Tuple[int, ...] = ()
    kicker_keys: Tuple[int, ...] = ()
    cards: Tuple[Card, ...] = field(default=(), compare=False)

    @property
    def category_rank(self) -> int:
        return int(self.category)

    def to_dict(self) -> dict:
        """Plain representation for front ends."""
        return {
            'category': self.category.name.lower(),
            'category_rank': self.category_rank,
            'primary_keys': list(self.primary_keys),
            'kicker_keys': list(self.kicker_keys),
            'cards': [str(card) for card in self.cards],
        }
