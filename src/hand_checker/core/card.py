"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union


class Suit(Enum):
    """Card suits, valued by their one-letter wire code."""
    SPADES = 'S'
    HEARTS = 'H'
    DIAMONDS = 'D'
    CLUBS = 'C'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Display glyph for the suit."""
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_SUIT_SYMBOLS = {
    Suit.SPADES: '♠',
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.CLUBS: '♣',
}


class Rank(Enum):
    """Card ranks, valued by their wire token."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = '10'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def numeric(self) -> int:
        """Numeric value used for ordering (2-14, ace high)."""
        return _RANK_NUMERIC[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        if self == Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    @classmethod
    def from_numeric(cls, value: int) -> 'Rank':
        """Look up the rank for a numeric value (2-14)."""
        for rank, numeric in _RANK_NUMERIC.items():
            if numeric == value:
                return rank
        raise ValueError(f"No rank with numeric value {value}")


_RANK_NUMERIC = {rank: index + 2 for index, rank in enumerate(Rank)}

# 'T' is a common shorthand for ten
_RANK_ALIASES = {'T': Rank.TEN}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal when rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (spades, hearts, diamonds, clubs)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'S10' for Ten of spades."""
        return f"{self.suit}{self.rank}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    @property
    def value(self) -> int:
        """Numeric rank value (2-14)."""
        return self.rank.numeric

    @property
    def display(self) -> str:
        """Glyph format, e.g. '♠10'."""
        return f"{self.suit.symbol}{self.rank}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Suit code followed by rank token, e.g. 'SA', 'H10', 'dq'.
                      'T' is accepted for ten.

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if not isinstance(card_str, str):
            raise ValueError(f"Invalid card string: {card_str!r}")

        token = card_str.strip().upper()
        if len(token) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")

        suit_str, rank_str = token[0], token[1:]

        try:
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"Invalid suit in: {card_str}")

        if rank_str in _RANK_ALIASES:
            return cls(rank=_RANK_ALIASES[rank_str], suit=suit)
        try:
            rank = Rank(rank_str)
        except ValueError:
            raise ValueError(f"Invalid rank in: {card_str}")

        return cls(rank=rank, suit=suit)


def parse_cards(cards: Union[str, Iterable[Union[str, Card]]]) -> List[Card]:
    """
    Parse several cards at once.

    Accepts a whitespace or comma separated string ("SA SK, SQ") or an
    iterable of tokens and/or Card instances.

    Raises:
        ValueError: If any token is invalid
    """
    if isinstance(cards, str):
        tokens = cards.replace(',', ' ').split()
    else:
        try:
            tokens = list(cards)
        except TypeError:
            raise ValueError(f"Expected card tokens, got {cards!r}")

    parsed = []
    for i, token in enumerate(tokens):
        if isinstance(token, Card):
            parsed.append(token)
            continue
        try:
            parsed.append(Card.from_string(token))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1}: {e}")
    return parsed
