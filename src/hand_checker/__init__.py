"""Poker hand classification and best-hand selection."""

from hand_checker.core.card import Card, Rank, Suit, parse_cards
from hand_checker.core.deck import Deck
from hand_checker.evaluation.classifier import classify
from hand_checker.evaluation.comparator import Ordering, compare
from hand_checker.evaluation.exceptions import HandCheckerError, InvalidHandSize, InvalidPoolShape
from hand_checker.evaluation.hand_description import HandDescriber
from hand_checker.evaluation.selector import best_hand
from hand_checker.evaluation.showdown import ShowdownResult, evaluate_showdown
from hand_checker.evaluation.types import HandCategory, HandDescriptor
from hand_checker.table import CheckerTable

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "Deck",
    "classify",
    "best_hand",
    "compare",
    "Ordering",
    "HandCategory",
    "HandDescriptor",
    "HandCheckerError",
    "InvalidHandSize",
    "InvalidPoolShape",
    "HandDescriber",
    "ShowdownResult",
    "evaluate_showdown",
    "CheckerTable",
]
