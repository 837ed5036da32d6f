"""Test helper functions."""
from typing import List

from hand_checker.core.card import Card, parse_cards
from hand_checker.evaluation.classifier import classify
from hand_checker.evaluation.types import HandDescriptor


def cards(text: str) -> List[Card]:
    """Build cards from space separated tokens, e.g. 'SA H10 DQ'."""
    return parse_cards(text)


def hand(text: str) -> HandDescriptor:
    """Classify five cards given as tokens."""
    return classify(parse_cards(text))
