"""Ordering of classified hands."""
from enum import IntEnum
from itertools import zip_longest
from typing import Sequence

from hand_checker.evaluation.types import HandDescriptor

# Pads the shorter key sequence when two descriptors disagree in length
MISSING_KEY = 0


class Ordering(IntEnum):
    """Outcome of comparing hand a against hand b."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: HandDescriptor, b: HandDescriptor) -> Ordering:
    """
    Compare two hand descriptors.

    Order is lexicographic over category rank, then primary keys, then
    kicker keys, stopping at the first difference.

    Returns:
        Ordering.GREATER if a is stronger, Ordering.LESS if b is stronger,
        Ordering.EQUAL if they tie
    """
    if a.category_rank != b.category_rank:
        return Ordering.GREATER if a.category_rank > b.category_rank else Ordering.LESS

    ordering = _compare_keys(a.primary_keys, b.primary_keys)
    if ordering != Ordering.EQUAL:
        return ordering

    return _compare_keys(a.kicker_keys, b.kicker_keys)


def _compare_keys(keys1: Sequence[int], keys2: Sequence[int]) -> Ordering:
    for k1, k2 in zip_longest(keys1, keys2, fillvalue=MISSING_KEY):
        if k1 != k2:
            return Ordering.GREATER if k1 > k2 else Ordering.LESS
    return Ordering.EQUAL
