"""Errors raised for malformed evaluation input."""


class HandCheckerError(ValueError):
    """Base class for evaluation input errors."""


class InvalidHandSize(HandCheckerError):
    """Raised when a hand to classify does not hold exactly five cards."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Hand classification requires exactly 5 cards, got {size}")


class InvalidPoolShape(HandCheckerError):
    """Raised when community and hole cards cannot form a hand."""
