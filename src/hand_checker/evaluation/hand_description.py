"""Human-readable names for classified hands."""
from typing import Dict

from hand_checker.core.card import Rank
from hand_checker.evaluation.types import HandCategory, HandDescriptor

CATEGORY_NAMES: Dict[str, Dict[HandCategory, str]] = {
    'en': {
        HandCategory.ROYAL_FLUSH: 'Royal Flush',
        HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
        HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
        HandCategory.FULL_HOUSE: 'Full House',
        HandCategory.FLUSH: 'Flush',
        HandCategory.STRAIGHT: 'Straight',
        HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
        HandCategory.TWO_PAIR: 'Two Pair',
        HandCategory.ONE_PAIR: 'One Pair',
        HandCategory.HIGH_CARD: 'High Card',
    },
    'ja': {
        HandCategory.ROYAL_FLUSH: 'ロイヤルストレートフラッシュ',
        HandCategory.STRAIGHT_FLUSH: 'ストレートフラッシュ',
        HandCategory.FOUR_OF_A_KIND: 'フォーカード',
        HandCategory.FULL_HOUSE: 'フルハウス',
        HandCategory.FLUSH: 'フラッシュ',
        HandCategory.STRAIGHT: 'ストレート',
        HandCategory.THREE_OF_A_KIND: 'スリーカード',
        HandCategory.TWO_PAIR: 'ツーペア',
        HandCategory.ONE_PAIR: 'ワンペア',
        HandCategory.HIGH_CARD: 'ハイカード',
    },
}

SUPPORTED_LOCALES = tuple(CATEGORY_NAMES)


class HandDescriber:
    """Generates human-readable descriptions for classified hands."""

    def __init__(self, locale: str = 'en'):
        """
        Initialize with a locale.

        Raises:
            ValueError: If the locale has no category names
        """
        if not isinstance(locale, str) or locale not in CATEGORY_NAMES:
            raise ValueError(
                f"Unsupported locale: {locale} (expected one of {', '.join(SUPPORTED_LOCALES)})"
            )
        self.locale = locale
        self.names = CATEGORY_NAMES[locale]

    def describe(self, descriptor: HandDescriptor) -> str:
        """Localized category name."""
        return self.names[descriptor.category]

    def describe_detailed(self, descriptor: HandDescriptor) -> str:
        """
        Detailed English description built from the descriptor's keys,
        e.g. 'Full House, Aces over Kings' or 'Five-high Straight'.
        """
        category = descriptor.category
        keys = [Rank.from_numeric(value) for value in descriptor.primary_keys]

        if category == HandCategory.ROYAL_FLUSH:
            return "Royal Flush"
        elif category == HandCategory.STRAIGHT_FLUSH:
            return f"{keys[0].full_name}-high Straight Flush"
        elif category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {keys[0].plural_name}"
        elif category == HandCategory.FULL_HOUSE:
            return f"Full House, {keys[0].plural_name} over {keys[1].plural_name}"
        elif category == HandCategory.FLUSH:
            return f"{keys[0].full_name}-high Flush"
        elif category == HandCategory.STRAIGHT:
            return f"{keys[0].full_name}-high Straight"
        elif category == HandCategory.THREE_OF_A_KIND:
            return f"Three {keys[0].plural_name}"
        elif category == HandCategory.TWO_PAIR:
            return f"Two Pair, {keys[0].plural_name} and {keys[1].plural_name}"
        elif category == HandCategory.ONE_PAIR:
            return f"Pair of {keys[0].plural_name}"
        return f"{keys[0].full_name} High"
