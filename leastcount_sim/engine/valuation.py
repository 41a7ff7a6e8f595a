"""
Hand valuation. Cards matching the round's joker count for nothing.
"""

from typing import Iterable, Optional

from .cards import Card, Joker


def card_value(card: Card, joker: Optional[Joker] = None) -> int:
    if joker is not None and joker.matches(card):
        return 0
    return card.value


def hand_value(hand: Iterable[Card], joker: Optional[Joker] = None) -> int:
    """Total points held in a hand. An empty hand is worth 0."""
    return sum(card_value(card, joker) for card in hand)
