"""
Deck management for Least Count.
Builds the 52-card deck and shuffles it with an injectable random source.
"""

import random
from typing import Optional, Sequence, TypeVar

from .cards import Card, Suit, RANKS

T = TypeVar("T")


def create_deck() -> list[Card]:
    """Create an unshuffled deck, one card per (suit, rank)."""
    cards = []
    counter = 0
    for suit in Suit:
        for rank in RANKS:
            cards.append(Card(id=f"card-{counter}-{rank}-{suit.value}", suit=suit, rank=rank))
            counter += 1
    return cards


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Fisher-Yates shuffle into a new list. The input is left untouched.

    Args:
        items: Cards (or anything else) to shuffle
        rng: Object with a ``randint(a, b)`` method, e.g. a seeded
            ``random.Random``. Defaults to the ``random`` module.
    """
    rng = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def build_shuffled_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Create a full deck in uniformly random order."""
    return shuffle(create_deck(), rng)
