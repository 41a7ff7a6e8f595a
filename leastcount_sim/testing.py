"""
Card and hand factories for the test suite.
"""

from itertools import count

from leastcount_sim.engine.cards import Card, Player, Suit

_ids = count()


def make_card(rank, suit=Suit.HEARTS):
    """Create a card with a fresh unique id."""
    return Card(id=f"test-{next(_ids)}-{rank}-{suit.value}", suit=suit, rank=rank)


def make_hand(*ranks, suit=Suit.HEARTS):
    """Create a hand of the given ranks, all in one suit by default."""
    return [make_card(rank, suit) for rank in ranks]


def make_player(player_id, *ranks):
    return Player(id=player_id, hand=make_hand(*ranks))
