"""
Round settlement for Least Count.

When a player shows, every hand is valued and scored:

    caller is the unique lowest hand   -> 0
    caller ties for the lowest hand    -> TIED_CALL_PENALTY
    caller is not the lowest hand      -> FAILED_CALL_PENALTY
    everyone else                      -> their own hand value
"""

import logging
from typing import Optional, Sequence

from .cards import Joker, Player, RoundScore
from .errors import EmptyTableError, InvalidCallerError
from .valuation import hand_value

logger = logging.getLogger(__name__)

TIED_CALL_PENALTY = 25
FAILED_CALL_PENALTY = 50


def caller_score(caller_value: int, lowest: int, winners_count: int) -> int:
    """Score for the player who showed, given the table's lowest value."""
    if caller_value == lowest:
        return 0 if winners_count == 1 else TIED_CALL_PENALTY
    return FAILED_CALL_PENALTY


def settle_round(players: Sequence[Player], caller_index: int,
                 joker: Optional[Joker] = None) -> list[RoundScore]:
    """
    Score a round after a show.

    Args:
        players: Every seated player, in table order
        caller_index: Position of the player who showed in ``players``
        joker: The round's joker, or None

    Returns:
        One RoundScore per player, in the same order as ``players``.

    Raises:
        EmptyTableError: ``players`` is empty
        InvalidCallerError: ``caller_index`` does not point at a player
    """
    if not players:
        raise EmptyTableError("Cannot settle a round with no players")
    if (isinstance(caller_index, bool) or not isinstance(caller_index, int)
            or not 0 <= caller_index < len(players)):
        raise InvalidCallerError(caller_index, len(players))

    values = [hand_value(p.hand, joker) for p in players]
    lowest = min(values)
    winners_count = values.count(lowest)
    caller_value = values[caller_index]

    scores = []
    for index, (player, value) in enumerate(zip(players, values)):
        if index == caller_index:
            value = caller_score(caller_value, lowest, winners_count)
        scores.append(RoundScore(player_id=player.id, round_score=value))

    logger.debug(
        "Settled round: caller=%s caller_value=%d lowest=%d winners=%d scores=%s",
        players[caller_index].id, caller_value, lowest, winners_count,
        [s.round_score for s in scores],
    )
    return scores
