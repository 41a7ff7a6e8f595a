"""
Bot decision policy for Least Count.

Rules are checked in priority order and the first match wins:
1. Toss the first pair found (once per turn)
2. Show when the hand is worth SHOW_THRESHOLD or less
3. Discard the most expensive card
"""

import logging
from typing import Optional

from .cards import Card, Joker, Player, BotAction, Toss, Show, Discard
from .valuation import card_value, hand_value

logger = logging.getLogger(__name__)

SHOW_THRESHOLD = 5


def group_by_rank(hand: list[Card]) -> dict[str, list[Card]]:
    """Group cards by rank, keeping ranks in the order they first appear."""
    groups: dict[str, list[Card]] = {}
    for card in hand:
        groups.setdefault(card.rank, []).append(card)
    return groups


def find_toss(hand: list[Card]) -> Optional[Toss]:
    for cards in group_by_rank(hand).values():
        if len(cards) >= 2:
            return Toss(card_ids=(cards[0].id, cards[1].id))
    return None


def highest_card(hand: list[Card], joker: Optional[Joker] = None) -> Card:
    """Most expensive card in hand; the earliest one wins ties."""
    best = hand[0]
    best_value = -1
    for card in hand:
        value = card_value(card, joker)
        if value > best_value:
            best_value = value
            best = card
    return best


def decide_action(player: Player, joker: Optional[Joker] = None,
                  tossed_this_turn: bool = False) -> BotAction:
    """Pick the bot's next move for this turn."""
    hand = player.hand

    if not tossed_this_turn:
        toss = find_toss(hand)
        if toss is not None:
            logger.debug("Player %s tosses %s", player.id, toss.card_ids)
            return toss

    score = hand_value(hand, joker)
    if score <= SHOW_THRESHOLD:
        logger.debug("Player %s shows with %d", player.id, score)
        return Show()

    card = highest_card(hand, joker)
    logger.debug("Player %s discards %s (hand worth %d)", player.id, card, score)
    return Discard(card_ids=(card.id,))
