"""
Table setup for running a single round outside a real game server.
Deals hands from a shuffled deck and turns up the joker.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .bot import decide_action
from .cards import Card, Joker, Player
from .deck import build_shuffled_deck
from .errors import DealError
from .valuation import hand_value

logger = logging.getLogger(__name__)


@dataclass
class TableConfig:
    """Configuration for dealing a round."""
    num_players: int = 4
    hand_size: int = 7
    seed: Optional[int] = None

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass
class DealtRound:
    """Hands, joker and remaining stock for one round."""
    players: list[Player]
    joker: Joker
    joker_card: Card
    stock: list[Card] = field(default_factory=list)

    def summary(self, tossed: Optional[set] = None) -> list[dict]:
        """
        Per-player rows for display.

        Args:
            tossed: Ids of players who already tossed this turn
        """
        tossed = tossed or set()
        rows = []
        for player in self.players:
            action = decide_action(player, self.joker, player.id in tossed)
            rows.append({
                "player": player.id,
                "hand": " ".join(str(c) for c in player.hand),
                "value": hand_value(player.hand, self.joker),
                "bot_action": action.to_dict(),
            })
        return rows


def deal_round(config: TableConfig = None, rng: Optional[random.Random] = None) -> DealtRound:
    """
    Deal a round: hands go out one card at a time, then the next card is
    turned up as the joker.

    Args:
        config: Table settings, defaults to TableConfig()
        rng: Random source, defaults to one seeded from config.seed
    """
    config = config or TableConfig()
    if config.num_players < 1 or config.hand_size < 0:
        raise DealError(f"Invalid table: {config.num_players} players, "
                        f"{config.hand_size} cards each")

    deck = build_shuffled_deck(rng or config.make_rng())
    needed = config.num_players * config.hand_size + 1
    if needed > len(deck):
        raise DealError(f"Cannot deal {needed} cards, only {len(deck)} in the deck")

    players = [Player(id=i) for i in range(config.num_players)]
    position = 0
    for _ in range(config.hand_size):
        for player in players:
            player.hand.append(deck[position])
            position += 1

    joker_card = deck[position]
    stock = deck[position + 1:]
    logger.debug("Dealt %d hands of %d, joker %s, %d cards in stock",
                 config.num_players, config.hand_size, joker_card, len(stock))
    return DealtRound(players=players, joker=Joker.of(joker_card),
                      joker_card=joker_card, stock=stock)
