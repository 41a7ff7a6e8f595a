"""
Least Count rules engine components.
"""

from .cards import (Card, Joker, Player, RoundScore, Suit, RANKS, RANK_VALUES,
                    ActionType, BotAction, Toss, Show, Discard)
from .deck import create_deck, shuffle, build_shuffled_deck
from .valuation import card_value, hand_value
from .settlement import settle_round, TIED_CALL_PENALTY, FAILED_CALL_PENALTY
from .bot import decide_action, SHOW_THRESHOLD
from .errors import RulesError, EmptyTableError, InvalidCallerError, DealError
from .table import TableConfig, DealtRound, deal_round
