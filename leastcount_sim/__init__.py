"""
Least Count Rules Engine
"""

from .engine.cards import Card, Joker, Player, RoundScore, Suit, BotAction, Toss, Show, Discard
from .engine.deck import build_shuffled_deck, shuffle
from .engine.valuation import hand_value
from .engine.settlement import settle_round
from .engine.bot import decide_action
from .engine.errors import RulesError, EmptyTableError, InvalidCallerError

__version__ = "0.1.0"
