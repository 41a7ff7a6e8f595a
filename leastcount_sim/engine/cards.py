"""
Card, joker, player and bot action types for Least Count.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class Suit(Enum):
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"


RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
RANK_VALUES = {
    "A": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9, "10": 10,
    "J": 10, "Q": 10, "K": 10
}


@dataclass(frozen=True)
class Card:
    id: str
    suit: Suit
    rank: str

    @property
    def value(self) -> int:
        """Point value of this card, always the table value for its rank."""
        return RANK_VALUES[self.rank]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "suit": self.suit.value,
            "rank": self.rank,
            "value": self.value,
        }

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value[0]}"


@dataclass(frozen=True)
class Joker:
    """The round's wild card kind. Matching cards are worth nothing."""
    rank: str
    suit: Suit

    @classmethod
    def of(cls, card: Card) -> "Joker":
        return cls(rank=card.rank, suit=card.suit)

    def matches(self, card: Card) -> bool:
        return card.rank == self.rank and card.suit == self.suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value[0]}"


@dataclass
class Player:
    id: int
    hand: list[Card] = field(default_factory=list)


@dataclass(frozen=True)
class RoundScore:
    player_id: int
    round_score: int


class ActionType(Enum):
    TOSS = "TOSS"
    SHOW = "SHOW"
    DISCARD = "DISCARD"


@dataclass(frozen=True)
class Toss:
    """Throw away two cards of the same rank together."""
    card_ids: tuple[str, str]
    type: ClassVar[ActionType] = ActionType.TOSS

    def to_dict(self) -> dict:
        return {"type": self.type.value, "cardIds": list(self.card_ids)}


@dataclass(frozen=True)
class Show:
    """Declare the lowest hand and end the round."""
    type: ClassVar[ActionType] = ActionType.SHOW

    def to_dict(self) -> dict:
        return {"type": self.type.value}


@dataclass(frozen=True)
class Discard:
    """Throw away a single card."""
    card_ids: tuple[str]
    type: ClassVar[ActionType] = ActionType.DISCARD

    def to_dict(self) -> dict:
        return {"type": self.type.value, "cardIds": list(self.card_ids)}


BotAction = Union[Toss, Show, Discard]
