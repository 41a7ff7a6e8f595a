"""
Exceptions raised by the rules engine.
"""


class RulesError(ValueError):
    """Base class for rule violations caused by bad caller input."""


class EmptyTableError(RulesError):
    """Settlement was requested for a round with no players."""


class InvalidCallerError(RulesError, IndexError):
    """The calling player's index does not point at a seated player."""

    def __init__(self, caller_index, num_players: int):
        self.caller_index = caller_index
        self.num_players = num_players
        super().__init__(
            f"Caller index {caller_index!r} is out of range for {num_players} players"
        )


class DealError(ValueError):
    """The deck cannot cover the requested deal."""
