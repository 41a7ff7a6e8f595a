"""
Tests for round settlement after a show.
"""

import pytest

from leastcount_sim.engine.cards import Joker, Player, Suit
from leastcount_sim.engine.errors import EmptyTableError, InvalidCallerError, RulesError
from leastcount_sim.engine.settlement import (
    settle_round, caller_score, TIED_CALL_PENALTY, FAILED_CALL_PENALTY
)

from leastcount_sim.testing import make_card, make_player


def scores_of(results):
    return [r.round_score for r in results]


class TestSettleRound:

    def test_unique_lowest_caller_scores_zero(self):
        players = [make_player(0, "3"), make_player(1, "10"), make_player(2, "8")]
        assert scores_of(settle_round(players, 0)) == [0, 10, 8]

    def test_tied_lowest_caller_is_penalized(self):
        players = [make_player(0, "5"), make_player(1, "5"), make_player(2, "K", "2")]
        assert scores_of(settle_round(players, 0)) == [TIED_CALL_PENALTY, 5, 12]
        assert TIED_CALL_PENALTY == 25

    def test_failed_call_is_penalized(self):
        players = [make_player(0, "9"), make_player(1, "2"), make_player(2, "7")]
        assert scores_of(settle_round(players, 0)) == [FAILED_CALL_PENALTY, 2, 7]
        assert FAILED_CALL_PENALTY == 50

    def test_output_keeps_player_order_and_ids(self):
        players = [make_player(7, "4"), make_player(3, "A"), make_player(9, "6")]
        results = settle_round(players, 1)
        assert [r.player_id for r in results] == [7, 3, 9]
        assert scores_of(results) == [4, 0, 6]

    def test_tie_between_other_players_does_not_matter(self):
        players = [make_player(0, "2"), make_player(1, "8"), make_player(2, "8")]
        assert scores_of(settle_round(players, 0)) == [0, 8, 8]

    def test_joker_applies_to_every_hand(self):
        caller_hand = [make_card("K", Suit.SPADES), make_card("A", Suit.HEARTS)]
        other_hand = [make_card("3", Suit.CLUBS)]
        players = [Player(id=0, hand=caller_hand), Player(id=1, hand=other_hand)]

        assert scores_of(settle_round(players, 0)) == [50, 3]
        assert scores_of(settle_round(players, 0, Joker("K", Suit.SPADES))) == [0, 3]

    def test_single_player_always_wins(self):
        assert scores_of(settle_round([make_player(0, "K", "Q")], 0)) == [0]

    def test_does_not_mutate_hands(self):
        players = [make_player(0, "2", "3"), make_player(1, "9")]
        before = [list(p.hand) for p in players]
        settle_round(players, 0)
        assert [p.hand for p in players] == before


class TestSettleRoundErrors:

    @pytest.mark.parametrize("caller_index", [3, 10, -1])
    def test_out_of_range_caller_is_rejected(self, caller_index):
        players = [make_player(0, "2"), make_player(1, "3"), make_player(2, "4")]
        with pytest.raises(InvalidCallerError) as exc:
            settle_round(players, caller_index)
        assert exc.value.caller_index == caller_index
        assert exc.value.num_players == 3

    def test_invalid_caller_is_an_index_error(self):
        with pytest.raises(IndexError):
            settle_round([make_player(0, "2")], 1)

    def test_non_integer_caller_is_rejected(self):
        with pytest.raises(InvalidCallerError):
            settle_round([make_player(0, "2"), make_player(1, "3")], True)

    def test_empty_table_is_rejected(self):
        with pytest.raises(EmptyTableError):
            settle_round([], 0)
        with pytest.raises(RulesError):
            settle_round([], 0)


class TestCallerScore:

    def test_cases(self):
        assert caller_score(3, 3, 1) == 0
        assert caller_score(3, 3, 2) == TIED_CALL_PENALTY
        assert caller_score(4, 3, 1) == FAILED_CALL_PENALTY
