"""
Dice Roller - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest
from src.engine.base import (
    MAX_ROLLS_PER_TURN,
    DiceSet,
    MatchPhase,
    MatchState,
    Outcome,
    TurnState,
)
from src.engine.exceptions import DiceGameError, InvalidAction, InvalidConfiguration
from src.engine.validators import (
    validate_keep_index,
    validate_score,
    validate_target_score,
)


class TestDiceSet:
    """Tests for DiceSet dataclass."""

    def test_default_shows_all_ones(self):
        dice = DiceSet()
        assert dice.values == (1, 1, 1, 1, 1)

    def test_totals(self, dice_totals):
        for values, expected in dice_totals.values():
            assert DiceSet(values=values).total == expected

    def test_len_and_index(self):
        dice = DiceSet(values=(6, 5, 4, 3, 2))
        assert len(dice) == 5
        assert dice[0] == 6
        assert dice[4] == 2

    def test_from_sequence(self):
        dice = DiceSet.from_sequence([2, 3, 4, 5, 6])
        assert dice.values == (2, 3, 4, 5, 6)

    def test_wrong_count_raises(self):
        with pytest.raises(ValueError, match="exactly 5 dice"):
            DiceSet(values=(1, 2, 3))

    def test_invalid_face_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 7"):
            DiceSet(values=(1, 2, 3, 4, 7))

    def test_zero_face_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 0"):
            DiceSet(values=(0, 1, 2, 3, 4))

    def test_immutable(self):
        dice = DiceSet()
        with pytest.raises(AttributeError):
            dice.values = (2, 2, 2, 2, 2)


class TestTurnState:
    """Tests for TurnState dataclass."""

    def test_defaults(self):
        turn = TurnState()
        assert turn.rolls_taken == 0
        assert turn.kept_indices == frozenset()
        assert turn.rolls_remaining == MAX_ROLLS_PER_TURN

    @pytest.mark.parametrize("rolls,expected", [(0, False), (1, True), (2, True), (3, False)])
    def test_can_reroll(self, rolls, expected):
        assert TurnState(rolls_taken=rolls).can_reroll is expected

    def test_rolls_above_max_raise(self):
        with pytest.raises(ValueError, match="rolls_taken"):
            TurnState(rolls_taken=4)

    def test_negative_rolls_raise(self):
        with pytest.raises(ValueError, match="rolls_taken"):
            TurnState(rolls_taken=-1)

    def test_kept_index_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            TurnState(rolls_taken=1, kept_indices=frozenset({5}))


class TestMatchState:
    """Tests for MatchState phases and derived values."""

    def test_default_is_setup(self):
        assert MatchState().phase is MatchPhase.SETUP

    def test_in_progress(self):
        assert MatchState(round_count=1).phase is MatchPhase.IN_PROGRESS

    def test_finished(self):
        state = MatchState(round_count=4, result=Outcome.HUMAN_WIN)
        assert state.phase is MatchPhase.FINISHED

    def test_tiebreaker(self):
        state = MatchState(round_count=4, result=Outcome.TIE, is_tiebreaker=True)
        assert state.phase is MatchPhase.TIEBREAKER

    def test_total_games(self):
        state = MatchState(total_human_wins=3, total_computer_wins=4)
        assert state.total_games == 7

    def test_turn_shortcuts(self):
        state = MatchState(turn=TurnState(rolls_taken=2, kept_indices=frozenset({1})))
        assert state.rolls_taken == 2
        assert state.kept_indices == frozenset({1})


class TestExceptions:
    """Both engine errors are ValueErrors."""

    def test_hierarchy(self):
        assert issubclass(InvalidAction, DiceGameError)
        assert issubclass(InvalidConfiguration, DiceGameError)
        assert issubclass(DiceGameError, ValueError)


class TestValidators:
    """Tests for validation helpers."""

    @pytest.mark.parametrize("index", [0, 4])
    def test_keep_index_bounds(self, index):
        assert validate_keep_index(index) == index

    @pytest.mark.parametrize("index", [-1, 5])
    def test_keep_index_out_of_range(self, index):
        with pytest.raises(InvalidAction, match="out of range"):
            validate_keep_index(index)

    def test_keep_index_bool_rejected(self):
        with pytest.raises(InvalidAction, match="must be an integer"):
            validate_keep_index(True)

    def test_score_negative(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_score(-1)

    def test_target_score_valid(self):
        assert validate_target_score(101) == 101

    @pytest.mark.parametrize("target", [0, -10])
    def test_target_score_not_positive(self, target):
        with pytest.raises(InvalidConfiguration, match="must be positive"):
            validate_target_score(target)

    def test_target_score_not_int(self):
        with pytest.raises(InvalidConfiguration, match="must be an integer"):
            validate_target_score(50.5)
