"""
Dice Roller - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Sequence

import pytest

from src.engine.base import DiceSet, MatchState, TurnState


class ScriptedRandom:
    """Deterministic stand-in for ``random.Random``.

    ``randint`` pops scripted die faces, ``random`` pops scripted coin values
    (below 0.5 means keep the die or take the extra reroll).
    Running out of either fails the test, which also proves that no extra
    randomness was consumed.
    """

    def __init__(self, dice: Sequence[int] = (), coins: Sequence[float] = ()) -> None:
        self.dice = list(dice)
        self.coins = list(coins)

    def randint(self, a: int, b: int) -> int:
        assert self.dice, "ScriptedRandom ran out of die faces"
        value = self.dice.pop(0)
        assert a <= value <= b
        return value

    def random(self) -> float:
        assert self.coins, "ScriptedRandom ran out of coin flips"
        return self.coins.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self.dice and not self.coins


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def make_state() -> Callable[..., MatchState]:
    """
    Build an in-progress MatchState from plain values.

    Accepts ``human``/``computer`` dice tuples, ``rolls_taken`` and ``kept``
    alongside any MatchState field.
    """
    def _make(
        human: tuple[int, ...] = (1, 1, 1, 1, 1),
        computer: tuple[int, ...] = (1, 1, 1, 1, 1),
        rolls_taken: int = 0,
        kept: frozenset[int] = frozenset(),
        **fields,
    ) -> MatchState:
        fields.setdefault("round_count", 1)
        return MatchState(
            human_dice=DiceSet(values=human),
            computer_dice=DiceSet(values=computer),
            turn=TurnState(rolls_taken=rolls_taken, kept_indices=frozenset(kept)),
            **fields,
        )

    return _make


# =============================================================================
# DICE TEST DATA
# =============================================================================

@pytest.fixture
def dice_totals() -> dict[str, tuple[tuple[int, ...], int]]:
    """
    Common five-dice sets with their totals.

    Returns:
        Dict mapping name to (dice_values, expected_total)
    """
    return {
        "all_ones": ((1, 1, 1, 1, 1), 5),
        "all_sixes": ((6, 6, 6, 6, 6), 30),
        "straight": ((1, 2, 3, 4, 5), 15),
        "mixed": ((6, 1, 4, 2, 3), 16),
    }
