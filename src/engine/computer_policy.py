"""
Dice Roller - Computer Player Policy

The computer does not optimise its score. After the first roll it keeps each
die with an independent coin flip and rerolls the rest; when the human stops a
turn early it flips one more coin to decide whether to take an extra reroll.
"""

import random

from src.engine.base import DIE_FACES, NUM_DICE, DiceSet, RandomSource


def _source(rng: RandomSource | None) -> RandomSource:
    return random if rng is None else rng


def roll_die(rng: RandomSource | None = None) -> int:
    """Roll a single D6."""
    return _source(rng).randint(1, DIE_FACES)


def roll_all(rng: RandomSource | None = None) -> DiceSet:
    """Roll a fresh set of five dice."""
    source = _source(rng)
    return DiceSet(values=tuple(roll_die(source) for _ in range(NUM_DICE)))


def reroll(
    dice: DiceSet,
    kept_indices: frozenset[int],
    rng: RandomSource | None = None,
) -> DiceSet:
    """
    Redraw every die whose index is not kept.

    Args:
        dice: Current dice
        kept_indices: Positions that retain their value
        rng: Random source (defaults to the ``random`` module)

    Returns:
        New DiceSet with kept faces untouched
    """
    source = _source(rng)
    return DiceSet(values=tuple(
        value if i in kept_indices else roll_die(source)
        for i, value in enumerate(dice.values)
    ))


def choose_kept_indices(rng: RandomSource | None = None) -> frozenset[int]:
    """Keep each die independently with probability 0.5."""
    source = _source(rng)
    return frozenset(i for i in range(NUM_DICE) if source.random() < 0.5)


def wants_extra_reroll(rng: RandomSource | None = None) -> bool:
    """Coin flip deciding whether the computer rerolls after an early stop."""
    return _source(rng).random() < 0.5


def computer_reroll(dice: DiceSet, rng: RandomSource | None = None) -> DiceSet:
    """Pick kept dice by coin flip, then reroll the others."""
    source = _source(rng)
    kept = choose_kept_indices(source)
    return reroll(dice, kept, source)
