"""
Dice Roller - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so every engine
action returns a new state instead of mutating the one it was given.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence


NUM_DICE = 5
DIE_FACES = 6
MAX_ROLLS_PER_TURN = 3

DEFAULT_TARGET_SCORE = 101
TARGET_SCORE_STEP = 10
MIN_TARGET_SCORE = 10


class RandomSource(Protocol):
    """Anything shaped like ``random.Random`` (or the ``random`` module)."""

    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


class Outcome(Enum):
    """Result of a match."""
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"


class MatchPhase(Enum):
    """Match-level lifecycle."""
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    TIEBREAKER = "tiebreaker"
    FINISHED = "finished"


class TurnAction(Enum):
    """Primary action the caller should offer next."""
    START = "Start Game"
    ROLL = "Roll Dice"
    REROLL = "Reroll"
    SCORE_AND_NEXT_TURN = "Score & Next Turn"
    ROLL_TIEBREAKER = "Roll Tiebreaker"
    NEW_GAME = "New Game"


@dataclass(frozen=True)
class DiceSet:
    """
    Immutable set of five D6 faces, in display order.

    Attributes:
        values: Tuple of exactly five face values (1-6)
    """
    values: tuple[int, ...] = (1,) * NUM_DICE

    def __post_init__(self) -> None:
        """Validate dice count and face range."""
        if len(self.values) != NUM_DICE:
            raise ValueError(
                f"A dice set holds exactly {NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def total(self) -> int:
        """Sum of all faces; this is the score of the set."""
        return sum(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceSet":
        """Create a DiceSet from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class TurnState:
    """
    Per-turn progress. Reset at the start of every turn.

    Attributes:
        rolls_taken: Rolls taken so far this turn (0-3)
        kept_indices: Human dice held back from the next reroll
    """
    rolls_taken: int = 0
    kept_indices: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not (0 <= self.rolls_taken <= MAX_ROLLS_PER_TURN):
            raise ValueError(
                f"rolls_taken must be between 0 and {MAX_ROLLS_PER_TURN}, "
                f"got {self.rolls_taken}."
            )
        for idx in self.kept_indices:
            if not (0 <= idx < NUM_DICE):
                raise ValueError(
                    f"Kept index {idx} is out of range. "
                    f"Must be between 0 and {NUM_DICE - 1}."
                )

    @property
    def rolls_remaining(self) -> int:
        return MAX_ROLLS_PER_TURN - self.rolls_taken

    @property
    def can_reroll(self) -> bool:
        """True between the first and last roll of a turn."""
        return 0 < self.rolls_taken < MAX_ROLLS_PER_TURN


@dataclass(frozen=True)
class MatchState:
    """
    Complete state of a human vs. computer match.

    Attributes:
        target_score: Cumulative score needed to win
        human_score: Human's cumulative score
        computer_score: Computer's cumulative score
        round_count: 0 on the setup screen, then the current turn number
        total_human_wins: Matches won by the human across sessions
        total_computer_wins: Matches won by the computer across sessions
        is_tiebreaker: Whether single-roll tiebreaker mode is active
        result: Outcome once decided (TIE while a tiebreaker runs)
        human_dice: Human's current dice
        computer_dice: Computer's current dice
        turn: Progress within the current turn
    """
    target_score: int = DEFAULT_TARGET_SCORE
    human_score: int = 0
    computer_score: int = 0
    round_count: int = 0
    total_human_wins: int = 0
    total_computer_wins: int = 0
    is_tiebreaker: bool = False
    result: Outcome | None = None
    human_dice: DiceSet = field(default_factory=DiceSet)
    computer_dice: DiceSet = field(default_factory=DiceSet)
    turn: TurnState = field(default_factory=TurnState)

    @property
    def phase(self) -> MatchPhase:
        if self.is_tiebreaker:
            return MatchPhase.TIEBREAKER
        if self.result is not None:
            return MatchPhase.FINISHED
        if self.round_count == 0:
            return MatchPhase.SETUP
        return MatchPhase.IN_PROGRESS

    @property
    def total_games(self) -> int:
        """Completed matches; every completed match has exactly one winner."""
        return self.total_human_wins + self.total_computer_wins

    @property
    def rolls_taken(self) -> int:
        return self.turn.rolls_taken

    @property
    def kept_indices(self) -> frozenset[int]:
        return self.turn.kept_indices

    @property
    def rolls_remaining(self) -> int:
        return self.turn.rolls_remaining
