"""
Dice Roller - Turn Engine

Human vs. computer, five D6 each. Every turn both sides roll, the human may
keep dice and reroll the rest up to three rolls in total, then both dice
totals are added to the cumulative scores. First side to reach the target
wins; if both reach it on the same turn with equal scores, single-roll
tiebreakers are played until the totals differ.

All methods are stateless class methods operating on immutable data.
State is passed in and returned, never stored.
"""

from dataclasses import replace
from typing import ClassVar

from src.engine import computer_policy
from src.engine.base import (
    DEFAULT_TARGET_SCORE,
    MAX_ROLLS_PER_TURN,
    MIN_TARGET_SCORE,
    TARGET_SCORE_STEP,
    DiceSet,
    MatchPhase,
    MatchState,
    Outcome,
    RandomSource,
    TurnAction,
    TurnState,
)
from src.engine.exceptions import InvalidAction
from src.engine.validators import validate_keep_index, validate_score, validate_target_score


class TurnEngine:
    """Stateless engine for the human vs. computer dice game."""

    MAX_ROLLS_PER_TURN: ClassVar[int] = MAX_ROLLS_PER_TURN

    # -- Setup --------------------------------------------------------------

    @classmethod
    def setup(
        cls,
        target_score: int = DEFAULT_TARGET_SCORE,
        *,
        total_human_wins: int = 0,
        total_computer_wins: int = 0,
    ) -> MatchState:
        """Create the pre-match state shown on the setup screen."""
        return MatchState(
            target_score=validate_target_score(target_score),
            total_human_wins=validate_score(total_human_wins),
            total_computer_wins=validate_score(total_computer_wins),
        )

    @classmethod
    def adjust_target_score(
        cls,
        target_score: int,
        steps: int,
        *,
        step: int = TARGET_SCORE_STEP,
        minimum: int = MIN_TARGET_SCORE,
    ) -> int:
        """
        Move a target score by whole steps.

        A decrement that would drop below ``minimum`` is ignored, so the
        target never goes under the minimum.

        Args:
            target_score: Current target
            steps: Positive to raise, negative to lower
            step: Size of one step
            minimum: Smallest allowed target

        Returns:
            New target score
        """
        proposed = target_score + steps * step
        if proposed < minimum:
            return target_score
        return proposed

    @classmethod
    def start_match(cls, target_score: int, previous: MatchState | None = None) -> MatchState:
        """
        Start a match with fresh scores.

        Args:
            target_score: Cumulative score needed to win (> 0)
            previous: Earlier state whose win totals carry over

        Returns:
            MatchState in the IN_PROGRESS phase at round 1

        Raises:
            InvalidConfiguration: If target_score is not a positive integer
        """
        validate_target_score(target_score)
        human_wins = previous.total_human_wins if previous is not None else 0
        computer_wins = previous.total_computer_wins if previous is not None else 0
        return MatchState(
            target_score=target_score,
            round_count=1,
            total_human_wins=human_wins,
            total_computer_wins=computer_wins,
        )

    # -- Turn actions -------------------------------------------------------

    @classmethod
    def roll_or_reroll(cls, state: MatchState, rng: RandomSource | None = None) -> MatchState:
        """
        Roll all dice, or reroll the ones not kept.

        The first roll of a turn rolls all five dice for both sides. Later
        rolls redraw human dice outside ``kept_indices``; the computer keeps
        each die on a coin flip and rerolls the rest.

        Raises:
            InvalidAction: Outside an in-progress turn with rolls left
        """
        cls._require_phase(state, MatchPhase.IN_PROGRESS, "roll")
        rolls_taken = state.turn.rolls_taken
        if rolls_taken >= cls.MAX_ROLLS_PER_TURN:
            raise InvalidAction(
                f"Cannot roll: all {cls.MAX_ROLLS_PER_TURN} rolls taken this turn; score the turn."
            )

        if rolls_taken == 0:
            human_dice = computer_policy.roll_all(rng)
            computer_dice = computer_policy.roll_all(rng)
        else:
            human_dice = computer_policy.reroll(state.human_dice, state.turn.kept_indices, rng)
            computer_dice = computer_policy.computer_reroll(state.computer_dice, rng)

        return replace(
            state,
            human_dice=human_dice,
            computer_dice=computer_dice,
            turn=replace(state.turn, rolls_taken=rolls_taken + 1),
        )

    @classmethod
    def toggle_keep(cls, state: MatchState, dice_index: int) -> MatchState:
        """
        Flip whether a human die is kept for the next reroll.

        Raises:
            InvalidAction: If keeping is not possible now or the index is bad
        """
        cls._require_phase(state, MatchPhase.IN_PROGRESS, "toggle keep")
        if not state.turn.can_reroll:
            raise InvalidAction(
                "Cannot toggle keep: dice can only be kept between the first "
                f"and roll {cls.MAX_ROLLS_PER_TURN} of a turn "
                f"(rolls taken: {state.turn.rolls_taken})."
            )
        validate_keep_index(dice_index)

        kept = state.turn.kept_indices ^ {dice_index}
        return replace(state, turn=replace(state.turn, kept_indices=frozenset(kept)))

    @classmethod
    def score_turn(cls, state: MatchState, rng: RandomSource | None = None) -> MatchState:
        """
        Bank both dice totals and start the next turn.

        Forced once all rolls are taken; allowed earlier when the human
        stops. On an early stop the computer, if it still has a spare
        reroll, takes one more reroll on a coin flip before scoring.
        A spare reroll means the human stopped after the first roll;
        stopping after the second roll scores the computer's dice as they are.

        Raises:
            InvalidAction: Before the first roll or outside an in-progress match
        """
        cls._require_phase(state, MatchPhase.IN_PROGRESS, "score turn")
        rolls_taken = state.turn.rolls_taken
        if rolls_taken == 0:
            raise InvalidAction("Cannot score turn: roll the dice first.")

        computer_dice = state.computer_dice
        if (
            rolls_taken < cls.MAX_ROLLS_PER_TURN - 1
            and computer_policy.wants_extra_reroll(rng)
        ):
            computer_dice = computer_policy.computer_reroll(computer_dice, rng)

        human_score = state.human_score + state.human_dice.total
        computer_score = state.computer_score + computer_dice.total
        outcome = cls.match_outcome(human_score, computer_score, state.target_score)

        scored = replace(
            state,
            human_score=human_score,
            computer_score=computer_score,
            computer_dice=computer_dice,
            turn=TurnState(),
        )
        if outcome is None:
            return replace(scored, round_count=state.round_count + 1)
        if outcome is Outcome.TIE:
            return replace(scored, result=Outcome.TIE, is_tiebreaker=True)
        return cls._record_win(scored, outcome)

    # -- Tiebreaker ---------------------------------------------------------

    @classmethod
    def resolve_tiebreaker_roll(cls, state: MatchState, rng: RandomSource | None = None) -> MatchState:
        """
        Roll fresh dice for both sides and compare totals.

        Equal totals leave the tiebreaker running; otherwise the higher total
        wins the match.

        Raises:
            InvalidAction: If no tiebreaker is in progress
        """
        cls._require_phase(state, MatchPhase.TIEBREAKER, "roll tiebreaker")

        human_dice = computer_policy.roll_all(rng)
        computer_dice = computer_policy.roll_all(rng)
        rolled = replace(state, human_dice=human_dice, computer_dice=computer_dice)

        if human_dice.total == computer_dice.total:
            return rolled

        winner = Outcome.HUMAN_WIN if human_dice.total > computer_dice.total else Outcome.COMPUTER_WIN
        return cls._record_win(replace(rolled, is_tiebreaker=False), winner)

    # -- Match lifecycle ----------------------------------------------------

    @classmethod
    def new_game(cls, state: MatchState) -> MatchState:
        """
        Leave a finished match and return to setup, keeping win totals.

        Raises:
            InvalidAction: If the match has not finished
        """
        cls._require_phase(state, MatchPhase.FINISHED, "start a new game")
        return MatchState(
            target_score=state.target_score,
            total_human_wins=state.total_human_wins,
            total_computer_wins=state.total_computer_wins,
            human_dice=state.human_dice,
            computer_dice=state.computer_dice,
        )

    @classmethod
    def match_outcome(cls, human_score: int, computer_score: int, target_score: int) -> Outcome | None:
        """
        Decide whether cumulative scores end the match.

        Args:
            human_score: Human's cumulative score
            computer_score: Computer's cumulative score
            target_score: Score needed to win

        Returns:
            None while neither side has reached the target, TIE when both
            reached it with equal scores, otherwise the winner
        """
        human_reached = human_score >= target_score
        computer_reached = computer_score >= target_score

        if human_reached and computer_reached:
            if human_score > computer_score:
                return Outcome.HUMAN_WIN
            if computer_score > human_score:
                return Outcome.COMPUTER_WIN
            return Outcome.TIE
        if human_reached:
            return Outcome.HUMAN_WIN
        if computer_reached:
            return Outcome.COMPUTER_WIN
        return None

    # -- Queries ------------------------------------------------------------

    @classmethod
    def primary_action(cls, state: MatchState) -> TurnAction:
        """The main button the caller should offer for this state."""
        phase = state.phase
        if phase is MatchPhase.SETUP:
            return TurnAction.START
        if phase is MatchPhase.FINISHED:
            return TurnAction.NEW_GAME
        if phase is MatchPhase.TIEBREAKER:
            return TurnAction.ROLL_TIEBREAKER
        if state.turn.rolls_taken >= cls.MAX_ROLLS_PER_TURN:
            return TurnAction.SCORE_AND_NEXT_TURN
        if state.turn.rolls_taken == 0:
            return TurnAction.ROLL
        return TurnAction.REROLL

    @classmethod
    def can_toggle_keep(cls, state: MatchState) -> bool:
        return state.phase is MatchPhase.IN_PROGRESS and state.turn.can_reroll

    @classmethod
    def can_score_early(cls, state: MatchState) -> bool:
        """True when the human may stop the turn before the last roll."""
        return state.phase is MatchPhase.IN_PROGRESS and state.turn.can_reroll

    # -- Internals ----------------------------------------------------------

    @classmethod
    def _record_win(cls, state: MatchState, winner: Outcome) -> MatchState:
        if winner is Outcome.HUMAN_WIN:
            return replace(state, result=winner, total_human_wins=state.total_human_wins + 1)
        return replace(state, result=winner, total_computer_wins=state.total_computer_wins + 1)

    @classmethod
    def _require_phase(cls, state: MatchState, expected: MatchPhase, action: str) -> None:
        phase = state.phase
        if phase is expected:
            return
        reasons = {
            MatchPhase.SETUP: "no match has started",
            MatchPhase.IN_PROGRESS: "the match is still in progress",
            MatchPhase.TIEBREAKER: "a tiebreaker is in progress",
            MatchPhase.FINISHED: "the match is finished; start a new game",
        }
        raise InvalidAction(f"Cannot {action}: {reasons[phase]}.")
