"""
Dice Roller - Game Session

High-level wrapper that owns one MatchState and drives the stateless
TurnEngine. Seeds win totals from the stats store when opened and flushes
them each time a match produces its winner.
Provides a single ``perform_primary`` entry point for the UI's main button.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from src.config.settings import Settings
from src.engine.base import (
    DEFAULT_TARGET_SCORE,
    MIN_TARGET_SCORE,
    TARGET_SCORE_STEP,
    MatchPhase,
    MatchState,
    RandomSource,
    TurnAction,
)
from src.engine.exceptions import InvalidAction
from src.engine.turn_engine import TurnEngine
from src.database.stats import StatsStore

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the current match for one player and persists win totals.

    All game rules live in TurnEngine; this class only swaps in the state
    each action returns and talks to the stats store between turns.
    """

    def __init__(
        self,
        store: StatsStore,
        rng: RandomSource | None = None,
        *,
        target_score: int = DEFAULT_TARGET_SCORE,
        target_step: int = TARGET_SCORE_STEP,
        target_min: int = MIN_TARGET_SCORE,
    ) -> None:
        self._store = store
        self._rng = rng
        self._target_step = target_step
        self._target_min = target_min
        self._totals_loaded = False

        human_wins, computer_wins = self._load_totals()
        self.state: MatchState = TurnEngine.setup(
            target_score,
            total_human_wins=human_wins,
            total_computer_wins=computer_wins,
        )

    @classmethod
    def from_settings(cls, store: StatsStore, settings: Settings, rng: RandomSource | None = None) -> GameSession:
        """Build a session using the target score options in ``settings``."""
        return cls(
            store,
            rng,
            target_score=settings.target_score_default,
            target_step=settings.target_score_step,
            target_min=settings.target_score_min,
        )

    # -- Setup --------------------------------------------------------------

    def adjust_target(self, steps: int) -> MatchState:
        """Raise or lower the target score on the setup screen."""
        if self.state.phase is not MatchPhase.SETUP:
            raise InvalidAction("Cannot change the target score once a match has started.")
        target = TurnEngine.adjust_target_score(
            self.state.target_score,
            steps,
            step=self._target_step,
            minimum=self._target_min,
        )
        self.state = TurnEngine.setup(
            target,
            total_human_wins=self.state.total_human_wins,
            total_computer_wins=self.state.total_computer_wins,
        )
        return self.state

    def start(self) -> MatchState:
        if self.state.phase is not MatchPhase.SETUP:
            raise InvalidAction("Cannot start a match: return to setup first.")
        self.state = TurnEngine.start_match(self.state.target_score, previous=self.state)
        logger.info("Match started, target %d", self.state.target_score)
        return self.state

    # -- Turn actions -------------------------------------------------------

    def roll(self) -> MatchState:
        self.state = TurnEngine.roll_or_reroll(self.state, self._rng)
        return self.state

    def toggle_keep(self, dice_index: int) -> MatchState:
        self.state = TurnEngine.toggle_keep(self.state, dice_index)
        return self.state

    def score(self) -> MatchState:
        return self._apply(TurnEngine.score_turn(self.state, self._rng))

    def roll_tiebreaker(self) -> MatchState:
        return self._apply(TurnEngine.resolve_tiebreaker_roll(self.state, self._rng))

    def new_game(self) -> MatchState:
        self.state = TurnEngine.new_game(self.state)
        return self.state

    def abandon(self) -> MatchState:
        """Discard the current match (navigating away) and return to setup.

        A tiebreaker abandoned this way counts for nobody.
        """
        if self.state.phase is not MatchPhase.SETUP:
            logger.info(
                "Match abandoned at %d-%d", self.state.human_score, self.state.computer_score
            )
        self.state = TurnEngine.setup(
            self.state.target_score,
            total_human_wins=self.state.total_human_wins,
            total_computer_wins=self.state.total_computer_wins,
        )
        return self.state

    def perform_primary(self) -> MatchState:
        """Run whatever the main button currently stands for."""
        action = TurnEngine.primary_action(self.state)
        if action is TurnAction.START:
            return self.start()
        if action is TurnAction.NEW_GAME:
            return self.new_game()
        if action is TurnAction.ROLL_TIEBREAKER:
            return self.roll_tiebreaker()
        if action is TurnAction.SCORE_AND_NEXT_TURN:
            return self.score()
        return self.roll()

    # -- Stats --------------------------------------------------------------

    def reset_stats(self) -> MatchState:
        """Clear persisted win totals and zero the counters in memory.

        If the store cannot be cleared the counters are left as they are.
        """
        try:
            self._store.reset()
        except Exception:
            logger.exception("Could not reset win totals")
            return self.state
        self._totals_loaded = True
        self.state = replace(self.state, total_human_wins=0, total_computer_wins=0)
        return self.state

    # -- Internals ----------------------------------------------------------

    def _apply(self, new_state: MatchState) -> MatchState:
        decided = new_state.total_games != self.state.total_games
        tie_started = new_state.is_tiebreaker and not self.state.is_tiebreaker
        self.state = new_state
        if tie_started:
            logger.info("Scores tied at %d, tiebreaker started", new_state.human_score)
        if decided:
            logger.info(
                "Match finished: %s (%d-%d)",
                new_state.result.value if new_state.result else "none",
                new_state.human_score,
                new_state.computer_score,
            )
            self._save_totals()
        return self.state

    def _load_totals(self) -> tuple[int, int]:
        try:
            totals = self._store.load_totals()
        except Exception:
            logger.exception("Could not load win totals; starting from zero")
            return 0, 0
        self._totals_loaded = True
        logger.debug("Loaded win totals %d/%d", totals.human_wins, totals.computer_wins)
        return totals.human_wins, totals.computer_wins

    def _save_totals(self) -> None:
        # Counters that never saw the stored history must not overwrite it
        if not self._totals_loaded:
            logger.warning("Win totals were not loaded; not saving over stored totals")
            return
        try:
            self._store.save_totals(self.state.total_human_wins, self.state.total_computer_wins)
        except Exception:
            logger.exception("Could not save win totals")
