"""Dice Roller — Streamlit Application Entrypoint."""

from __future__ import annotations

import logging

import streamlit as st

from src.config.settings import configure_logging, get_settings
from src.database.stats import get_stats_store
from src.engine.base import MatchPhase, Outcome
from src.engine.exceptions import InvalidAction
from src.engine.turn_engine import TurnEngine
from src.session.game_session import GameSession
from src.ui.components import (
    render_dice_score,
    render_dice_tray,
    render_scoreboard,
    render_turn_controls,
)

logger = logging.getLogger(__name__)


_RULES = """\
**Goal:** First to the target score wins!

**Each turn:**
- You and the computer each roll five dice
- Keep any dice you like and reroll the rest, up to **3 rolls**
- Press **Score** to stop early, or score after the third roll
- Both dice totals are added to the running scores

**Ties:** if both sides pass the target with equal scores,
roll single tiebreakers until someone rolls higher.
"""

_RESULT_TEXT = {
    Outcome.HUMAN_WIN: "You Win!",
    Outcome.COMPUTER_WIN: "Computer Wins!",
}


def _get_session() -> GameSession:
    """One GameSession per browser session."""
    ss = st.session_state
    if "session" not in ss:
        settings = get_settings()
        ss["session"] = GameSession.from_settings(get_stats_store(settings), settings)
    return ss["session"]


def _render_setup(session: GameSession) -> None:
    st.subheader("Set target score:")
    cols = st.columns([1, 2, 1])
    with cols[0]:
        if st.button("-10", key="btn_target_down", use_container_width=True):
            session.adjust_target(-1)
            st.rerun()
    with cols[1]:
        st.markdown(f"<h2 style='text-align:center'>{session.state.target_score}</h2>", unsafe_allow_html=True)
    with cols[2]:
        if st.button("+10", key="btn_target_up", use_container_width=True):
            session.adjust_target(1)
            st.rerun()

    if st.button("Start Game", key="btn_start", use_container_width=True, type="primary"):
        session.start()
        st.rerun()


def _render_result_banner(session: GameSession) -> None:
    state = session.state
    if state.result is None:
        return
    if state.result is Outcome.TIE:
        text = "Keep rolling to break the tie!" if state.is_tiebreaker else "It's a Tie!"
        st.info(text)
    elif state.result is Outcome.HUMAN_WIN:
        st.success(_RESULT_TEXT[state.result])
    else:
        st.error(_RESULT_TEXT[state.result])


def _render_game(session: GameSession) -> None:
    state = session.state
    _render_result_banner(session)

    suffix = " (Tiebreaker)" if state.is_tiebreaker else ""

    st.markdown(f"#### Computer's Dice{suffix}")
    render_dice_tray("computer", state.computer_dice.values, frozenset(), False, state.rolls_taken)
    render_dice_score(state.computer_dice.total, state.computer_score, state.is_tiebreaker)

    st.divider()

    st.markdown(f"#### Your Dice{suffix}")
    can_keep = TurnEngine.can_toggle_keep(state)
    toggled = render_dice_tray("human", state.human_dice.values, state.kept_indices, can_keep, state.rolls_taken)
    render_dice_score(state.human_dice.total, state.human_score, state.is_tiebreaker)
    if not state.is_tiebreaker and state.rolls_taken > 0:
        st.caption(f"Roll {state.rolls_taken}/{TurnEngine.MAX_ROLLS_PER_TURN}")

    if toggled:
        for idx in toggled:
            session.toggle_keep(idx)
        st.rerun()

    choice = render_turn_controls(state)
    if choice is None:
        return
    try:
        if choice == "score":
            session.score()
        else:
            session.perform_primary()
    except InvalidAction as exc:
        # Stale button from a previous rerun
        logger.warning("Rejected action %s: %s", choice, exc)
        st.warning(str(exc))
        return
    st.rerun()


def _render_sidebar(session: GameSession) -> None:
    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)
        st.divider()
        if session.state.phase is not MatchPhase.SETUP:
            if st.button("Back to setup", key="btn_back", use_container_width=True):
                session.abandon()
                st.rerun()
        if st.button("Reset stats", key="btn_reset_stats", use_container_width=True):
            session.reset_stats()
            st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dice Roller",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    session = _get_session()
    st.title("Dice Game")
    render_scoreboard(session.state)

    if session.state.phase is MatchPhase.SETUP:
        _render_setup(session)
    else:
        _render_game(session)

    _render_sidebar(session)


if __name__ == "__main__":
    main()
