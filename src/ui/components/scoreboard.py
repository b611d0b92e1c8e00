"""Scoreboard component — win counters, target and cumulative scores."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MatchState


def render_scoreboard(state: MatchState) -> None:
    """Render the header row above the dice.

    Args:
        state: Current match snapshot (read only).
    """
    cols = st.columns(3)
    with cols[0]:
        st.markdown(f"**H:{state.total_human_wins}/C:{state.total_computer_wins}**")
    with cols[1]:
        if state.result is None:
            st.markdown(f"**Target: {state.target_score}**")
    with cols[2]:
        if state.round_count > 0:
            st.markdown(f"**Scores: {state.human_score}-{state.computer_score}**")


def render_dice_score(dice_total: int, cumulative: int, is_tiebreaker: bool) -> None:
    """Render the roll/total line under a dice tray."""
    if is_tiebreaker:
        st.markdown(f"**Score: {dice_total}**")
    else:
        st.markdown(f"**Roll: {dice_total} | Total: {cumulative}**")
