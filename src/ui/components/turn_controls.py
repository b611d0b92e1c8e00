"""Turn control buttons — Roll/Reroll/Score/Tiebreaker/New Game."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MatchState
from src.engine.turn_engine import TurnEngine


def render_turn_controls(state: MatchState) -> str | None:
    """Render the main action button and, mid-turn, the early Score button.

    Returns:
        ``"primary"``, ``"score"``, or ``None`` if no action taken.
    """
    action = TurnEngine.primary_action(state)
    show_score = TurnEngine.can_score_early(state)

    cols = st.columns(2 if show_score else 1)

    with cols[0]:
        if st.button(
            action.value,
            key=f"btn_primary_{state.round_count}_{state.rolls_taken}",
            use_container_width=True,
            type="primary",
        ):
            return "primary"

    if show_score:
        with cols[1]:
            if st.button(
                "Score",
                key=f"btn_score_{state.round_count}_{state.rolls_taken}",
                use_container_width=True,
            ):
                return "score"

    return None
