"""Dice tray component — renders five dice with keep toggles."""

from __future__ import annotations

import streamlit as st

_FACES = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}


def render_dice_tray(
    owner: str,
    dice: tuple[int, ...],
    kept_indices: frozenset[int],
    can_keep: bool,
    rolls_taken: int,
) -> set[int]:
    """Render a row of dice and, for the human, keep/release buttons.

    Args:
        owner: ``"human"`` or ``"computer"``; used in widget keys.
        dice: Current face values.
        kept_indices: Indices the human is keeping for the next reroll.
        can_keep: Whether keep buttons should be shown.
        rolls_taken: Rolls taken this turn (used in button keys).

    Returns:
        Set of indices whose keep state was toggled (empty if nothing changed).
    """
    html_parts = ['<div class="dice-tray">']
    for i, val in enumerate(dice):
        classes = ["die", owner]
        if i in kept_indices:
            classes.append("held")
        html_parts.append(
            f'<span class="{" ".join(classes)}" style="font-size:3.5rem;">{_FACES[val]}</span>'
        )
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    toggled: set[int] = set()
    if not can_keep:
        return toggled

    st.caption("Tap dice to keep for reroll")
    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            if i in kept_indices:
                key = f"release_{owner}_{i}_r{rolls_taken}"
                if st.button("Kept", key=key, use_container_width=True, type="primary"):
                    toggled.add(i)
            else:
                key = f"keep_{owner}_{i}_r{rolls_taken}"
                if st.button("Keep", key=key, use_container_width=True):
                    toggled.add(i)

    return toggled
