"""
Dice Roller Session Layer.

Caller-owned holder of the single match state, its random source and the
win totals store.
"""

from src.session.game_session import GameSession

__all__ = ["GameSession"]
