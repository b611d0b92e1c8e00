"""
Dice Roller Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles rolling, keeping, turn scoring, match end and tiebreakers.
"""

from src.engine.base import (
    DiceSet,
    MatchPhase,
    MatchState,
    Outcome,
    RandomSource,
    TurnAction,
    TurnState,
)
from src.engine.exceptions import DiceGameError, InvalidAction, InvalidConfiguration
from src.engine.turn_engine import TurnEngine

__all__ = [
    # Data Classes
    "DiceSet",
    "MatchState",
    "TurnState",
    # Enums
    "MatchPhase",
    "Outcome",
    "TurnAction",
    # Protocols
    "RandomSource",
    # Errors
    "DiceGameError",
    "InvalidAction",
    "InvalidConfiguration",
    # Engines
    "TurnEngine",
]
