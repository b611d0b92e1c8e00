"""
Dice Roller - Input Validation Utilities

Provides validation functions for turn engine inputs. All validators
either return validated data or raise a descriptive exception.
"""

from src.engine.base import NUM_DICE
from src.engine.exceptions import InvalidAction, InvalidConfiguration


def validate_keep_index(index: int) -> int:
    """
    Validate the index of a die the human wants to keep or release.

    Args:
        index: Position of the die (0-4)

    Returns:
        Validated index

    Raises:
        InvalidAction: If the index is not a die position
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidAction(f"Dice index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < NUM_DICE):
        raise InvalidAction(
            f"Dice index {index} is out of range. Must be between 0 and {NUM_DICE - 1}."
        )

    return index


def validate_score(score: int) -> int:
    """
    Validate a cumulative score or win counter.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_target_score(score: int) -> int:
    """
    Validate target score for a match.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        InvalidConfiguration: If score is not a positive integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidConfiguration(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise InvalidConfiguration(f"Target score must be positive, got {score}.")

    return score
