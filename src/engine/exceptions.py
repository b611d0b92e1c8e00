"""
Dice Roller - Engine Errors

Errors raised by the turn engine. Both are ValueError subclasses so callers
that already guard engine input with ``except ValueError`` keep working.
"""


class DiceGameError(ValueError):
    """Base class for all turn engine errors."""


class InvalidAction(DiceGameError):
    """An action was requested whose precondition does not hold.

    Raised before any state is produced, so the caller's state is untouched.
    """


class InvalidConfiguration(DiceGameError):
    """A match was configured with an unusable value (e.g. target score <= 0)."""
