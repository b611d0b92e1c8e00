"""
Dice Roller - Database Models

Pydantic models that mirror the persisted win totals.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class WinTotals(BaseModel):
    """Mirrors one row of the `game_stats` table (or the local stats file)."""

    profile: str = Field(default="default", max_length=64)
    human_wins: int = Field(default=0, ge=0)
    computer_wins: int = Field(default=0, ge=0)
    total_games: int = Field(default=0, ge=0)
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class StatsFile(BaseModel):
    """Layout of the local stats file: one totals record per profile."""

    profiles: dict[str, WinTotals] = Field(default_factory=dict)
