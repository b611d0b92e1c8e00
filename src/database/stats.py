"""
Dice Roller - Win Totals Persistence

Stores how many matches the human and the computer have won. Two backends
share one interface: a local JSON file (default) and the Supabase
`game_stats` table.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from supabase import Client

from src.config.settings import Settings
from src.database.models import StatsFile, WinTotals

logger = logging.getLogger(__name__)


class StatsStore(Protocol):
    """Persistence interface consumed by the game session."""

    def load_totals(self) -> WinTotals: ...

    def save_totals(self, human_wins: int, computer_wins: int) -> WinTotals: ...

    def reset(self) -> WinTotals: ...


def _build_totals(profile: str, human_wins: int, computer_wins: int) -> WinTotals:
    return WinTotals(
        profile=profile,
        human_wins=human_wins,
        computer_wins=computer_wins,
        total_games=human_wins + computer_wins,
        updated_at=datetime.now(timezone.utc),
    )


class LocalStatsStore:
    """Keeps win totals in a JSON file on disk, one record per profile."""

    def __init__(self, path: Path | str, profile: str = "default") -> None:
        self.path = Path(path)
        self.profile = profile

    def _read(self) -> StatsFile:
        if not self.path.exists():
            return StatsFile()
        return StatsFile.model_validate_json(self.path.read_text(encoding="utf-8"))

    def _write(self, stats: StatsFile) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(stats.model_dump_json(indent=2), encoding="utf-8")

    def load_totals(self) -> WinTotals:
        """Read this profile's totals; no record means no games played yet."""
        totals = self._read().profiles.get(self.profile)
        if totals is None:
            return WinTotals(profile=self.profile)
        return totals

    def save_totals(self, human_wins: int, computer_wins: int) -> WinTotals:
        stats = self._read()
        totals = _build_totals(self.profile, human_wins, computer_wins)
        stats.profiles[self.profile] = totals
        self._write(stats)
        logger.debug("Saved win totals for profile %s to %s", self.profile, self.path)
        return totals

    def reset(self) -> WinTotals:
        """Clear this profile's stats; the file goes once no profile is left."""
        stats = self._read()
        stats.profiles.pop(self.profile, None)
        if stats.profiles:
            self._write(stats)
        else:
            self.path.unlink(missing_ok=True)
        logger.info("Cleared win totals for profile %s at %s", self.profile, self.path)
        return WinTotals(profile=self.profile)


class StatsManager:
    """Manages win totals in the Supabase `game_stats` table."""

    def __init__(self, client: Client, profile: str = "default") -> None:
        self.client = client
        self.profile = profile
        self.table = client.table("game_stats")

    def load_totals(self) -> WinTotals:
        """Get the totals row for this profile, or zeros if none exists."""
        data = (
            self.table
            .select("*")
            .eq("profile", self.profile)
            .execute()
        )
        if data.data:
            return WinTotals.model_validate(data.data[0])
        return WinTotals(profile=self.profile)

    def save_totals(self, human_wins: int, computer_wins: int) -> WinTotals:
        """Insert or update the totals row for this profile."""
        totals = _build_totals(self.profile, human_wins, computer_wins)
        data = (
            self.table
            .upsert(totals.model_dump(mode="json"), on_conflict="profile")
            .execute()
        )
        return WinTotals.model_validate(data.data[0])

    def reset(self) -> WinTotals:
        """Delete the totals row for this profile."""
        self.table.delete().eq("profile", self.profile).execute()
        logger.info("Cleared win totals for profile %s", self.profile)
        return WinTotals(profile=self.profile)


def get_stats_store(settings: Settings) -> StatsStore:
    """Build the stats backend selected by ``settings.stats_backend``."""
    if settings.stats_backend == "supabase":
        from src.database.client import get_supabase_client

        return StatsManager(get_supabase_client(), profile=settings.stats_profile)
    return LocalStatsStore(settings.stats_file, profile=settings.stats_profile)
