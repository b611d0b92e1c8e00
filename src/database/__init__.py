"""
Dice Roller Database Layer.

Persistence of historical win totals (local JSON file or Supabase).
"""

from src.database.client import get_supabase_client
from src.database.models import StatsFile, WinTotals
from src.database.stats import LocalStatsStore, StatsManager, StatsStore, get_stats_store

__all__ = [
    "get_supabase_client",
    "get_stats_store",
    "LocalStatsStore",
    "StatsFile",
    "StatsManager",
    "StatsStore",
    "WinTotals",
]
