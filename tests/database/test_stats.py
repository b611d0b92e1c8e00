"""Tests for src/database/stats.py — win totals persistence."""

from unittest.mock import MagicMock, patch

import pytest

from src.config.settings import Settings
from src.database.models import StatsFile, WinTotals
from src.database.stats import LocalStatsStore, StatsManager, get_stats_store


class TestWinTotals:
    def test_defaults(self):
        totals = WinTotals()
        assert totals.human_wins == 0
        assert totals.computer_wins == 0
        assert totals.total_games == 0

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            WinTotals(human_wins=-1)

    def test_stats_file_starts_empty(self):
        assert StatsFile().profiles == {}


class TestLocalStatsStore:
    def test_missing_file_loads_zeros(self, tmp_path):
        store = LocalStatsStore(tmp_path / "stats.json")
        totals = store.load_totals()
        assert (totals.human_wins, totals.computer_wins) == (0, 0)

    def test_save_then_load(self, tmp_path):
        store = LocalStatsStore(tmp_path / "stats.json", profile="alice")
        saved = store.save_totals(3, 5)
        assert saved.total_games == 8

        loaded = LocalStatsStore(tmp_path / "stats.json", profile="alice").load_totals()
        assert loaded.human_wins == 3
        assert loaded.computer_wins == 5
        assert loaded.total_games == 8
        assert loaded.profile == "alice"

    def test_profiles_are_kept_apart(self, tmp_path):
        path = tmp_path / "stats.json"
        LocalStatsStore(path, profile="alice").save_totals(3, 5)
        LocalStatsStore(path, profile="bob").save_totals(1, 0)

        bob = LocalStatsStore(path, profile="bob").load_totals()
        alice = LocalStatsStore(path, profile="alice").load_totals()
        assert (bob.human_wins, bob.computer_wins) == (1, 0)
        assert (alice.human_wins, alice.computer_wins) == (3, 5)

    def test_unknown_profile_loads_zeros(self, tmp_path):
        path = tmp_path / "stats.json"
        LocalStatsStore(path, profile="alice").save_totals(3, 5)
        totals = LocalStatsStore(path, profile="carol").load_totals()
        assert totals.profile == "carol"
        assert totals.total_games == 0

    def test_reset_keeps_other_profiles(self, tmp_path):
        path = tmp_path / "stats.json"
        LocalStatsStore(path, profile="alice").save_totals(3, 5)
        LocalStatsStore(path, profile="bob").save_totals(1, 0)

        LocalStatsStore(path, profile="bob").reset()
        assert path.exists()
        assert LocalStatsStore(path, profile="bob").load_totals().total_games == 0
        assert LocalStatsStore(path, profile="alice").load_totals().total_games == 8

    def test_creates_parent_directory(self, tmp_path):
        store = LocalStatsStore(tmp_path / "nested" / "dir" / "stats.json")
        store.save_totals(1, 0)
        assert (tmp_path / "nested" / "dir" / "stats.json").exists()

    def test_reset_removes_file(self, tmp_path):
        path = tmp_path / "stats.json"
        store = LocalStatsStore(path)
        store.save_totals(2, 2)
        totals = store.reset()
        assert not path.exists()
        assert totals.total_games == 0

    def test_reset_without_file_is_noop(self, tmp_path):
        LocalStatsStore(tmp_path / "stats.json").reset()  # should not raise


@pytest.fixture
def mock_client():
    """Mock Supabase client whose query chain returns a configurable response."""
    client = MagicMock()
    table = client.table.return_value
    # Every builder method returns the same table mock so chains resolve
    for method in ("select", "eq", "upsert", "delete"):
        getattr(table, method).return_value = table
    return client


class TestStatsManager:
    def test_uses_game_stats_table(self, mock_client):
        StatsManager(mock_client)
        mock_client.table.assert_called_once_with("game_stats")

    def test_load_existing_row(self, mock_client):
        table = mock_client.table.return_value
        table.execute.return_value = MagicMock(data=[
            {"profile": "default", "human_wins": 4, "computer_wins": 1, "total_games": 5},
        ])
        totals = StatsManager(mock_client).load_totals()

        table.eq.assert_called_with("profile", "default")
        assert totals.human_wins == 4
        assert totals.computer_wins == 1

    def test_load_without_row(self, mock_client):
        mock_client.table.return_value.execute.return_value = MagicMock(data=[])
        totals = StatsManager(mock_client, profile="bob").load_totals()
        assert totals.profile == "bob"
        assert totals.total_games == 0

    def test_save_upserts_by_profile(self, mock_client):
        table = mock_client.table.return_value
        table.execute.return_value = MagicMock(data=[
            {"profile": "default", "human_wins": 2, "computer_wins": 3, "total_games": 5},
        ])
        totals = StatsManager(mock_client).save_totals(2, 3)

        payload = table.upsert.call_args.args[0]
        assert payload["human_wins"] == 2
        assert payload["computer_wins"] == 3
        assert payload["total_games"] == 5
        assert table.upsert.call_args.kwargs == {"on_conflict": "profile"}
        assert totals.total_games == 5

    def test_reset_deletes_row(self, mock_client):
        table = mock_client.table.return_value
        StatsManager(mock_client, profile="carol").reset()
        table.delete.assert_called_once()
        table.eq.assert_called_with("profile", "carol")


class TestGetStatsStore:
    def test_local_backend(self, tmp_path):
        settings = Settings(stats_backend="local", stats_file=tmp_path / "s.json")
        store = get_stats_store(settings)
        assert isinstance(store, LocalStatsStore)
        assert store.path == tmp_path / "s.json"

    @patch("src.database.client.get_supabase_client")
    def test_supabase_backend(self, mock_get_client):
        settings = Settings(
            stats_backend="supabase",
            supabase_url="https://example.supabase.co",
            supabase_anon_key="anon",
            stats_profile="team",
        )
        store = get_stats_store(settings)
        assert isinstance(store, StatsManager)
        assert store.profile == "team"
        mock_get_client.assert_called_once()
