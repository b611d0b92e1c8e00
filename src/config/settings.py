"""
Dice Roller - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from src.engine.base import DEFAULT_TARGET_SCORE, MIN_TARGET_SCORE, TARGET_SCORE_STEP

_SECRET_KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "STATS_BACKEND",
    "STATS_PROFILE",
    "DEBUG",
    "LOG_LEVEL",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Match setup
    target_score_default: int = Field(default=DEFAULT_TARGET_SCORE, gt=0)
    target_score_step: int = Field(default=TARGET_SCORE_STEP, gt=0)
    target_score_min: int = Field(default=MIN_TARGET_SCORE, gt=0)

    # Win totals persistence
    stats_backend: Literal["local", "supabase"] = "local"
    stats_file: Path = Path(".dice_roller_stats.json")
    stats_profile: str = "default"

    # Supabase (only needed when stats_backend == "supabase")
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _check_supabase_credentials(self) -> "Settings":
        if self.stats_backend == "supabase" and not (self.supabase_url and self.supabase_anon_key):
            raise ValueError(
                "SUPABASE_URL and SUPABASE_ANON_KEY are required when STATS_BACKEND=supabase."
            )
        if self.target_score_default < self.target_score_min:
            raise ValueError(
                f"TARGET_SCORE_DEFAULT ({self.target_score_default}) is below "
                f"TARGET_SCORE_MIN ({self.target_score_min})."
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings. DEBUG overrides LOG_LEVEL."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
