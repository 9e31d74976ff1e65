# src/watchlist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is persisted: DATA_DIR only holds the log file.
- Real environment variables win over values from .env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "WATCHLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    title: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Watchlist seed ----
    seed_count: int
    seed_label: str

    # ---- Connector flags ----
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "watchlist").strip() or "watchlist"
        title = _env(_k("TITLE"), "My WatchList")
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/watchlist"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        seed_count = max(0, _env_int(_k("SEED_COUNT"), 3))
        seed_label = _env(_k("SEED_LABEL"), "Movie #{i}")
        # A template without {i} (or with other fields) would break seeding.
        try:
            seed_label.format(i=0)
        except (KeyError, IndexError, ValueError):
            seed_label = "Movie #{i}"

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        return Settings(
            app_name=app_name,
            title=title,
            log_level=log_level,
            data_dir=data_dir,
            log_to_file=log_to_file,
            seed_count=seed_count,
            seed_label=seed_label,
            console_enabled=console_enabled,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
