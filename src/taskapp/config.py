# src/taskapp/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a default, so a bare checkout runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

ENV_PREFIX = "TASKAPP"

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


def _env_list(name: str, default: List[str]) -> List[str]:
    """Comma-separated list; items keep inner spaces ("1:John Doe, 2:Jane")."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_seed_users(items: List[str]) -> List[Tuple[int, str]]:
    """Parse "code:name" items; malformed entries are skipped."""
    out: List[Tuple[int, str]] = []
    for item in items:
        code_s, sep, name = item.partition(":")
        if not sep or not name.strip():
            continue
        try:
            out.append((int(code_s), name.strip()))
        except ValueError:
            continue
    return out


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path
    log_dir: Path

    # ---- Session ----
    user_code: int
    seed_users: List[Tuple[int, str]]

    # ---- Lifecycle ----
    strict_transitions: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskapp") or "taskapp"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskapp"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "taskapp.sqlite3")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        user_code = _env_int(_k("USER_CODE"), 1)
        seed_users = parse_seed_users(_env_list(_k("SEED_USERS"), ["1:admin"]))

        strict_transitions = _env_bool(_k("STRICT_TRANSITIONS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            log_dir=log_dir,
            user_code=user_code,
            seed_users=seed_users,
            strict_transitions=strict_transitions,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
