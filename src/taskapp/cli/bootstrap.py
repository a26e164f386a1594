# src/taskapp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the SQLite stores and seeds reference users,
- wires TaskService and the acting user into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import ValidationError
from ..core.state import AppState
from ..tasks.task_service import TaskService
from ..tasks.task_store import LogStore, TaskStore, UserStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def seed_users(users: UserStore, seeds) -> int:
    """Insert configured users that are not in the store yet. Returns how many were added."""
    added = 0
    for code, name in seeds:
        if users.find_by_code(code) is None:
            users.add_user(code, name)
            added += 1
    if added:
        logger.info("Seeded %d user(s)", added)
    return added


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    Raises ValidationError if the configured acting user does not exist.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    users = UserStore(settings.db_path)
    seed_users(users, getattr(settings, "seed_users", []))

    current_user = users.find_by_code(settings.user_code)
    if current_user is None:
        raise ValidationError(f"acting user code {settings.user_code} does not exist")

    service = TaskService(
        TaskStore(settings.db_path),
        LogStore(settings.db_path),
        users,
        enforce_transitions=settings.strict_transitions,
    )
    logger.info(
        "Session user=%s (%s) strict_transitions=%s",
        current_user.code,
        current_user.name,
        settings.strict_transitions,
    )
    return AppState(settings=settings, service=service, users=users, current_user=current_user)
