# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskapp.core.state import AppState
from taskapp.tasks.task_models import User
from taskapp.tasks.task_service import TaskService

from .fakes import FakeLogRepo, FakeTaskRepo, FakeUserRepo

TODAY = date(2024, 5, 17)

ALICE = User(code=10, name="Alice")
BOB = User(code=20, name="Bob")


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskapp-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        db_path=tmp_path / "taskapp.sqlite3",
        log_dir=tmp_path,
        user_code=10,
        seed_users=[(10, "Alice"), (20, "Bob")],
        strict_transitions=True,
    )


@pytest.fixture()
def user_repo() -> FakeUserRepo:
    return FakeUserRepo(users={ALICE.code: ALICE, BOB.code: BOB})


@pytest.fixture()
def task_repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def log_repo() -> FakeLogRepo:
    return FakeLogRepo()


@pytest.fixture()
def service(task_repo, log_repo, user_repo) -> TaskService:
    return TaskService(task_repo, log_repo, user_repo, today=lambda: TODAY)


@pytest.fixture()
def state(settings, service, user_repo) -> AppState:
    """AppState wired with in-memory fakes, acting as Alice."""
    return AppState(settings=settings, service=service, users=user_repo, current_user=ALICE)
