# src/taskapp/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Stored as a plain integer. Legal moves are single steps forward:
    NOT_STARTED -> IN_PROGRESS -> DONE.
    """

    NOT_STARTED = 0
    IN_PROGRESS = 1
    DONE = 2


STATUS_LABELS: dict[int, str] = {
    TaskStatus.NOT_STARTED: "Not Started",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}
UNKNOWN_STATUS_LABEL = "Unknown"


def status_label(status: int) -> str:
    """Human-readable label; never raises for out-of-range values."""
    return STATUS_LABELS.get(status, UNKNOWN_STATUS_LABEL)


@dataclass(slots=True, frozen=True)
class User:
    code: int
    name: str


@dataclass(slots=True)
class Task:
    code: int
    name: str
    status: int = TaskStatus.NOT_STARTED
    assignee: User | None = None


@dataclass(slots=True, frozen=True)
class Log:
    """Append-only audit record of a task lifecycle event."""

    task_code: int
    user_code: int
    status: int
    date: date
