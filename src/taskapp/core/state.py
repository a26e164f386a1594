# src/taskapp/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import User
from ..tasks.task_service import TaskService
from .ports import UserRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    service: TaskService
    users: UserRepo

    # The acting user for this session; stamped on every log entry.
    current_user: User
