# src/taskapp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskService depends on these Protocols instead of the SQLite stores,
so tests can pass in-memory fakes.
"""

from typing import Protocol

from ..tasks.task_models import Log, Task, User


class TaskRepo(Protocol):
    def find_all(self) -> list[Task]: ...
    def find_by_code(self, code: int) -> Task | None: ...
    def save(self, task: Task) -> None: ...
    def update(self, task: Task) -> None: ...
    def delete(self, code: int) -> None: ...


class LogRepo(Protocol):
    def save(self, log: Log) -> None: ...
    def find_by_task_code(self, code: int) -> list[Log]: ...
    def delete_by_task_code(self, code: int) -> None: ...


class UserRepo(Protocol):
    def find_by_code(self, code: int) -> User | None: ...
    def find_all(self) -> list[User]: ...
