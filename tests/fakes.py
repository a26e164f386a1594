# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field, replace

from taskapp.tasks.task_models import Log, Task, User


@dataclass(slots=True)
class FakeUserRepo:
    """In-memory UserRepo."""

    users: dict[int, User] = field(default_factory=dict)

    def find_by_code(self, code: int) -> User | None:
        return self.users.get(code)

    def find_all(self) -> list[User]:
        return [self.users[k] for k in sorted(self.users)]


class FakeTaskRepo:
    """
    In-memory TaskRepo that records every write for assertions.

    Reads hand out copies so the service cannot mutate stored state
    without calling update().
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: dict[int, Task] = {t.code: t for t in tasks or []}
        self.saved: list[Task] = []
        self.updated: list[Task] = []
        self.deleted: list[int] = []

    def find_all(self) -> list[Task]:
        return [replace(self.tasks[k]) for k in sorted(self.tasks)]

    def find_by_code(self, code: int) -> Task | None:
        t = self.tasks.get(code)
        return replace(t) if t is not None else None

    def save(self, task: Task) -> None:
        self.saved.append(replace(task))
        self.tasks[task.code] = replace(task)

    def update(self, task: Task) -> None:
        self.updated.append(replace(task))
        self.tasks[task.code] = replace(task)

    def delete(self, code: int) -> None:
        self.deleted.append(code)
        self.tasks.pop(code, None)

    @property
    def writes(self) -> int:
        return len(self.saved) + len(self.updated) + len(self.deleted)


@dataclass(slots=True)
class FakeLogRepo:
    """In-memory append-only LogRepo."""

    logs: list[Log] = field(default_factory=list)
    deleted_for: list[int] = field(default_factory=list)

    def save(self, log: Log) -> None:
        self.logs.append(log)

    def find_by_task_code(self, code: int) -> list[Log]:
        return [log for log in self.logs if log.task_code == code]

    def delete_by_task_code(self, code: int) -> None:
        self.deleted_for.append(code)
        self.logs = [log for log in self.logs if log.task_code != code]
