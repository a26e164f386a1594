# src/taskapp/tasks/task_service.py

from __future__ import annotations

"""
Task service.

Enforces the task lifecycle and coordinates writes:
- tasks go through the injected TaskRepo,
- every lifecycle event appends a Log through the LogRepo,
- assignees are resolved through the UserRepo.

Known limitation: there is no transaction across repos. If the Log write
fails after the Task write, the task stays without its log entry.
"""

import logging
from collections.abc import Callable
from datetime import date

from ..core.errors import TransitionError, ValidationError
from ..core.ports import LogRepo, TaskRepo, UserRepo
from .task_models import Log, Task, TaskStatus, User, status_label

logger = logging.getLogger(__name__)

# Legal single-step moves: current status -> next status.
_NEXT_STATUS: dict[int, int] = {
    TaskStatus.NOT_STARTED: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.DONE,
}


def describe_assignee(task: Task, current_user: User) -> str:
    if task.assignee is None:
        return "No assignee info"
    if task.assignee.code == current_user.code:
        return "Assigned to you"
    return f"Assigned to {task.assignee.name}"


def format_task_line(task: Task, current_user: User) -> str:
    return (
        f"{task.code}. Task: {task.name}, "
        f"{describe_assignee(task, current_user)}, "
        f"Status: {status_label(task.status)}"
    )


class TaskService:
    def __init__(
        self,
        task_repo: TaskRepo,
        log_repo: LogRepo,
        user_repo: UserRepo,
        *,
        enforce_transitions: bool = True,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._tasks = task_repo
        self._logs = log_repo
        self._users = user_repo
        self._enforce_transitions = enforce_transitions
        self._today = today

    def list_all(self, current_user: User) -> list[str]:
        """One display line per task, in store order."""
        return [format_task_line(t, current_user) for t in self._tasks.find_all()]

    def create(self, code: int, name: str, assignee_code: int, current_user: User) -> Task:
        """
        Create a task in NOT_STARTED and log the creation.

        Raises ValidationError (before any write) when the assignee does not exist.
        Code uniqueness is enforced by TaskRepo.save.
        """
        assignee = self._users.find_by_code(assignee_code)
        if assignee is None:
            logger.info("Task create rejected code=%s: unknown assignee=%s", code, assignee_code)
            raise ValidationError("please enter an existing user code")

        task = Task(code=code, name=name, status=TaskStatus.NOT_STARTED, assignee=assignee)
        self._tasks.save(task)
        self._logs.save(
            Log(
                task_code=task.code,
                user_code=current_user.code,
                status=TaskStatus.NOT_STARTED,
                date=self._today(),
            )
        )
        logger.info(
            "Task created code=%s assignee=%s by user=%s", code, assignee.code, current_user.code
        )
        return task

    def change_status(self, code: int, new_status: int, current_user: User) -> Task | None:
        """
        Move a task to new_status and append a Log.

        A missing task is a silent no-op (returns None).
        In strict mode an illegal move raises TransitionError without writing.
        """
        task = self._tasks.find_by_code(code)
        if task is None:
            logger.debug("Status change ignored: task code=%s not found", code)
            return None

        if self._enforce_transitions and not self.can_change_status(task, new_status):
            logger.info(
                "Status change rejected code=%s %s -> %s", code, task.status, new_status
            )
            raise TransitionError(code, task.status, new_status)

        old_status = task.status
        task.status = new_status
        self._tasks.update(task)
        self._logs.save(
            Log(
                task_code=task.code,
                user_code=current_user.code,
                status=new_status,
                date=self._today(),
            )
        )
        logger.info(
            "Task status changed code=%s %s -> %s by user=%s",
            code,
            old_status,
            new_status,
            current_user.code,
        )
        return task

    @staticmethod
    def can_change_status(task: Task, new_status: int) -> bool:
        """True only for NOT_STARTED -> IN_PROGRESS and IN_PROGRESS -> DONE."""
        return task.status in _NEXT_STATUS and _NEXT_STATUS[task.status] == new_status

    def find_by_code(self, code: int) -> Task | None:
        return self._tasks.find_by_code(code)

    def delete(self, code: int) -> None:
        """Delete a DONE task together with all of its logs."""
        task = self._tasks.find_by_code(code)
        if task is None:
            raise ValidationError(f"task {code} does not exist")
        if task.status != TaskStatus.DONE:
            raise ValidationError(f"task {code} is not done and cannot be deleted")

        self._tasks.delete(code)
        self._logs.delete_by_task_code(code)
        logger.info("Task deleted code=%s", code)

    def logs_for(self, code: int) -> list[Log]:
        return self._logs.find_by_task_code(code)
