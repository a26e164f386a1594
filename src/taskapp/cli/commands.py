# src/taskapp/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import AppError, ValidationError
from ..core.state import AppState
from ..tasks.task_models import status_label

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        AppError messages are returned as the reply.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except AppError as e:
            logger.debug("Command /%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _int_arg(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{what} must be a number, got {raw!r}") from None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    lines = state.service.list_all(state.current_user)
    if not lines:
        return "No tasks yet. Use /add to create one."
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add CODE ASSIGNEE_CODE NAME...
    """
    if len(args) < 3:
        return "Usage: /add CODE ASSIGNEE_CODE NAME"
    code = _int_arg(args[0], "task code")
    assignee_code = _int_arg(args[1], "assignee code")
    name = " ".join(args[2:])
    task = state.service.create(code, name, assignee_code, state.current_user)
    return f'Task {task.code} "{task.name}" created.'


def cmd_status(state: AppState, args: list[str]) -> str:
    """
    /status CODE NEW_STATUS   (0 = Not Started, 1 = In Progress, 2 = Done)
    """
    if len(args) != 2:
        return "Usage: /status CODE NEW_STATUS (0=Not Started, 1=In Progress, 2=Done)"
    code = _int_arg(args[0], "task code")
    new_status = _int_arg(args[1], "status")
    task = state.service.change_status(code, new_status, state.current_user)
    if task is None:
        return f"Task {code} not found; nothing changed."
    return f"Task {task.code} is now {status_label(task.status)}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete CODE"
    code = _int_arg(args[0], "task code")
    state.service.delete(code)
    return f"Task {code} and its logs were deleted."


def cmd_logs(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /logs CODE"
    code = _int_arg(args[0], "task code")
    logs = state.service.logs_for(code)
    if not logs:
        return f"No logs for task {code}."
    lines = [f"Logs for task {code}:"]
    for log in logs:
        lines.append(
            f"  {log.date.isoformat()} user {log.user_code}: {status_label(log.status)}"
        )
    return "\n".join(lines)


def cmd_users(state: AppState, args: list[str]) -> str:
    users = state.users.find_all()
    if not users:
        return "No users."
    return "\n".join(f"{u.code}. {u.name}" for u in users)


def cmd_whoami(state: AppState, args: list[str]) -> str:
    u = state.current_user
    return f"Logged in as {u.name} (code {u.code})."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Create a task: /add CODE ASSIGNEE_CODE NAME.")
registry.register(
    "status", cmd_status, help_text="Change task status: /status CODE NEW_STATUS."
)
registry.register("delete", cmd_delete, help_text="Delete a done task: /delete CODE.")
registry.register("logs", cmd_logs, help_text="Show the status history of a task: /logs CODE.")
registry.register("users", cmd_users, help_text="List known users.")
registry.register("whoami", cmd_whoami, help_text="Show the acting user.")
