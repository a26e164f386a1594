# src/taskapp/core/errors.py

from __future__ import annotations


class AppError(Exception):
    """Recoverable failure whose message is meant to be shown to the user."""


class ValidationError(AppError):
    """Input refers to something that does not exist or is not allowed."""


class TransitionError(AppError):
    """Requested status change is not a single step forward."""

    def __init__(self, code: int, current: int, requested: int) -> None:
        super().__init__(
            f"task {code}: cannot change status from {current} to {requested}"
        )
        self.code = code
        self.current = current
        self.requested = requested
