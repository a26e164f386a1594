# src/taskapp/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskapp.log"

# Loggers that only reach the console at WARNING+ (their INFO is bookkeeping).
QUIET_ON_CONSOLE = ("taskapp.tasks.task_store",)


def _console_allows(record: logging.LogRecord) -> bool:
    if not record.name.startswith("taskapp."):
        return record.levelno >= logging.ERROR
    if record.name in QUIET_ON_CONSOLE:
        return record.levelno >= logging.WARNING
    return True


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map "debug"/"INFO"/... to a logging level; unknown names fall back to default."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(settings) -> Path:
    """
    Route logs for a console session.

    The console shows taskapp logs at settings.log_level (store chatter and
    third-party records only when they matter); the file under settings.log_dir
    gets everything. Replaces any existing root handlers. Returns the log file path.
    """
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(getattr(settings, "log_level", None)))
    console.addFilter(_console_allows)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.DEBUG)
    for handler in (console, file_handler):
        handler.setFormatter(fmt)
        root.addHandler(handler)

    logging.captureWarnings(True)
    return log_file
