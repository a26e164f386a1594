# src/taskapp/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from datetime import date
from pathlib import Path

from ..core.errors import ValidationError
from .task_models import Log, Task, User

logger = logging.getLogger(__name__)


class _SQLiteStore:
    """
    Shared SQLite plumbing for the task app stores.

    All three stores may point at the same file; each creates the full
    schema if missing, so construction order does not matter.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "taskapp.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    code INTEGER PRIMARY KEY,
                    name TEXT NOT NULL
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    code INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    status INTEGER NOT NULL DEFAULT 0,
                    assignee_code INTEGER
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    task_code INTEGER NOT NULL,
                    user_code INTEGER NOT NULL,
                    status INTEGER NOT NULL,
                    date TEXT NOT NULL
                )
                """
            )
            cur.execute("CREATE INDEX IF NOT EXISTS idx_logs_task ON logs(task_code)")
            conn.commit()
        finally:
            conn.close()

    def _count(self, table: str) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
            return int(n)
        finally:
            conn.close()


class UserStore(_SQLiteStore):
    """SQLite user store (reference data)."""

    def __init__(self, db_path: str | Path = "taskapp.sqlite3") -> None:
        super().__init__(db_path)
        logger.info("UserStore ready db=%s total=%s", self._db_path, self.count_users())

    def count_users(self) -> int:
        return self._count("users")

    def add_user(self, code: int, name: str) -> User:
        if not name or not name.strip():
            raise ValidationError("user name is required")
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO users(code, name) VALUES (?, ?)", (int(code), name.strip())
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise ValidationError(f"user code {code} already exists") from e
        finally:
            conn.close()
        logger.debug("User added code=%s", code)
        return User(code=int(code), name=name.strip())

    def find_by_code(self, code: int) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT code, name FROM users WHERE code = ?", (int(code),)
            ).fetchone()
            return User(code=int(row["code"]), name=str(row["name"])) if row else None
        finally:
            conn.close()

    def find_all(self) -> list[User]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT code, name FROM users ORDER BY code ASC").fetchall()
            return [User(code=int(r["code"]), name=str(r["name"])) for r in rows]
        finally:
            conn.close()


class TaskStore(_SQLiteStore):
    """
    SQLite task store.

    The assignee is stored as a user code and joined back into a User
    on read. A dangling assignee code reads as "no assignee".
    """

    _SELECT = """
        SELECT t.code, t.name, t.status,
               u.code AS user_code, u.name AS user_name
        FROM tasks t
        LEFT JOIN users u ON u.code = t.assignee_code
    """

    def __init__(self, db_path: str | Path = "taskapp.sqlite3") -> None:
        super().__init__(db_path)
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        assignee = None
        if row["user_code"] is not None:
            assignee = User(code=int(row["user_code"]), name=str(row["user_name"]))
        return Task(
            code=int(row["code"]),
            name=str(row["name"]),
            status=int(row["status"]),
            assignee=assignee,
        )

    def count_tasks(self) -> int:
        return self._count("tasks")

    def find_all(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute(self._SELECT + " ORDER BY t.code ASC").fetchall()
            return [self._row_to_task(r) for r in rows]
        finally:
            conn.close()

    def find_by_code(self, code: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute(self._SELECT + " WHERE t.code = ?", (int(code),)).fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def save(self, task: Task) -> None:
        assignee_code = task.assignee.code if task.assignee is not None else None
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO tasks(code, name, status, assignee_code) VALUES (?, ?, ?, ?)",
                (int(task.code), task.name, int(task.status), assignee_code),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise ValidationError(f"task code {task.code} already exists") from e
        finally:
            conn.close()
        logger.debug("Task saved code=%s status=%s", task.code, task.status)

    def update(self, task: Task) -> None:
        assignee_code = task.assignee.code if task.assignee is not None else None
        conn = self._get_conn()
        try:
            conn.execute(
                "UPDATE tasks SET name = ?, status = ?, assignee_code = ? WHERE code = ?",
                (task.name, int(task.status), assignee_code, int(task.code)),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, code: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM tasks WHERE code = ?", (int(code),))
            conn.commit()
        finally:
            conn.close()


class LogStore(_SQLiteStore):
    """Append-only log store. Dates are stored as ISO strings."""

    def save(self, log: Log) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO logs(task_code, user_code, status, date) VALUES (?, ?, ?, ?)",
                (int(log.task_code), int(log.user_code), int(log.status), log.date.isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def find_by_task_code(self, code: int) -> list[Log]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT task_code, user_code, status, date FROM logs "
                "WHERE task_code = ? ORDER BY id ASC",
                (int(code),),
            ).fetchall()
            return [
                Log(
                    task_code=int(r["task_code"]),
                    user_code=int(r["user_code"]),
                    status=int(r["status"]),
                    date=date.fromisoformat(r["date"]),
                )
                for r in rows
            ]
        finally:
            conn.close()

    def delete_by_task_code(self, code: int) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM logs WHERE task_code = ?", (int(code),))
            conn.commit()
            logger.debug("Deleted %s log(s) for task code=%s", cur.rowcount, code)
        finally:
            conn.close()

    def count_logs(self) -> int:
        return self._count("logs")
