"""SQLite database for users, programs, templates, schedules and workouts."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TypeVar

from ..config import get_settings
from .schema import SCHEMA

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_default_db_path() -> Path:
    """Get the default database path from settings."""
    return Path(get_settings().db_path)


class PlannerDatabase:
    """SQLite database manager for the fitness planner."""

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize the planner database.

        Args:
            db_path: Path to SQLite database file. If not provided,
                     uses FITNESS_PLANNER_DB_PATH or the default location.
        """
        if db_path:
            self.db_path = Path(db_path)
        else:
            self.db_path = get_default_db_path()

        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self._get_connection() as conn:
            conn.executescript(SCHEMA)

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager.

        Commits when the block succeeds; rolls back and re-raises otherwise.
        """
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


class SqliteScheduleWriter:
    """Schedule writes bound to one open connection."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def delete_schedules_for_user(self, user_id: str) -> int:
        cursor = self._conn.execute(
            "DELETE FROM workout_schedules WHERE user_id = ?",
            (user_id,),
        )
        return cursor.rowcount

    def create_schedule(self, user_id: str, template_id: str, day_of_week: str) -> None:
        self._conn.execute(
            """
            INSERT INTO workout_schedules (user_id, template_id, day_of_week)
            VALUES (?, ?, ?)
            """,
            (user_id, template_id, day_of_week),
        )

    def merge_workout_preferences(self, user_id: str, updates: Mapping[str, Any]) -> None:
        row = self._conn.execute(
            "SELECT workout_preferences FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            raise sqlite3.IntegrityError(f"user {user_id} does not exist")

        try:
            current = json.loads(row["workout_preferences"] or "{}")
        except json.JSONDecodeError:
            logger.warning(f"Replacing unreadable workout preferences of user {user_id}")
            current = {}
        if not isinstance(current, dict):
            current = {}

        self._conn.execute(
            """
            UPDATE users SET workout_preferences = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
            """,
            (json.dumps({**current, **updates}), user_id),
        )


class SqliteUnitOfWork:
    """Runs a group of schedule writes in one SQLite transaction."""

    def __init__(self, db: PlannerDatabase):
        self._db = db

    def run(self, fn: Callable[[SqliteScheduleWriter], T]) -> T:
        with self._db._get_connection() as conn:
            return fn(SqliteScheduleWriter(conn))
