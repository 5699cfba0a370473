"""SQLite-backed repository for users and their workout preferences."""

import json
import logging
from typing import Any, Dict, List, Optional

from ...models.schedule import User
from ..database import PlannerDatabase

logger = logging.getLogger(__name__)


def _load_preferences(raw: Optional[str], user_id: str) -> Dict[str, Any]:
    """Decode a stored preferences blob; unreadable blobs become empty."""
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring unreadable workout preferences for user {user_id}")
        return {}
    return data if isinstance(data, dict) else {}


class UserRepository:
    """Users and their workout preferences blob."""

    def __init__(self, db: PlannerDatabase):
        self._db = db

    def _row_to_user(self, row) -> User:
        return User(
            id=row["id"],
            workout_preferences=_load_preferences(row["workout_preferences"], row["id"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def create_user(
        self,
        user_id: str,
        workout_preferences: Optional[Dict[str, Any]] = None,
    ) -> User:
        """
        Create a new user.

        Args:
            user_id: Unique user identifier
            workout_preferences: Initial preferences blob

        Returns:
            The created User

        Raises:
            sqlite3.IntegrityError: If a user with this id already exists
        """
        with self._db._get_connection() as conn:
            conn.execute(
                "INSERT INTO users (id, workout_preferences) VALUES (?, ?)",
                (user_id, json.dumps(workout_preferences or {})),
            )

        logger.info(f"Created user {user_id}")
        return self.get_user(user_id)

    def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by id, or None if not found."""
        with self._db._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()

        return self._row_to_user(row) if row else None

    def list_users(self) -> List[User]:
        with self._db._get_connection() as conn:
            rows = conn.execute("SELECT * FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def update_workout_preferences(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        """
        Merge keys into a user's preferences blob.

        Keys not present in ``updates`` are kept.

        Returns:
            The updated User, or None if the user does not exist
        """
        current = self.get_user(user_id)
        if current is None:
            return None

        merged = {**current.workout_preferences, **updates}
        with self._db._get_connection() as conn:
            conn.execute(
                """
                UPDATE users SET workout_preferences = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (json.dumps(merged), user_id),
            )

        return self.get_user(user_id)
