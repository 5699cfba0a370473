"""SQLite-backed repository for logged workouts."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ...models.programs import WorkoutHistorySample
from ..database import PlannerDatabase

logger = logging.getLogger(__name__)


def _to_utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class WorkoutRepository:
    """Workout log used as recommendation history."""

    def __init__(self, db: PlannerDatabase):
        self._db = db

    def log_workout(
        self,
        user_id: str,
        started_at: datetime,
        duration_min: float,
        template_id: Optional[str] = None,
    ) -> int:
        """
        Store a completed workout.

        Returns:
            The id of the new workout row
        """
        with self._db._get_connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO workouts (user_id, started_at, duration_min, template_id)
                VALUES (?, ?, ?, ?)
                """,
                (user_id, _to_utc_iso(started_at), max(0.0, float(duration_min)), template_id),
            )
            return cursor.lastrowid

    def get_history_samples(
        self,
        user_id: str,
        since: Optional[datetime] = None,
    ) -> List[WorkoutHistorySample]:
        """
        Workouts of a user, oldest first.

        Args:
            user_id: Owner of the workouts
            since: Only include workouts started at or after this time
        """
        query = "SELECT started_at, duration_min FROM workouts WHERE user_id = ?"
        params: list = [user_id]
        if since is not None:
            query += " AND started_at >= ?"
            params.append(_to_utc_iso(since))
        query += " ORDER BY started_at"

        with self._db._get_connection() as conn:
            rows = conn.execute(query, params).fetchall()

        return [
            WorkoutHistorySample(started_at=row["started_at"], duration=row["duration_min"])
            for row in rows
        ]
