"""SQLite-backed read access to stored weekly schedules."""

from typing import List

from ...models.schedule import StoredSchedule
from ..database import PlannerDatabase


class ScheduleRepository:
    """Stored schedule assignments.

    Writes go through ``SqliteUnitOfWork`` so a schedule is always replaced
    as a whole.
    """

    def __init__(self, db: PlannerDatabase):
        self._db = db

    def get_schedules_for_user(self, user_id: str) -> List[StoredSchedule]:
        """Assignments of a user in insertion order."""
        with self._db._get_connection() as conn:
            rows = conn.execute(
                """
                SELECT * FROM workout_schedules
                WHERE user_id = ?
                ORDER BY id
                """,
                (user_id,),
            ).fetchall()

        return [
            StoredSchedule(
                id=row["id"],
                user_id=row["user_id"],
                template_id=row["template_id"],
                day_of_week=row["day_of_week"],
                created_at=row["created_at"],
            )
            for row in rows
        ]

    def count_for_user(self, user_id: str) -> int:
        with self._db._get_connection() as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS cnt FROM workout_schedules WHERE user_id = ?",
                (user_id,),
            ).fetchone()
        return row["cnt"]
