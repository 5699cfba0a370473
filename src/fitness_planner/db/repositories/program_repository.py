"""SQLite-backed repository for programs and their workout templates."""

import json
import logging
from typing import Iterable, List, Optional

from ...models.programs import ProgramCandidate
from ...models.schedule import WorkoutTemplate
from ..database import PlannerDatabase

logger = logging.getLogger(__name__)

_UPSERT_PROGRAM = """
    INSERT INTO programs
    (id, name, level, duration_weeks, days_per_week, category,
     equipment, average_session_duration)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
    ON CONFLICT(id) DO UPDATE SET
        name = excluded.name,
        level = excluded.level,
        duration_weeks = excluded.duration_weeks,
        days_per_week = excluded.days_per_week,
        category = excluded.category,
        equipment = excluded.equipment,
        average_session_duration = excluded.average_session_duration
"""

_UPSERT_TEMPLATE = """
    INSERT INTO workout_templates
    (id, program_id, name, position, description)
    VALUES (?, ?, ?, ?, ?)
    ON CONFLICT(id) DO UPDATE SET
        program_id = excluded.program_id,
        name = excluded.name,
        position = excluded.position,
        description = excluded.description
"""


def _program_params(program: ProgramCandidate) -> tuple:
    record = program.to_dict()
    return (
        program.id,
        program.name,
        record["level"],
        program.duration_weeks,
        program.days_per_week,
        record["category"],
        json.dumps(record["equipment"]),
        program.average_session_duration,
    )


def _template_params(template: WorkoutTemplate) -> tuple:
    return (
        template.id,
        template.program_id,
        template.name,
        template.position,
        template.description,
    )


class ProgramRepository:
    """Programs available for recommendation and their ordered templates."""

    def __init__(self, db: PlannerDatabase):
        self._db = db

    def _row_to_program(self, row) -> ProgramCandidate:
        try:
            equipment = json.loads(row["equipment"] or "[]")
        except ValueError:
            equipment = []
        return ProgramCandidate(
            id=row["id"],
            name=row["name"],
            level=row["level"],
            duration_weeks=row["duration_weeks"],
            days_per_week=row["days_per_week"],
            category=row["category"],
            equipment=[item for item in equipment if isinstance(item, str)],
            average_session_duration=row["average_session_duration"],
        )

    def _row_to_template(self, row) -> WorkoutTemplate:
        return WorkoutTemplate(
            id=row["id"],
            program_id=row["program_id"],
            name=row["name"],
            position=row["position"],
            description=row["description"],
        )

    # === Programs ===

    def save_program(self, program: ProgramCandidate) -> None:
        """Save or update a program."""
        with self._db._get_connection() as conn:
            conn.execute(_UPSERT_PROGRAM, _program_params(program))

    def get_program(self, program_id: str) -> Optional[ProgramCandidate]:
        with self._db._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM programs WHERE id = ?",
                (program_id,),
            ).fetchone()
        return self._row_to_program(row) if row else None

    def list_programs(self) -> List[ProgramCandidate]:
        """All stored programs, ordered by name."""
        with self._db._get_connection() as conn:
            rows = conn.execute("SELECT * FROM programs ORDER BY name, id").fetchall()
        return [self._row_to_program(row) for row in rows]

    def seed_programs(
        self,
        programs: Iterable[ProgramCandidate],
        templates: Iterable[WorkoutTemplate],
    ) -> int:
        """
        Store programs and their templates in one transaction.

        Existing rows with the same ids are updated in place.

        Returns:
            Number of programs stored
        """
        programs = list(programs)
        with self._db._get_connection() as conn:
            conn.executemany(_UPSERT_PROGRAM, [_program_params(p) for p in programs])
            conn.executemany(_UPSERT_TEMPLATE, [_template_params(t) for t in templates])

        logger.info(f"Seeded {len(programs)} programs")
        return len(programs)

    # === Templates ===

    def save_template(self, template: WorkoutTemplate) -> None:
        """Save or update a workout template."""
        with self._db._get_connection() as conn:
            conn.execute(_UPSERT_TEMPLATE, _template_params(template))

    def get_templates_for_program(self, program_id: str) -> List[WorkoutTemplate]:
        """Templates of a program in program order."""
        with self._db._get_connection() as conn:
            rows = conn.execute(
                """
                SELECT * FROM workout_templates
                WHERE program_id = ?
                ORDER BY position, id
                """,
                (program_id,),
            ).fetchall()
        return [self._row_to_template(row) for row in rows]

    def get_templates(self, template_ids: Iterable[str]) -> List[WorkoutTemplate]:
        """Templates with the given ids; unknown ids are skipped."""
        ids = list(dict.fromkeys(template_ids))
        if not ids:
            return []

        placeholders = ", ".join("?" for _ in ids)
        with self._db._get_connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM workout_templates WHERE id IN ({placeholders})",
                ids,
            ).fetchall()
        return [self._row_to_template(row) for row in rows]
