"""Weekly schedules for stored users."""

import logging
from typing import List, Optional

from ..data.program_catalog import (
    get_catalog_template,
    get_program_by_id,
    get_program_templates,
)
from ..db.database import PlannerDatabase, SqliteUnitOfWork
from ..db.repositories.program_repository import ProgramRepository
from ..db.repositories.schedule_repository import ScheduleRepository
from ..db.repositories.user_repository import UserRepository
from ..exceptions import ProgramNotFoundError, UserNotFoundError
from ..models.schedule import (
    ApplyTemplateScheduleResult,
    User,
    WeeklyWorkoutPlan,
    WorkoutTemplate,
)
from ..scheduling.planner import PreferencesInput, apply_template_schedule_for_user
from ..scheduling.weekly_plan import build_weekly_plan_from_schedules

logger = logging.getLogger(__name__)


class ScheduleService:
    """Applies program templates to a user's week and reads the week back."""

    def __init__(self, db: Optional[PlannerDatabase] = None):
        self._db = db or PlannerDatabase()
        self._users = UserRepository(self._db)
        self._programs = ProgramRepository(self._db)
        self._schedules = ScheduleRepository(self._db)

    def _require_user(self, user_id: str) -> User:
        user = self._users.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_program_templates(self, program_id: str) -> List[WorkoutTemplate]:
        """
        Ordered templates of a program.

        Stored templates take precedence over the built-in catalog.

        Raises:
            ProgramNotFoundError: If neither the database nor the catalog
                knows the program
        """
        templates = self._programs.get_templates_for_program(program_id)
        if templates:
            return templates

        if self._programs.get_program(program_id) is None and get_program_by_id(program_id) is None:
            raise ProgramNotFoundError(program_id)

        return get_program_templates(program_id)

    def apply_program_schedule(
        self,
        user_id: str,
        program_id: str,
        preferences: PreferencesInput = None,
    ) -> ApplyTemplateScheduleResult:
        """
        Replace a user's weekly schedule with a program's workouts.

        Args:
            user_id: The user to schedule
            program_id: Program whose templates are placed on the week
            preferences: Optional start day / rest day overrides

        Returns:
            ApplyTemplateScheduleResult

        Raises:
            UserNotFoundError: If the user does not exist
            ProgramNotFoundError: If the program does not exist
        """
        user = self._require_user(user_id)
        templates = self.get_program_templates(program_id)

        logger.info(f"Applying program {program_id} ({len(templates)} templates) for user {user_id}")
        return apply_template_schedule_for_user(
            SqliteUnitOfWork(self._db),
            user,
            templates,
            preferences,
        )

    def get_weekly_plan(self, user_id: str) -> WeeklyWorkoutPlan:
        """
        The user's current week, rest days included.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self._require_user(user_id)
        schedules = self._schedules.get_schedules_for_user(user_id)

        template_ids = [schedule.template_id for schedule in schedules]
        templates = self._programs.get_templates(template_ids)
        stored_ids = {template.id for template in templates}
        # Catalog templates applied without being stored
        templates.extend(
            template
            for template in map(get_catalog_template, set(template_ids) - stored_ids)
            if template is not None
        )

        return build_weekly_plan_from_schedules(
            user_id,
            schedules,
            templates,
            user.workout_preferences,
        )


# Singleton instance
_schedule_service: Optional[ScheduleService] = None


def get_schedule_service() -> ScheduleService:
    """Get or create the schedule service singleton."""
    global _schedule_service
    if _schedule_service is None:
        _schedule_service = ScheduleService()
    return _schedule_service
