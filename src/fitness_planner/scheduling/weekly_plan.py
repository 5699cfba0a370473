"""Build a user's weekly plan from stored schedule assignments."""

import logging
from typing import Any, Dict, Iterable, Optional, Sequence

from ..models.schedule import (
    StoredSchedule,
    WeekDayName,
    WeeklyWorkoutPlan,
    WorkoutDay,
    WorkoutTemplate,
)
from .planner import get_ordered_week_days, get_schedule_preferences_from_user

logger = logging.getLogger(__name__)

REST_DAY_TITLE = "Rest & Recovery"
REST_DAY_NOTES = "Optional: light mobility, stretching, or a walk."
MISSING_TEMPLATE_TITLE = "Template unavailable"


def create_rest_day(day_of_week: WeekDayName) -> WorkoutDay:
    """A rest day entry."""
    return WorkoutDay(
        day_of_week=day_of_week,
        title=REST_DAY_TITLE,
        is_rest_day=True,
        notes=REST_DAY_NOTES,
    )


def _schedules_by_day(schedules: Iterable[StoredSchedule]) -> Dict[str, StoredSchedule]:
    # First assignment per day wins
    by_day: Dict[str, StoredSchedule] = {}
    for schedule in schedules:
        key = (schedule.day_of_week or "").strip().lower()
        if key and key not in by_day:
            by_day[key] = schedule
    return by_day


def build_weekly_plan_from_schedules(
    user_id: str,
    schedules: Sequence[StoredSchedule],
    templates: Sequence[WorkoutTemplate],
    workout_preferences: Optional[Any] = None,
) -> WeeklyWorkoutPlan:
    """
    Lay out a full week for the user.

    The week starts at the stored start day. Days with an assignment show
    the template; every other day is a rest day. An assignment whose template
    no longer exists is shown as an unavailable rest day.

    Args:
        user_id: Owner of the schedules
        schedules: Stored schedule assignments of the user
        templates: Templates referenced by the schedules
        workout_preferences: The user's stored preferences blob

    Returns:
        WeeklyWorkoutPlan with seven days
    """
    preferences = get_schedule_preferences_from_user(workout_preferences)
    template_by_id = {template.id: template for template in templates}
    schedule_by_day = _schedules_by_day(schedules)

    days = []
    for day in get_ordered_week_days(preferences.start_day):
        schedule = schedule_by_day.get(day.lower())
        if schedule is None:
            days.append(create_rest_day(day))
            continue

        template = template_by_id.get(schedule.template_id)
        if template is None:
            logger.warning(
                f"Schedule {schedule.id} for user {user_id} references missing template "
                f"{schedule.template_id}"
            )
            missing = create_rest_day(day)
            missing.title = MISSING_TEMPLATE_TITLE
            missing.schedule_id = schedule.id
            missing.template_id = schedule.template_id
            days.append(missing)
            continue

        days.append(WorkoutDay(
            day_of_week=day,
            title=template.name,
            is_rest_day=False,
            template_id=template.id,
            schedule_id=schedule.id,
            notes=template.description,
        ))

    return WeeklyWorkoutPlan(
        id=f"schedule_{user_id}",
        user_id=user_id,
        days=days,
        schedule_preferences=preferences,
    )
