"""Weekly workout scheduling."""

from .planner import (
    SCHEDULE_PREFERENCES_KEY,
    to_week_day_name,
    get_ordered_week_days,
    sanitize_schedule_preferences,
    get_schedule_preferences_from_user,
    merge_schedule_preferences,
    map_templates_to_schedule,
    apply_template_schedule_for_user,
)
from .weekly_plan import build_weekly_plan_from_schedules

__all__ = [
    "SCHEDULE_PREFERENCES_KEY",
    "to_week_day_name",
    "get_ordered_week_days",
    "sanitize_schedule_preferences",
    "get_schedule_preferences_from_user",
    "merge_schedule_preferences",
    "map_templates_to_schedule",
    "apply_template_schedule_for_user",
    "build_weekly_plan_from_schedules",
]
