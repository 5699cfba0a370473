"""
Weekly schedule planner.

Maps an ordered list of workout templates onto the days of a week. The week
starts on the user's chosen start day and skips their rest days; templates
that do not fit are reported as dropped rather than spilling onto rest days.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..db.base import ScheduleWriter, UnitOfWork
from ..models.schedule import (
    DEFAULT_WORKOUT_SCHEDULE_PREFERENCES,
    WEEK_DAYS,
    ApplyTemplateScheduleResult,
    MappedTemplateSchedule,
    ScheduleAssignment,
    User,
    WeekDayName,
    WorkoutSchedulePreferences,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

SCHEDULE_PREFERENCES_KEY = "schedulePreferences"
MAX_REST_DAYS = len(WEEK_DAYS) - 1

PreferencesInput = Union[WorkoutSchedulePreferences, Mapping, None]


def _normalize_day(day: str) -> str:
    return day.strip().lower()


def to_week_day_name(value: Any) -> Optional[WeekDayName]:
    """Resolve a day name regardless of case and surrounding whitespace."""
    if not isinstance(value, str) or not value:
        return None

    normalized = _normalize_day(value)
    for day in WEEK_DAYS:
        if _normalize_day(day) == normalized:
            return day
    return None


def to_week_day_names(values: Any) -> List[WeekDayName]:
    """Valid, de-duplicated day names in Monday -> Sunday order."""
    if not isinstance(values, (list, tuple)):
        return []

    resolved = {to_week_day_name(value) for value in values}
    return [day for day in WEEK_DAYS if day in resolved]


def get_ordered_week_days(
    start_day: str = DEFAULT_WORKOUT_SCHEDULE_PREFERENCES.start_day,
) -> List[WeekDayName]:
    """The week rotated so it begins at ``start_day``."""
    if start_day not in WEEK_DAYS:
        return list(WEEK_DAYS)

    start_index = WEEK_DAYS.index(start_day)
    return list(WEEK_DAYS[start_index:] + WEEK_DAYS[:start_index])


def _read_field(preferences: PreferencesInput, camel: str, snake: str) -> Any:
    if preferences is None:
        return None
    if isinstance(preferences, WorkoutSchedulePreferences):
        return getattr(preferences, snake)
    if isinstance(preferences, Mapping):
        if camel in preferences:
            return preferences[camel]
        return preferences.get(snake)
    return None


def _has_field(preferences: PreferencesInput, camel: str, snake: str) -> bool:
    if isinstance(preferences, WorkoutSchedulePreferences):
        return True
    if isinstance(preferences, Mapping):
        return camel in preferences or snake in preferences
    return False


def sanitize_schedule_preferences(preferences: PreferencesInput = None) -> WorkoutSchedulePreferences:
    """
    Normalize schedule preferences.

    Never raises: an invalid start day becomes Monday, rest days are limited
    to valid day names in canonical order and capped at six so at least one
    training day always remains.

    Args:
        preferences: ``WorkoutSchedulePreferences``, a mapping with
            ``startDay``/``restDays`` (or ``start_day``/``rest_days``) keys,
            or None

    Returns:
        Sanitized preferences
    """
    start_day = (
        to_week_day_name(_read_field(preferences, "startDay", "start_day"))
        or DEFAULT_WORKOUT_SCHEDULE_PREFERENCES.start_day
    )
    rest_days = to_week_day_names(_read_field(preferences, "restDays", "rest_days"))

    return WorkoutSchedulePreferences(
        start_day=start_day,
        rest_days=tuple(rest_days[:MAX_REST_DAYS]),
    )


def get_schedule_preferences_from_user(workout_preferences: Any) -> WorkoutSchedulePreferences:
    """Schedule preferences stored in a user's workout preferences blob.

    Reads the nested ``schedulePreferences`` object, falling back to flat
    ``startDay``/``restDays`` keys written by older clients.
    """
    if not isinstance(workout_preferences, Mapping):
        return DEFAULT_WORKOUT_SCHEDULE_PREFERENCES

    nested = workout_preferences.get(SCHEDULE_PREFERENCES_KEY)
    if isinstance(nested, Mapping):
        return sanitize_schedule_preferences(nested)

    start_day = workout_preferences.get("startDay")
    return sanitize_schedule_preferences({
        "startDay": start_day if isinstance(start_day, str) else None,
        "restDays": workout_preferences.get("restDays"),
    })


def unique_template_ids(template_ids: Iterable[Optional[str]]) -> List[str]:
    """Drop empty ids and duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(template_id for template_id in template_ids if template_id))


def map_templates_to_schedule(
    template_ids: Sequence[Optional[str]],
    preferences: PreferencesInput = None,
) -> MappedTemplateSchedule:
    """
    Assign templates to training days in week order.

    Templates are placed one per training day, starting at the start day and
    skipping rest days. Templates beyond the number of training days are
    returned as dropped, in their original order.

    Args:
        template_ids: Template ids in program order
        preferences: Schedule preferences; sanitized before use

    Returns:
        MappedTemplateSchedule with assignments, dropped ids, the training
        days used and the effective preferences
    """
    ids = unique_template_ids(template_ids)
    effective_preferences = sanitize_schedule_preferences(preferences)

    ordered_days = get_ordered_week_days(effective_preferences.start_day)
    ordered_training_days = [
        day for day in ordered_days if day not in effective_preferences.rest_days
    ]
    # Sanitization caps rest days at six, so this fallback is a guard only
    usable_training_days = ordered_training_days or ordered_days

    assignments = tuple(
        ScheduleAssignment(template_id=template_id, day_of_week=day)
        for template_id, day in zip(ids, usable_training_days)
    )
    dropped = tuple(ids[len(usable_training_days):])

    if dropped:
        logger.debug(
            f"{len(dropped)} template(s) did not fit into "
            f"{len(usable_training_days)} training day(s)"
        )

    return MappedTemplateSchedule(
        assignments=assignments,
        dropped_template_ids=dropped,
        ordered_training_days=tuple(usable_training_days),
        effective_preferences=effective_preferences,
    )


def merge_schedule_preferences(
    stored: WorkoutSchedulePreferences,
    override: PreferencesInput = None,
) -> WorkoutSchedulePreferences:
    """Overlay explicit preferences on stored ones.

    Every key present in ``override`` wins, even when its value is None:
    ``{"startDay": None}`` resets the start day to Monday and
    ``{"restDays": None}`` clears the rest days. A provided rest day list
    replaces the stored one; it is not combined with it. The result is
    sanitized.
    """
    merged: dict = {"startDay": stored.start_day, "restDays": list(stored.rest_days)}
    for camel, snake in (("startDay", "start_day"), ("restDays", "rest_days")):
        if _has_field(override, camel, snake):
            merged[camel] = _read_field(override, camel, snake)

    return sanitize_schedule_preferences(merged)


def apply_template_schedule_for_user(
    unit_of_work: UnitOfWork,
    user: User,
    templates: Sequence[WorkoutTemplate],
    preferences: PreferencesInput = None,
) -> ApplyTemplateScheduleResult:
    """
    Replace a user's stored weekly schedule with a program's templates.

    In a single unit of work: deletes the user's existing schedule
    assignments, stores one record per new assignment and records the
    effective schedule preferences in the user's preferences blob (other
    keys of the blob are kept). Errors raised by the unit of work propagate
    unchanged; nothing is committed in that case.

    Args:
        unit_of_work: Transaction capability of the persistence layer
        user: The user being scheduled
        templates: Program templates in program order
        preferences: Optional overrides of the stored schedule preferences

    Returns:
        ApplyTemplateScheduleResult with the mapped schedule and the number
        of assignments created
    """
    template_ids = unique_template_ids(template.id for template in templates)

    stored_preferences = get_schedule_preferences_from_user(user.workout_preferences)
    merged_preferences = merge_schedule_preferences(stored_preferences, preferences)

    mapped = map_templates_to_schedule(template_ids, merged_preferences)
    preference_updates = {SCHEDULE_PREFERENCES_KEY: mapped.effective_preferences.to_dict()}

    def write(writer: ScheduleWriter) -> int:
        removed = writer.delete_schedules_for_user(user.id)
        for assignment in mapped.assignments:
            writer.create_schedule(user.id, assignment.template_id, assignment.day_of_week)
        writer.merge_workout_preferences(user.id, preference_updates)
        return removed

    try:
        removed = unit_of_work.run(write)
    except Exception:
        logger.exception(f"Failed to apply workout schedule for user {user.id}")
        raise

    if mapped.dropped_template_ids:
        logger.warning(
            f"User {user.id}: {len(mapped.dropped_template_ids)} template(s) dropped, "
            f"only {len(mapped.ordered_training_days)} training day(s) available"
        )
    logger.info(
        f"Applied workout schedule for user {user.id}: "
        f"{len(mapped.assignments)} assignment(s) created, {removed} replaced"
    )

    return ApplyTemplateScheduleResult(
        assignments=mapped.assignments,
        dropped_template_ids=mapped.dropped_template_ids,
        ordered_training_days=mapped.ordered_training_days,
        effective_preferences=mapped.effective_preferences,
        assignments_created=len(mapped.assignments),
    )
