"""Data models for the fitness planner."""

from .programs import (
    # Enums
    ProgramLevel,
    ProgramCategory,
    Goal,
    ActivityLevel,
    Confidence,
    # Recommendation inputs/outputs
    ProgramCandidate,
    WorkoutHistorySample,
    UserRecommendationContext,
    ProgramInsight,
    ProgramRecommendation,
)
from .profile import WorkoutProfile, FITNESS_GOALS
from .schedule import (
    WeekDayName,
    WEEK_DAYS,
    WorkoutSchedulePreferences,
    DEFAULT_WORKOUT_SCHEDULE_PREFERENCES,
    ScheduleAssignment,
    MappedTemplateSchedule,
    ApplyTemplateScheduleResult,
    User,
    WorkoutTemplate,
    StoredSchedule,
    WorkoutDay,
    WeeklyWorkoutPlan,
)

__all__ = [
    "ProgramLevel",
    "ProgramCategory",
    "Goal",
    "ActivityLevel",
    "Confidence",
    "ProgramCandidate",
    "WorkoutHistorySample",
    "UserRecommendationContext",
    "ProgramInsight",
    "ProgramRecommendation",
    "WorkoutProfile",
    "FITNESS_GOALS",
    "WeekDayName",
    "WEEK_DAYS",
    "WorkoutSchedulePreferences",
    "DEFAULT_WORKOUT_SCHEDULE_PREFERENCES",
    "ScheduleAssignment",
    "MappedTemplateSchedule",
    "ApplyTemplateScheduleResult",
    "User",
    "WorkoutTemplate",
    "StoredSchedule",
    "WorkoutDay",
    "WeeklyWorkoutPlan",
]
