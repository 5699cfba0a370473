"""Data models for weekly workout scheduling."""

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

WeekDayName = Literal[
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# Fixed Monday -> Sunday order; all rotation arithmetic is based on it
WEEK_DAYS: Tuple[WeekDayName, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(frozen=True)
class WorkoutSchedulePreferences:
    """Start day of the training week and the days kept free of workouts."""
    start_day: WeekDayName = "Monday"
    rest_days: Tuple[WeekDayName, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        """Shape stored under ``schedulePreferences`` in the user's preferences."""
        return {
            "startDay": self.start_day,
            "restDays": list(self.rest_days),
        }


DEFAULT_WORKOUT_SCHEDULE_PREFERENCES = WorkoutSchedulePreferences()


@dataclass(frozen=True)
class ScheduleAssignment:
    """A workout template placed on a day of the week."""
    template_id: str
    day_of_week: WeekDayName

    def to_dict(self) -> dict:
        return {"templateId": self.template_id, "dayOfWeek": self.day_of_week}


@dataclass(frozen=True)
class MappedTemplateSchedule:
    """Result of mapping templates onto the training days of a week."""
    assignments: Tuple[ScheduleAssignment, ...]
    dropped_template_ids: Tuple[str, ...]
    ordered_training_days: Tuple[WeekDayName, ...]
    effective_preferences: WorkoutSchedulePreferences

    def to_dict(self) -> dict:
        return {
            "assignments": [a.to_dict() for a in self.assignments],
            "droppedTemplateIds": list(self.dropped_template_ids),
            "orderedTrainingDays": list(self.ordered_training_days),
            "effectivePreferences": self.effective_preferences.to_dict(),
        }


@dataclass(frozen=True)
class ApplyTemplateScheduleResult(MappedTemplateSchedule):
    """Mapped schedule plus the number of stored assignment records."""
    assignments_created: int = 0

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["assignmentsCreated"] = self.assignments_created
        return result


@dataclass
class User:
    """A user as seen by the scheduler: identity plus the preferences blob."""
    id: str
    workout_preferences: Dict[str, object] = field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class WorkoutTemplate:
    """One workout of a program, in program order."""
    id: str
    program_id: Optional[str]
    name: str
    position: int = 0
    description: Optional[str] = None


@dataclass(frozen=True)
class StoredSchedule:
    """A persisted schedule assignment row."""
    id: int
    user_id: str
    template_id: str
    day_of_week: str
    created_at: Optional[str] = None


@dataclass
class WorkoutDay:
    """One day of a user's weekly plan."""
    day_of_week: WeekDayName
    title: str
    is_rest_day: bool
    template_id: Optional[str] = None
    schedule_id: Optional[int] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "dayOfWeek": self.day_of_week,
            "title": self.title,
            "isRestDay": self.is_rest_day,
            "templateId": self.template_id,
            "scheduleId": self.schedule_id,
            "notes": self.notes,
        }


@dataclass
class WeeklyWorkoutPlan:
    """A full week of workout and rest days in the user's day order."""
    id: str
    user_id: str
    days: List[WorkoutDay]
    schedule_preferences: WorkoutSchedulePreferences

    @property
    def training_days(self) -> List[WorkoutDay]:
        return [day for day in self.days if not day.is_rest_day]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "days": [day.to_dict() for day in self.days],
            "schedulePreferences": self.schedule_preferences.to_dict(),
        }
