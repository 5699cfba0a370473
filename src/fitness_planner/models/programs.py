"""Data models for program recommendations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional, Union


class ProgramLevel(str, Enum):
    """Experience level a program is written for."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ProgramCategory(str, Enum):
    """Training emphasis of a program."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    FAT_LOSS = "fat_loss"
    INTRO = "intro"
    ENDURANCE = "endurance"
    MOBILITY = "mobility"


class Goal(str, Enum):
    """Body composition goal chosen during onboarding."""
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ActivityLevel(str, Enum):
    """Self-reported daily activity level."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    ATHLETE = "athlete"


class Confidence(str, Enum):
    """How much recent history backs a recommendation."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _coerce_enum(enum_cls, value):
    """Return the enum member for ``value``, or ``value`` unchanged if unknown."""
    if isinstance(value, enum_cls) or value is None:
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class ProgramCandidate:
    """
    A trainable program that can be recommended.

    Unknown level or category values are kept as given; the scorer treats
    them as a mismatch.
    """
    id: str
    name: str
    level: Union[ProgramLevel, str]
    duration_weeks: int
    days_per_week: int
    category: Optional[Union[ProgramCategory, str]] = None
    equipment: tuple = ()
    average_session_duration: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "level", _coerce_enum(ProgramLevel, self.level))
        object.__setattr__(self, "category", _coerce_enum(ProgramCategory, self.category))
        object.__setattr__(self, "equipment", tuple(self.equipment or ()))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level.value if isinstance(self.level, ProgramLevel) else self.level,
            "durationWeeks": self.duration_weeks,
            "daysPerWeek": self.days_per_week,
            "category": (
                self.category.value if isinstance(self.category, ProgramCategory) else self.category
            ),
            "equipment": list(self.equipment),
            "averageSessionDuration": self.average_session_duration,
        }


@dataclass(frozen=True)
class WorkoutHistorySample:
    """A past workout: when it started and how long it lasted (minutes)."""
    started_at: datetime
    duration: float = 0.0

    def __post_init__(self):
        started_at = self.started_at
        if isinstance(started_at, (int, float)):
            # Epoch milliseconds, as stored by the mobile client
            started_at = datetime.fromtimestamp(started_at / 1000, tz=timezone.utc)
        elif isinstance(started_at, str):
            started_at = datetime.fromisoformat(started_at.replace("Z", "+00:00"))
        if started_at.tzinfo is None:
            started_at = started_at.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "started_at", started_at)


@dataclass
class UserRecommendationContext:
    """Who the recommendations are for."""
    goal: Union[Goal, str]
    activity_level: Union[ActivityLevel, str]
    workout_preferences: Any = None

    def __post_init__(self):
        self.goal = _coerce_enum(Goal, self.goal)
        self.activity_level = _coerce_enum(ActivityLevel, self.activity_level)


@dataclass
class ProgramRecommendation:
    """A scored and ranked program."""
    program_id: str
    score: int
    confidence: Confidence
    reasons: List[str] = field(default_factory=list)
    projected_weekly_minutes: int = 0
    rank: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "programId": self.program_id,
            "score": self.score,
            "confidence": self.confidence.value,
            "reasons": list(self.reasons),
            "projectedWeeklyMinutes": self.projected_weekly_minutes,
            "rank": self.rank,
        }


@dataclass
class ProgramInsight:
    """At-a-glance summary of a program's training week."""
    program_id: str
    workout_days_per_week: int
    average_session_duration: int
    focus_areas: List[str] = field(default_factory=list)
    equipment: List[str] = field(default_factory=list)
    sample_workouts: List[str] = field(default_factory=list)

    @property
    def weekly_minutes(self) -> int:
        return self.workout_days_per_week * self.average_session_duration

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "programId": self.program_id,
            "workoutDaysPerWeek": self.workout_days_per_week,
            "averageSessionDuration": self.average_session_duration,
            "weeklyMinutes": self.weekly_minutes,
            "focusAreas": list(self.focus_areas),
            "equipment": list(self.equipment),
            "sampleWorkouts": list(self.sample_workouts),
        }
