"""Workout profile parsed from a user's stored workout preferences.

The mobile client stores preferences as a free-form JSON blob. This module
validates it once at the boundary: every field that is missing or malformed
resolves to ``None`` (or an empty list) instead of raising.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .programs import ProgramLevel

logger = logging.getLogger(__name__)

FITNESS_GOALS = ("weight_loss", "muscle_gain", "endurance", "strength", "general_fitness")


def _string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, (list, tuple)):
        return None
    return [item for item in value if isinstance(item, str) and item]


class WorkoutProfile(BaseModel):
    """Partial user workout profile used for recommendations."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    fitness_level: Optional[ProgramLevel] = None
    goals: List[str] = []
    days_per_week: Optional[int] = None
    available_equipment: Optional[List[str]] = None
    target_areas: List[str] = []

    @field_validator("fitness_level", mode="before")
    @classmethod
    def validate_fitness_level(cls, v: Any) -> Optional[str]:
        """Unknown levels are treated as not provided."""
        if isinstance(v, ProgramLevel):
            return v
        if isinstance(v, str) and v in {level.value for level in ProgramLevel}:
            return v
        return None

    @field_validator("goals", mode="before")
    @classmethod
    def validate_goals(cls, v: Any) -> List[str]:
        """Keep only recognised goals."""
        return [goal for goal in (_string_list(v) or []) if goal in FITNESS_GOALS]

    @field_validator("days_per_week", mode="before")
    @classmethod
    def validate_days_per_week(cls, v: Any) -> Optional[int]:
        """Whole numbers only; range checks happen where the value is used."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if isinstance(v, float) and not v.is_integer():
            return None
        return int(v)

    @field_validator("available_equipment", mode="before")
    @classmethod
    def validate_available_equipment(cls, v: Any) -> Optional[List[str]]:
        return _string_list(v)

    @field_validator("target_areas", mode="before")
    @classmethod
    def validate_target_areas(cls, v: Any) -> List[str]:
        return _string_list(v) or []

    @classmethod
    def from_preferences(cls, workout_preferences: Any) -> "WorkoutProfile":
        """Build a profile from a stored preferences blob.

        Non-mapping values produce an empty profile.
        """
        if isinstance(workout_preferences, WorkoutProfile):
            return workout_preferences
        if not isinstance(workout_preferences, Mapping):
            return cls()
        try:
            return cls.model_validate(dict(workout_preferences))
        except ValidationError as e:
            # Validators above coerce every field, so this only guards unexpected shapes
            logger.warning(f"Ignoring unreadable workout preferences: {e.error_count()} errors")
            return cls()
