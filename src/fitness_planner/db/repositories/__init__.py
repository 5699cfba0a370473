"""SQLite repositories for planner data."""

from .user_repository import UserRepository
from .program_repository import ProgramRepository
from .workout_repository import WorkoutRepository
from .schedule_repository import ScheduleRepository

__all__ = [
    "UserRepository",
    "ProgramRepository",
    "WorkoutRepository",
    "ScheduleRepository",
]
