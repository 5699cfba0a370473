"""Database module for the fitness planner."""

from .base import ScheduleWriter, UnitOfWork
from .database import PlannerDatabase, SqliteScheduleWriter, SqliteUnitOfWork
from .schema import SCHEMA

__all__ = [
    "ScheduleWriter",
    "UnitOfWork",
    "PlannerDatabase",
    "SqliteScheduleWriter",
    "SqliteUnitOfWork",
    "SCHEMA",
]
