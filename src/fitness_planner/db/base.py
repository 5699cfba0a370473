"""
Persistence protocols used by the scheduler.

The scheduler never talks to a storage engine directly. It receives a unit
of work and performs all of its writes through the writer handed to it, so
that every write of one request commits or rolls back together.
"""

from typing import Any, Callable, Mapping, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ScheduleWriter(Protocol):
    """Write operations available inside a unit of work."""

    def delete_schedules_for_user(self, user_id: str) -> int:
        """Delete all stored schedule assignments of a user."""
        ...

    def create_schedule(self, user_id: str, template_id: str, day_of_week: str) -> None:
        """Store one schedule assignment."""
        ...

    def merge_workout_preferences(self, user_id: str, updates: Mapping[str, Any]) -> None:
        """Merge keys into the stored preferences blob of a user.

        The blob is read inside the unit of work, so keys written since the
        user was loaded are kept.
        """
        ...


@runtime_checkable
class UnitOfWork(Protocol):
    """All-or-nothing execution of a group of writes."""

    def run(self, fn: Callable[[ScheduleWriter], T]) -> T:
        """Call ``fn`` inside one transaction and return its result.

        If ``fn`` raises, nothing it wrote is kept and the error propagates.
        """
        ...
