"""Program recommendations for stored users.

Loads the user's preferences, candidate programs and recent workout history
from the planner database and ranks the programs.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from ..config import get_settings
from ..data.program_catalog import ALL_PROGRAMS
from ..db.database import PlannerDatabase
from ..db.repositories.program_repository import ProgramRepository
from ..db.repositories.user_repository import UserRepository
from ..db.repositories.workout_repository import WorkoutRepository
from ..exceptions import UserNotFoundError
from ..models.programs import (
    ActivityLevel,
    Goal,
    ProgramCandidate,
    ProgramRecommendation,
    UserRecommendationContext,
)
from ..recommendations.programs import recommend_programs_for_user

logger = logging.getLogger(__name__)


class RecommendationService:
    """Ranks training programs for users stored in the planner database."""

    def __init__(self, db: Optional[PlannerDatabase] = None):
        self._db = db or PlannerDatabase()
        self._users = UserRepository(self._db)
        self._programs = ProgramRepository(self._db)
        self._workouts = WorkoutRepository(self._db)

    def get_candidate_programs(self) -> List[ProgramCandidate]:
        """Stored programs, or the built-in catalog when none are stored."""
        programs = self._programs.list_programs()
        if not programs:
            logger.debug("No stored programs, using built-in catalog")
            return list(ALL_PROGRAMS)
        return programs

    def recommend_for_user(
        self,
        user_id: str,
        goal: Union[Goal, str],
        activity_level: Union[ActivityLevel, str],
        now: Optional[datetime] = None,
    ) -> List[ProgramRecommendation]:
        """
        Rank all candidate programs for a user.

        Args:
            user_id: The user to recommend for
            goal: Onboarding goal (lose, maintain, gain)
            activity_level: Self-reported activity level
            now: Reference time (defaults to now, UTC)

        Returns:
            Recommendations sorted best first

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self._users.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        now = now or datetime.now(timezone.utc)
        since = now - timedelta(days=get_settings().history_window_days)
        workouts = self._workouts.get_history_samples(user_id, since=since)

        context = UserRecommendationContext(
            goal=goal,
            activity_level=activity_level,
            workout_preferences=user.workout_preferences,
        )
        recommendations = recommend_programs_for_user(
            context,
            self.get_candidate_programs(),
            workouts,
            now=now,
        )

        logger.info(
            f"Recommended {len(recommendations)} programs for user {user_id} "
            f"from {len(workouts)} recent workouts"
        )
        return recommendations


# Singleton instance
_recommendation_service: Optional[RecommendationService] = None


def get_recommendation_service() -> RecommendationService:
    """Get or create the recommendation service singleton."""
    global _recommendation_service
    if _recommendation_service is None:
        _recommendation_service = RecommendationService()
    return _recommendation_service
