"""Services combining the planner database with recommendation and scheduling logic."""

from .recommendation_service import RecommendationService, get_recommendation_service
from .schedule_service import ScheduleService, get_schedule_service

__all__ = [
    "RecommendationService",
    "get_recommendation_service",
    "ScheduleService",
    "get_schedule_service",
]
