"""Recommendation engine for training programs."""

from .programs import (
    HISTORY_WINDOW_DAYS,
    HistoryStats,
    RecommendationBreakdown,
    get_history_stats,
    infer_fitness_level,
    infer_desired_days,
    derive_target_categories,
    score_program,
    recommend_programs_for_user,
)

__all__ = [
    "HISTORY_WINDOW_DAYS",
    "HistoryStats",
    "RecommendationBreakdown",
    "get_history_stats",
    "infer_fitness_level",
    "infer_desired_days",
    "derive_target_categories",
    "score_program",
    "recommend_programs_for_user",
]
