"""
Program Recommendation Engine

Ranks candidate training programs for a user based on:
- Fitness level (explicit or inferred from recent frequency)
- Goal focus
- Preferred training days per week
- Available equipment
- Recent adherence and session length

Scoring is deterministic and side-effect free. Each factor also yields a
weighted reason so the top reasons can be shown next to the program.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..models.profile import WorkoutProfile
from ..models.programs import (
    ActivityLevel,
    Confidence,
    Goal,
    ProgramCandidate,
    ProgramCategory,
    ProgramLevel,
    ProgramRecommendation,
    UserRecommendationContext,
    WorkoutHistorySample,
)

logger = logging.getLogger(__name__)

HISTORY_WINDOW_DAYS = 28

LEVEL_ORDER: Tuple[ProgramLevel, ...] = (
    ProgramLevel.BEGINNER,
    ProgramLevel.INTERMEDIATE,
    ProgramLevel.ADVANCED,
)

ACTIVITY_TO_DAYS: Dict[ActivityLevel, int] = {
    ActivityLevel.SEDENTARY: 3,
    ActivityLevel.LIGHT: 3,
    ActivityLevel.MODERATE: 4,
    ActivityLevel.VERY_ACTIVE: 5,
    ActivityLevel.ATHLETE: 6,
}
DEFAULT_DESIRED_DAYS = 4

GOAL_TO_CATEGORIES: Dict[Goal, Tuple[ProgramCategory, ...]] = {
    Goal.LOSE: (ProgramCategory.FAT_LOSS, ProgramCategory.ENDURANCE, ProgramCategory.INTRO),
    Goal.MAINTAIN: (
        ProgramCategory.STRENGTH,
        ProgramCategory.ENDURANCE,
        ProgramCategory.MOBILITY,
        ProgramCategory.INTRO,
    ),
    Goal.GAIN: (ProgramCategory.STRENGTH, ProgramCategory.HYPERTROPHY),
}

PROFILE_GOAL_TO_CATEGORIES: Dict[str, Tuple[ProgramCategory, ...]] = {
    "muscle_gain": (ProgramCategory.STRENGTH, ProgramCategory.HYPERTROPHY),
    "strength": (ProgramCategory.STRENGTH, ProgramCategory.HYPERTROPHY),
    "weight_loss": (ProgramCategory.FAT_LOSS, ProgramCategory.ENDURANCE),
    "endurance": (ProgramCategory.FAT_LOSS, ProgramCategory.ENDURANCE),
    "general_fitness": (ProgramCategory.INTRO, ProgramCategory.STRENGTH, ProgramCategory.ENDURANCE),
}

DEFAULT_REASON = "Balanced default recommendation."
MAX_REASONS = 3


@dataclass(frozen=True)
class HistoryStats:
    """Workout history summary over the recent window."""
    recent_count: int
    workouts_per_week: float
    average_duration: float


@dataclass(frozen=True)
class Reason:
    """A reason string and the weight it carries when ranking reasons."""
    text: str
    weight: float


@dataclass
class RecommendationBreakdown:
    """Score of one program and the reasons behind it."""
    score: float
    reasons: List[Reason] = field(default_factory=list)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp value into [min_value, max_value]."""
    return min(max_value, max(min_value, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def _value(member) -> Optional[str]:
    return member.value if hasattr(member, "value") else member


def get_history_stats(
    workouts: Sequence[WorkoutHistorySample],
    now: Optional[datetime] = None,
) -> HistoryStats:
    """Summarize workouts that started within the last 28 days."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    window_start = now - timedelta(days=HISTORY_WINDOW_DAYS)

    recent = [w for w in workouts if w.started_at >= window_start]
    total_duration = sum(max(0.0, w.duration or 0.0) for w in recent)

    return HistoryStats(
        recent_count=len(recent),
        workouts_per_week=len(recent) / 4,
        average_duration=total_duration / len(recent) if recent else 0.0,
    )


def infer_fitness_level(
    profile: WorkoutProfile,
    context: UserRecommendationContext,
    recent_workouts_per_week: float,
) -> ProgramLevel:
    """Explicit profile level, otherwise inferred from frequency and activity."""
    if profile.fitness_level is not None:
        return profile.fitness_level

    if recent_workouts_per_week >= 4.5:
        return ProgramLevel.ADVANCED

    if recent_workouts_per_week >= 2.5:
        return ProgramLevel.INTERMEDIATE

    if context.activity_level in (ActivityLevel.ATHLETE, ActivityLevel.VERY_ACTIVE):
        return ProgramLevel.INTERMEDIATE

    return ProgramLevel.BEGINNER


def infer_desired_days(profile: WorkoutProfile, context: UserRecommendationContext) -> int:
    """Training days per week the user is aiming for."""
    days = profile.days_per_week
    if days is not None and 2 <= days <= 7:
        return days

    return ACTIVITY_TO_DAYS.get(context.activity_level, DEFAULT_DESIRED_DAYS)


def derive_target_categories(
    context: UserRecommendationContext,
    profile: WorkoutProfile,
) -> Set[ProgramCategory]:
    """Program categories that serve the user's goals."""
    categories: Set[ProgramCategory] = set()
    for goal in profile.goals:
        categories.update(PROFILE_GOAL_TO_CATEGORIES.get(goal, ()))

    if not categories:
        return set(GOAL_TO_CATEGORIES.get(context.goal, ()))

    return categories


def score_program(
    program: ProgramCandidate,
    context: UserRecommendationContext,
    profile: WorkoutProfile,
    history: HistoryStats,
) -> RecommendationBreakdown:
    """Score a single program for the user.

    Five factors are summed and clamped to 0-100:

    * level fit (up to 22)
    * category fit (up to 24)
    * frequency fit (up to 22)
    * equipment fit (up to 18)
    * adherence (6 by default, 10 for consistent users, negative when the
      program is likely too frequent or too dense)
    """
    reasons: List[Reason] = []

    inferred_level = infer_fitness_level(profile, context, history.workouts_per_week)
    desired_days = infer_desired_days(profile, context)
    target_categories = derive_target_categories(context, profile)
    available_equipment = set(profile.available_equipment or ["bodyweight"]) | {"bodyweight"}

    # Level fit; unknown levels fall through to the farthest-distance score
    if program.level in LEVEL_ORDER:
        level_distance = abs(LEVEL_ORDER.index(program.level) - LEVEL_ORDER.index(inferred_level))
    else:
        level_distance = len(LEVEL_ORDER)

    level_score = 22 if level_distance == 0 else 14 if level_distance == 1 else 6
    reasons.append(Reason(
        text=(
            f"Matches your {inferred_level.value} fitness level."
            if level_distance == 0
            else f"Level is {_value(program.level)}; close to your current readiness."
        ),
        weight=level_score,
    ))

    # Category fit
    category_matches = program.category in target_categories
    if category_matches:
        category_score = 24
    elif program.category == ProgramCategory.STRENGTH and context.goal == Goal.MAINTAIN:
        category_score = 14
    else:
        category_score = 8
    goal_label = _value(context.goal)
    reasons.append(Reason(
        text=(
            f"Aligned with your goal focus ({goal_label})."
            if category_matches
            else f"Less specific to your main goal ({goal_label})."
        ),
        weight=category_score,
    ))

    # Frequency fit
    day_difference = abs(program.days_per_week - desired_days)
    days_score = clamp(22 - day_difference * 6, 0, 22)
    reasons.append(Reason(
        text=(
            f"Training frequency fits your target ({desired_days} days/week)."
            if day_difference <= 1
            else f"Frequency differs from your target by {day_difference} day(s)."
        ),
        weight=days_score if day_difference <= 1 else -max(4, 14 - days_score),
    ))

    # Equipment fit
    required_equipment = list(dict.fromkeys(item for item in program.equipment if item))
    matched_count = sum(1 for item in required_equipment if item in available_equipment)
    match_ratio = matched_count / len(required_equipment) if required_equipment else 1.0
    equipment_score = round_half_up(18 * match_ratio)
    reasons.append(Reason(
        text=(
            "Fully matches your available equipment."
            if match_ratio >= 1
            else f"Needs more equipment ({matched_count}/{len(required_equipment)} matched)."
        ),
        weight=equipment_score if match_ratio >= 1 else -max(3, 14 - equipment_score),
    ))

    # Adherence
    adherence_score = 6
    if history.recent_count > 0:
        expected_recent_sessions = max(4, desired_days * 4)
        adherence_ratio = history.recent_count / expected_recent_sessions

        if adherence_ratio >= 0.9:
            adherence_score = 10
            reasons.append(Reason(
                text="Recent consistency supports progressive programming.",
                weight=10,
            ))
        elif adherence_ratio < 0.6 and program.days_per_week > desired_days + 1:
            adherence_score = -8
            reasons.append(Reason(
                text="Current consistency suggests a slightly lower weekly frequency first.",
                weight=-8,
            ))

        if 0 < history.average_duration < 30 and program.days_per_week >= 5:
            adherence_score -= 4
            reasons.append(Reason(
                text="Session length trend suggests this may feel too dense right now.",
                weight=-4,
            ))

    score = clamp(
        level_score + category_score + days_score + equipment_score + adherence_score,
        0,
        100,
    )

    return RecommendationBreakdown(score=score, reasons=reasons)


def confidence_for(recent_count: int) -> Confidence:
    """Confidence tier from the number of recent sessions."""
    if recent_count >= 12:
        return Confidence.HIGH
    if recent_count >= 4:
        return Confidence.MEDIUM
    return Confidence.LOW


def top_reasons(reasons: Sequence[Reason], limit: int = MAX_REASONS) -> List[str]:
    """Reason texts ordered by absolute weight, strongest first."""
    ordered = sorted(reasons, key=lambda reason: abs(reason.weight), reverse=True)
    texts = [reason.text for reason in ordered[:limit]]
    return texts or [DEFAULT_REASON]


def projected_weekly_minutes(program: ProgramCandidate) -> int:
    """Expected weekly training time for a program."""
    session_minutes = max(25, program.average_session_duration or 45)
    return round_half_up(session_minutes * max(1, program.days_per_week))


def recommend_programs_for_user(
    context: UserRecommendationContext,
    programs: Sequence[ProgramCandidate],
    workouts: Sequence[WorkoutHistorySample],
    now: Optional[datetime] = None,
) -> List[ProgramRecommendation]:
    """
    Score and rank programs for a user.

    Args:
        context: Goal, activity level and stored workout preferences
        programs: Candidate programs
        workouts: Workout history; only the last 28 days are considered
        now: Reference time for the history window (defaults to now, UTC)

    Returns:
        One recommendation per program, sorted by score (ties keep input
        order) with 1-based ranks
    """
    profile = WorkoutProfile.from_preferences(context.workout_preferences)
    history = get_history_stats(workouts, now)
    confidence = confidence_for(history.recent_count)

    recommendations = []
    for program in programs:
        breakdown = score_program(program, context, profile, history)
        recommendations.append(ProgramRecommendation(
            program_id=program.id,
            score=int(breakdown.score),
            confidence=confidence,
            reasons=top_reasons(breakdown.reasons),
            projected_weekly_minutes=projected_weekly_minutes(program),
        ))

    recommendations.sort(key=lambda rec: rec.score, reverse=True)
    for index, recommendation in enumerate(recommendations):
        recommendation.rank = index + 1

    if recommendations:
        logger.debug(
            f"Ranked {len(recommendations)} programs "
            f"(top={recommendations[0].program_id}, score={recommendations[0].score}, "
            f"recent_sessions={history.recent_count})"
        )

    return recommendations
