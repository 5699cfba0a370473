"""Tests for the recommendation and schedule services."""

from datetime import datetime, timedelta, timezone

import pytest

from fitness_planner.config import get_settings
from fitness_planner.data.program_catalog import ALL_PROGRAMS, seed_catalog
from fitness_planner.db.repositories import (
    ProgramRepository,
    ScheduleRepository,
    UserRepository,
    WorkoutRepository,
)
from fitness_planner.exceptions import ProgramNotFoundError, UserNotFoundError
from fitness_planner.models.programs import Confidence, ProgramCandidate
from fitness_planner.models.schedule import WorkoutTemplate
from fitness_planner.services import recommendation_service, schedule_service
from fitness_planner.services.recommendation_service import (
    RecommendationService,
    get_recommendation_service,
)
from fitness_planner.services.schedule_service import ScheduleService, get_schedule_service

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def users(planner_db):
    repo = UserRepository(planner_db)
    repo.create_user("user-1", {
        "fitnessLevel": "intermediate",
        "daysPerWeek": 4,
        "availableEquipment": ["barbell", "dumbbells"],
        "goals": ["muscle_gain"],
        "schedulePreferences": {"startDay": "Monday", "restDays": ["Wednesday", "Sunday"]},
    })
    return repo


@pytest.fixture
def recommendations(planner_db):
    return RecommendationService(db=planner_db)


@pytest.fixture
def scheduler(planner_db):
    return ScheduleService(db=planner_db)


class TestRecommendationService:
    """Test recommendations for stored users."""

    def test_unknown_user(self, recommendations):
        with pytest.raises(UserNotFoundError):
            recommendations.recommend_for_user("nobody", "gain", "moderate")

    def test_falls_back_to_catalog(self, recommendations, users):
        result = recommendations.recommend_for_user("user-1", "gain", "moderate", now=NOW)

        assert len(result) == len(ALL_PROGRAMS)
        assert result[0].program_id == "int_upper_lower"
        assert [r.rank for r in result] == list(range(1, len(ALL_PROGRAMS) + 1))

    def test_stored_programs_replace_catalog(self, planner_db, recommendations, users):
        ProgramRepository(planner_db).save_program(ProgramCandidate(
            id="custom", name="Custom", level="intermediate", duration_weeks=6, days_per_week=4,
        ))

        result = recommendations.recommend_for_user("user-1", "gain", "moderate", now=NOW)

        assert [r.program_id for r in result] == ["custom"]

    def test_uses_recent_history_only(self, planner_db, recommendations, users):
        workouts = WorkoutRepository(planner_db)
        for i in range(12):
            workouts.log_workout("user-1", NOW - timedelta(days=40 + i), 50)

        stale = recommendations.recommend_for_user("user-1", "gain", "moderate", now=NOW)
        assert stale[0].confidence == Confidence.LOW

        for i in range(12):
            workouts.log_workout("user-1", NOW - timedelta(days=2 * i), 50)

        fresh = recommendations.recommend_for_user("user-1", "gain", "moderate", now=NOW)
        assert fresh[0].confidence == Confidence.HIGH


class TestScheduleService:
    """Test applying programs to a user's week."""

    def test_apply_catalog_program(self, scheduler, users):
        result = scheduler.apply_program_schedule("user-1", "int_upper_lower")

        assert [(a.template_id, a.day_of_week) for a in result.assignments] == [
            ("int_upper_lower_w1", "Monday"),
            ("int_upper_lower_w2", "Tuesday"),
            ("int_upper_lower_w3", "Thursday"),
            ("int_upper_lower_w4", "Friday"),
        ]
        assert result.dropped_template_ids == ()

    def test_weekly_plan_after_apply(self, scheduler, users):
        scheduler.apply_program_schedule("user-1", "int_upper_lower", {"startDay": "Tuesday"})

        plan = scheduler.get_weekly_plan("user-1")

        assert plan.days[0].day_of_week == "Tuesday"
        assert [d.title for d in plan.training_days] == [
            "Upper Strength", "Lower Strength", "Upper Hypertrophy", "Lower Hypertrophy",
        ]
        assert [d.day_of_week for d in plan.training_days] == [
            "Tuesday", "Thursday", "Friday", "Saturday",
        ]
        assert plan.days[1].is_rest_day

    def test_dropped_templates(self, scheduler, users):
        result = scheduler.apply_program_schedule(
            "user-1", "adv_volume_ppl", {"restDays": ["Saturday", "Sunday"]}
        )

        assert result.assignments_created == 5
        assert result.dropped_template_ids == ("adv_volume_ppl_w6",)

    def test_stored_templates_take_precedence(self, planner_db, scheduler, users):
        programs = ProgramRepository(planner_db)
        seed_catalog(programs)
        programs.save_template(WorkoutTemplate(
            id="custom_w1", program_id="beg_intro_2day", name="Warm-up Day", position=-1,
        ))

        result = scheduler.apply_program_schedule("user-1", "beg_intro_2day")

        assert [a.template_id for a in result.assignments] == [
            "custom_w1", "beg_intro_2day_w1", "beg_intro_2day_w2",
        ]
        plan = scheduler.get_weekly_plan("user-1")
        assert plan.days[0].title == "Warm-up Day"

    def test_reapply_replaces_schedule(self, planner_db, scheduler, users):
        scheduler.apply_program_schedule("user-1", "int_ppl_5day")
        scheduler.apply_program_schedule("user-1", "beg_intro_2day")

        assert ScheduleRepository(planner_db).count_for_user("user-1") == 2

    def test_preferences_persisted(self, scheduler, users):
        scheduler.apply_program_schedule("user-1", "beg_foundation", {"startDay": "saturday"})

        stored = users.get_user("user-1").workout_preferences
        assert stored["schedulePreferences"] == {
            "startDay": "Saturday",
            "restDays": ["Wednesday", "Sunday"],
        }
        assert stored["goals"] == ["muscle_gain"]

    def test_unknown_user(self, scheduler):
        with pytest.raises(UserNotFoundError):
            scheduler.apply_program_schedule("nobody", "beg_foundation")
        with pytest.raises(UserNotFoundError):
            scheduler.get_weekly_plan("nobody")

    def test_unknown_program(self, scheduler, users):
        with pytest.raises(ProgramNotFoundError):
            scheduler.apply_program_schedule("user-1", "does_not_exist")

    def test_empty_week(self, scheduler, users):
        plan = scheduler.get_weekly_plan("user-1")
        assert len(plan.days) == 7
        assert plan.training_days == []


class TestServiceSingletons:
    """Test module-level service accessors."""

    @pytest.fixture(autouse=True)
    def isolated_settings(self, monkeypatch, temp_db_path):
        monkeypatch.setenv("FITNESS_PLANNER_DB_PATH", temp_db_path)
        monkeypatch.setattr(recommendation_service, "_recommendation_service", None)
        monkeypatch.setattr(schedule_service, "_schedule_service", None)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_recommendation_service_singleton(self, temp_db_path):
        service = get_recommendation_service()
        assert service is get_recommendation_service()
        assert str(service._db.db_path) == temp_db_path

    def test_schedule_service_singleton(self):
        assert get_schedule_service() is get_schedule_service()
