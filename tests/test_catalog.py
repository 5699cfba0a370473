"""Tests for the built-in program catalog."""

from fitness_planner.data.program_catalog import (
    ALL_PROGRAMS,
    build_program_insight,
    get_catalog_template,
    get_program_by_id,
    get_program_by_title,
    get_program_templates,
)
from fitness_planner.models.programs import ProgramCandidate, ProgramCategory, ProgramLevel
from fitness_planner.models.schedule import WorkoutTemplate


class TestProgramCatalog:
    """Test catalog lookups."""

    def test_ids_are_unique(self):
        ids = [program.id for program in ALL_PROGRAMS]
        assert len(ids) == len(set(ids))

    def test_programs_use_known_levels_and_categories(self):
        for program in ALL_PROGRAMS:
            assert isinstance(program.level, ProgramLevel)
            assert isinstance(program.category, ProgramCategory)

    def test_get_program_by_id(self):
        program = get_program_by_id("int_upper_lower")
        assert program is not None
        assert program.name == "Upper Lower Strength"
        assert get_program_by_id("missing") is None
        assert get_program_by_id(None) is None

    def test_get_program_by_title(self):
        assert get_program_by_title("  volume ppl ").id == "adv_volume_ppl"
        assert get_program_by_title("") is None
        assert get_program_by_title("Nope") is None

    def test_templates_match_days_per_week(self):
        for program in ALL_PROGRAMS:
            templates = get_program_templates(program.id)
            assert len(templates) == program.days_per_week
            assert [t.position for t in templates] == list(range(len(templates)))

    def test_template_ids(self):
        templates = get_program_templates("beg_intro_2day")
        assert [t.id for t in templates] == ["beg_intro_2day_w1", "beg_intro_2day_w2"]
        assert templates[0].name == "Technique A"
        assert get_catalog_template("beg_intro_2day_w2").name == "Technique B"
        assert get_catalog_template("beg_intro_2day_w3") is None

    def test_unknown_program_has_no_templates(self):
        assert get_program_templates("missing") == []


class TestBuildProgramInsight:
    """Test program week summaries."""

    def test_catalog_program(self):
        insight = build_program_insight(get_program_by_id("int_upper_lower"))

        assert insight.workout_days_per_week == 4
        assert insight.average_session_duration == 55
        assert insight.weekly_minutes == 220
        assert insight.focus_areas == [
            "Upper Strength", "Lower Strength", "Upper Hypertrophy", "Lower Hypertrophy",
        ]
        assert insight.equipment == ["barbell", "dumbbells", "bodyweight"]
        assert insight.sample_workouts == [
            "Day 1: Upper Strength (~55 min)",
            "Day 2: Lower Strength (~55 min)",
            "Day 3: Upper Hypertrophy (~55 min)",
        ]

    def test_every_catalog_program(self):
        for program in ALL_PROGRAMS:
            insight = build_program_insight(program)
            assert insight.workout_days_per_week == program.days_per_week
            assert 1 <= len(insight.sample_workouts) <= 3

    def test_explicit_templates_deduplicate_focus(self):
        program = get_program_by_id("beg_intro_2day")
        templates = [
            WorkoutTemplate(id=f"x{i}", program_id=program.id, name=name, position=i)
            for i, name in enumerate(["Technique A", "Technique B", "Technique A"])
        ]

        insight = build_program_insight(program, templates)

        assert insight.workout_days_per_week == 3
        assert insight.focus_areas == ["Technique A", "Technique B"]
        assert len(insight.sample_workouts) == 3

    def test_program_without_templates(self):
        program = ProgramCandidate(
            id="custom",
            name="Custom",
            level="beginner",
            duration_weeks=4,
            days_per_week=3,
            category="mobility",
            average_session_duration=27.5,
        )

        insight = build_program_insight(program)

        assert insight.workout_days_per_week == 3
        assert insight.average_session_duration == 28
        assert insight.focus_areas == ["mobility"]
        assert insight.equipment == []
        assert insight.sample_workouts == []

    def test_missing_duration(self):
        program = ProgramCandidate(
            id="custom", name="Custom", level="beginner", duration_weeks=4, days_per_week=2,
        )

        insight = build_program_insight(program)

        assert insight.average_session_duration == 0
        assert insight.focus_areas == []

    def test_to_dict(self):
        data = build_program_insight(get_program_by_id("beg_intro_2day")).to_dict()

        assert data["programId"] == "beg_intro_2day"
        assert data["workoutDaysPerWeek"] == 2
        assert data["weeklyMinutes"] == 60
        assert data["sampleWorkouts"] == ["Day 1: Technique A (~30 min)", "Day 2: Technique B (~30 min)"]
