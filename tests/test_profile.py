"""Tests for parsing stored workout preferences into a profile."""

from fitness_planner.models.profile import WorkoutProfile
from fitness_planner.models.programs import ProgramLevel


class TestWorkoutProfile:
    """Test lenient profile parsing."""

    def test_camel_case_blob(self):
        profile = WorkoutProfile.from_preferences({
            "fitnessLevel": "advanced",
            "goals": ["strength", "endurance"],
            "daysPerWeek": 5,
            "availableEquipment": ["barbell"],
            "targetAreas": ["legs"],
            "schedulePreferences": {"startDay": "Sunday"},
        })

        assert profile.fitness_level == ProgramLevel.ADVANCED
        assert profile.goals == ["strength", "endurance"]
        assert profile.days_per_week == 5
        assert profile.available_equipment == ["barbell"]
        assert profile.target_areas == ["legs"]

    def test_snake_case_names(self):
        profile = WorkoutProfile(fitness_level="beginner", days_per_week=3)
        assert profile.fitness_level == ProgramLevel.BEGINNER
        assert profile.days_per_week == 3

    def test_non_mapping_is_empty(self):
        for value in (None, "text", 7, ["a"]):
            profile = WorkoutProfile.from_preferences(value)
            assert profile == WorkoutProfile()

    def test_invalid_level_is_none(self):
        assert WorkoutProfile.from_preferences({"fitnessLevel": "pro"}).fitness_level is None
        assert WorkoutProfile.from_preferences({"fitnessLevel": 2}).fitness_level is None

    def test_days_per_week_whole_numbers_only(self):
        assert WorkoutProfile.from_preferences({"daysPerWeek": 4.0}).days_per_week == 4
        assert WorkoutProfile.from_preferences({"daysPerWeek": 4.5}).days_per_week is None
        assert WorkoutProfile.from_preferences({"daysPerWeek": "4"}).days_per_week is None
        assert WorkoutProfile.from_preferences({"daysPerWeek": True}).days_per_week is None

    def test_unknown_goals_filtered(self):
        profile = WorkoutProfile.from_preferences({"goals": ["strength", "flexibility", 3, None]})
        assert profile.goals == ["strength"]

    def test_equipment_wrong_type(self):
        profile = WorkoutProfile.from_preferences({"availableEquipment": "barbell"})
        assert profile.available_equipment is None

    def test_equipment_drops_non_strings(self):
        profile = WorkoutProfile.from_preferences({"availableEquipment": ["dumbbells", 1, "", None]})
        assert profile.available_equipment == ["dumbbells"]
