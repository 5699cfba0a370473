"""Tests for the command line interface."""

import pytest

from fitness_planner.cli import build_parser, main
from fitness_planner.data.program_catalog import ALL_PROGRAMS
from fitness_planner.db.database import PlannerDatabase
from fitness_planner.db.repositories import ScheduleRepository, UserRepository, WorkoutRepository


def run(temp_db_path, *argv):
    return main(["--db", temp_db_path, *argv])


class TestParser:
    """Test argument parsing."""

    def test_day_names_are_capitalized(self):
        args = build_parser().parse_args(
            ["apply", "u1", "p1", "--start-day", "tuesday", "--rest-days", "sunday", "Monday"]
        )
        assert args.start_day == "Tuesday"
        assert args.rest_days == ["Sunday", "Monday"]

    def test_invalid_goal(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["recommend", "u1", "--goal", "bulk", "--activity", "light"])

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestCommands:
    """Test commands end to end against a temporary database."""

    def test_add_user_and_log(self, temp_db_path, capsys):
        assert run(temp_db_path, "add-user", "alex", "--level", "beginner", "--days", "3") == 0
        assert run(temp_db_path, "log", "alex", "--minutes", "40",
                   "--started-at", "2026-02-01T07:00:00Z") == 0

        db = PlannerDatabase(db_path=temp_db_path)
        user = UserRepository(db).get_user("alex")
        assert user.workout_preferences == {"fitnessLevel": "beginner", "daysPerWeek": 3}
        assert len(WorkoutRepository(db).get_history_samples("alex")) == 1
        assert "Created user alex" in capsys.readouterr().out

    def test_add_user_twice(self, temp_db_path, capsys):
        run(temp_db_path, "add-user", "alex")
        assert run(temp_db_path, "add-user", "alex") == 1
        assert "already exists" in capsys.readouterr().out

    def test_log_unknown_user(self, temp_db_path):
        assert run(temp_db_path, "log", "ghost", "--minutes", "30") == 1

    def test_recommend(self, temp_db_path, capsys):
        run(temp_db_path, "add-user", "alex", "--goals", "muscle_gain")
        capsys.readouterr()

        assert run(temp_db_path, "recommend", "alex", "--goal", "gain",
                   "--activity", "moderate", "-n", "2") == 0

        out = capsys.readouterr().out
        shown = [program.id for program in ALL_PROGRAMS if program.id in out]
        assert len(shown) == 2
        assert f"Why {shown[0]}" in out or f"Why {shown[1]}" in out
        assert "days/week" in out
        assert "Day 1:" in out

    def test_recommend_unknown_user(self, temp_db_path, capsys):
        assert run(temp_db_path, "recommend", "ghost", "--goal", "gain", "--activity", "light") == 1
        assert "User not found: ghost" in capsys.readouterr().out

    def test_apply_and_week(self, temp_db_path, capsys):
        run(temp_db_path, "seed")
        run(temp_db_path, "add-user", "alex")

        assert run(temp_db_path, "apply", "alex", "beg_intro_2day", "--start-day", "Saturday") == 0
        assert run(temp_db_path, "week", "alex") == 0

        out = capsys.readouterr().out
        assert "Technique A" in out
        assert "Rest & Recovery" in out
        schedules = ScheduleRepository(PlannerDatabase(db_path=temp_db_path))
        assert [s.day_of_week for s in schedules.get_schedules_for_user("alex")] == [
            "Saturday", "Sunday",
        ]

    def test_apply_reports_dropped(self, temp_db_path, capsys):
        run(temp_db_path, "add-user", "alex")

        run(temp_db_path, "apply", "alex", "adv_volume_ppl", "--rest-days",
            "Monday", "Tuesday", "Wednesday")

        assert "Dropped 2 workout(s)" in capsys.readouterr().out

    def test_apply_unknown_program(self, temp_db_path, capsys):
        run(temp_db_path, "add-user", "alex")
        assert run(temp_db_path, "apply", "alex", "nope") == 1
        assert "Program not found: nope" in capsys.readouterr().out
