#!/usr/bin/env python3
"""
Fitness Planner CLI.

Program recommendations and weekly workout schedules.

Usage:
    fitness-planner seed
    fitness-planner add-user alex --level intermediate --days 4
    fitness-planner log alex --minutes 50
    fitness-planner recommend alex --goal gain --activity moderate
    fitness-planner apply alex int_upper_lower --start-day Tuesday --rest-days Sunday
    fitness-planner week alex
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from .data.program_catalog import build_program_insight, seed_catalog
from .db.database import PlannerDatabase
from .db.repositories import ProgramRepository, UserRepository, WorkoutRepository
from .exceptions import FitnessPlannerError
from .logging_config import configure_logging
from .models.programs import ActivityLevel, Confidence, Goal, ProgramLevel
from .models.schedule import WEEK_DAYS
from .services.recommendation_service import RecommendationService
from .services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)

console = Console()


def get_score_color(score: int) -> str:
    """Get rich color for a recommendation score."""
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def get_confidence_color(confidence: Confidence) -> str:
    """Get rich color for a confidence tier."""
    colors = {
        Confidence.HIGH: "green",
        Confidence.MEDIUM: "yellow",
        Confidence.LOW: "white",
    }
    return colors.get(confidence, "white")


def cmd_seed(args, db: PlannerDatabase):
    """Store the built-in program catalog."""
    count = seed_catalog(ProgramRepository(db))
    console.print(f"[green]Seeded {count} programs[/green] into {db.db_path}")


def cmd_add_user(args, db: PlannerDatabase):
    """Create a user with optional workout preferences."""
    preferences = {}
    if args.level:
        preferences["fitnessLevel"] = args.level
    if args.days:
        preferences["daysPerWeek"] = args.days
    if args.equipment:
        preferences["availableEquipment"] = args.equipment
    if args.goals:
        preferences["goals"] = args.goals

    users = UserRepository(db)
    if users.get_user(args.user_id) is not None:
        console.print(f"[yellow]User {args.user_id} already exists[/yellow]")
        return 1

    user = users.create_user(args.user_id, preferences)
    console.print(f"[green]Created user {user.id}[/green]")
    return 0


def cmd_log(args, db: PlannerDatabase):
    """Log a completed workout."""
    if UserRepository(db).get_user(args.user_id) is None:
        console.print(f"[red]Unknown user: {args.user_id}[/red]")
        return 1

    started_at = args.started_at or datetime.now(timezone.utc)
    WorkoutRepository(db).log_workout(args.user_id, started_at, args.minutes, args.template)
    console.print(f"Logged {args.minutes:.0f} min workout for {args.user_id}")
    return 0


def cmd_recommend(args, db: PlannerDatabase):
    """Show ranked program recommendations."""
    service = RecommendationService(db=db)
    recommendations = service.recommend_for_user(args.user_id, args.goal, args.activity)

    console.print()
    console.print(Panel("[bold]Fitness Planner - Recommendations[/bold]"))
    console.print()

    if not recommendations:
        console.print("[yellow]No programs available.[/yellow]")
        return 0

    table = Table(box=box.ROUNDED)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Program", style="bold", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Confidence")
    table.add_column("Min/week", justify="right")

    for rec in recommendations[: args.limit]:
        table.add_row(
            str(rec.rank),
            rec.program_id,
            Text(str(rec.score), style=get_score_color(rec.score)),
            Text(rec.confidence.value, style=get_confidence_color(rec.confidence)),
            str(rec.projected_weekly_minutes),
        )
    console.print(table)

    top = recommendations[0]
    console.print()
    console.print(f"[bold]Why {top.program_id}:[/bold]")
    for reason in top.reasons:
        console.print(f"  - {reason}")

    program = next(
        (p for p in service.get_candidate_programs() if p.id == top.program_id), None
    )
    if program is not None:
        stored_templates = ProgramRepository(db).get_templates_for_program(program.id)
        insight = build_program_insight(program, stored_templates or None)
        console.print(
            f"[dim]{insight.workout_days_per_week} days/week, "
            f"~{insight.average_session_duration} min sessions, "
            f"equipment: {', '.join(insight.equipment) or 'none'}[/dim]"
        )
        for sample in insight.sample_workouts:
            console.print(f"  [dim]{sample}[/dim]")
    console.print()
    return 0


def cmd_apply(args, db: PlannerDatabase):
    """Replace a user's weekly schedule with a program."""
    preferences = {}
    if args.start_day:
        preferences["startDay"] = args.start_day
    if args.rest_days is not None:
        preferences["restDays"] = args.rest_days

    service = ScheduleService(db=db)
    result = service.apply_program_schedule(args.user_id, args.program_id, preferences or None)

    console.print()
    console.print(Panel(f"[bold]Fitness Planner - {args.program_id}[/bold]"))
    console.print()

    table = Table(box=box.ROUNDED)
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Template", style="white", no_wrap=True)
    for assignment in result.assignments:
        table.add_row(assignment.day_of_week, assignment.template_id)
    console.print(table)

    if result.dropped_template_ids:
        console.print()
        console.print(
            f"[yellow]Dropped {len(result.dropped_template_ids)} workout(s): "
            f"{', '.join(result.dropped_template_ids)}[/yellow]"
        )
    console.print()
    return 0


def cmd_week(args, db: PlannerDatabase):
    """Show the user's weekly plan."""
    plan = ScheduleService(db=db).get_weekly_plan(args.user_id)

    console.print()
    console.print(Panel(f"[bold]Fitness Planner - Week of {args.user_id}[/bold]"))
    console.print()

    table = Table(box=box.ROUNDED)
    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Workout", no_wrap=True)
    table.add_column("Notes", style="dim")
    for day in plan.days:
        title = Text(day.title, style="dim" if day.is_rest_day else "bold green")
        table.add_row(day.day_of_week, title, day.notes or "")
    console.print(table)
    console.print()
    return 0


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {value}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fitness-planner",
        description="Fitness Planner - program recommendations and weekly schedules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fitness-planner seed
  fitness-planner recommend alex --goal gain --activity moderate
  fitness-planner apply alex int_upper_lower --start-day Tuesday
  fitness-planner week alex
        """,
    )
    parser.add_argument("--db", help="Path to the planner database")
    parser.add_argument("--log-level", help="Log level (default from settings)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Seed command
    subparsers.add_parser("seed", help="Store the built-in program catalog")

    # Add user command
    user_p = subparsers.add_parser("add-user", help="Create a user")
    user_p.add_argument("user_id")
    user_p.add_argument("--level", choices=[level.value for level in ProgramLevel])
    user_p.add_argument("--days", type=int, help="Target training days per week")
    user_p.add_argument("--equipment", nargs="*", help="Available equipment")
    user_p.add_argument("--goals", nargs="*", help="Profile goals, e.g. muscle_gain")

    # Log command
    log_p = subparsers.add_parser("log", help="Log a completed workout")
    log_p.add_argument("user_id")
    log_p.add_argument("--minutes", "-m", type=float, required=True, help="Duration in minutes")
    log_p.add_argument("--started-at", type=_parse_datetime, help="ISO start time (default now)")
    log_p.add_argument("--template", help="Template the workout followed")

    # Recommend command
    rec_p = subparsers.add_parser("recommend", help="Rank programs for a user")
    rec_p.add_argument("user_id")
    rec_p.add_argument("--goal", choices=[goal.value for goal in Goal], required=True)
    rec_p.add_argument(
        "--activity",
        choices=[level.value for level in ActivityLevel],
        required=True,
    )
    rec_p.add_argument("--limit", "-n", type=int, default=5, help="Number of programs to show")

    # Apply command
    apply_p = subparsers.add_parser("apply", help="Schedule a program for a user")
    apply_p.add_argument("user_id")
    apply_p.add_argument("program_id")
    apply_p.add_argument("--start-day", choices=WEEK_DAYS, type=str.capitalize)
    apply_p.add_argument(
        "--rest-days",
        nargs="*",
        choices=WEEK_DAYS,
        type=str.capitalize,
        help="Replaces the stored rest days",
    )

    # Week command
    week_p = subparsers.add_parser("week", help="Show a user's weekly plan")
    week_p.add_argument("user_id")

    return parser


COMMANDS = {
    "seed": cmd_seed,
    "add-user": cmd_add_user,
    "log": cmd_log,
    "recommend": cmd_recommend,
    "apply": cmd_apply,
    "week": cmd_week,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    db = PlannerDatabase(db_path=args.db)
    try:
        return handler(args, db) or 0
    except FitnessPlannerError as e:
        console.print(f"[red]{e.message}[/red]")
        logger.debug(f"Command {args.command} failed: {e!r}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
