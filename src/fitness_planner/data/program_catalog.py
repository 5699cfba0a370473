"""Static catalog of built-in training programs."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..models.programs import ProgramCandidate, ProgramInsight
from ..models.schedule import WorkoutTemplate
from ..recommendations.programs import round_half_up


# (program, workout names in program order)
_CATALOG: Tuple[Tuple[ProgramCandidate, Tuple[str, ...]], ...] = (
    (
        ProgramCandidate(
            id="beg_foundation",
            name="Full Body Foundation",
            level="beginner",
            duration_weeks=8,
            days_per_week=3,
            category="strength",
            equipment=("bodyweight", "dumbbells", "barbell"),
            average_session_duration=45,
        ),
        ("Full Body A", "Full Body B", "Full Body C"),
    ),
    (
        ProgramCandidate(
            id="beg_home",
            name="Home Kickstart Circuit",
            level="beginner",
            duration_weeks=6,
            days_per_week=4,
            category="fat_loss",
            equipment=("bodyweight", "dumbbells"),
            average_session_duration=35,
        ),
        ("Home Circuit A", "Home Circuit B", "Full Body A", "Conditioning"),
    ),
    (
        ProgramCandidate(
            id="beg_intro_2day",
            name="Starter Technique 2-Day",
            level="beginner",
            duration_weeks=4,
            days_per_week=2,
            category="intro",
            equipment=("bodyweight", "dumbbells"),
            average_session_duration=30,
        ),
        ("Technique A", "Technique B"),
    ),
    (
        ProgramCandidate(
            id="beg_fatloss_ramp",
            name="Beginner Fat-Loss Ramp",
            level="beginner",
            duration_weeks=8,
            days_per_week=5,
            category="fat_loss",
            equipment=("bodyweight", "dumbbells"),
            average_session_duration=35,
        ),
        ("Home Circuit A", "Full Body Endurance", "Home Circuit B", "Conditioning", "Full Body A"),
    ),
    (
        ProgramCandidate(
            id="int_upper_lower",
            name="Upper Lower Strength",
            level="intermediate",
            duration_weeks=10,
            days_per_week=4,
            category="strength",
            equipment=("barbell", "dumbbells", "bodyweight"),
            average_session_duration=55,
        ),
        ("Upper Strength", "Lower Strength", "Upper Hypertrophy", "Lower Hypertrophy"),
    ),
    (
        ProgramCandidate(
            id="int_ppl_5day",
            name="PPL Performance 5-Day",
            level="intermediate",
            duration_weeks=10,
            days_per_week=5,
            category="hypertrophy",
            equipment=("barbell", "dumbbells", "bodyweight"),
            average_session_duration=55,
        ),
        ("Push Heavy", "Pull Heavy", "Legs Heavy", "Push Volume", "Pull Volume"),
    ),
    (
        ProgramCandidate(
            id="int_conditioning_hybrid",
            name="Conditioning Hybrid 4-Day",
            level="intermediate",
            duration_weeks=8,
            days_per_week=4,
            category="endurance",
            equipment=("bodyweight", "dumbbells", "barbell"),
            average_session_duration=40,
        ),
        ("Home Circuit A", "Conditioning", "Full Body Endurance", "Home Circuit B"),
    ),
    (
        ProgramCandidate(
            id="int_cut_6day",
            name="Intermediate Cut 6-Day",
            level="intermediate",
            duration_weeks=8,
            days_per_week=6,
            category="fat_loss",
            equipment=("barbell", "dumbbells", "bodyweight"),
            average_session_duration=45,
        ),
        ("Home Circuit A", "Push Volume", "Legs Volume", "Home Circuit B", "Pull Volume", "Conditioning"),
    ),
    (
        ProgramCandidate(
            id="adv_power",
            name="Powerbuilding Phase",
            level="advanced",
            duration_weeks=12,
            days_per_week=5,
            category="strength",
            equipment=("barbell", "dumbbells", "bodyweight"),
            average_session_duration=65,
        ),
        ("Lower Strength", "Upper Strength", "Lower Hypertrophy", "Upper Hypertrophy", "Conditioning"),
    ),
    (
        ProgramCandidate(
            id="adv_volume_ppl",
            name="Volume PPL",
            level="advanced",
            duration_weeks=12,
            days_per_week=6,
            category="hypertrophy",
            equipment=("barbell", "dumbbells", "bodyweight"),
            average_session_duration=60,
        ),
        ("Push Heavy", "Pull Heavy", "Legs Heavy", "Upper Hypertrophy", "Lower Hypertrophy", "Conditioning"),
    ),
    (
        ProgramCandidate(
            id="all_mobility_reset",
            name="Mobility Reset",
            level="beginner",
            duration_weeks=4,
            days_per_week=3,
            category="mobility",
            equipment=("bodyweight",),
            average_session_duration=25,
        ),
        ("Hips & Spine", "Shoulders & T-Spine", "Full Body Flow"),
    ),
)

ALL_PROGRAMS: Tuple[ProgramCandidate, ...] = tuple(program for program, _ in _CATALOG)

_program_by_id: Dict[str, ProgramCandidate] = {program.id: program for program in ALL_PROGRAMS}
_program_by_title: Dict[str, ProgramCandidate] = {
    program.name.strip().lower(): program for program in ALL_PROGRAMS
}
_workout_names: Dict[str, Tuple[str, ...]] = {program.id: names for program, names in _CATALOG}


def get_program_by_id(program_id: Optional[str]) -> Optional[ProgramCandidate]:
    """Catalog program with the given id."""
    if not program_id:
        return None
    return _program_by_id.get(program_id)


def get_program_by_title(title: Optional[str]) -> Optional[ProgramCandidate]:
    """Catalog program by display name, ignoring case and surrounding whitespace."""
    if not title:
        return None
    return _program_by_title.get(title.strip().lower())


def get_program_templates(program_id: str) -> List[WorkoutTemplate]:
    """Workout templates of a catalog program, in program order.

    Template ids are ``<program_id>_w<n>``.
    """
    return [
        WorkoutTemplate(
            id=f"{program_id}_w{position + 1}",
            program_id=program_id,
            name=name,
            position=position,
        )
        for position, name in enumerate(_workout_names.get(program_id, ()))
    ]


def seed_catalog(program_repository) -> int:
    """Store every catalog program and its templates through a ProgramRepository."""
    templates = [
        template
        for program in ALL_PROGRAMS
        for template in get_program_templates(program.id)
    ]
    return program_repository.seed_programs(ALL_PROGRAMS, templates)


_template_by_id: Dict[str, WorkoutTemplate] = {
    template.id: template
    for program in ALL_PROGRAMS
    for template in get_program_templates(program.id)
}


def get_catalog_template(template_id: str) -> Optional[WorkoutTemplate]:
    """Catalog workout template with the given id."""
    return _template_by_id.get(template_id)


def build_program_insight(
    program: ProgramCandidate,
    templates: Optional[Sequence[WorkoutTemplate]] = None,
) -> ProgramInsight:
    """
    Summarize a program's training week.

    Args:
        program: The program to describe
        templates: Its workout templates in program order. Defaults to the
            catalog templates; when there are none, the program's
            ``days_per_week`` and category stand in.

    Returns:
        ProgramInsight with workout days, session length, focus areas,
        equipment and the first three workouts
    """
    if templates is None:
        templates = get_program_templates(program.id)
    names = [template.name for template in templates]

    workout_days = len(names) or max(0, program.days_per_week)
    session_minutes = round_half_up(max(0.0, program.average_session_duration or 0))

    focus_areas = list(dict.fromkeys(names))
    if not focus_areas and program.category is not None:
        focus_areas = [getattr(program.category, "value", program.category)]

    return ProgramInsight(
        program_id=program.id,
        workout_days_per_week=workout_days,
        average_session_duration=session_minutes,
        focus_areas=focus_areas,
        equipment=list(program.equipment),
        sample_workouts=[
            f"Day {position}: {name} (~{session_minutes} min)"
            for position, name in enumerate(names[:3], start=1)
        ],
    )
