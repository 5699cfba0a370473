"""Built-in seed data."""

from .program_catalog import (
    ALL_PROGRAMS,
    build_program_insight,
    get_program_by_id,
    get_program_by_title,
    get_catalog_template,
    get_program_templates,
    seed_catalog,
)

__all__ = [
    "ALL_PROGRAMS",
    "build_program_insight",
    "get_program_by_id",
    "get_program_by_title",
    "get_catalog_template",
    "get_program_templates",
    "seed_catalog",
]
