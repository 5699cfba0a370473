"""Shared fixtures for planner tests."""

import os
import tempfile

import pytest

from fitness_planner.db.database import PlannerDatabase


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield db_path
    try:
        os.unlink(db_path)
    except OSError:
        pass


@pytest.fixture
def planner_db(temp_db_path):
    """A planner database backed by a temporary file."""
    return PlannerDatabase(db_path=temp_db_path)
