"""Workout program recommendation and weekly schedule planning."""

__version__ = "0.1.0"
