"""Database schema for the fitness planner."""

SCHEMA = """
-- Users and their free-form workout preferences (JSON)
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    workout_preferences TEXT NOT NULL DEFAULT '{}',
    created_at TEXT DEFAULT CURRENT_TIMESTAMP,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);

-- Training programs available for recommendation
CREATE TABLE IF NOT EXISTS programs (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    level TEXT NOT NULL,
    duration_weeks INTEGER NOT NULL,
    days_per_week INTEGER NOT NULL,
    category TEXT,
    equipment TEXT NOT NULL DEFAULT '[]',  -- JSON list of equipment tags
    average_session_duration REAL
);

-- Workouts of a program, in program order
CREATE TABLE IF NOT EXISTS workout_templates (
    id TEXT PRIMARY KEY,
    program_id TEXT,
    name TEXT NOT NULL,
    position INTEGER NOT NULL DEFAULT 0,
    description TEXT,
    FOREIGN KEY (program_id) REFERENCES programs(id)
);

CREATE INDEX IF NOT EXISTS idx_workout_templates_program
    ON workout_templates(program_id, position);

-- Template assigned to a day of the week for a user
CREATE TABLE IF NOT EXISTS workout_schedules (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    template_id TEXT NOT NULL,
    day_of_week TEXT NOT NULL,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (user_id) REFERENCES users(id)
);

CREATE INDEX IF NOT EXISTS idx_workout_schedules_user
    ON workout_schedules(user_id);

-- Logged workouts
CREATE TABLE IF NOT EXISTS workouts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    started_at TEXT NOT NULL,  -- ISO timestamp, UTC
    duration_min REAL NOT NULL DEFAULT 0,
    template_id TEXT,
    FOREIGN KEY (user_id) REFERENCES users(id)
);

CREATE INDEX IF NOT EXISTS idx_workouts_user_started
    ON workouts(user_id, started_at);
"""
