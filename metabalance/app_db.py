# -*- coding: utf-8 -*-
"""App database — SQLite helpers and schema.

Every per-user table carries a ``user_id`` column; calendar days are stored as
``YYYY-MM-DD`` strings and timestamps as UTC ISO-8601 strings.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                name TEXT,
                password_hash TEXT NOT NULL,
                created_at TEXT NOT NULL,
                last_signed_in TEXT
            );
            """
        )

        # ---- profile ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS user_profiles (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
                current_weight REAL,
                target_weight REAL,
                height REAL,
                age INTEGER,
                gender TEXT,
                has_obesity INTEGER NOT NULL DEFAULT 0,
                has_diabetes INTEGER NOT NULL DEFAULT 0,
                has_metabolic_syndrome INTEGER NOT NULL DEFAULT 0,
                has_nafld INTEGER NOT NULL DEFAULT 0,
                current_medications TEXT,
                taking_glp1 INTEGER NOT NULL DEFAULT 0,
                stress_level TEXT,
                sleep_quality TEXT,
                activity_level TEXT,
                susceptible_to_linoleic_acid INTEGER NOT NULL DEFAULT 0,
                low_nad_levels INTEGER NOT NULL DEFAULT 0,
                poor_gut_health INTEGER NOT NULL DEFAULT 0,
                primary_goal TEXT,
                target_date TEXT,
                notifications_enabled INTEGER NOT NULL DEFAULT 1,
                daily_reminder_time TEXT NOT NULL DEFAULT '09:00',
                streak_alerts_enabled INTEGER NOT NULL DEFAULT 1,
                milestone_alerts_enabled INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )

        # ---- meals ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meals (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                logged_at TEXT NOT NULL,
                meal_type TEXT NOT NULL,
                food_name TEXT NOT NULL,
                serving_size TEXT,
                calories REAL,
                protein REAL,
                carbs REAL,
                fats REAL,
                fiber REAL,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_meals_user_logged ON meals(user_id, logged_at);")

        # ---- intermittent fasting ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS fasting_schedules (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                fasting_type TEXT NOT NULL,
                eating_window_start INTEGER,
                eating_window_end INTEGER,
                fasting_days TEXT,
                is_active INTEGER NOT NULL DEFAULT 1,
                start_date TEXT NOT NULL,
                end_date TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS fasting_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                schedule_id TEXT NOT NULL,
                date TEXT NOT NULL,
                adhered INTEGER NOT NULL,
                actual_eating_start TEXT,
                actual_eating_end TEXT,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(schedule_id) REFERENCES fasting_schedules(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_fasting_logs_user_date ON fasting_logs(user_id, date DESC);")

        # ---- personal supplements ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS supplements (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                dosage TEXT,
                frequency TEXT,
                timing TEXT,
                start_date TEXT NOT NULL,
                end_date TEXT,
                is_active INTEGER NOT NULL DEFAULT 1,
                notes TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS supplement_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                supplement_id TEXT NOT NULL,
                taken_at TEXT NOT NULL,
                adhered INTEGER NOT NULL,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(supplement_id) REFERENCES supplements(id) ON DELETE CASCADE
            );
            """
        )

        # ---- progress ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS progress_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                logged_at TEXT NOT NULL,
                weight REAL,
                waist_circumference REAL,
                hip_circumference REAL,
                chest_circumference REAL,
                energy_level TEXT,
                mood TEXT,
                sleep_quality TEXT,
                photo_front_url TEXT,
                photo_side_url TEXT,
                photo_back_url TEXT,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_progress_user_logged ON progress_logs(user_id, logged_at DESC);")

        # ---- AI content ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_insights (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                date TEXT NOT NULL,
                title TEXT NOT NULL,
                content TEXT NOT NULL,
                insight_type TEXT NOT NULL,
                viewed INTEGER NOT NULL DEFAULT 0,
                viewed_at TEXT,
                created_at TEXT NOT NULL,
                UNIQUE(user_id, date),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS chat_messages (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                role TEXT NOT NULL,
                content TEXT NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_chat_messages_user_created ON chat_messages(user_id, created_at ASC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS research_content (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                category TEXT NOT NULL,
                content TEXT NOT NULL,
                generated_at TEXT NOT NULL,
                viewed INTEGER NOT NULL DEFAULT 0,
                viewed_at TEXT,
                bookmarked INTEGER NOT NULL DEFAULT 0,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_research_user_generated ON research_content(user_id, generated_at DESC);"
        )

        # ---- daily wins ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_goals (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                date TEXT NOT NULL,
                meal_logging_complete INTEGER NOT NULL DEFAULT 0,
                protein_goal_complete INTEGER NOT NULL DEFAULT 0,
                fasting_goal_complete INTEGER NOT NULL DEFAULT 0,
                exercise_goal_complete INTEGER NOT NULL DEFAULT 0,
                water_goal_complete INTEGER NOT NULL DEFAULT 0,
                win_score INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE(user_id, date),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS water_intake (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                date TEXT NOT NULL,
                glasses INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE(user_id, date),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS weekly_reflections (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                week_start TEXT NOT NULL,
                week_end TEXT NOT NULL,
                went_well TEXT,
                challenges TEXT,
                next_week_plan TEXT,
                ai_insights TEXT,
                weight_change REAL,
                avg_win_score INTEGER NOT NULL DEFAULT 0,
                days_logged INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE(user_id, week_start),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS user_achievements (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                achievement_id TEXT NOT NULL,
                unlocked_at TEXT NOT NULL,
                viewed INTEGER NOT NULL DEFAULT 0,
                UNIQUE(user_id, achievement_id),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )

        # ---- 12-month journey ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS journey_phases (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                phase_number INTEGER NOT NULL,
                phase_name TEXT NOT NULL,
                start_date TEXT NOT NULL,
                end_date TEXT NOT NULL,
                goal_weight_loss REAL NOT NULL,
                actual_weight_loss REAL,
                status TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE(user_id, phase_number),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS journey_initializations (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
                start_date TEXT NOT NULL,
                initial_weight REAL NOT NULL,
                goal_weight REAL NOT NULL,
                current_phase INTEGER NOT NULL DEFAULT 1,
                completed_phases INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS journey_supplements (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                dosage TEXT NOT NULL,
                frequency TEXT NOT NULL,
                monthly_cost REAL,
                category TEXT NOT NULL,
                phase_introduced INTEGER NOT NULL,
                benefits TEXT,
                brands TEXT,
                sort_order INTEGER NOT NULL DEFAULT 0
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS user_supplement_log (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                supplement_id TEXT NOT NULL,
                date TEXT NOT NULL,
                taken INTEGER NOT NULL,
                notes TEXT,
                created_at TEXT NOT NULL,
                UNIQUE(user_id, supplement_id, date),
                FOREIGN KEY(supplement_id) REFERENCES journey_supplements(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS supplement_reminders (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                supplement_id TEXT NOT NULL,
                reminder_time TEXT NOT NULL,
                enabled INTEGER NOT NULL DEFAULT 1,
                frequency TEXT NOT NULL DEFAULT 'daily',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(supplement_id) REFERENCES journey_supplements(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS extended_fasting_sessions (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                fasting_type TEXT NOT NULL,
                start_time TEXT NOT NULL,
                end_time TEXT,
                target_duration INTEGER NOT NULL,
                actual_duration INTEGER,
                weight_before REAL,
                weight_after REAL,
                electrolytes_log TEXT,
                notes TEXT,
                completed INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS fasting_analytics (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL UNIQUE,
                total_fasts INTEGER NOT NULL DEFAULT 0,
                completed_fasts INTEGER NOT NULL DEFAULT 0,
                abandoned_fasts INTEGER NOT NULL DEFAULT 0,
                total_weight_lost TEXT NOT NULL DEFAULT '0.0',
                average_fast_duration INTEGER NOT NULL DEFAULT 0,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS blood_work_results (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                test_date TEXT NOT NULL,
                glucose REAL,
                a1c REAL,
                total_cholesterol REAL,
                ldl REAL,
                hdl REAL,
                triglycerides REAL,
                tsh REAL,
                alt REAL,
                ast REAL,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )

        # ---- emotional eating & medications ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS emotional_eating_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                timestamp TEXT NOT NULL,
                trigger_emotion TEXT NOT NULL,
                trigger_description TEXT,
                situation TEXT,
                food_consumed TEXT NOT NULL,
                estimated_calories INTEGER,
                intensity INTEGER NOT NULL,
                coping_strategy_used TEXT,
                effectiveness_rating INTEGER,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_emotional_user_ts ON emotional_eating_logs(user_id, timestamp DESC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS medications (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                dosage TEXT NOT NULL,
                frequency TEXT NOT NULL,
                start_date TEXT NOT NULL,
                end_date TEXT,
                prescribed_for TEXT,
                side_effects TEXT,
                effectiveness INTEGER,
                notes TEXT,
                active INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS medication_logs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                medication_id TEXT NOT NULL,
                taken_at TEXT NOT NULL,
                dosage_taken TEXT NOT NULL,
                side_effects_noted TEXT,
                notes TEXT,
                created_at TEXT NOT NULL,
                FOREIGN KEY(medication_id) REFERENCES medications(id) ON DELETE CASCADE
            );
            """
        )

        # ---- mindfulness ----
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS mindfulness_exercises (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                description TEXT NOT NULL,
                category TEXT NOT NULL,
                duration INTEGER NOT NULL,
                difficulty TEXT NOT NULL,
                instructions TEXT NOT NULL,
                benefits_json TEXT NOT NULL,
                best_for TEXT,
                audio_url TEXT,
                image_url TEXT,
                is_active INTEGER NOT NULL DEFAULT 1,
                sort_order INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS mindfulness_sessions (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                exercise_id TEXT NOT NULL,
                started_at TEXT NOT NULL,
                completed_at TEXT,
                duration_minutes INTEGER,
                trigger TEXT,
                mood_before TEXT,
                mood_after TEXT,
                craving_intensity_before INTEGER,
                craving_intensity_after INTEGER,
                notes TEXT,
                completed INTEGER NOT NULL DEFAULT 0,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE,
                FOREIGN KEY(exercise_id) REFERENCES mindfulness_exercises(id)
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_mindfulness_sessions_user_started ON mindfulness_sessions(user_id, started_at DESC);"
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
