# -*- coding: utf-8 -*-
"""Mindfulness exercises and sessions — DB storage helpers."""

from __future__ import annotations

import json
from collections import Counter
from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import iso, parse_day, today, utc_now, utc_now_iso

_SESSION_COLUMNS = (
    "id",
    "user_id",
    "exercise_id",
    "started_at",
    "completed_at",
    "duration_minutes",
    "trigger",
    "mood_before",
    "mood_after",
    "craving_intensity_before",
    "craving_intensity_after",
    "notes",
    "completed",
)


def _row_to_exercise(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["benefits"] = json.loads(out.pop("benefits_json") or "[]")
    out["is_active"] = bool(out["is_active"])
    return out


def _row_to_session(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["completed"] = bool(out["completed"])
    return out


# ---- exercises ----


def list_exercises(*, category: Optional[str] = None) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM mindfulness_exercises WHERE is_active = 1"
    params: List[Any] = []
    if category:
        sql += " AND category = ?"
        params.append(category)
    sql += " ORDER BY sort_order ASC, category ASC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_exercise(r) for r in rows]


def get_exercise(exercise_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM mindfulness_exercises WHERE id = ?", (exercise_id,)).fetchone()
    return _row_to_exercise(row) if row else None


def require_exercise(exercise_id: str) -> Dict[str, Any]:
    exercise = get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


# ---- sessions ----


def start_session(
    *,
    user_id: str,
    exercise_id: str,
    trigger: Optional[str] = None,
    mood_before: Optional[str] = None,
    craving_intensity_before: Optional[int] = None,
) -> str:
    require_exercise(exercise_id)
    session_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO mindfulness_sessions (
                id, user_id, exercise_id, started_at, duration_minutes,
                trigger, mood_before, craving_intensity_before, completed
            ) VALUES (?, ?, ?, ?, 0, ?, ?, ?, 0)
            """,
            (session_id, user_id, exercise_id, utc_now_iso(), trigger, mood_before, craving_intensity_before),
        )
    return session_id


def complete_session(*, user_id: str, session_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            UPDATE mindfulness_sessions
            SET completed_at = ?, duration_minutes = ?, mood_after = ?,
                craving_intensity_after = ?, notes = ?, completed = 1
            WHERE id = ? AND user_id = ?
            """,
            (
                utc_now_iso(),
                int(fields["duration_minutes"]),
                fields.get("mood_after"),
                fields.get("craving_intensity_after"),
                fields.get("notes"),
                session_id,
                user_id,
            ),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Session not found")
        row = conn.execute("SELECT * FROM mindfulness_sessions WHERE id = ?", (session_id,)).fetchone()
    return _row_to_session(row)


def recent_sessions(*, user_id: str, limit: int = 10) -> List[Dict[str, Any]]:
    """Newest first, each paired with its exercise."""
    session_cols = ", ".join(f"s.{c} AS s_{c}" for c in _SESSION_COLUMNS)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            f"""
            SELECT {session_cols}, e.*
            FROM mindfulness_sessions s
            JOIN mindfulness_exercises e ON e.id = s.exercise_id
            WHERE s.user_id = ?
            ORDER BY s.started_at DESC
            LIMIT ?
            """,
            (user_id, int(limit)),
        ).fetchall()
    out = []
    for row in rows:
        data = dict(row)
        session = {c: data.pop(f"s_{c}") for c in _SESSION_COLUMNS}
        out.append({"session": _row_to_session(session), "exercise": _row_to_exercise(data)})
    return out


def completed_sessions(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM mindfulness_sessions WHERE user_id = ? AND completed = 1 ORDER BY started_at DESC",
            (user_id,),
        ).fetchall()
    return [_row_to_session(r) for r in rows]


def practice_streak(session_days: List[str], *, anchor=None) -> int:
    """Consecutive days ending at ``anchor`` (today) with a completed session."""
    days = {parse_day(d) for d in session_days}
    current = parse_day(anchor) if anchor is not None else today()
    streak = 0
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def session_stats(*, user_id: str) -> Dict[str, Any]:
    sessions = completed_sessions(user_id=user_id)
    week_ago = iso(utc_now() - timedelta(days=7))

    ranked = Counter(s["exercise_id"] for s in sessions).most_common(1)
    favorite = get_exercise(ranked[0][0]) if ranked else None

    return {
        "total_sessions": len(sessions),
        "total_minutes": sum(int(s.get("duration_minutes") or 0) for s in sessions),
        "sessions_this_week": sum(1 for s in sessions if s["started_at"] >= week_ago),
        "current_streak": practice_streak([s["started_at"] for s in sessions]),
        "favorite_exercise": favorite,
    }


def sessions_by_category(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT e.category AS category, COUNT(*) AS count,
                   COALESCE(SUM(s.duration_minutes), 0) AS total_minutes
            FROM mindfulness_sessions s
            JOIN mindfulness_exercises e ON e.id = s.exercise_id
            WHERE s.user_id = ? AND s.completed = 1
            GROUP BY e.category
            ORDER BY count DESC
            """,
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]
