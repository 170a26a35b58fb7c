# -*- coding: utf-8 -*-
"""Daily goals — DB storage helpers."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import parse_day, utc_now_iso
from .streaks import GOAL_COLUMNS, win_score


def _row_to_goal(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    for column in GOAL_COLUMNS.values():
        out[column] = bool(out[column])
    return out


def get_goal(*, user_id: str, day: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM daily_goals WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()
    return _row_to_goal(row) if row else None


def upsert_goal(*, user_id: str, day: str, flags: Mapping[str, Optional[bool]]) -> Dict[str, Any]:
    """Merge ``flags`` (column -> bool, None = keep) over the stored row and rescore."""
    existing = get_goal(user_id=user_id, day=day) or {}
    merged = {
        column: bool(flags[column]) if flags.get(column) is not None else bool(existing.get(column, False))
        for column in GOAL_COLUMNS.values()
    }
    score = win_score(merged)
    now = utc_now_iso()
    columns = list(merged.keys())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO daily_goals (id, user_id, date, {", ".join(columns)}, win_score, created_at, updated_at)
            VALUES (?, ?, ?, {", ".join("?" for _ in columns)}, ?, ?, ?)
            ON CONFLICT(user_id, date) DO UPDATE SET
                {", ".join(f"{c} = excluded.{c}" for c in columns)},
                win_score = excluded.win_score,
                updated_at = excluded.updated_at
            """,
            (str(uuid4()), user_id, day, *(1 if merged[c] else 0 for c in columns), score, now, now),
        )
        row = conn.execute(
            "SELECT * FROM daily_goals WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()
    return _row_to_goal(row)


def toggle_goal(*, user_id: str, day: str, goal_id: str) -> Dict[str, Any]:
    column = GOAL_COLUMNS.get(goal_id)
    if not column:
        raise HTTPException(status_code=400, detail=f"Unknown goal: {goal_id}")
    existing = get_goal(user_id=user_id, day=day) or {}
    return upsert_goal(user_id=user_id, day=day, flags={column: not existing.get(column, False)})


def mark_goal_complete(*, user_id: str, day: str, goal_id: str) -> Dict[str, Any]:
    return upsert_goal(user_id=user_id, day=day, flags={GOAL_COLUMNS[goal_id]: True})


def list_goals_between(*, user_id: str, start_day: str, end_day: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM daily_goals WHERE user_id = ? AND date BETWEEN ? AND ? ORDER BY date ASC",
            (user_id, start_day, end_day),
        ).fetchall()
    return [_row_to_goal(r) for r in rows]


def list_week(*, user_id: str, week_start: str) -> List[Dict[str, Any]]:
    start = parse_day(week_start)
    end = start + timedelta(days=6)
    return list_goals_between(user_id=user_id, start_day=start.isoformat(), end_day=end.isoformat())


def list_all_goals(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM daily_goals WHERE user_id = ? ORDER BY date ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_goal(r) for r in rows]
