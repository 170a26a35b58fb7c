# -*- coding: utf-8 -*-
"""Daily insights — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def _row_to_insight(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["viewed"] = bool(out["viewed"])
    return out


def get_insight_for_day(*, user_id: str, day: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM daily_insights WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()
    return _row_to_insight(row) if row else None


def save_insight(*, user_id: str, day: str, title: str, content: str, insight_type: str) -> Dict[str, Any]:
    """Store the day's insight; a concurrent insert for the same day wins."""
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO daily_insights (id, user_id, date, title, content, insight_type, viewed, created_at)
            VALUES (?, ?, ?, ?, ?, ?, 0, ?)
            ON CONFLICT(user_id, date) DO NOTHING
            """,
            (str(uuid4()), user_id, day, title, content, insight_type, utc_now_iso()),
        )
        row = conn.execute(
            "SELECT * FROM daily_insights WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()
    return _row_to_insight(row)


def mark_viewed(*, user_id: str, insight_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE daily_insights SET viewed = 1, viewed_at = ? WHERE id = ? AND user_id = ?",
            (utc_now_iso(), insight_id, user_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Insight not found")
