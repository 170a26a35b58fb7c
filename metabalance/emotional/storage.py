# -*- coding: utf-8 -*-
"""Emotional eating episodes — DB storage helpers."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import iso, utc_now, utc_now_iso

_EPISODE_FIELDS = (
    "trigger_emotion",
    "trigger_description",
    "situation",
    "food_consumed",
    "estimated_calories",
    "intensity",
    "coping_strategy_used",
    "effectiveness_rating",
    "notes",
)


def create_episode(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    episode_id = str(uuid4())
    now = utc_now_iso()
    columns = ", ".join(_EPISODE_FIELDS)
    marks = ", ".join("?" for _ in _EPISODE_FIELDS)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO emotional_eating_logs (id, user_id, timestamp, {columns}, created_at)
            VALUES (?, ?, ?, {marks}, ?)
            """,
            (
                episode_id,
                user_id,
                fields.get("timestamp") or now,
                *(fields.get(f) for f in _EPISODE_FIELDS),
                now,
            ),
        )
        row = conn.execute("SELECT * FROM emotional_eating_logs WHERE id = ?", (episode_id,)).fetchone()
    return dict(row)


def list_episodes(
    *,
    user_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Newest first; ``start``/``end`` are inclusive UTC timestamps."""
    sql = "SELECT * FROM emotional_eating_logs WHERE user_id = ?"
    params: List[Any] = [user_id]
    if start:
        sql += " AND timestamp >= ?"
        params.append(start)
    if end:
        sql += " AND timestamp <= ?"
        params.append(end)
    sql += " ORDER BY timestamp DESC"
    if limit is not None:
        sql += " LIMIT ?"
        params.append(int(limit))
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [dict(r) for r in rows]


def episodes_since(*, user_id: str, days: int) -> List[Dict[str, Any]]:
    return list_episodes(user_id=user_id, start=iso(utc_now() - timedelta(days=days)))
