# -*- coding: utf-8 -*-
"""Progress — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso

_COLUMNS = (
    "logged_at",
    "weight",
    "waist_circumference",
    "hip_circumference",
    "chest_circumference",
    "energy_level",
    "mood",
    "sleep_quality",
    "photo_front_url",
    "photo_side_url",
    "photo_back_url",
    "notes",
)


def create_progress(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    record = {"id": str(uuid4()), "user_id": user_id}
    record.update({k: fields.get(k) for k in _COLUMNS})
    record["created_at"] = utc_now_iso()
    columns = list(record.keys())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"INSERT INTO progress_logs ({', '.join(columns)}) VALUES ({', '.join('?' for _ in columns)})",
            tuple(record.values()),
        )
    return record


def list_progress(
    *,
    user_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Newest first; the day range applies only when both bounds are given."""
    sql = "SELECT * FROM progress_logs WHERE user_id = ?"
    params: List[Any] = [user_id]
    if start and end:
        sql += " AND substr(logged_at, 1, 10) BETWEEN ? AND ?"
        params.extend([start[:10], end[:10]])
    sql += " ORDER BY logged_at DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [dict(r) for r in rows]


def latest_progress(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM progress_logs WHERE user_id = ? ORDER BY logged_at DESC LIMIT 1",
            (user_id,),
        ).fetchone()
    return dict(row) if row else None


def weight_history(*, user_id: str) -> List[Dict[str, Any]]:
    """Logs carrying a weight, oldest first."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM progress_logs WHERE user_id = ? AND weight IS NOT NULL ORDER BY logged_at ASC",
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]
