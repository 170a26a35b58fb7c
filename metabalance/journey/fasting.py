# -*- coding: utf-8 -*-
"""Extended fasting sessions and their rollup analytics."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import iso, parse_timestamp, utc_now, utc_now_iso
from ..numbers import round_half_up


def _row_to_session(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["completed"] = bool(out["completed"])
    return out


def start_session(
    *, user_id: str, fasting_type: str, target_duration: int, weight_before: Optional[float] = None
) -> Dict[str, Any]:
    session_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO extended_fasting_sessions (
                id, user_id, fasting_type, start_time, target_duration, weight_before, completed, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, 0, ?)
            """,
            (
                session_id,
                user_id,
                fasting_type,
                now,
                int(target_duration),
                round_half_up(weight_before, 2) if weight_before is not None else None,
                now,
            ),
        )
        row = conn.execute("SELECT * FROM extended_fasting_sessions WHERE id = ?", (session_id,)).fetchone()
    return _row_to_session(row)


def end_session(
    *,
    user_id: str,
    session_id: str,
    weight_after: Optional[float] = None,
    electrolytes_log: Optional[str] = None,
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM extended_fasting_sessions WHERE id = ? AND user_id = ?",
            (session_id, user_id),
        ).fetchone()
        if not row:
            raise HTTPException(status_code=404, detail="Fasting session not found")
        if row["completed"]:
            raise HTTPException(status_code=400, detail="Fasting session already ended")

        ended = utc_now()
        elapsed = ended - parse_timestamp(row["start_time"])
        conn.execute(
            """
            UPDATE extended_fasting_sessions
            SET end_time = ?, actual_duration = ?, weight_after = ?, electrolytes_log = ?, notes = ?, completed = 1
            WHERE id = ? AND user_id = ?
            """,
            (
                iso(ended),
                int(elapsed.total_seconds() // 3600),
                round_half_up(weight_after, 2) if weight_after is not None else None,
                electrolytes_log,
                notes,
                session_id,
                user_id,
            ),
        )
        row = conn.execute("SELECT * FROM extended_fasting_sessions WHERE id = ?", (session_id,)).fetchone()
    return _row_to_session(row)


def active_session(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            """
            SELECT * FROM extended_fasting_sessions
            WHERE user_id = ? AND completed = 0
            ORDER BY start_time DESC LIMIT 1
            """,
            (user_id,),
        ).fetchone()
    return _row_to_session(row) if row else None


def list_sessions(*, user_id: str, limit: Optional[int] = 10) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM extended_fasting_sessions WHERE user_id = ? ORDER BY start_time DESC"
    params: List[Any] = [user_id]
    if limit is not None:
        sql += " LIMIT ?"
        params.append(int(limit))
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_session(r) for r in rows]


def compute_stats(sessions: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    completed = sum(1 for s in sessions if s.get("end_time"))
    lost = sum(
        s["weight_before"] - s["weight_after"]
        for s in sessions
        if s.get("weight_before") and s.get("weight_after")
    )
    durations = [s["actual_duration"] for s in sessions if s.get("actual_duration")]
    average = sum(durations) / len(durations) if durations else 0
    return {
        "total_fasts": len(sessions),
        "completed_fasts": completed,
        "abandoned_fasts": len(sessions) - completed,
        "total_weight_lost": f"{lost:.1f}",
        "average_fast_duration": round_half_up(average),
    }


def refresh_stats(*, user_id: str) -> Dict[str, Any]:
    """Recompute the rollup from every session and persist it."""
    stats = compute_stats(list_sessions(user_id=user_id, limit=None))
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO fasting_analytics (
                id, user_id, total_fasts, completed_fasts, abandoned_fasts,
                total_weight_lost, average_fast_duration, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                total_fasts = excluded.total_fasts,
                completed_fasts = excluded.completed_fasts,
                abandoned_fasts = excluded.abandoned_fasts,
                total_weight_lost = excluded.total_weight_lost,
                average_fast_duration = excluded.average_fast_duration,
                updated_at = excluded.updated_at
            """,
            (
                str(uuid4()),
                user_id,
                stats["total_fasts"],
                stats["completed_fasts"],
                stats["abandoned_fasts"],
                stats["total_weight_lost"],
                stats["average_fast_duration"],
                utc_now_iso(),
            ),
        )
    return stats
