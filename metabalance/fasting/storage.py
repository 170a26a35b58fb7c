# -*- coding: utf-8 -*-
"""Intermittent fasting — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def _row_to_schedule(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["is_active"] = bool(out["is_active"])
    return out


def _row_to_log(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["adhered"] = bool(out["adhered"])
    return out


def create_schedule(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Insert a schedule and make it the only active one."""
    schedule_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE fasting_schedules SET is_active = 0, updated_at = ? WHERE user_id = ? AND is_active = 1",
            (now, user_id),
        )
        conn.execute(
            """
            INSERT INTO fasting_schedules (
                id, user_id, fasting_type, eating_window_start, eating_window_end,
                fasting_days, is_active, start_date, end_date, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, 1, ?, ?, ?, ?)
            """,
            (
                schedule_id,
                user_id,
                fields["fasting_type"],
                fields.get("eating_window_start"),
                fields.get("eating_window_end"),
                fields.get("fasting_days"),
                fields["start_date"],
                fields.get("end_date"),
                now,
                now,
            ),
        )
        row = conn.execute("SELECT * FROM fasting_schedules WHERE id = ?", (schedule_id,)).fetchone()
    return _row_to_schedule(row)


def get_active_schedule(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM fasting_schedules WHERE user_id = ? AND is_active = 1 ORDER BY created_at DESC LIMIT 1",
            (user_id,),
        ).fetchone()
    return _row_to_schedule(row) if row else None


def list_schedules(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM fasting_schedules WHERE user_id = ? ORDER BY created_at DESC",
            (user_id,),
        ).fetchall()
    return [_row_to_schedule(r) for r in rows]


def require_schedule(*, user_id: str, schedule_id: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM fasting_schedules WHERE id = ? AND user_id = ?",
            (schedule_id, user_id),
        ).fetchone()
    if not row:
        raise HTTPException(status_code=404, detail="Fasting schedule not found")
    return _row_to_schedule(row)


def log_adherence(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    require_schedule(user_id=user_id, schedule_id=fields["schedule_id"])
    log_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO fasting_logs (
                id, user_id, schedule_id, date, adhered, actual_eating_start, actual_eating_end, notes, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                log_id,
                user_id,
                fields["schedule_id"],
                fields["date"],
                1 if fields["adhered"] else 0,
                fields.get("actual_eating_start"),
                fields.get("actual_eating_end"),
                fields.get("notes"),
                utc_now_iso(),
            ),
        )
        row = conn.execute("SELECT * FROM fasting_logs WHERE id = ?", (log_id,)).fetchone()
    return _row_to_log(row)


def list_logs(
    *,
    user_id: str,
    schedule_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[Dict[str, Any]]:
    require_schedule(user_id=user_id, schedule_id=schedule_id)
    sql = "SELECT * FROM fasting_logs WHERE user_id = ? AND schedule_id = ?"
    params: List[Any] = [user_id, schedule_id]
    if start:
        sql += " AND date >= ?"
        params.append(start[:10])
    if end:
        sql += " AND date <= ?"
        params.append(end[:10])
    sql += " ORDER BY date DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_log(r) for r in rows]
