# -*- coding: utf-8 -*-
"""Journey supplement intake log and reminders — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso
from .catalog import catalog_entry_exists


def _row_to_intake(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["taken"] = bool(out["taken"])
    return out


def _row_to_reminder(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["enabled"] = bool(out["enabled"])
    return out


def _require_catalog_entry(supplement_id: str) -> None:
    if not catalog_entry_exists(supplement_id):
        raise HTTPException(status_code=404, detail="Journey supplement not found")


def log_intake(*, user_id: str, supplement_id: str, day: str, taken: bool, notes: Optional[str] = None) -> Dict[str, Any]:
    _require_catalog_entry(supplement_id)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO user_supplement_log (id, user_id, supplement_id, date, taken, notes, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, supplement_id, date) DO UPDATE SET
                taken = excluded.taken,
                notes = excluded.notes
            """,
            (str(uuid4()), user_id, supplement_id, day, 1 if taken else 0, notes, utc_now_iso()),
        )
        row = conn.execute(
            "SELECT * FROM user_supplement_log WHERE user_id = ? AND supplement_id = ? AND date = ?",
            (user_id, supplement_id, day),
        ).fetchone()
    return _row_to_intake(row)


def list_intake_for_day(*, user_id: str, day: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM user_supplement_log WHERE user_id = ? AND date = ? ORDER BY created_at ASC",
            (user_id, day),
        ).fetchall()
    return [_row_to_intake(r) for r in rows]


def create_reminder(*, user_id: str, supplement_id: str, reminder_time: str) -> Dict[str, Any]:
    _require_catalog_entry(supplement_id)
    reminder_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO supplement_reminders (
                id, user_id, supplement_id, reminder_time, enabled, frequency, created_at, updated_at
            ) VALUES (?, ?, ?, ?, 1, 'daily', ?, ?)
            """,
            (reminder_id, user_id, supplement_id, reminder_time, now, now),
        )
        row = conn.execute("SELECT * FROM supplement_reminders WHERE id = ?", (reminder_id,)).fetchone()
    return _row_to_reminder(row)


def list_reminders(*, user_id: str) -> List[Dict[str, Any]]:
    """Enabled reminders only."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM supplement_reminders WHERE user_id = ? AND enabled = 1 ORDER BY reminder_time ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_reminder(r) for r in rows]


def update_reminder(*, user_id: str, reminder_id: str, reminder_time: str, enabled: bool) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            UPDATE supplement_reminders SET reminder_time = ?, enabled = ?, updated_at = ?
            WHERE id = ? AND user_id = ?
            """,
            (reminder_time, 1 if enabled else 0, utc_now_iso(), reminder_id, user_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Reminder not found")
        row = conn.execute("SELECT * FROM supplement_reminders WHERE id = ?", (reminder_id,)).fetchone()
    return _row_to_reminder(row)
