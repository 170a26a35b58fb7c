# -*- coding: utf-8 -*-
"""Medications and dose logs — DB storage helpers."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import iso, utc_now, utc_now_iso
from ..numbers import round_half_up

_UPDATABLE = ("dosage", "frequency", "end_date", "side_effects", "effectiveness", "notes", "active")


def _row_to_medication(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["active"] = bool(out["active"])
    return out


def create_medication(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    medication_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO medications (
                id, user_id, name, type, dosage, frequency, start_date, end_date,
                prescribed_for, side_effects, effectiveness, notes, active, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                medication_id,
                user_id,
                fields["name"],
                fields["type"],
                fields["dosage"],
                fields["frequency"],
                fields["start_date"],
                fields.get("end_date"),
                fields.get("prescribed_for"),
                fields.get("side_effects"),
                fields.get("effectiveness"),
                fields.get("notes"),
                1 if fields.get("active", True) else 0,
                now,
                now,
            ),
        )
    return require_medication(user_id=user_id, medication_id=medication_id)


def require_medication(*, user_id: str, medication_id: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM medications WHERE id = ? AND user_id = ?",
            (medication_id, user_id),
        ).fetchone()
    if not row:
        raise HTTPException(status_code=404, detail="Medication not found")
    return _row_to_medication(row)


def list_medications(*, user_id: str, active_only: bool = False) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM medications WHERE user_id = ?"
    if active_only:
        sql += " AND active = 1"
    sql += " ORDER BY start_date DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, (user_id,)).fetchall()
    return [_row_to_medication(r) for r in rows]


def update_medication(*, user_id: str, medication_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    require_medication(user_id=user_id, medication_id=medication_id)
    updates = {k: v for k, v in fields.items() if k in _UPDATABLE and v is not None}
    if "active" in updates:
        updates["active"] = 1 if updates["active"] else 0
    if updates:
        updates["updated_at"] = utc_now_iso()
        assignments = ", ".join(f"{k} = ?" for k in updates)
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                f"UPDATE medications SET {assignments} WHERE id = ? AND user_id = ?",
                (*updates.values(), medication_id, user_id),
            )
    return require_medication(user_id=user_id, medication_id=medication_id)


def log_dose(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    require_medication(user_id=user_id, medication_id=fields["medication_id"])
    log_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO medication_logs (
                id, user_id, medication_id, taken_at, dosage_taken, side_effects_noted, notes, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                log_id,
                user_id,
                fields["medication_id"],
                fields["taken_at"],
                fields["dosage_taken"],
                fields.get("side_effects_noted"),
                fields.get("notes"),
                utc_now_iso(),
            ),
        )
        row = conn.execute("SELECT * FROM medication_logs WHERE id = ?", (log_id,)).fetchone()
    return dict(row)


def list_doses(
    *,
    user_id: str,
    medication_id: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: int = 100,
) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM medication_logs WHERE user_id = ?"
    params: List[Any] = [user_id]
    if medication_id:
        sql += " AND medication_id = ?"
        params.append(medication_id)
    if start:
        sql += " AND taken_at >= ?"
        params.append(start)
    if end:
        sql += " AND taken_at <= ?"
        params.append(end)
    sql += " ORDER BY taken_at DESC LIMIT ?"
    params.append(int(limit))
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [dict(r) for r in rows]


def adherence(*, user_id: str, medication_id: str, days: int = 30) -> Dict[str, Any]:
    """Logged doses against one expected dose per day over the window."""
    medication = require_medication(user_id=user_id, medication_id=medication_id)
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            """
            SELECT COUNT(*) AS n FROM medication_logs
            WHERE user_id = ? AND medication_id = ? AND taken_at >= ?
            """,
            (user_id, medication_id, iso(utc_now() - timedelta(days=days))),
        ).fetchone()
    total = int(row["n"])
    return {
        "total_doses": total,
        "expected_doses": days,
        "adherence_rate": round_half_up(100 * total / days) if days > 0 else 0,
        "period_days": days,
        "medication_name": medication["name"],
    }
