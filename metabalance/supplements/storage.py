# -*- coding: utf-8 -*-
"""Supplements — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso

_UPDATABLE = ("name", "dosage", "frequency", "timing", "end_date", "is_active", "notes")


def _row_to_supplement(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["is_active"] = bool(out["is_active"])
    return out


def _row_to_log(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["adhered"] = bool(out["adhered"])
    return out


def list_supplements(*, user_id: str, active_only: bool = False) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM supplements WHERE user_id = ?"
    if active_only:
        sql += " AND is_active = 1"
    sql += " ORDER BY created_at DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, (user_id,)).fetchall()
    return [_row_to_supplement(r) for r in rows]


def require_supplement(*, user_id: str, supplement_id: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM supplements WHERE id = ? AND user_id = ?",
            (supplement_id, user_id),
        ).fetchone()
    if not row:
        raise HTTPException(status_code=404, detail="Supplement not found")
    return _row_to_supplement(row)


def create_supplement(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    supplement_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO supplements (
                id, user_id, name, type, dosage, frequency, timing,
                start_date, end_date, is_active, notes, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 1, ?, ?, ?)
            """,
            (
                supplement_id,
                user_id,
                fields["name"],
                fields["type"],
                fields.get("dosage"),
                fields.get("frequency"),
                fields.get("timing"),
                fields["start_date"],
                fields.get("end_date"),
                fields.get("notes"),
                now,
                now,
            ),
        )
    return require_supplement(user_id=user_id, supplement_id=supplement_id)


def update_supplement(*, user_id: str, supplement_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    require_supplement(user_id=user_id, supplement_id=supplement_id)
    updates = {k: v for k, v in fields.items() if k in _UPDATABLE}
    if "is_active" in updates:
        if updates["is_active"] is None:
            updates.pop("is_active")
        else:
            updates["is_active"] = 1 if updates["is_active"] else 0
    if updates:
        assignments = ", ".join(f"{k} = ?" for k in updates)
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                f"UPDATE supplements SET {assignments}, updated_at = ? WHERE id = ? AND user_id = ?",
                (*updates.values(), utc_now_iso(), supplement_id, user_id),
            )
    return require_supplement(user_id=user_id, supplement_id=supplement_id)


def delete_supplement(*, user_id: str, supplement_id: str) -> None:
    require_supplement(user_id=user_id, supplement_id=supplement_id)
    with db_conn(settings.app_db_path) as conn:
        conn.execute("DELETE FROM supplements WHERE id = ? AND user_id = ?", (supplement_id, user_id))


def log_adherence(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    require_supplement(user_id=user_id, supplement_id=fields["supplement_id"])
    log_id = str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO supplement_logs (id, user_id, supplement_id, taken_at, adhered, notes, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                log_id,
                user_id,
                fields["supplement_id"],
                fields["taken_at"],
                1 if fields["adhered"] else 0,
                fields.get("notes"),
                utc_now_iso(),
            ),
        )
        row = conn.execute("SELECT * FROM supplement_logs WHERE id = ?", (log_id,)).fetchone()
    return _row_to_log(row)


def list_logs(
    *,
    user_id: str,
    supplement_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[Dict[str, Any]]:
    require_supplement(user_id=user_id, supplement_id=supplement_id)
    sql = "SELECT * FROM supplement_logs WHERE user_id = ? AND supplement_id = ?"
    params: List[Any] = [user_id, supplement_id]
    if start:
        sql += " AND substr(taken_at, 1, 10) >= ?"
        params.append(start[:10])
    if end:
        sql += " AND substr(taken_at, 1, 10) <= ?"
        params.append(end[:10])
    sql += " ORDER BY taken_at DESC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_log(r) for r in rows]
