# -*- coding: utf-8 -*-
"""Blood work results — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso
from ..numbers import round_half_up

# marker -> decimals kept
MARKERS = {
    "glucose": 2,
    "a1c": 2,
    "total_cholesterol": 2,
    "ldl": 2,
    "hdl": 2,
    "triglycerides": 2,
    "tsh": 3,
    "alt": 2,
    "ast": 2,
}


def add_result(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    result_id = str(uuid4())
    values = {
        marker: round_half_up(fields[marker], places) if fields.get(marker) is not None else None
        for marker, places in MARKERS.items()
    }
    columns = ", ".join(MARKERS)
    marks = ", ".join("?" for _ in MARKERS)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO blood_work_results (id, user_id, test_date, {columns}, notes, created_at)
            VALUES (?, ?, ?, {marks}, ?, ?)
            """,
            (result_id, user_id, fields["test_date"], *values.values(), fields.get("notes"), utc_now_iso()),
        )
        row = conn.execute("SELECT * FROM blood_work_results WHERE id = ?", (result_id,)).fetchone()
    return dict(row)


def list_results(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM blood_work_results WHERE user_id = ? ORDER BY test_date DESC",
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def latest_result(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM blood_work_results WHERE user_id = ? ORDER BY test_date DESC LIMIT 1",
            (user_id,),
        ).fetchone()
    return dict(row) if row else None
