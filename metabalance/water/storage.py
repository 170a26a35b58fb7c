# -*- coding: utf-8 -*-
"""Water intake — DB storage helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso
from ..goals.storage import mark_goal_complete
from .models import DAILY_TARGET_GLASSES

log = logging.getLogger(__name__)


def get_intake(*, user_id: str, day: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM water_intake WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()
    return dict(row) if row else None


def upsert_intake(*, user_id: str, day: str, glasses: int) -> Dict[str, Any]:
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO water_intake (id, user_id, date, glasses, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, date) DO UPDATE SET
                glasses = excluded.glasses,
                updated_at = excluded.updated_at
            """,
            (str(uuid4()), user_id, day, glasses, now, now),
        )
        row = conn.execute(
            "SELECT * FROM water_intake WHERE user_id = ? AND date = ?",
            (user_id, day),
        ).fetchone()

    # Reaching the target completes the day's water goal; dropping below never un-completes it.
    if glasses >= DAILY_TARGET_GLASSES:
        mark_goal_complete(user_id=user_id, day=day, goal_id="water")
        log.info("water goal reached for user %s on %s", user_id, day)
    return dict(row)


def list_intake_between(*, user_id: str, start_day: str, end_day: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM water_intake WHERE user_id = ? AND date BETWEEN ? AND ? ORDER BY date ASC",
            (user_id, start_day, end_day),
        ).fetchall()
    return [dict(r) for r in rows]
