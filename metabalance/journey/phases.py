# -*- coding: utf-8 -*-
"""Journey phases and initialization — DB storage helpers.

A journey is four consecutive three-month phases. Each phase owns a share of
the total planned loss (start weight minus target weight).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import add_months, iso, utc_now, utc_now_iso
from ..numbers import round_half_up

PHASE_MONTHS = 3

# (number, name, share of total loss)
PHASES = (
    (1, "Foundation & Metabolic Reset", 0.22),
    (2, "Acceleration & Advanced Protocols", 0.28),
    (3, "Deep Optimization & Metabolic Reset", 0.28),
    (4, "Maintenance & Consolidation", 0.22),
)

# tables cleared by reset_journey
_JOURNEY_TABLES = (
    "journey_phases",
    "user_supplement_log",
    "extended_fasting_sessions",
    "blood_work_results",
    "journey_initializations",
    "supplement_reminders",
    "fasting_analytics",
)


def _shift_months(moment: datetime, months: int) -> datetime:
    day = add_months(moment, months)
    return moment.replace(year=day.year, month=day.month, day=day.day)


def plan_phases(start_weight: float, target_weight: float, start: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Phase rows (without ids) for a journey starting at ``start``."""
    start = start or utc_now()
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    total_loss = start_weight - target_weight
    planned = []
    for index, (number, name, share) in enumerate(PHASES):
        planned.append(
            {
                "phase_number": number,
                "phase_name": name,
                "start_date": iso(_shift_months(start, index * PHASE_MONTHS)),
                "end_date": iso(_shift_months(start, (index + 1) * PHASE_MONTHS)),
                "goal_weight_loss": round_half_up(total_loss * share, 2),
                "actual_weight_loss": 0.0,
                "status": "active" if number == 1 else "upcoming",
            }
        )
    return planned


def initialize_phases(*, user_id: str, start_weight: float, target_weight: float) -> List[Dict[str, Any]]:
    now = utc_now_iso()
    planned = plan_phases(start_weight, target_weight)
    with db_conn(settings.app_db_path) as conn:
        conn.execute("DELETE FROM journey_phases WHERE user_id = ?", (user_id,))
        conn.executemany(
            """
            INSERT INTO journey_phases (
                id, user_id, phase_number, phase_name, start_date, end_date,
                goal_weight_loss, actual_weight_loss, status, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    str(uuid4()),
                    user_id,
                    p["phase_number"],
                    p["phase_name"],
                    p["start_date"],
                    p["end_date"],
                    p["goal_weight_loss"],
                    p["actual_weight_loss"],
                    p["status"],
                    now,
                    now,
                )
                for p in planned
            ],
        )
        conn.execute(
            """
            INSERT INTO journey_initializations (
                id, user_id, start_date, initial_weight, goal_weight,
                current_phase, completed_phases, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, 1, 0, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                start_date = excluded.start_date,
                initial_weight = excluded.initial_weight,
                goal_weight = excluded.goal_weight,
                current_phase = 1,
                completed_phases = 0,
                updated_at = excluded.updated_at
            """,
            (str(uuid4()), user_id, planned[0]["start_date"], start_weight, target_weight, now, now),
        )
    return list_phases(user_id=user_id)


def list_phases(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM journey_phases WHERE user_id = ? ORDER BY phase_number ASC",
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def current_phase(*, user_id: str, now: Optional[str] = None) -> Optional[Dict[str, Any]]:
    moment = now or utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            """
            SELECT * FROM journey_phases
            WHERE user_id = ? AND start_date <= ? AND end_date >= ?
            ORDER BY phase_number ASC LIMIT 1
            """,
            (user_id, moment, moment),
        ).fetchone()
    return dict(row) if row else None


def update_phase_progress(
    *, user_id: str, phase_number: int, actual_weight_loss: float, status: Optional[str] = None
) -> Dict[str, Any]:
    sets = ["actual_weight_loss = ?", "updated_at = ?"]
    params: List[Any] = [round_half_up(actual_weight_loss, 2), utc_now_iso()]
    if status:
        sets.append("status = ?")
        params.append(status)
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            f"UPDATE journey_phases SET {', '.join(sets)} WHERE user_id = ? AND phase_number = ?",
            (*params, user_id, phase_number),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Phase not found")
        row = conn.execute(
            "SELECT * FROM journey_phases WHERE user_id = ? AND phase_number = ?",
            (user_id, phase_number),
        ).fetchone()
    return dict(row)


def get_initialization(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM journey_initializations WHERE user_id = ?", (user_id,)).fetchone()
    return dict(row) if row else None


def advance_phase(*, user_id: str, new_phase: int) -> Dict[str, Any]:
    """Move the journey to ``new_phase``; earlier phases become completed."""
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            UPDATE journey_initializations
            SET current_phase = ?, completed_phases = ?, updated_at = ?
            WHERE user_id = ?
            """,
            (new_phase, new_phase - 1, now, user_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Journey not initialized")
        conn.execute(
            """
            UPDATE journey_phases
            SET status = CASE
                    WHEN phase_number < ? AND status != 'skipped' THEN 'completed'
                    WHEN phase_number = ? THEN 'active'
                    ELSE 'upcoming'
                END,
                updated_at = ?
            WHERE user_id = ?
            """,
            (new_phase, new_phase, now, user_id),
        )
        row = conn.execute("SELECT * FROM journey_initializations WHERE user_id = ?", (user_id,)).fetchone()
    return dict(row)


def reset_journey(*, user_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        for table in _JOURNEY_TABLES:
            conn.execute(f"DELETE FROM {table} WHERE user_id = ?", (user_id,))
