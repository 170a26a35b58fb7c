# -*- coding: utf-8 -*-
"""Achievements — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def _row_to_unlock(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["viewed"] = bool(out.get("viewed"))
    return out


def list_unlocked(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM user_achievements WHERE user_id = ? ORDER BY unlocked_at ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_unlock(r) for r in rows]


def list_unviewed(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM user_achievements WHERE user_id = ? AND viewed = 0 ORDER BY unlocked_at ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_unlock(r) for r in rows]


def unlock(*, user_id: str, achievement_ids: Iterable[str]) -> None:
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.executemany(
            """
            INSERT INTO user_achievements (id, user_id, achievement_id, unlocked_at, viewed)
            VALUES (?, ?, ?, ?, 0)
            ON CONFLICT(user_id, achievement_id) DO NOTHING
            """,
            [(str(uuid4()), user_id, aid, now) for aid in achievement_ids],
        )


def mark_viewed(*, user_id: str, achievement_ids: Sequence[str]) -> None:
    if not achievement_ids:
        return
    marks = ",".join("?" for _ in achievement_ids)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"UPDATE user_achievements SET viewed = 1 WHERE user_id = ? AND achievement_id IN ({marks})",
            (user_id, *achievement_ids),
        )
