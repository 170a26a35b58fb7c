# -*- coding: utf-8 -*-
"""Research — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def _row_to_entry(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    out["viewed"] = bool(out["viewed"])
    out["bookmarked"] = bool(out["bookmarked"])
    return out


def save_digest(*, user_id: str, digest: Mapping[str, str]) -> str:
    """Persist one row per category with a shared ``generated_at``."""
    generated_at = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.executemany(
            """
            INSERT INTO research_content (id, user_id, category, content, generated_at, viewed, bookmarked)
            VALUES (?, ?, ?, ?, ?, 0, 0)
            """,
            [(str(uuid4()), user_id, category, content, generated_at) for category, content in digest.items()],
        )
    return generated_at


def list_history(*, user_id: str, category: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM research_content WHERE user_id = ?"
    params: List[Any] = [user_id]
    if category:
        sql += " AND category = ?"
        params.append(category)
    sql += " ORDER BY generated_at DESC LIMIT ?"
    params.append(int(limit))
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [_row_to_entry(r) for r in rows]


def latest_by_category(*, user_id: str, category: str) -> Optional[Dict[str, Any]]:
    rows = list_history(user_id=user_id, category=category, limit=1)
    return rows[0] if rows else None


def mark_viewed(*, user_id: str, entry_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE research_content SET viewed = 1, viewed_at = ? WHERE id = ? AND user_id = ?",
            (utc_now_iso(), entry_id, user_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Research entry not found")


def set_bookmark(*, user_id: str, entry_id: str, bookmarked: bool) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "UPDATE research_content SET bookmarked = ? WHERE id = ? AND user_id = ?",
            (1 if bookmarked else 0, entry_id, user_id),
        )
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Research entry not found")
