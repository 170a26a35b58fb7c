# -*- coding: utf-8 -*-
"""Chat — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def append_message(*, user_id: str, role: str, content: str) -> Dict[str, Any]:
    msg_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO chat_messages (id, user_id, role, content, created_at) VALUES (?, ?, ?, ?, ?)",
            (msg_id, user_id, role, content, now),
        )
    return {"id": msg_id, "role": role, "content": content, "created_at": now}


def list_recent_messages(*, user_id: str, limit: int = 50) -> List[Dict[str, Any]]:
    """The ``limit`` most recent messages, returned oldest first."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT id, role, content, created_at FROM chat_messages
            WHERE user_id = ?
            ORDER BY created_at DESC, rowid DESC
            LIMIT ?
            """,
            (user_id, int(limit)),
        ).fetchall()
    return [dict(r) for r in reversed(rows)]


def clear_messages(*, user_id: str) -> int:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM chat_messages WHERE user_id = ?", (user_id,))
        return cur.rowcount
