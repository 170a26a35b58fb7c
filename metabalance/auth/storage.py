# -*- coding: utf-8 -*-
"""Auth — DB storage helpers. Emails are stored lower-cased."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def _fetch_user(where: str, value: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(f"SELECT * FROM users WHERE {where} = ?", (value,)).fetchone()
    return dict(row) if row else None


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    return _fetch_user("email", email.strip().lower())


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    return _fetch_user("id", user_id)


def create_user(*, email: str, password_hash: str, name: Optional[str] = None) -> Dict[str, Any]:
    user = {
        "id": str(uuid4()),
        "email": email.strip().lower(),
        "name": name,
        "password_hash": password_hash,
        "created_at": utc_now_iso(),
    }
    user["last_signed_in"] = user["created_at"]
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO users (id, email, name, password_hash, created_at, last_signed_in)
            VALUES (:id, :email, :name, :password_hash, :created_at, :last_signed_in)
            """,
            user,
        )
    return user


def touch_last_signed_in(user_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute("UPDATE users SET last_signed_in = ? WHERE id = ?", (utc_now_iso(), user_id))
