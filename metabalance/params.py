# -*- coding: utf-8 -*-
"""Shared query-parameter parsing for the API routers."""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException

from .dates import day_key, today_key


def resolve_day(value: Optional[str]) -> str:
    """``YYYY-MM-DD`` for a day or ISO timestamp parameter; today when omitted."""
    if not value:
        return today_key()
    try:
        return day_key(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}") from exc
