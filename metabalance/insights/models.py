# -*- coding: utf-8 -*-
"""Daily insights — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

InsightType = Literal["motivation", "education", "tip", "reminder", "celebration"]


class DailyInsight(BaseModel):
    id: str
    user_id: str
    date: str
    title: str
    content: str
    insight_type: InsightType
    viewed: bool
    viewed_at: Optional[str] = None
    created_at: str
