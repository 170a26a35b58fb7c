# -*- coding: utf-8 -*-
"""Research — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

ResearchCategory = Literal["overview", "glp1", "fasting", "nutrition", "exercise", "metabolic"]


class ResearchDigest(BaseModel):
    overview: str
    glp1: str
    fasting: str
    nutrition: str
    exercise: str
    metabolic: str


class ResearchEntry(BaseModel):
    id: str
    user_id: str
    category: ResearchCategory
    content: str
    generated_at: str
    viewed: bool
    viewed_at: Optional[str] = None
    bookmarked: bool


class BookmarkRequest(BaseModel):
    bookmarked: bool
