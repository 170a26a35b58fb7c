# -*- coding: utf-8 -*-
"""Achievements — Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

AchievementCategory = Literal["weight", "streak", "consistency", "milestone"]
AchievementTier = Literal["bronze", "silver", "gold", "platinum"]


class AchievementInfo(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    category: AchievementCategory
    tier: AchievementTier


class AchievementStatus(AchievementInfo):
    unlocked: bool = False
    unlocked_at: Optional[str] = None


class UnviewedAchievement(BaseModel):
    id: str
    achievement_id: str
    unlocked_at: str
    viewed: bool = False
    definition: AchievementInfo


class MarkViewedRequest(BaseModel):
    achievement_ids: List[str] = Field(default_factory=list)


class CheckResponse(BaseModel):
    new_achievements: List[AchievementInfo]
