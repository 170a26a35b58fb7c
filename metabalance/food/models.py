# -*- coding: utf-8 -*-
"""Food lookup — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class FoodSearchResult(BaseModel):
    id: int
    name: str
    image: Optional[str] = None


class FoodNutrition(BaseModel):
    id: int
    name: str
    amount: float
    unit: str
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    fiber: int = 0
