# -*- coding: utf-8 -*-
"""Food lookup — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .client import get_food_nutrition, search_foods
from .models import FoodNutrition, FoodSearchResult

router = APIRouter(prefix="/api/food", tags=["Food"])


@router.get("/search", response_model=List[FoodSearchResult], summary="Search ingredients")
def search(
    query: str = Query(..., min_length=1, max_length=200),
    limit: int = Query(default=10, ge=1, le=50),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    return search_foods(query, limit)


@router.get("/nutrition/{ingredient_id}", response_model=FoodNutrition, summary="Nutrition for an ingredient")
def nutrition(
    ingredient_id: int,
    amount: float = Query(default=100, gt=0),
    unit: str = Query(default="g", min_length=1, max_length=20),
    user: dict = Depends(get_current_user),  # noqa: ARG001
):
    return get_food_nutrition(ingredient_id, amount, unit)
