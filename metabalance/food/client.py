# -*- coding: utf-8 -*-
"""Spoonacular ingredient search and nutrition lookup."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import httpx
from fastapi import HTTPException

from ..config import settings
from ..numbers import round_half_up

log = logging.getLogger(__name__)

# Spoonacular nutrient name -> our macro field.
NUTRIENT_FIELDS: Dict[str, str] = {
    "Calories": "calories",
    "Protein": "protein",
    "Carbohydrates": "carbs",
    "Fat": "fats",
    "Fiber": "fiber",
}


def _api_key() -> str:
    if not settings.spoonacular_api_key:
        raise HTTPException(status_code=500, detail="SPOONACULAR_API_KEY not set")
    return settings.spoonacular_api_key


def _get(path: str, params: Dict[str, Any]) -> Any:
    url = f"{settings.spoonacular_base_url.rstrip('/')}{path}"
    query = {**params, "apiKey": _api_key()}
    try:
        with httpx.Client(timeout=settings.spoonacular_timeout, follow_redirects=True) as client:
            resp = client.get(url, params=query)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        log.warning("Spoonacular request %s failed: %s", path, status)
        raise HTTPException(status_code=502, detail=f"Spoonacular API error: {status}") from exc
    except httpx.HTTPError as exc:
        log.warning("Spoonacular unreachable: %s", exc)
        raise HTTPException(status_code=502, detail=f"Spoonacular API unreachable: {exc}") from exc


def extract_macros(nutrients: List[Mapping[str, Any]]) -> Dict[str, int]:
    macros = {field: 0 for field in NUTRIENT_FIELDS.values()}
    for nutrient in nutrients or []:
        field = NUTRIENT_FIELDS.get(str(nutrient.get("name") or ""))
        if field:
            macros[field] = round_half_up(float(nutrient.get("amount") or 0))
    return macros


def search_foods(query: str, limit: int = 10) -> List[Dict[str, Any]]:
    data = _get(
        "/food/ingredients/autocomplete",
        {"query": query, "number": limit, "metaInformation": "true"},
    )
    return [
        {"id": int(item["id"]), "name": item.get("name") or "", "image": item.get("image")}
        for item in data or []
        if item.get("id") is not None
    ]


def get_food_nutrition(ingredient_id: int, amount: float = 100, unit: str = "g") -> Dict[str, Any]:
    data = _get(f"/food/ingredients/{ingredient_id}/information", {"amount": amount, "unit": unit})
    nutrients = (data.get("nutrition") or {}).get("nutrients") or []
    return {
        "id": int(data.get("id") or ingredient_id),
        "name": data.get("name") or "",
        "amount": amount,
        "unit": unit,
        **extract_macros(nutrients),
    }
