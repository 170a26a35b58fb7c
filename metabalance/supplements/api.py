# -*- coding: utf-8 -*-
"""Supplements — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .models import Supplement, SupplementCreateRequest, SupplementLog, SupplementLogRequest, SupplementUpdateRequest
from .storage import create_supplement, delete_supplement, list_logs, list_supplements, log_adherence, update_supplement

router = APIRouter(prefix="/api/supplements", tags=["Supplements"])


@router.get("", response_model=List[Supplement], summary="List supplements")
def list_all(
    active_only: bool = Query(default=False),
    user: dict = Depends(get_current_user),
):
    return list_supplements(user_id=user["id"], active_only=active_only)


@router.get("/active", response_model=List[Supplement], summary="Active supplements")
def list_active(user: dict = Depends(get_current_user)):
    return list_supplements(user_id=user["id"], active_only=True)


@router.post("", response_model=Supplement, summary="Add a supplement")
def create(request: SupplementCreateRequest, user: dict = Depends(get_current_user)):
    return create_supplement(user_id=user["id"], fields=request.model_dump())


@router.patch("/{supplement_id}", response_model=Supplement, summary="Update a supplement")
def update(supplement_id: str, request: SupplementUpdateRequest, user: dict = Depends(get_current_user)):
    return update_supplement(
        user_id=user["id"],
        supplement_id=supplement_id,
        fields=request.model_dump(exclude_unset=True),
    )


@router.delete("/{supplement_id}", summary="Delete a supplement")
def delete(supplement_id: str, user: dict = Depends(get_current_user)):
    delete_supplement(user_id=user["id"], supplement_id=supplement_id)
    return {"success": True}


@router.post("/logs", response_model=SupplementLog, summary="Log supplement adherence")
def create_log(request: SupplementLogRequest, user: dict = Depends(get_current_user)):
    return log_adherence(user_id=user["id"], fields=request.model_dump())


@router.get("/{supplement_id}/logs", response_model=List[SupplementLog], summary="Supplement adherence logs")
def get_logs(
    supplement_id: str,
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    user: dict = Depends(get_current_user),
):
    return list_logs(user_id=user["id"], supplement_id=supplement_id, start=start, end=end)
