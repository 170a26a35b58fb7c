# -*- coding: utf-8 -*-
"""Progress — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .export import export_progress_pdf
from .models import PDFExportResponse, ProgressCreateRequest, ProgressLog
from .storage import create_progress, latest_progress, list_progress

router = APIRouter(prefix="/api/progress", tags=["Progress"])


@router.get("", response_model=List[ProgressLog], summary="Progress logs (newest first)")
def list_logs(
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    return list_progress(user_id=user["id"], start=start, end=end)


@router.get("/latest", response_model=Optional[ProgressLog], summary="Most recent progress log")
def latest(user: dict = Depends(get_current_user)):
    return latest_progress(user_id=user["id"])


@router.post("", response_model=ProgressLog, summary="Log weight and measurements")
def create(request: ProgressCreateRequest, user: dict = Depends(get_current_user)):
    return create_progress(user_id=user["id"], fields=request.model_dump())


@router.get("/export", response_model=PDFExportResponse, summary="Export a PDF progress report")
def export_pdf(user: dict = Depends(get_current_user)):
    return export_progress_pdf(user)
