# -*- coding: utf-8 -*-
"""Research — API endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from .. import llm
from ..auth.security import get_current_user
from .models import BookmarkRequest, ResearchCategory, ResearchDigest, ResearchEntry
from .prompts import research_messages
from .storage import latest_by_category, list_history, mark_viewed, save_digest, set_bookmark

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/research", tags=["Research"])


@router.get("/latest", response_model=ResearchDigest, summary="Generate a fresh research digest")
async def get_latest_research(user: dict = Depends(get_current_user)):
    digest = await llm.gather_llm(research_messages())
    save_digest(user_id=user["id"], digest=digest)
    log.info("generated research digest for user %s", user["id"])
    return ResearchDigest(**digest)


@router.get("/history", response_model=List[ResearchEntry], summary="Saved research (newest first)")
def get_history(
    category: Optional[ResearchCategory] = Query(default=None),
    limit: int = Query(default=10, ge=1, le=100),
    user: dict = Depends(get_current_user),
):
    return list_history(user_id=user["id"], category=category, limit=limit)


@router.get("/latest/{category}", response_model=Optional[ResearchEntry], summary="Most recent saved entry for a category")
def get_latest_saved(category: ResearchCategory, user: dict = Depends(get_current_user)):
    return latest_by_category(user_id=user["id"], category=category)


@router.post("/{entry_id}/viewed", summary="Mark a research entry as viewed")
def viewed(entry_id: str, user: dict = Depends(get_current_user)):
    mark_viewed(user_id=user["id"], entry_id=entry_id)
    return {"success": True}


@router.put("/{entry_id}/bookmark", summary="Bookmark or un-bookmark a research entry")
def bookmark(entry_id: str, request: BookmarkRequest, user: dict = Depends(get_current_user)):
    set_bookmark(user_id=user["id"], entry_id=entry_id, bookmarked=request.bookmarked)
    return {"success": True}
