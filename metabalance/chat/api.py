# -*- coding: utf-8 -*-
"""Chat — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .coach import send_message
from .models import ChatMessage, ChatSendRequest, ChatSendResponse
from .storage import clear_messages, list_recent_messages

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.get("/history", response_model=List[ChatMessage], summary="Chat history (oldest first)")
def get_history(
    limit: int = Query(default=50, ge=1, le=500),
    user: dict = Depends(get_current_user),
):
    return list_recent_messages(user_id=user["id"], limit=limit)


@router.post("/messages", response_model=ChatSendResponse, summary="Ask the health coach")
def post_message(request: ChatSendRequest, user: dict = Depends(get_current_user)):
    return ChatSendResponse(response=send_message(user_id=user["id"], content=request.content))


@router.delete("/history", summary="Clear chat history")
def clear_history(user: dict = Depends(get_current_user)):
    clear_messages(user_id=user["id"])
    return {"success": True}
