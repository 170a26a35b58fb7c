# -*- coding: utf-8 -*-
"""Chat — Pydantic models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: str


class ChatSendRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=8000)


class ChatSendResponse(BaseModel):
    response: str
