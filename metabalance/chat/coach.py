# -*- coding: utf-8 -*-
"""Chat — health-coach prompt assembly."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .. import llm
from ..profile.storage import get_profile
from .storage import append_message, list_recent_messages

HISTORY_WINDOW = 10

BASE_SYSTEM_PROMPT = (
    "You are a knowledgeable and empathetic health coach specializing in obesity reversal and metabolic health. \n"
    "You provide evidence-based advice on diet, intermittent fasting, supplements, and lifestyle changes "
    "based on the latest research.\n"
    "Be supportive, motivational, and practical in your responses."
)


def build_system_prompt(profile: Optional[Mapping[str, Any]]) -> str:
    prompt = BASE_SYSTEM_PROMPT
    if not profile:
        return prompt
    prompt += "\n\nUser context:"
    if profile.get("current_weight") and profile.get("target_weight"):
        prompt += f"\n- Current weight: {profile['current_weight']:g} lbs, Target: {profile['target_weight']:g} lbs"
    if profile.get("primary_goal"):
        prompt += f"\n- Primary goal: {profile['primary_goal']}"
    if profile.get("has_obesity"):
        prompt += "\n- Has obesity"
    if profile.get("has_diabetes"):
        prompt += "\n- Has diabetes"
    if profile.get("taking_glp1"):
        prompt += "\n- Taking GLP-1 medication"
    return prompt


def send_message(*, user_id: str, content: str) -> str:
    append_message(user_id=user_id, role="user", content=content)

    # The window already ends with the message just stored.
    history = list_recent_messages(user_id=user_id, limit=HISTORY_WINDOW)
    messages: List[Dict[str, str]] = [
        {"role": "system", "content": build_system_prompt(get_profile(user_id=user_id))}
    ]
    messages.extend({"role": m["role"], "content": m["content"]} for m in history)

    reply = llm.call_llm(messages)
    append_message(user_id=user_id, role="assistant", content=reply)
    return reply
