# -*- coding: utf-8 -*-
"""Daily insight generation.

Builds a plain-text snapshot of the user's profile and last week of activity and
asks the LLM for a short coaching note. Any LLM failure degrades to a canned tip
so the dashboard always has something to show.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from fastapi import HTTPException

from .. import llm
from ..dates import days_ago_key, today_key
from ..goals.storage import list_goals_between
from ..meals.storage import weekly_totals
from ..profile.storage import get_profile
from ..progress.storage import list_progress
from .storage import get_insight_for_day, save_insight

log = logging.getLogger(__name__)

INSIGHT_TITLE = "Today's Insight"
FALLBACK_CONTENT = (
    "Focus on reducing seed oils today and prioritize whole, unprocessed foods. "
    "Your body will thank you!"
)
SYSTEM_PROMPT = (
    "You are a knowledgeable, supportive metabolic health coach. "
    "Keep responses brief, actionable, and encouraging."
)
_INSIGHT_TYPES = {"motivation", "education", "tip", "reminder", "celebration"}


def momentum_label(avg_win_score: float) -> str:
    if avg_win_score >= 4:
        return " - Excellent momentum!"
    if avg_win_score >= 3:
        return " - Good consistency!"
    if avg_win_score >= 2:
        return " - Building habits!"
    if avg_win_score > 0:
        return " - Keep going!"
    return ""


def _or(value: Any, default: str) -> str:
    return str(value) if value not in (None, "") else default


def build_context(
    profile: Optional[Mapping[str, Any]],
    progress: List[Mapping[str, Any]],
    meal_days: int,
    goals: List[Mapping[str, Any]],
) -> str:
    """``progress`` is newest first."""
    profile = profile or {}
    weights = [p["weight"] for p in progress if p.get("weight") is not None]
    weight_change = weights[0] - weights[-1] if len(weights) >= 2 else 0.0
    avg_win = sum(int(g.get("win_score") or 0) for g in goals) / len(goals) if goals else 0.0

    current = profile.get("current_weight")
    target = profile.get("target_weight")
    to_lose = f"{current - target:g}" if current and target else "N/A"
    conditions = [
        name
        for flag, name in (
            ("has_obesity", "Obesity"),
            ("has_diabetes", "Diabetes"),
            ("has_metabolic_syndrome", "Metabolic Syndrome"),
        )
        if profile.get(flag)
    ]
    sign = "+" if weight_change > 0 else ""

    lines = [
        "User Profile:",
        f"- Current Weight: {_or(current, 'Not set')} lbs",
        f"- Target Weight: {_or(target, 'Not set')} lbs",
        f"- Weight to lose: {to_lose} lbs",
        f"- Recent weight change (7 days): {sign}{weight_change:.1f} lbs",
        f"- Stress Level: {_or(profile.get('stress_level'), 'unknown')}",
        f"- Sleep Quality: {_or(profile.get('sleep_quality'), 'unknown')}",
        f"- Activity Level: {_or(profile.get('activity_level'), 'unknown')}",
        f"- Taking GLP-1: {'Yes' if profile.get('taking_glp1') else 'No'}",
        f"- Health conditions: {', '.join(conditions) or 'None reported'}",
        "",
        "Recent Activity:",
        f"- Progress logs in past week: {len(progress)}",
        f"- Days with meals logged recently: {meal_days}",
        f"- Average win score (7 days): {avg_win:.1f}/5.0 stars{momentum_label(avg_win)}",
    ]
    return "\n".join(lines)


def build_prompt(context: str) -> str:
    return (
        "You are a supportive metabolic health coach helping someone on their weight loss and "
        "metabolic health journey. Based on their profile and recent activity, generate a brief, "
        "personalized daily insight (2-3 sentences max) that:\n\n"
        "1. Acknowledges their current situation or recent progress\n"
        "2. Provides one specific, actionable tip related to metabolic health, nutrition, or lifestyle\n"
        "3. Offers encouragement and motivation\n\n"
        "Focus on evidence-based advice about:\n"
        "- Reducing linoleic acid / seed oils\n"
        "- Intermittent fasting benefits\n"
        "- Gut health and probiotics\n"
        "- NAD+ and mitochondrial function\n"
        "- Managing stress and sleep\n"
        "- Staying consistent with tracking\n\n"
        f"{context}\n\n"
        "Generate a warm, encouraging daily insight:"
    )


def parse_structured_insight(text: str) -> Dict[str, str]:
    """Pull ``{title, content, type}`` out of a model reply, tolerating plain prose."""
    match = re.search(r"\{[\s\S]*\}", text or "")
    if match:
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            log.warning("insight reply looked like JSON but did not parse", exc_info=True)
        else:
            if isinstance(parsed, dict):
                insight_type = parsed.get("type")
                return {
                    "title": str(parsed.get("title") or "Daily Insight"),
                    "content": str(parsed.get("content") or text),
                    "type": insight_type if insight_type in _INSIGHT_TYPES else "motivation",
                }
    return {"title": "Daily Insight", "content": text, "type": "motivation"}


def get_today_insight(*, user_id: str) -> Dict[str, Any]:
    today = today_key()
    existing = get_insight_for_day(user_id=user_id, day=today)
    if existing:
        return existing

    week_ago = days_ago_key(7)
    progress = [p for p in list_progress(user_id=user_id) if p["logged_at"][:10] >= week_ago]
    context = build_context(
        get_profile(user_id=user_id),
        progress,
        len(weekly_totals(user_id=user_id, start_day=week_ago, end_day=today)),
        list_goals_between(user_id=user_id, start_day=week_ago, end_day=today),
    )

    try:
        parsed = parse_structured_insight(llm.complete(SYSTEM_PROMPT, build_prompt(context)))
        content, insight_type = parsed["content"], parsed["type"]
    except HTTPException as exc:
        log.warning("daily insight generation failed, using fallback: %s", exc.detail)
        content = FALLBACK_CONTENT
        insight_type = "tip"

    return save_insight(user_id=user_id, day=today, title=INSIGHT_TITLE, content=content, insight_type=insight_type)
