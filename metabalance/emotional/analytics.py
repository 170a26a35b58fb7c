# -*- coding: utf-8 -*-
"""Pattern summaries over emotional eating episodes."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Mapping, Optional, Sequence

from ..dates import parse_timestamp
from ..numbers import round_half_up


def _round1(value: float) -> float:
    return round_half_up(value, 1)


def most_common_hour(episodes: Sequence[Mapping[str, Any]]) -> Optional[int]:
    """UTC hour with the most episodes; the earliest hour wins a tie."""
    hours = Counter(parse_timestamp(e["timestamp"]).hour for e in episodes)
    if not hours:
        return None
    return min(hours, key=lambda hour: (-hours[hour], hour))


def summarize_episodes(episodes: Sequence[Mapping[str, Any]], period_days: int) -> Dict[str, Any]:
    total = len(episodes)
    with_coping = sum(1 for e in episodes if e.get("coping_strategy_used"))
    rated = [e["effectiveness_rating"] for e in episodes if e.get("effectiveness_rating") is not None]
    return {
        "total_episodes": total,
        "emotion_counts": dict(Counter(e["trigger_emotion"] for e in episodes)),
        "avg_intensity": _round1(sum(e["intensity"] for e in episodes) / total) if total else 0.0,
        "episodes_with_coping": with_coping,
        "coping_usage_rate": round_half_up(100 * with_coping / total) if total else 0,
        "avg_coping_effectiveness": _round1(sum(rated) / len(rated)) if rated else 0.0,
        "most_common_hour": most_common_hour(episodes),
        "period_days": period_days,
    }
