# -*- coding: utf-8 -*-
"""Numeric helpers shared by the scoring and analytics code."""

from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number, places: int = 0) -> Number:
    """Round with halves going up: 190.5 -> 191, 2.5 -> 3, -2.5 -> -2."""
    if places == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
