"""
Status classification for indicators.

Maps an (actual, target) pair to above/below/neutral. Input arrives either
as numbers or as the numeric strings the backend sends, so parsing is part
of the contract. Nothing here raises.
"""

import math
from typing import Any

from .types import IndicatorStatus


def parse_number(raw: Any) -> float | None:
    """
    Coerce a numeric or numeric-formatted value to float.

    Accepts pt-BR decimal commas ("3,2") and a trailing percent sign.
    Returns None for anything that is absent or unparseable.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().rstrip("%").strip()
        if not text:
            return None
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def variation_percent(value: Any, target: Any) -> float | None:
    """Signed percentage distance of value from target, or None."""
    actual = parse_number(value)
    goal = parse_number(target)
    if actual is None or goal is None or goal == 0:
        return None
    return (actual - goal) / goal * 100


def classify(value: Any, target: Any) -> IndicatorStatus:
    """
    Classify an indicator against its target.

    ``above`` when the variation is >= 0, ``below`` when negative. Two valid
    numbers never produce ``neutral``; that only comes back when one of the
    inputs cannot be used.
    """
    variation = variation_percent(value, target)
    if variation is None:
        return IndicatorStatus.NEUTRAL
    if variation >= 0:
        return IndicatorStatus.ABOVE
    return IndicatorStatus.BELOW


def format_variation(value: Any, target: Any, decimals: int = 2) -> str:
    """Render the variation the way the dashboard cards show it ("+3.83%")."""
    variation = variation_percent(value, target)
    if variation is None:
        return ""
    return f"{variation:+.{decimals}f}%"
