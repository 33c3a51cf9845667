# utils/money.py
from __future__ import annotations
from typing import Any


def coerce_budget(value: Any, default: int) -> int:
    """
    Turns form input into a positive whole-dollar amount.
    Anything that is not a positive number falls back to `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        amount = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            amount = int(float(str(value).strip()))
        except (TypeError, ValueError, OverflowError):
            return default
    return amount if amount > 0 else default


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def format_usd(amount: int) -> str:
    return f"${amount:,}"
