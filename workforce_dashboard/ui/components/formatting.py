"""
Utility helpers for formatting counts, percentages and dates for display.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def share_percent(part: Optional[float], total: Optional[float]) -> Optional[float]:
    if part is None or not total:
        return None
    return part / total * 100


def format_date(value: Optional[str]) -> str:
    """Render an ISO date as e.g. `Mar 4, 2024`; unparseable values pass through."""
    if not value:
        return "–"
    try:
        parsed = dt.date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
