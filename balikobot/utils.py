"""
Date helpers for gateway payloads.  The gateway expects calendar dates
as ``YYYY-MM-DD`` and times of day as ``HH:MM``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def format_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%Y-%m-%d")


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")
