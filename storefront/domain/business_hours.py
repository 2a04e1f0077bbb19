"""Opening-hours checks for a business."""
from __future__ import annotations

from datetime import datetime
from typing import Mapping

from storefront.domain.entities import OpeningWindow
from storefront.domain.value_objects import Weekday

Hours = Mapping[Weekday, OpeningWindow | None]


def has_any_hours(hours: Hours | None) -> bool:
    return bool(hours) and any(window is not None for window in hours.values())


def is_open(hours: Hours | None, now: datetime) -> bool:
    """A business without configured hours is always open.

    Otherwise it is open when today has a window and the current minute falls
    inside it, both ends included. A day without a window is closed.
    """
    if not has_any_hours(hours):
        return True

    window = hours.get(Weekday.from_date(now))
    if window is None:
        return False

    current = now.hour * 60 + now.minute
    return window.open_minutes <= current <= window.close_minutes


def describe_hours(hours: Hours | None) -> list[tuple[Weekday, str]]:
    """Configured days in week order as ``(day, "HH:MM - HH:MM")``."""
    if not hours:
        return []
    result = []
    for day in Weekday:
        window = hours.get(day)
        if window is not None:
            result.append((day, f"{window.open} - {window.close}"))
    return result
