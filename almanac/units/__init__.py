"""Calendar units and enumerations.

This module provides:
    - DayOfWeek: Sunday-based day-of-week enum
"""

from __future__ import annotations

from almanac.units.weekday import DayOfWeek

__all__: list[str] = [
    "DayOfWeek",
]
