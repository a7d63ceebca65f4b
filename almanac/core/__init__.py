"""Core calendar types.

This module provides:
    - Date: Packed calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from almanac.core.date import Date

__all__: list[str] = [
    "Date",
]
