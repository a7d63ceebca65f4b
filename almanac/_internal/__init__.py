"""Internal utilities for Almanac.

This module contains private implementation details:
    - Calendar kernels (unchecked)
    - Validation decorators and helpers
    - Constants and magic numbers
    - Binary heap used by schedule merging

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.heap import Heap
from almanac._internal.validation import (
    validate_day,
    validate_day_number,
    validate_day_of_any_year,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "Heap",
    "validate_day",
    "validate_day_number",
    "validate_day_of_any_year",
    "validate_month",
    "validate_range",
    "validate_year",
]
