"""
Number formatting shared by every formula.

Result fields are rounded with :func:`round_to` after all arithmetic is done.
Values that are mathematically undefined (e.g. the cotangent of 0°) come back
as ``None`` so that no NaN or infinity ever reaches a result payload.
"""

from __future__ import annotations

import math

UNDEFINED_TEXT = "undefined"


def is_finite(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def round_to(value: float, places: int) -> float | None:
    if not is_finite(value):
        return None
    # Adding 0.0 folds -0.0 into 0.0.
    return round(value, places) + 0.0


def reciprocal(value: float) -> float:
    if value == 0:
        return math.inf
    return 1 / value


def as_number(value: float) -> int | float:
    """Render integral floats as ints, the way echoed inputs are displayed."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return int(value)
    return value


def format_number(value: float | int | None) -> str:
    if value is None:
        return UNDEFINED_TEXT
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return UNDEFINED_TEXT
    return repr(as_number(value))


def format_fixed(value: float | None, places: int) -> str:
    if not is_finite(value):
        return UNDEFINED_TEXT
    return f"{value:.{places}f}"
