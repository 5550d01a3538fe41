"""Conversion between the two scales capacity figures are stored in.

Internally every unit and capacity is a coefficient (1.0 = 100%). Older data
stores ``max_units`` as a percentage ("150" meaning 150%), so any value above
``PERCENT_THRESHOLD`` is read as a percentage.
"""
from __future__ import annotations

import math
from typing import Optional

PERCENT_THRESHOLD = 10.0
DEFAULT_UNITS = 1.0
DEFAULT_MAX_UNITS = 1.0


def normalize_capacity(raw: Optional[float]) -> float:
    """Return the effective capacity fraction for a raw ``max_units`` value.

    Zero and negative values pass through unchanged; sanity of entered data is
    checked by ``ResourceService``, not here.
    """
    if raw is None:
        return DEFAULT_MAX_UNITS
    value = float(raw)
    if value > PERCENT_THRESHOLD:
        return value / 100.0
    return value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_percent(value: Optional[float]) -> int:
    if value is None:
        return round_half_up(DEFAULT_UNITS * 100)
    value = float(value)
    if value <= PERCENT_THRESHOLD:
        return round_half_up(value * 100)
    return round_half_up(value)


def is_coefficient(value: float) -> bool:
    return value <= PERCENT_THRESHOLD


def is_percent(value: float) -> bool:
    return value > PERCENT_THRESHOLD


def is_greater(value1: Optional[float], value2: Optional[float]) -> bool:
    return normalize_capacity(value1) > normalize_capacity(value2)


def difference_percent(value1: Optional[float], value2: Optional[float]) -> int:
    return to_percent(value1) - to_percent(value2)


def normalize_resource_id(value: object) -> str:
    """Map a resource identity to the string key used for matching.

    Identities arrive as ``str`` from the database and sometimes as numbers from
    imported data; ``7``, ``7.0`` and ``"7"`` all resolve to ``"7"``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


__all__ = [
    "PERCENT_THRESHOLD",
    "DEFAULT_UNITS",
    "DEFAULT_MAX_UNITS",
    "round_half_up",
    "normalize_capacity",
    "to_percent",
    "is_coefficient",
    "is_percent",
    "is_greater",
    "difference_percent",
    "normalize_resource_id",
]
