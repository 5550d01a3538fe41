from __future__ import annotations

from enum import Enum


class UsageStatus(str, Enum):
    AVAILABLE = "available"
    PARTIAL = "partial"
    BUSY = "busy"
    DISTRIBUTED = "distributed"
    OVERLOADED = "overloaded"


class WorkloadLevel(str, Enum):
    NORMAL = "normal"
    DISTRIBUTED = "distributed"
    OVERLOAD = "overload"


class BoundaryRule(str, Enum):
    """How a sweep treats one task ending on the day another starts."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


__all__ = ["UsageStatus", "WorkloadLevel", "BoundaryRule"]
