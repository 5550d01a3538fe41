from __future__ import annotations

from core.models import UsageStatus, WorkloadLevel
from core.services.workload.models import LoadClassification, SweepResult
from core.services.workload.sweep import LOAD_EPSILON, exceeds


def ratio_exceeds_capacity(total_units: float, capacity: float) -> bool:
    """``total_units / capacity > 1`` with a zero capacity handled explicitly."""
    if capacity == 0:
        return total_units > 0
    return total_units / capacity > 1 + LOAD_EPSILON


def classify_load(total_units: float, capacity: float, sweep: SweepResult) -> LoadClassification:
    if sweep.is_indeterminate:
        overloaded = ratio_exceeds_capacity(total_units, capacity)
    else:
        overloaded = bool(sweep.overloaded)

    if overloaded:
        return LoadClassification(UsageStatus.OVERLOADED, WorkloadLevel.OVERLOAD, True)

    if exceeds(total_units, capacity):
        # Committed beyond capacity overall, but never at the same time.
        return LoadClassification(UsageStatus.DISTRIBUTED, WorkloadLevel.DISTRIBUTED, False)

    if total_units == 0:
        status = UsageStatus.AVAILABLE
    elif total_units < capacity - LOAD_EPSILON:
        status = UsageStatus.PARTIAL
    else:
        status = UsageStatus.BUSY
    return LoadClassification(status, WorkloadLevel.NORMAL, False)


__all__ = ["ratio_exceeds_capacity", "classify_load"]
