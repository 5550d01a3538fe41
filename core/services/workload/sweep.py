from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from core.models import BoundaryRule
from core.services.workload.models import AssignmentContribution, DateRange, SweepResult

# Float tolerance for capacity comparisons (0.6 + 0.6 vs 1.2 and friends).
LOAD_EPSILON = 1e-9

# Event ordering within a single date, lower first.
_ORDER = {
    BoundaryRule.INCLUSIVE: {"start": 0, "end": 1, "instant_end": 1},
    BoundaryRule.EXCLUSIVE: {"start": 1, "end": 0, "instant_end": 2},
}


def exceeds(load: float, capacity: float) -> bool:
    return load > capacity + LOAD_EPSILON


def build_load_events(
    contributions: Iterable[AssignmentContribution],
    date_range: DateRange,
    rule: BoundaryRule = BoundaryRule.INCLUSIVE,
) -> list[tuple[date, int, float]]:
    """Turn dated contributions into sorted ``(date, order, delta)`` events.

    Intervals are clipped to ``date_range``; anything left empty (outside the
    range, or ending before it starts) produces no events.
    """
    order = _ORDER[rule]
    events: list[tuple[date, int, float]] = []
    for c in contributions:
        if not c.has_interval:
            continue
        start = max(c.start, date_range.start)
        end = min(c.end, date_range.end)
        if start > end:
            continue
        events.append((start, order["start"], c.units))
        end_order = order["instant_end"] if start == end else order["end"]
        events.append((end, end_order, -c.units))
    events.sort(key=lambda e: (e[0], e[1]))
    return events


def sweep_load(
    contributions: Iterable[AssignmentContribution],
    date_range: Optional[DateRange],
    capacity: float,
    rule: BoundaryRule = BoundaryRule.INCLUSIVE,
) -> SweepResult:
    """Find the peak simultaneous load of a resource over the project span.

    With no ``date_range`` the result is indeterminate (``overloaded is None``)
    and the caller falls back to comparing total units with capacity.
    """
    if date_range is None:
        return SweepResult()

    running = 0.0
    peak = 0.0
    peak_date: Optional[date] = None
    for when, _, delta in build_load_events(contributions, date_range, rule):
        running += delta
        if running > peak + LOAD_EPSILON:
            peak = running
            peak_date = when

    return SweepResult(peak_units=peak, peak_date=peak_date, overloaded=exceeds(peak, capacity))


def is_overloaded_in_time(
    contributions: Iterable[AssignmentContribution],
    date_range: Optional[DateRange],
    capacity: float,
    rule: BoundaryRule = BoundaryRule.INCLUSIVE,
) -> Optional[bool]:
    return sweep_load(contributions, date_range, capacity, rule).overloaded


__all__ = ["LOAD_EPSILON", "exceeds", "build_load_events", "sweep_load", "is_overloaded_in_time"]
