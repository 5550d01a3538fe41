from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Optional

from core.models import Resource, Task
from core.services.workload.assignments import resolve_assignments
from core.services.workload.date_range import find_project_date_range
from core.services.workload.models import DateRange, HistogramDay, ResourceHistogram
from core.services.workload.sweep import exceeds
from core.services.workload.units import normalize_capacity, normalize_resource_id


def build_resource_histogram(
    resource: Resource,
    tasks: Iterable[Task],
    date_range: Optional[DateRange] = None,
) -> ResourceHistogram:
    """Day-by-day load of ``resource`` across the project span.

    A task occupies its resource on every calendar day from start to end,
    inclusive. Without a date range the histogram has no days.
    """
    tasks = list(tasks)
    capacity = normalize_capacity(resource.max_units)
    histogram = ResourceHistogram(
        resource_id=normalize_resource_id(resource.id),
        resource_name=resource.name,
        capacity=capacity,
    )

    span = date_range or find_project_date_range(tasks)
    if span is None:
        return histogram

    deltas = [0.0] * (span.days + 1)
    for c in resolve_assignments(resource, tasks).dated:
        start = max(c.start, span.start)
        end = min(c.end, span.end)
        if start > end:
            continue
        deltas[(start - span.start).days] += c.units
        deltas[(end - span.start).days + 1] -= c.units

    running = 0.0
    for offset in range(span.days):
        running += deltas[offset]
        histogram.days.append(
            HistogramDay(
                day=span.start + timedelta(days=offset),
                workload_units=running,
                capacity_units=capacity,
                is_overloaded=exceeds(running, capacity),
            )
        )
    return histogram


__all__ = ["build_resource_histogram"]
