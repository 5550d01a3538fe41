from __future__ import annotations

from typing import Iterable, Optional

from core.models import Task
from core.services.workload.models import DateRange


def find_project_date_range(tasks: Iterable[Task]) -> Optional[DateRange]:
    """Return the span covered by dated, non-summary tasks, or None."""
    starts = []
    ends = []
    for task in tasks:
        if task.is_summary or task.start_date is None or task.end_date is None:
            continue
        starts.append(task.start_date)
        ends.append(task.end_date)

    if not starts:
        return None

    start, end = min(starts), max(ends)
    if start > end:
        return None
    return DateRange(start=start, end=end)


__all__ = ["find_project_date_range"]
