from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from core.models import Resource, Task
from core.services.workload.models import AssignmentContribution, ResolvedAssignments
from core.services.workload.units import DEFAULT_UNITS, normalize_resource_id


@dataclass(frozen=True)
class IndexedTask:
    """A non-summary task with its per-resource units keyed by normalized id."""

    task_id: str
    units_by_resource: dict[str, float]
    start: Optional[date]
    end: Optional[date]


def index_task(task: Task) -> IndexedTask:
    units_by_resource: dict[str, float] = {}
    for assignment in task.resource_assignments or []:
        key = normalize_resource_id(assignment.resource_id)
        # First explicit entry for a resource wins.
        units_by_resource.setdefault(key, float(assignment.units))
    for legacy_id in task.resource_ids or []:
        units_by_resource.setdefault(normalize_resource_id(legacy_id), DEFAULT_UNITS)

    dated = task.start_date is not None and task.end_date is not None
    return IndexedTask(
        task_id=task.id,
        units_by_resource=units_by_resource,
        start=task.start_date if dated else None,
        end=task.end_date if dated else None,
    )


def index_tasks(tasks: Iterable[Task]) -> list[IndexedTask]:
    return [index_task(task) for task in tasks if not task.is_summary]


def resolve_indexed(resource_key: str, indexed_tasks: Iterable[IndexedTask]) -> ResolvedAssignments:
    total = 0.0
    contributions: list[AssignmentContribution] = []
    for item in indexed_tasks:
        units = item.units_by_resource.get(resource_key)
        if units is None:
            continue
        total += units
        contributions.append(
            AssignmentContribution(task_id=item.task_id, units=units, start=item.start, end=item.end)
        )
    return ResolvedAssignments(total_units=total, contributions=tuple(contributions))


def resolve_assignments(resource: Resource, tasks: Iterable[Task]) -> ResolvedAssignments:
    """Collect the unit contributions ``resource`` receives from ``tasks``.

    Summary tasks are skipped. An explicit assignment supplies its own units; a
    legacy resource reference without units counts as a full-time assignment.
    ``total_units`` ignores time overlap and may exceed 1.0.
    """
    return resolve_indexed(normalize_resource_id(resource.id), index_tasks(tasks))


__all__ = ["IndexedTask", "index_task", "index_tasks", "resolve_indexed", "resolve_assignments"]
