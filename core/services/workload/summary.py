from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from core.models import BoundaryRule, Resource, Task
from core.services.workload.assignments import index_tasks, resolve_indexed
from core.services.workload.classifier import classify_load
from core.services.workload.date_range import find_project_date_range
from core.services.workload.labels import (
    Translate,
    default_translate,
    status_label_key,
    workload_label_key,
)
from core.services.workload.models import (
    LoadClassification,
    ResolvedAssignments,
    ResourceUsage,
    SweepResult,
)
from core.services.workload.policy import DEFAULT_BOUNDARY_RULE
from core.services.workload.sweep import sweep_load
from core.services.workload.units import normalize_capacity, normalize_resource_id

logger = logging.getLogger(__name__)


def available_fraction(total_units: float) -> float:
    return max(0.0, 1.0 - min(total_units, 1.0))


def build_resource_usage(
    resource: Resource,
    resolved: ResolvedAssignments,
    sweep: SweepResult,
    classification: LoadClassification,
    translate: Translate = default_translate,
) -> ResourceUsage:
    return ResourceUsage(
        resource_id=normalize_resource_id(resource.id),
        resource_name=resource.name,
        assigned_percent=resolved.total_units,
        available_percent=available_fraction(resolved.total_units),
        status=translate(status_label_key(classification.status)),
        workload=translate(workload_label_key(classification.workload)),
        status_key=classification.status,
        workload_key=classification.workload,
        is_overloaded_in_time=classification.is_overloaded_in_time,
        capacity=normalize_capacity(resource.max_units),
        peak_units=sweep.peak_units,
    )


def compute_resource_usage(
    resources: Sequence[Resource],
    tasks: Iterable[Task],
    translate: Translate = default_translate,
    boundary_rule: Optional[BoundaryRule] = None,
) -> list[ResourceUsage]:
    """Workload records for ``resources``, one per resource in input order.

    The computation only reads its arguments, so callers may memoize the result
    on them. ``boundary_rule`` defaults to inclusive; the environment setting is
    applied by ``ResourceUsageService``.
    """
    tasks = list(tasks)
    rule = boundary_rule or DEFAULT_BOUNDARY_RULE
    date_range = find_project_date_range(tasks)
    indexed = index_tasks(tasks)

    usages: list[ResourceUsage] = []
    for resource in resources:
        capacity = normalize_capacity(resource.max_units)
        resolved = resolve_indexed(normalize_resource_id(resource.id), indexed)
        sweep = sweep_load(resolved.dated, date_range, capacity, rule)
        classification = classify_load(resolved.total_units, capacity, sweep)
        usages.append(build_resource_usage(resource, resolved, sweep, classification, translate))

    logger.debug(
        "Computed usage for %d resources over %d tasks (range=%s, rule=%s)",
        len(usages),
        len(indexed),
        date_range,
        rule.value,
    )
    return usages


__all__ = ["available_fraction", "build_resource_usage", "compute_resource_usage"]
