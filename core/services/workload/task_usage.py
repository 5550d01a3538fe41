from __future__ import annotations

from typing import Sequence

from core.models import Resource, Task
from core.services.workload.units import normalize_resource_id, round_half_up


def format_assigned_resources(task: Task, resources: Sequence[Resource], fallback: str) -> str:
    """Render a task's resources as ``"Ann (100%), Bob (50%)"``.

    Explicit assignments take priority; legacy references are shown at 100%.
    """
    names = {normalize_resource_id(r.id): r.name for r in resources}

    parts: list[str] = []
    for assignment in task.resource_assignments or []:
        name = names.get(normalize_resource_id(assignment.resource_id))
        if name:
            parts.append(f"{name} ({round_half_up(assignment.units * 100)}%)")
    if parts:
        return ", ".join(parts)

    for rid in task.resource_ids or []:
        name = names.get(normalize_resource_id(rid))
        if name:
            parts.append(f"{name} (100%)")
    if parts:
        return ", ".join(parts)

    return fallback


__all__ = ["format_assigned_resources"]
