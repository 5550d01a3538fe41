from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from core.domain.identifiers import generate_id

ResourceKey = Union[str, int]


@dataclass
class ResourceAssignment:
    resource_id: ResourceKey
    units: float = 1.0


@dataclass
class Task:
    id: str
    project_id: str
    name: str
    is_summary: bool = False
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    resource_assignments: list[ResourceAssignment] = field(default_factory=list)
    # Legacy references without units; each one implies a full-capacity assignment.
    resource_ids: list[ResourceKey] = field(default_factory=list)

    @staticmethod
    def create(project_id: str, name: str, **extra) -> "Task":
        return Task(
            id=generate_id(),
            project_id=project_id,
            name=name,
            **extra,
        )

    def has_dates(self) -> bool:
        return self.start_date is not None and self.end_date is not None


@dataclass
class TaskAssignment:
    id: str
    task_id: str
    resource_id: str
    units: float = 1.0

    @staticmethod
    def create(task_id: str, resource_id: str, units: float = 1.0) -> "TaskAssignment":
        return TaskAssignment(
            id=generate_id(),
            task_id=task_id,
            resource_id=resource_id,
            units=units,
        )

    def to_resource_assignment(self) -> ResourceAssignment:
        return ResourceAssignment(resource_id=self.resource_id, units=self.units)


__all__ = ["ResourceKey", "ResourceAssignment", "Task", "TaskAssignment"]
