from __future__ import annotations

from core.domain import (
    BoundaryRule,
    Resource,
    ResourceAssignment,
    ResourceKey,
    Task,
    TaskAssignment,
    UsageStatus,
    WorkloadLevel,
    generate_id,
)

__all__ = [
    "generate_id",
    "UsageStatus",
    "WorkloadLevel",
    "BoundaryRule",
    "Resource",
    "ResourceKey",
    "ResourceAssignment",
    "Task",
    "TaskAssignment",
]
