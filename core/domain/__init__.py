from core.domain.enums import BoundaryRule, UsageStatus, WorkloadLevel
from core.domain.identifiers import generate_id
from core.domain.resource import Resource
from core.domain.task import ResourceAssignment, ResourceKey, Task, TaskAssignment

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
