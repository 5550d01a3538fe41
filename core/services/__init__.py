from .resource import ResourceService
from .task import TaskService
from .workload import ResourceUsageService

__all__ = [
    "ResourceService",
    "TaskService",
    "ResourceUsageService",
]
