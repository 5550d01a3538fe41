from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models import Resource, Task, TaskAssignment


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> None: ...

    @abstractmethod
    def update(self, resource: Resource) -> None: ...

    @abstractmethod
    def delete(self, resource_id: str) -> None: ...

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]: ...

    @abstractmethod
    def list_all(self) -> List[Resource]: ...


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> None: ...

    @abstractmethod
    def update(self, task: Task) -> None: ...

    @abstractmethod
    def delete(self, task_id: str) -> None: ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[Task]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Task]: ...


class AssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: TaskAssignment) -> None: ...

    @abstractmethod
    def update(self, assignment: TaskAssignment) -> None: ...

    @abstractmethod
    def delete(self, assignment_id: str) -> None: ...

    @abstractmethod
    def get(self, assignment_id: str) -> Optional[TaskAssignment]: ...

    @abstractmethod
    def list_by_task(self, task_id: str) -> List[TaskAssignment]: ...

    @abstractmethod
    def list_by_tasks(self, task_ids: List[str]) -> List[TaskAssignment]: ...

    @abstractmethod
    def list_by_resource(self, resource_id: str) -> List[TaskAssignment]: ...


__all__ = ["ResourceRepository", "TaskRepository", "AssignmentRepository"]
