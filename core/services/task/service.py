from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import AssignmentRepository, ResourceRepository, TaskRepository
from core.services.task.assignment import TaskAssignmentMixin
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.validation import TaskValidationMixin


class TaskService(
    TaskLifecycleMixin,
    TaskAssignmentMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository,
        assignment_repo: AssignmentRepository,
        resource_repo: ResourceRepository,
    ):
        self._session: Session = session
        self._task_repo: TaskRepository = task_repo
        self._assignment_repo: AssignmentRepository = assignment_repo
        self._resource_repo: ResourceRepository = resource_repo


__all__ = ["TaskService"]
