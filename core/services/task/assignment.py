from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import BusinessRuleError, NotFoundError
from core.interfaces import AssignmentRepository, ResourceRepository, TaskRepository
from core.models import TaskAssignment

logger = logging.getLogger(__name__)


class TaskAssignmentMixin:
    _session: Session
    _task_repo: TaskRepository
    _assignment_repo: AssignmentRepository
    _resource_repo: ResourceRepository

    def assign_resource(self, task_id: str, resource_id: str, units: float = 1.0) -> TaskAssignment:
        value = self._validate_units(units)
        self._require_task(task_id)
        if not self._resource_repo.get(resource_id):
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        for existing in self._assignment_repo.list_by_task(task_id):
            if existing.resource_id == resource_id:
                raise BusinessRuleError(
                    "Resource is already assigned to this task; change its units instead.",
                    code="ASSIGNMENT_DUPLICATE",
                )

        assignment = TaskAssignment.create(task_id, resource_id, value)
        try:
            self._assignment_repo.add(assignment)
            self._session.commit()
            logger.info("Assigned resource %s to task %s at %.2f units", resource_id, task_id, value)
        except Exception:
            self._session.rollback()
            raise
        return assignment

    def set_assignment_units(self, assignment_id: str, units: float) -> TaskAssignment:
        value = self._validate_units(units)
        a = self._require_assignment(assignment_id)
        a.units = value
        try:
            self._assignment_repo.update(a)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return a

    def unassign_resource(self, assignment_id: str) -> None:
        self._require_assignment(assignment_id)
        try:
            self._assignment_repo.delete(assignment_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def get_assignment(self, assignment_id: str) -> TaskAssignment | None:
        return self._assignment_repo.get(assignment_id)

    def list_assignments_for_task(self, task_id: str) -> List[TaskAssignment]:
        return self._assignment_repo.list_by_task(task_id)

    def _require_assignment(self, assignment_id: str) -> TaskAssignment:
        a = self._assignment_repo.get(assignment_id)
        if not a:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        return a
