from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import AssignmentRepository, ResourceRepository, TaskRepository
from core.models import BoundaryRule, Resource, Task
from core.services.task.query import load_project_tasks
from core.services.workload.alerts import build_overload_alerts
from core.services.workload.histogram import build_resource_histogram
from core.services.workload.labels import Translate, default_translate
from core.services.workload.models import ResourceHistogram, ResourceUsage
from core.services.workload.policy import load_boundary_rule
from core.services.workload.summary import compute_resource_usage

logger = logging.getLogger(__name__)


class ResourceUsageService:
    """Loads resource/task snapshots from the repositories and runs the workload engine."""

    def __init__(
        self,
        session: Session,
        resource_repo: ResourceRepository,
        task_repo: TaskRepository,
        assignment_repo: AssignmentRepository,
        boundary_rule: BoundaryRule | None = None,
    ):
        self._session = session
        self._resource_repo = resource_repo
        self._task_repo = task_repo
        self._assignment_repo = assignment_repo
        self._boundary_rule = boundary_rule

    @property
    def boundary_rule(self) -> BoundaryRule:
        return self._boundary_rule or load_boundary_rule()

    def get_project_resource_usage(
        self,
        project_id: str,
        translate: Translate = default_translate,
    ) -> List[ResourceUsage]:
        resources = self._resource_repo.list_all()
        tasks = self._load_tasks(project_id)
        usages = compute_resource_usage(resources, tasks, translate, self.boundary_rule)
        logger.info(
            "Resource usage for project %s: %d resources, %d overloaded",
            project_id,
            len(usages),
            sum(1 for u in usages if u.is_overloaded_in_time),
        )
        return usages

    def get_resource_usage(
        self,
        project_id: str,
        resource_id: str,
        translate: Translate = default_translate,
    ) -> ResourceUsage:
        resource = self._require_resource(resource_id)
        tasks = self._load_tasks(project_id)
        return compute_resource_usage([resource], tasks, translate, self.boundary_rule)[0]

    def get_resource_histogram(self, project_id: str, resource_id: str) -> ResourceHistogram:
        resource = self._require_resource(resource_id)
        return build_resource_histogram(resource, self._load_tasks(project_id))

    def get_project_histograms(self, project_id: str) -> List[ResourceHistogram]:
        tasks = self._load_tasks(project_id)
        return [build_resource_histogram(r, tasks) for r in self._resource_repo.list_all()]

    def get_overload_alerts(self, project_id: str) -> List[str]:
        return build_overload_alerts(self.get_project_resource_usage(project_id))

    def _require_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def _load_tasks(self, project_id: str) -> List[Task]:
        return load_project_tasks(self._task_repo, self._assignment_repo, project_id)


__all__ = ["ResourceUsageService"]
