from __future__ import annotations

from collections import defaultdict
from typing import List

from core.interfaces import AssignmentRepository, TaskRepository
from core.models import Task


def load_project_tasks(
    task_repo: TaskRepository,
    assignment_repo: AssignmentRepository,
    project_id: str,
) -> List[Task]:
    """Project tasks with their explicit assignments attached."""
    tasks = task_repo.list_by_project(project_id)
    if not tasks:
        return []

    by_task = defaultdict(list)
    for a in assignment_repo.list_by_tasks([t.id for t in tasks]):
        by_task[a.task_id].append(a.to_resource_assignment())
    for task in tasks:
        task.resource_assignments = by_task.get(task.id, [])
    return tasks


class TaskQueryMixin:
    _task_repo: TaskRepository
    _assignment_repo: AssignmentRepository

    def list_tasks_for_project(self, project_id: str) -> List[Task]:
        return load_project_tasks(self._task_repo, self._assignment_repo, project_id)


__all__ = ["load_project_tasks", "TaskQueryMixin"]
