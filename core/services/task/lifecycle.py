from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import AssignmentRepository, ResourceRepository, TaskRepository
from core.models import Task

logger = logging.getLogger(__name__)

_UNSET = object()


class TaskLifecycleMixin:
    _session: Session
    _task_repo: TaskRepository
    _assignment_repo: AssignmentRepository
    _resource_repo: ResourceRepository

    def create_task(
        self,
        project_id: str,
        name: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_summary: bool = False,
        resource_ids: Iterable[str] = (),
    ) -> Task:
        self._validate_task_name(name)
        self._validate_dates(start_date, end_date)

        task = Task.create(
            project_id=project_id,
            name=name.strip(),
            is_summary=is_summary,
            start_date=start_date,
            end_date=end_date,
            resource_ids=[str(rid) for rid in resource_ids],
        )
        try:
            self._task_repo.add(task)
            self._session.commit()
            logger.info("Created task %s - %s for project %s", task.id, task.name, project_id)
        except Exception:
            self._session.rollback()
            raise
        return task

    def update_task(
        self,
        task_id: str,
        name: str | None = None,
        start_date=_UNSET,
        end_date=_UNSET,
        is_summary: bool | None = None,
    ) -> Task:
        task = self._require_task(task_id)

        if name is not None:
            self._validate_task_name(name)
            task.name = name.strip()
        new_start = task.start_date if start_date is _UNSET else start_date
        new_end = task.end_date if end_date is _UNSET else end_date
        self._validate_dates(new_start, new_end)
        task.start_date = new_start
        task.end_date = new_end
        if is_summary is not None:
            task.is_summary = is_summary

        try:
            self._task_repo.update(task)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return task

    def set_legacy_resources(self, task_id: str, resource_ids: Iterable[str]) -> Task:
        task = self._require_task(task_id)
        task.resource_ids = [str(rid) for rid in resource_ids]
        try:
            self._task_repo.update(task)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return task

    def delete_task(self, task_id: str) -> None:
        self._require_task(task_id)
        try:
            self._task_repo.delete(task_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def _require_task(self, task_id: str) -> Task:
        task = self._task_repo.get(task_id)
        if not task:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        return task
