from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import AssignmentRepository, TaskRepository
from core.models import Task, TaskAssignment
from infra.db.models import TaskAssignmentORM, TaskORM
from infra.db.task.mapper import (
    join_resource_ids,
    assignment_from_orm,
    assignment_to_orm,
    task_from_orm,
    task_to_orm,
)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, task: Task) -> None:
        self.session.add(task_to_orm(task))

    def update(self, task: Task) -> None:
        obj = self.session.get(TaskORM, task.id)
        if obj is None:
            raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
        obj.name = task.name
        obj.is_summary = task.is_summary
        obj.start_date = task.start_date
        obj.end_date = task.end_date
        obj.resource_ids = join_resource_ids(task.resource_ids)

    def delete(self, task_id: str) -> None:
        self.session.query(TaskAssignmentORM).filter_by(task_id=task_id).delete()
        self.session.query(TaskORM).filter_by(id=task_id).delete()

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.project_id == project_id).order_by(TaskORM.start_date, TaskORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]


class SqlAlchemyAssignmentRepository(AssignmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, assignment: TaskAssignment) -> None:
        self.session.add(assignment_to_orm(assignment))

    def update(self, assignment: TaskAssignment) -> None:
        obj = self.session.get(TaskAssignmentORM, assignment.id)
        if obj is None:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        obj.units = assignment.units

    def delete(self, assignment_id: str) -> None:
        self.session.query(TaskAssignmentORM).filter_by(id=assignment_id).delete()

    def get(self, assignment_id: str) -> Optional[TaskAssignment]:
        obj = self.session.get(TaskAssignmentORM, assignment_id)
        return assignment_from_orm(obj) if obj else None

    def list_by_task(self, task_id: str) -> List[TaskAssignment]:
        stmt = select(TaskAssignmentORM).where(TaskAssignmentORM.task_id == task_id).order_by(TaskAssignmentORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]

    def list_by_tasks(self, task_ids: List[str]) -> List[TaskAssignment]:
        if not task_ids:
            return []
        stmt = select(TaskAssignmentORM).where(TaskAssignmentORM.task_id.in_(task_ids)).order_by(TaskAssignmentORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]

    def list_by_resource(self, resource_id: str) -> List[TaskAssignment]:
        stmt = select(TaskAssignmentORM).where(TaskAssignmentORM.resource_id == resource_id).order_by(TaskAssignmentORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyTaskRepository", "SqlAlchemyAssignmentRepository"]
