from __future__ import annotations

from core.models import Task, TaskAssignment
from infra.db.models import TaskAssignmentORM, TaskORM


def join_resource_ids(values) -> str:
    return ",".join(str(v).strip() for v in values or [] if str(v).strip())


def split_resource_ids(raw: str | None) -> list[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def task_to_orm(task: Task) -> TaskORM:
    return TaskORM(
        id=task.id,
        project_id=task.project_id,
        name=task.name,
        is_summary=task.is_summary,
        start_date=task.start_date,
        end_date=task.end_date,
        resource_ids=join_resource_ids(task.resource_ids),
    )


def task_from_orm(obj: TaskORM) -> Task:
    # resource_assignments are attached by the service from the assignments table
    return Task(
        id=obj.id,
        project_id=obj.project_id,
        name=obj.name,
        is_summary=bool(obj.is_summary),
        start_date=obj.start_date,
        end_date=obj.end_date,
        resource_ids=split_resource_ids(obj.resource_ids),
    )


def assignment_to_orm(assignment: TaskAssignment) -> TaskAssignmentORM:
    return TaskAssignmentORM(
        id=assignment.id,
        task_id=assignment.task_id,
        resource_id=assignment.resource_id,
        units=assignment.units,
    )


def assignment_from_orm(obj: TaskAssignmentORM) -> TaskAssignment:
    return TaskAssignment(
        id=obj.id,
        task_id=obj.task_id,
        resource_id=obj.resource_id,
        units=obj.units,
    )


__all__ = [
    "join_resource_ids",
    "split_resource_ids",
    "task_to_orm",
    "task_from_orm",
    "assignment_to_orm",
    "assignment_from_orm",
]
