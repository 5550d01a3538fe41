from infra.db.task.mapper import (
    assignment_from_orm,
    assignment_to_orm,
    task_from_orm,
    task_to_orm,
)
from infra.db.task.repository import (
    SqlAlchemyAssignmentRepository,
    SqlAlchemyTaskRepository,
)

__all__ = [
    "task_to_orm",
    "task_from_orm",
    "assignment_to_orm",
    "assignment_from_orm",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyAssignmentRepository",
]
