# infra/db/repositories.py
from __future__ import annotations

from infra.db.resource.repository import SqlAlchemyResourceRepository
from infra.db.task.repository import SqlAlchemyAssignmentRepository, SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyResourceRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyAssignmentRepository",
]
