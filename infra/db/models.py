# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    Float,
    Boolean,
    ForeignKey,
    Index,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    # fraction (1.0) or legacy percentage (150); NULL means full time
    max_units: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    role: Mapped[str] = mapped_column(String, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_summary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # legacy resource references stored as a comma-separated string, e.g. "r1,r2"
    resource_ids: Mapped[str] = mapped_column(String, nullable=False, default="")

Index("idx_tasks_project_id", TaskORM.project_id)


class TaskAssignmentORM(Base):
    __tablename__ = "task_assignments"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    task_id: Mapped[str] = mapped_column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    resource_id: Mapped[str] = mapped_column(String, ForeignKey("resources.id", ondelete="CASCADE"), nullable=False)
    units: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)

Index("idx_task_assignments_task", TaskAssignmentORM.task_id)
Index("idx_task_assignments_resource", TaskAssignmentORM.resource_id)
Index("ux_task_assignments_task_resource", TaskAssignmentORM.task_id, TaskAssignmentORM.resource_id, unique=True)
