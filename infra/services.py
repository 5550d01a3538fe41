from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.models import BoundaryRule
from core.services.resource import ResourceService
from core.services.task import TaskService
from core.services.workload import ResourceUsageService
from core.services.workload.policy import load_boundary_rule
from infra.db.repositories import (
    SqlAlchemyAssignmentRepository,
    SqlAlchemyResourceRepository,
    SqlAlchemyTaskRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    resource_service: ResourceService
    task_service: TaskService
    usage_service: ResourceUsageService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "resource_service": self.resource_service,
            "task_service": self.task_service,
            "usage_service": self.usage_service,
        }


def build_service_graph(session: Session, boundary_rule: BoundaryRule | None = None) -> ServiceGraph:
    resource_repo = SqlAlchemyResourceRepository(session)
    task_repo = SqlAlchemyTaskRepository(session)
    assignment_repo = SqlAlchemyAssignmentRepository(session)

    return ServiceGraph(
        session=session,
        resource_service=ResourceService(session, resource_repo, assignment_repo),
        task_service=TaskService(session, task_repo, assignment_repo, resource_repo),
        usage_service=ResourceUsageService(
            session,
            resource_repo,
            task_repo,
            assignment_repo,
            boundary_rule=boundary_rule or load_boundary_rule(),
        ),
    )


def build_services(session: Session, boundary_rule: BoundaryRule | None = None) -> dict[str, Any]:
    return build_service_graph(session, boundary_rule).as_dict()


def bootstrap() -> dict[str, Any]:
    """Set up logging and the database, then wire services on a fresh session."""
    from infra.db.base import Base, SessionLocal, engine
    from infra.logging_config import setup_logging
    import infra.db.models  # noqa: F401  (registers tables on Base.metadata)

    setup_logging()
    Base.metadata.create_all(bind=engine)
    services = build_services(SessionLocal())
    logger.info("Services ready (boundary rule: %s)", services["usage_service"].boundary_rule.value)
    return services
