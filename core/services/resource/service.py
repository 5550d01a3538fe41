# core/services/resource/service.py
from __future__ import annotations
from typing import List
from sqlalchemy.orm import Session

from core.models import Resource
from core.interfaces import ResourceRepository, AssignmentRepository
from core.exceptions import NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, session: Session,
                 resource_repo: ResourceRepository,
                 assignment_repo: AssignmentRepository,
        ):
        self._session = session
        self._resource_repo = resource_repo
        self._assignment_repo = assignment_repo

    def create_resource(
        self,
        name: str,
        max_units: float | None = None,
        role: str = "",
        is_active: bool = True,
    ) -> Resource:
        if not name or not name.strip():
            raise ValidationError("Resource name cannot be empty.")
        self._validate_max_units(max_units)
        resource = Resource.create(
            name=name.strip(),
            max_units=max_units,
            role=role.strip(),
            is_active=is_active,
        )
        try:
            self._resource_repo.add(resource)
            self._session.commit()
            logger.info("Created resource %s - %s", resource.id, resource.name)
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating resource: %s", e)
            raise
        return resource

    def update_resource(
        self,
        resource_id: str,
        name: str | None = None,
        max_units: float | None = None,
        role: str | None = None,
        is_active: bool | None = None,
    ) -> Resource:
        resource = self.get_resource(resource_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Resource name cannot be empty.")
            resource.name = name.strip()
        if max_units is not None:
            self._validate_max_units(max_units)
            resource.max_units = max_units
        if role is not None:
            resource.role = role.strip()
        if is_active is not None:
            resource.is_active = is_active

        try:
            self._resource_repo.update(resource)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return resource

    def list_resources(self) -> List[Resource]:
        return self._resource_repo.list_all()

    def get_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def delete_resource(self, resource_id: str) -> None:
        self.get_resource(resource_id)
        try:
            # delete assignments first
            for a in self._assignment_repo.list_by_resource(resource_id):
                self._assignment_repo.delete(a.id)
            self._resource_repo.delete(resource_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    @staticmethod
    def _validate_max_units(max_units: float | None) -> None:
        if max_units is not None and max_units < 0:
            raise ValidationError(
                "Max units cannot be negative.",
                code="RESOURCE_INVALID_MAX_UNITS",
            )
