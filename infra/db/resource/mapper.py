from __future__ import annotations

from core.models import Resource
from infra.db.models import ResourceORM


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        name=resource.name,
        max_units=resource.max_units,
        role=resource.role,
        is_active=resource.is_active,
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        name=obj.name,
        max_units=obj.max_units,
        role=obj.role or "",
        is_active=bool(obj.is_active),
    )


__all__ = ["resource_to_orm", "resource_from_orm"]
