from infra.db.resource.mapper import resource_from_orm, resource_to_orm
from infra.db.resource.repository import SqlAlchemyResourceRepository

__all__ = [
    "resource_to_orm",
    "resource_from_orm",
    "SqlAlchemyResourceRepository",
]
