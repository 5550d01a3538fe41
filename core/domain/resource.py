from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass
class Resource:
    id: str
    name: str
    # Fraction (1.0 = 100%) or legacy percentage (150 = 150%); None means 1.0.
    max_units: Optional[float] = None
    role: str = ""
    is_active: bool = True

    @staticmethod
    def create(
        name: str,
        max_units: Optional[float] = None,
        role: str = "",
        is_active: bool = True,
    ) -> "Resource":
        return Resource(
            id=generate_id(),
            name=name,
            max_units=max_units,
            role=role,
            is_active=is_active,
        )


__all__ = ["Resource"]
