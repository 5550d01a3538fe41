from __future__ import annotations

from datetime import date

from core.exceptions import ValidationError


class TaskValidationMixin:
    def _validate_dates(self, start_date: date | None, end_date: date | None) -> None:
        if start_date and end_date and end_date < start_date:
            raise ValidationError(
                "Task end_date cannot be before start_date.",
                code="TASK_INVALID_DATE",
            )

    def _validate_task_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Task name cannot be empty.", code="TASK_NAME_EMPTY")

    def _validate_units(self, units: float) -> float:
        value = float(units or 0.0)
        if value <= 0:
            raise ValidationError("units must be greater than zero.", code="ASSIGNMENT_INVALID_UNITS")
        return value
