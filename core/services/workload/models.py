from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from core.models import UsageStatus, WorkloadLevel


@dataclass(frozen=True)
class AssignmentContribution:
    task_id: str
    units: float
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def has_interval(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class ResolvedAssignments:
    total_units: float
    contributions: tuple[AssignmentContribution, ...] = ()

    @property
    def dated(self) -> list[AssignmentContribution]:
        return [c for c in self.contributions if c.has_interval]


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class SweepResult:
    peak_units: float = 0.0
    peak_date: Optional[date] = None
    # None when there is no project date range to sweep over.
    overloaded: Optional[bool] = None

    @property
    def is_indeterminate(self) -> bool:
        return self.overloaded is None


@dataclass(frozen=True)
class LoadClassification:
    status: UsageStatus
    workload: WorkloadLevel
    is_overloaded_in_time: bool


@dataclass
class ResourceUsage:
    resource_id: str
    resource_name: str
    assigned_percent: float
    available_percent: float
    status: str
    workload: str
    status_key: UsageStatus
    workload_key: WorkloadLevel
    is_overloaded_in_time: bool
    capacity: float
    peak_units: float = 0.0
    # Hours and variance are filled in by time-tracking collaborators.
    actual_hours: float = 0.0
    planned_hours: float = 0.0
    variance: float = 0.0


@dataclass
class HistogramDay:
    day: date
    workload_units: float
    capacity_units: float
    is_overloaded: bool


@dataclass
class ResourceHistogram:
    resource_id: str
    resource_name: str
    capacity: float
    days: list[HistogramDay] = field(default_factory=list)

    @property
    def has_workload(self) -> bool:
        return any(d.workload_units > 0 for d in self.days)

    @property
    def peak_units(self) -> float:
        return max((d.workload_units for d in self.days), default=0.0)


__all__ = [
    "AssignmentContribution",
    "ResolvedAssignments",
    "DateRange",
    "SweepResult",
    "LoadClassification",
    "ResourceUsage",
    "HistogramDay",
    "ResourceHistogram",
]
