from __future__ import annotations

from typing import Iterable, List

from core.models import UsageStatus
from core.services.workload.models import ResourceUsage


def build_overload_alerts(usages: Iterable[ResourceUsage]) -> List[str]:
    alerts: List[str] = []
    for usage in usages:
        if usage.status_key == UsageStatus.OVERLOADED:
            alerts.append(
                f'Resource "{usage.resource_name}" is overloaded: peak load '
                f"{usage.peak_units * 100:.0f}% exceeds capacity {usage.capacity * 100:.0f}%."
            )
        elif usage.status_key == UsageStatus.DISTRIBUTED:
            alerts.append(
                f'Resource "{usage.resource_name}" carries {usage.assigned_percent * 100:.0f}% '
                "in total, spread over non-overlapping periods."
            )
    return alerts


__all__ = ["build_overload_alerts"]
