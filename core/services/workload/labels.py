from __future__ import annotations

from typing import Callable

from core.models import UsageStatus, WorkloadLevel

Translate = Callable[[str], str]

STATUS_AVAILABLE = "status_available"
STATUS_OVERLOADED = "status_overloaded"
STATUS_PARTIAL = "status_partial"
STATUS_BUSY = "status_busy"
STATUS_DISTRIBUTED = "status_distributed"
WORKLOAD_OVERLOAD = "workload_overload"
WORKLOAD_NORMAL = "workload_normal"
WORKLOAD_DISTRIBUTED = "workload_distributed"

LABEL_KEYS = (
    STATUS_AVAILABLE,
    STATUS_OVERLOADED,
    STATUS_PARTIAL,
    STATUS_BUSY,
    STATUS_DISTRIBUTED,
    WORKLOAD_OVERLOAD,
    WORKLOAD_NORMAL,
    WORKLOAD_DISTRIBUTED,
)

DEFAULT_LABELS: dict[str, str] = {
    STATUS_AVAILABLE: "Available",
    STATUS_OVERLOADED: "Overloaded",
    STATUS_PARTIAL: "Partially allocated",
    STATUS_BUSY: "Fully allocated",
    STATUS_DISTRIBUTED: "Distributed",
    WORKLOAD_OVERLOAD: "Overload",
    WORKLOAD_NORMAL: "Normal",
    WORKLOAD_DISTRIBUTED: "Distributed",
}


def default_translate(key: str) -> str:
    return DEFAULT_LABELS.get(key, key)


def status_label_key(status: UsageStatus) -> str:
    return f"status_{status.value}"


def workload_label_key(workload: WorkloadLevel) -> str:
    return f"workload_{workload.value}"


__all__ = [
    "Translate",
    "LABEL_KEYS",
    "DEFAULT_LABELS",
    "default_translate",
    "status_label_key",
    "workload_label_key",
]
