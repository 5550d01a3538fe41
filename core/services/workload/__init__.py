from .alerts import build_overload_alerts
from .assignments import index_tasks, resolve_assignments, resolve_indexed
from .classifier import classify_load
from .date_range import find_project_date_range
from .histogram import build_resource_histogram
from .labels import DEFAULT_LABELS, LABEL_KEYS, default_translate
from .models import (
    AssignmentContribution,
    DateRange,
    HistogramDay,
    LoadClassification,
    ResolvedAssignments,
    ResourceHistogram,
    ResourceUsage,
    SweepResult,
)
from .replacement import rescale_units_for_replacement
from .service import ResourceUsageService
from .summary import build_resource_usage, compute_resource_usage
from .sweep import sweep_load
from .task_usage import format_assigned_resources
from .units import normalize_capacity, normalize_resource_id

__all__ = [
    "ResourceUsageService",
    "compute_resource_usage",
    "build_resource_usage",
    "resolve_assignments",
    "resolve_indexed",
    "index_tasks",
    "find_project_date_range",
    "sweep_load",
    "classify_load",
    "build_resource_histogram",
    "build_overload_alerts",
    "rescale_units_for_replacement",
    "format_assigned_resources",
    "normalize_capacity",
    "normalize_resource_id",
    "default_translate",
    "DEFAULT_LABELS",
    "LABEL_KEYS",
    "AssignmentContribution",
    "ResolvedAssignments",
    "DateRange",
    "SweepResult",
    "LoadClassification",
    "ResourceUsage",
    "HistogramDay",
    "ResourceHistogram",
]
