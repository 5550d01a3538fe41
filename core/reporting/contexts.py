from dataclasses import dataclass, field
from datetime import date
from typing import List

from core.services.workload import ResourceHistogram, ResourceUsage


@dataclass
class ResourceUsageReportContext:
    project_id: str
    usages: List[ResourceUsage]
    as_of: date
    histograms: List[ResourceHistogram] = field(default_factory=list)
