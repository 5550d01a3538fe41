"""Reporting API wrappers around renderer classes."""

from datetime import date
from pathlib import Path

from core.reporting.contexts import ResourceUsageReportContext
from core.reporting.renderers.excel import ResourceUsageExcelRenderer
from core.reporting.renderers.histogram import ResourceHistogramPngRenderer
from core.services.workload import ResourceUsageService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_resource_usage_excel(
    usage_service: ResourceUsageService,
    project_id: str,
    output_path: str | Path,
    include_histogram: bool = True,
    as_of: date | None = None,
) -> Path:
    ctx = ResourceUsageReportContext(
        project_id=project_id,
        usages=usage_service.get_project_resource_usage(project_id),
        as_of=as_of or date.today(),
        histograms=usage_service.get_project_histograms(project_id) if include_histogram else [],
    )
    return ResourceUsageExcelRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_resource_histogram_png(
    usage_service: ResourceUsageService,
    project_id: str,
    resource_id: str,
    output_path: str | Path,
) -> Path:
    histogram = usage_service.get_resource_histogram(project_id, resource_id)
    renderer = ResourceHistogramPngRenderer()
    return renderer.render(histogram, _ensure_parent(Path(output_path)))
