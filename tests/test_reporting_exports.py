from __future__ import annotations

from datetime import date

import pytest
from openpyxl import load_workbook

from core.exceptions import BusinessRuleError
from core.reporting import api as reporting_api


def _setup_usage_project(services):
    rs = services["resource_service"]
    ts = services["task_service"]

    ann = rs.create_resource("Ann", max_units=1.0)
    bob = rs.create_resource("Bob", max_units=150)
    t1 = ts.create_task("p1", "Alpha", start_date=date(2024, 1, 1), end_date=date(2024, 1, 4))
    t2 = ts.create_task("p1", "Beta", start_date=date(2024, 1, 3), end_date=date(2024, 1, 5))
    ts.assign_resource(t1.id, ann.id, 0.6)
    ts.assign_resource(t2.id, ann.id, 0.6)
    ts.assign_resource(t2.id, bob.id, 0.75)
    return ann, bob


def test_excel_export_lists_every_resource(services, tmp_path):
    _setup_usage_project(services)
    out = tmp_path / "reports" / "usage.xlsx"

    path = reporting_api.export_resource_usage_excel(
        services["usage_service"], "p1", out, as_of=date(2024, 2, 1)
    )

    assert path == out
    wb = load_workbook(path)
    assert wb.sheetnames == ["Resource Usage", "Histogram"]

    ws = wb["Resource Usage"]
    assert ws["A1"].value == "Resource usage - project p1"
    assert ws["A2"].value == "As of 2024-02-01"
    assert ws["B4"].value == "Name"

    ann_row = [c.value for c in ws[5]]
    assert ann_row[1] == "Ann"
    assert ann_row[2] == 100.0
    assert ann_row[3] == 120.0
    assert ann_row[4] == 0.0
    assert ann_row[5] == 120.0
    assert ann_row[6] == "Overloaded"
    assert ann_row[8] == "Yes"
    assert ws["A5"].fill.fgColor.rgb.endswith("FFCCCC")

    bob_row = [c.value for c in ws[6]]
    assert bob_row[1] == "Bob"
    assert bob_row[2] == 150.0
    assert bob_row[4] == 25.0
    assert bob_row[6] == "Partially allocated"
    assert bob_row[8] == "No"

    hist = wb["Histogram"]
    assert [c.value for c in hist[1]] == ["Resource", "Date", "Load (%)", "Capacity (%)", "Overloaded"]
    # 5 project days for each of the 2 resources
    assert hist.max_row == 1 + 10
    assert [c.value for c in hist[4]] == ["Ann", "2024-01-03", 120.0, 100.0, "Yes"]


def test_excel_export_without_histogram(services, tmp_path):
    _setup_usage_project(services)

    path = reporting_api.export_resource_usage_excel(
        services["usage_service"], "p1", tmp_path / "usage.xlsx", include_histogram=False
    )

    assert load_workbook(path).sheetnames == ["Resource Usage"]


def test_histogram_png_export(services, tmp_path):
    ann, _ = _setup_usage_project(services)
    out = tmp_path / "charts" / "ann.png"

    path = reporting_api.generate_resource_histogram_png(services["usage_service"], "p1", ann.id, out)

    assert path == out
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_histogram_png_requires_workload(services, tmp_path):
    rs = services["resource_service"]
    ts = services["task_service"]
    idle = rs.create_resource("Idle")
    ts.create_task("p1", "Alpha", start_date=date(2024, 1, 1), end_date=date(2024, 1, 4))

    with pytest.raises(BusinessRuleError) as exc:
        reporting_api.generate_resource_histogram_png(
            services["usage_service"], "p1", idle.id, tmp_path / "idle.png"
        )
    assert exc.value.code == "NO_WORKLOAD"
