from datetime import date

import pytest

from core.models import Resource, ResourceAssignment, Task, UsageStatus, WorkloadLevel
from core.services.workload import (
    build_overload_alerts,
    build_resource_histogram,
    format_assigned_resources,
    rescale_units_for_replacement,
)
from core.services.workload.models import DateRange, ResourceUsage


def _task(task_id, start, end, assignments=(), legacy=()):
    return Task(
        id=task_id,
        project_id="p1",
        name=task_id,
        start_date=start,
        end_date=end,
        resource_assignments=list(assignments),
        resource_ids=list(legacy),
    )


def _usage(name, status, workload, total, peak, capacity=1.0):
    return ResourceUsage(
        resource_id=name.lower(),
        resource_name=name,
        assigned_percent=total,
        available_percent=max(0.0, 1.0 - min(total, 1.0)),
        status=status.value,
        workload=workload.value,
        status_key=status,
        workload_key=workload,
        is_overloaded_in_time=status == UsageStatus.OVERLOADED,
        capacity=capacity,
        peak_units=peak,
    )


def test_histogram_counts_every_calendar_day():
    dev = Resource(id="r1", name="Dev", max_units=1.0)
    tasks = [
        _task("t1", date(2024, 3, 1), date(2024, 3, 3), [ResourceAssignment("r1", 0.5)]),
        _task("t2", date(2024, 3, 3), date(2024, 3, 5), [ResourceAssignment("r1", 0.75)]),
        _task("t3", date(2024, 3, 1), date(2024, 3, 6), [ResourceAssignment("r2", 1.0)]),
    ]

    histogram = build_resource_histogram(dev, tasks)

    assert [d.day.day for d in histogram.days] == [1, 2, 3, 4, 5, 6]
    assert [d.workload_units for d in histogram.days] == pytest.approx(
        [0.5, 0.5, 1.25, 0.75, 0.75, 0.0]
    )
    assert [d.is_overloaded for d in histogram.days] == [False, False, True, False, False, False]
    assert histogram.peak_units == pytest.approx(1.25)
    assert histogram.has_workload


def test_histogram_respects_explicit_range_and_capacity():
    dev = Resource(id="r1", name="Dev", max_units=150)
    tasks = [_task("t1", date(2024, 3, 1), date(2024, 3, 10), [ResourceAssignment("r1", 1.2)])]

    histogram = build_resource_histogram(dev, tasks, DateRange(date(2024, 3, 9), date(2024, 3, 12)))

    assert len(histogram.days) == 4
    assert [d.workload_units for d in histogram.days] == pytest.approx([1.2, 1.2, 0.0, 0.0])
    assert all(d.capacity_units == pytest.approx(1.5) for d in histogram.days)
    assert not any(d.is_overloaded for d in histogram.days)


def test_histogram_without_dates_is_empty():
    dev = Resource(id="r1", name="Dev")
    histogram = build_resource_histogram(dev, [_task("t1", None, None, legacy=["r1"])])

    assert histogram.days == []
    assert not histogram.has_workload
    assert histogram.peak_units == 0.0


def test_overload_alerts_cover_overloaded_and_distributed_only():
    usages = [
        _usage("Ann", UsageStatus.OVERLOADED, WorkloadLevel.OVERLOAD, 1.2, 1.2),
        _usage("Bob", UsageStatus.DISTRIBUTED, WorkloadLevel.DISTRIBUTED, 2.0, 1.0),
        _usage("Cid", UsageStatus.BUSY, WorkloadLevel.NORMAL, 1.0, 1.0),
    ]

    alerts = build_overload_alerts(usages)

    assert len(alerts) == 2
    assert alerts[0] == 'Resource "Ann" is overloaded: peak load 120% exceeds capacity 100%.'
    assert alerts[1].startswith('Resource "Bob" carries 200% in total')


@pytest.mark.parametrize(
    "units,current,new,keep,expected",
    [
        (0.5, 1.0, 2.0, True, 1.0),
        (0.5, 100, 50, True, 0.25),
        (1.0, 1.0, 0.5, True, 0.5),
        (0.8, 1.0, 0.5, False, 0.5),
        (0.4, 1.0, 2.0, False, 0.4),
        (0.4, 0.0, 1.0, True, 1.0),
        (0.4, 0.0, 0.5, True, 0.5),
        (50, 1.0, 2.0, True, 1.0),
        (60, 100, 50, False, 0.5),
    ],
)
def test_rescale_units_for_replacement(units, current, new, keep, expected):
    assert rescale_units_for_replacement(units, current, new, keep) == pytest.approx(expected)


def test_format_assigned_resources():
    resources = [Resource(id="r1", name="Ann"), Resource(id="2", name="Bob")]

    explicit = _task("t1", None, None, [ResourceAssignment("r1", 1.0), ResourceAssignment(2, 0.5)])
    legacy = _task("t2", None, None, legacy=["r1", "missing"])
    nobody = _task("t3", None, None, legacy=["missing"])

    assert format_assigned_resources(explicit, resources, "-") == "Ann (100%), Bob (50%)"
    assert format_assigned_resources(legacy, resources, "-") == "Ann (100%)"
    assert format_assigned_resources(nobody, resources, "Unassigned") == "Unassigned"
