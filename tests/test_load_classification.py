from datetime import date

from core.models import UsageStatus, WorkloadLevel
from core.services.workload.classifier import classify_load, ratio_exceeds_capacity
from core.services.workload.models import SweepResult

INDETERMINATE = SweepResult()


def _swept(peak, overloaded):
    return SweepResult(peak_units=peak, peak_date=date(2024, 1, 1), overloaded=overloaded)


def test_overloaded_in_time_takes_priority():
    result = classify_load(2.0, 1.0, _swept(1.2, True))

    assert result.status == UsageStatus.OVERLOADED
    assert result.workload == WorkloadLevel.OVERLOAD
    assert result.is_overloaded_in_time is True


def test_total_above_capacity_without_overlap_is_distributed():
    result = classify_load(2.0, 1.0, _swept(1.0, False))

    assert result.status == UsageStatus.DISTRIBUTED
    assert result.workload == WorkloadLevel.DISTRIBUTED
    assert result.is_overloaded_in_time is False


def test_ratio_classification_for_loads_within_capacity():
    assert classify_load(0.0, 1.0, _swept(0.0, False)).status == UsageStatus.AVAILABLE
    assert classify_load(0.4, 1.0, _swept(0.4, False)).status == UsageStatus.PARTIAL
    assert classify_load(1.0, 1.0, _swept(1.0, False)).status == UsageStatus.BUSY
    assert classify_load(1.5, 2.0, _swept(1.5, False)).status == UsageStatus.PARTIAL
    assert classify_load(0.4, 1.0, _swept(0.4, False)).workload == WorkloadLevel.NORMAL


def test_indeterminate_sweep_falls_back_to_total_ratio():
    over = classify_load(1.5, 1.0, INDETERMINATE)
    assert over.status == UsageStatus.OVERLOADED
    assert over.is_overloaded_in_time is True

    within = classify_load(0.5, 1.0, INDETERMINATE)
    assert within.status == UsageStatus.PARTIAL
    assert within.is_overloaded_in_time is False

    exact = classify_load(1.0, 1.0, INDETERMINATE)
    assert exact.status == UsageStatus.BUSY


def test_zero_capacity_ratio():
    assert ratio_exceeds_capacity(0.0, 0.0) is False
    assert ratio_exceeds_capacity(0.5, 0.0) is True
    assert classify_load(0.0, 0.0, INDETERMINATE).status == UsageStatus.AVAILABLE
    assert classify_load(0.5, 0.0, INDETERMINATE).status == UsageStatus.OVERLOADED
