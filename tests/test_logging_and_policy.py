from __future__ import annotations

import logging
import sys

import pytest

import infra.logging_config as logging_config
import infra.operational_support as operational_support
from core.models import BoundaryRule
from core.services.workload.policy import load_boundary_rule
from infra.operational_support import TraceIdLogFilter, bind_trace_id, current_trace_id


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, BoundaryRule.INCLUSIVE),
        ("", BoundaryRule.INCLUSIVE),
        ("exclusive", BoundaryRule.EXCLUSIVE),
        ("  Inclusive ", BoundaryRule.INCLUSIVE),
        ("EXCLUSIVE", BoundaryRule.EXCLUSIVE),
    ],
)
def test_boundary_rule_from_environment(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PM_LOAD_BOUNDARY_RULE", raising=False)
    else:
        monkeypatch.setenv("PM_LOAD_BOUNDARY_RULE", raw)

    assert load_boundary_rule() == expected


def test_unknown_boundary_rule_warns_and_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("PM_LOAD_BOUNDARY_RULE", "half-open")

    with caplog.at_level(logging.WARNING, logger="core.services.workload.policy"):
        assert load_boundary_rule() == BoundaryRule.INCLUSIVE

    assert "half-open" in caplog.text


def test_bind_trace_id_scopes_value():
    assert current_trace_id() is None
    with bind_trace_id("usage-test-1") as trace_id:
        assert trace_id == "usage-test-1"
        assert current_trace_id() == "usage-test-1"
        with bind_trace_id() as generated:
            assert generated.startswith("usage-")
            assert current_trace_id() == generated
        assert current_trace_id() == "usage-test-1"
    assert current_trace_id() is None


def test_trace_filter_stamps_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"

    with bind_trace_id("usage-abc"):
        TraceIdLogFilter().filter(record)
    assert record.trace_id == "usage-abc"


def test_setup_logging_writes_to_user_data_dir(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setattr(logging_config, "user_data_dir", lambda: tmp_path)
    monkeypatch.setattr(operational_support, "_HOOKS_INSTALLED", False)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    log_file = logging_config.setup_logging()
    logging_config.setup_logging()

    assert log_file == tmp_path / "logs" / "app.log"
    assert len(restore_root_logger.handlers) == 2

    with bind_trace_id("usage-log-1"):
        logging.getLogger("core.services.workload").info("usage computed")
    for handler in restore_root_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized" in text
    assert "trace=usage-log-1 core.services.workload - usage computed" in text
    assert sys.excepthook is not sys.__excepthook__
