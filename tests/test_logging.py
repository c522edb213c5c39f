"""
Tests for logging setup.
"""
import structlog.contextvars

from dutcheck import logging as dutcheck_logging
from dutcheck.config import settings


def test_component_tagger_stamps_events():
    tag = dutcheck_logging.component_tagger("dutcheck-api")
    event = tag(None, "info", {"event": "runner_reset"})
    assert event["component"] == "dutcheck-api"


def test_component_tagger_keeps_explicit_component():
    tag = dutcheck_logging.component_tagger("dutcheck-api")
    event = tag(None, "info", {"event": "x", "component": "scheduler"})
    assert event["component"] == "scheduler"


def test_setup_logging_writes_component_log(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "log_dir", tmp_path / "logs")
    dutcheck_logging.setup_logging("unit-test")
    assert (tmp_path / "logs" / "unit-test.log").exists()


def test_bind_run_context():
    structlog.contextvars.clear_contextvars()
    dutcheck_logging.bind_run_context(run_id="r1")
    try:
        assert structlog.contextvars.get_contextvars()["run_id"] == "r1"
    finally:
        structlog.contextvars.clear_contextvars()
