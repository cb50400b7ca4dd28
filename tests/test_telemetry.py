from __future__ import annotations

import pytest

from vicore.runtime import telemetry


def test_loggers_are_cached_by_name() -> None:
    assert telemetry.get_logger("vicore.test") is telemetry.get_logger("vicore.test")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="chatty")


def test_span_reraises_and_keeps_metadata() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", component="tests", metadata={"n": 1}) as handle:
            handle.add_metadata("stage", "body")
            raise RuntimeError("boom")

    assert handle.metadata == {"n": "1", "stage": "body"}
    assert handle.component_name == "tests"
