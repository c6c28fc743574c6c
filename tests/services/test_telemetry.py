"""Tests for Span, trace_span, and the @traced decorator."""

from pushwire.services.result import ServiceResult
from pushwire.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@traced
def _op(fail: bool = False) -> ServiceResult:
    with trace_span("inner") as span:
        if span is not None:
            span.annotate("step", 1)
    return ServiceResult(ok=not fail, op="sample", meta={"source": "test"})


class TestSpan:
    def test_unfinished_duration_is_zero(self) -> None:
        assert Span(name="x").duration_ms == 0.0

    def test_to_dict_omits_empty_parts(self) -> None:
        span = Span(name="x")
        span.finish()
        data = span.to_dict()
        assert data["name"] == "x"
        assert "children" not in data
        assert "annotations" not in data


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        disable_telemetry()
        result = _op()
        assert result.meta == {"source": "test"}

    def test_enabled_merges_span_tree(self) -> None:
        enable_telemetry()
        result = _op()
        assert result.meta is not None
        assert result.meta["source"] == "test"
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("_op")
        (inner,) = telemetry["children"]
        assert inner["name"] == "inner"
        assert inner["annotations"] == {"step": 1}

    def test_trace_span_outside_traced_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None
