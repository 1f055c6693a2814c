"""Tests for MCP tool invocation logging and counters."""

import logging

import pytest

from intentguard.interface.mcp.observability import metrics_snapshot, tool_invocation


def test_invocation_logged_with_trace_and_extra(caplog):
    caplog.set_level(logging.INFO, logger="intentguard.mcp")
    with tool_invocation("probe_tool") as ctx:
        ctx["extra"]["terms_count"] = 3
    record = next(r for r in caplog.records if r.getMessage() == "tool_invocation")
    assert record.tool == "probe_tool"
    assert record.terms_count == 3
    assert record.trace_id == ctx["trace_id"]


def test_raised_exception_counted_and_propagated():
    before = metrics_snapshot()["errors"].get("failing_tool", 0)
    with pytest.raises(RuntimeError):
        with tool_invocation("failing_tool"):
            raise RuntimeError("boom")
    snap = metrics_snapshot()
    assert snap["errors"]["failing_tool"] == before + 1
    assert snap["tool_calls"]["failing_tool"] >= 1


def test_snapshot_is_a_copy():
    snap = metrics_snapshot()
    snap["tool_calls"]["injected"] = 99
    assert "injected" not in metrics_snapshot()["tool_calls"]
