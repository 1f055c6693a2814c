"""Observability for MCP tools: one structured log line per invocation, plus counters."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

_LOGGER = logging.getLogger("intentguard.mcp")

# tool_calls[name] = count, errors[name] = count
METRICS: dict[str, dict[str, int]] = {"tool_calls": {}, "errors": {}}


def log_tool_invocation(
    tool: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit the invocation log line and bump counters."""
    payload: dict[str, Any] = {
        "tool": tool,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.info("tool_invocation", extra=payload)
    METRICS["tool_calls"][tool] = METRICS["tool_calls"].get(tool, 0) + 1
    if error:
        METRICS["errors"][tool] = METRICS["errors"].get(tool, 0) + 1


@contextmanager
def tool_invocation(tool: str) -> Iterator[dict[str, Any]]:
    """Time a tool call and log it on exit.

    Yields a mutable context holding ``trace_id``; the tool may set
    ``error`` or add fields under ``extra`` before returning.
    """
    ctx: dict[str, Any] = {"trace_id": str(uuid.uuid4()), "error": None, "extra": {}}
    t0 = time.monotonic()
    try:
        yield ctx
    except Exception as e:
        ctx["error"] = ctx["error"] or f"{type(e).__name__}: {e}"
        raise
    finally:
        log_tool_invocation(
            tool,
            ctx["trace_id"],
            (time.monotonic() - t0) * 1000,
            error=ctx["error"],
            extra=ctx["extra"],
        )


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return a copy of the invocation counters."""
    return {k: dict(v) for k, v in METRICS.items()}
