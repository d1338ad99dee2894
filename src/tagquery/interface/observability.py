"""Observability: structured logs (trace_id, operation, latency_ms) and call counters."""

from __future__ import annotations

import logging
import time
from typing import Any

_LOGGER = logging.getLogger("tagquery")

# Counters: calls[name] = count, errors[name] = count
METRICS: dict[str, dict[str, int]] = {"calls": {}, "errors": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a plain stderr handler to the root logger (CLI / MCP entrypoints only)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_invocation(
    operation: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit structured log and update counters."""
    payload: dict[str, Any] = {
        "operation": operation,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    if error:
        _LOGGER.warning("invocation_failed", extra=payload)
    else:
        _LOGGER.info("invocation", extra=payload)
    METRICS["calls"][operation] = METRICS["calls"].get(operation, 0) + 1
    if error:
        METRICS["errors"][operation] = METRICS["errors"].get(operation, 0) + 1


def elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return current counters."""
    return {k: dict(v) for k, v in METRICS.items()}
