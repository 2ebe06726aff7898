"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from comingsoon.shared.telemetry.logging import get_logger, setup_logging
from comingsoon.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from comingsoon.shared.telemetry.tracing import add_span_attributes, get_trace_id, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "get_trace_id",
]
