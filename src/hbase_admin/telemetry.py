"""OpenTelemetry instrumentation for hbase-admin operations.

Every administrative call runs inside one span opened by operation_span().
Spans carry the operation name, the table or column family the call acts
on, and whether the caller supplied its own handle. Only the OpenTelemetry
API is used, so spans go wherever the application's global tracer provider
sends them (and nowhere if none is configured).

Span attributes:
    hbase.admin.operation: Operation name, e.g. ``delete_table``.
    hbase.admin.resource: Table or column family name, when the call has one.
    hbase.admin.explicit_handle: True when ``admin=`` was passed.

Example:
    >>> from hbase_admin.telemetry import operation_span
    >>>
    >>> with operation_span("flush", resource="users", explicit_handle=False):
    ...     handle.flush("users")
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from opentelemetry.trace import Span, Tracer

TRACER_NAME = "hbase-admin"
"""OpenTelemetry instrumentation library name."""

SPAN_PREFIX = "hbase.admin"
"""Prefix for span names and attribute keys."""

# Semantic attribute names for admin operations
ATTR_OPERATION = f"{SPAN_PREFIX}.operation"
ATTR_RESOURCE = f"{SPAN_PREFIX}.resource"
ATTR_EXPLICIT_HANDLE = f"{SPAN_PREFIX}.explicit_handle"

# Cached tracer, guarded by double-checked locking
_tracer: Tracer | None = None
_lock = threading.Lock()


def get_tracer() -> Tracer:
    """Get or create the cached hbase-admin tracer.

    Returns a NoOpTracer, uncached, if OpenTelemetry initialization fails.
    """
    global _tracer

    tracer = _tracer
    if tracer is not None:
        return tracer

    with _lock:
        if _tracer is None:
            try:
                _tracer = trace.get_tracer(TRACER_NAME)
            except Exception:
                return trace.NoOpTracer()
        return _tracer


def reset_tracer() -> None:
    """Drop the cached tracer so the next call re-reads the global provider."""
    global _tracer
    with _lock:
        _tracer = None


@contextmanager
def operation_span(
    operation: str,
    *,
    resource: str | None = None,
    explicit_handle: bool = False,
) -> Iterator[Span]:
    """Open the span for one administrative call.

    Any exception raised inside the block is recorded on the span, the span
    status is set to ERROR, and the exception is re-raised unchanged.

    Args:
        operation: Operation name; the span is named ``hbase.admin.<operation>``.
        resource: Table or column family name the call acts on.
        explicit_handle: Whether the caller supplied its own handle.
    """
    with get_tracer().start_as_current_span(f"{SPAN_PREFIX}.{operation}") as span:
        span.set_attribute(ATTR_OPERATION, operation)
        span.set_attribute(ATTR_EXPLICIT_HANDLE, explicit_handle)
        if resource is not None:
            span.set_attribute(ATTR_RESOURCE, resource)
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            raise


__all__ = [
    "TRACER_NAME",
    "ATTR_OPERATION",
    "ATTR_RESOURCE",
    "ATTR_EXPLICIT_HANDLE",
    "get_tracer",
    "reset_tracer",
    "operation_span",
]
