"""sf-tracing: trace id helpers and one-string OpenTelemetry setup."""

from sftracing.auto import get_tracer, get_tracing_handle, setup_tracing, shutdown_tracing
from sftracing.config import Backend, TracingConfig
from sftracing.context import (
    extract,
    get_span_id,
    get_trace_id,
    inject,
    new_fixed_trace_id_in_context,
    new_zeroed_trace_id_in_context,
    with_trace_id,
)
from sftracing.errors import (
    BackendInitError,
    ConfigError,
    InvalidArgumentError,
    TracingError,
    UnsupportedBackend,
    UnsupportedBackendError,
)
from sftracing.tracer import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    SpanID,
    TraceID,
    TracingHandle,
    new_fixed_trace_id,
    new_random_span_id,
    new_random_trace_id,
    new_zeroed_trace_id,
)
from sftracing.version import __version__

__all__ = [
    "__version__",
    "setup_tracing",
    "shutdown_tracing",
    "get_tracer",
    "get_tracing_handle",
    "Backend",
    "TracingConfig",
    "TracingHandle",
    "TraceID",
    "SpanID",
    "INVALID_TRACE_ID",
    "INVALID_SPAN_ID",
    "new_random_trace_id",
    "new_random_span_id",
    "new_fixed_trace_id",
    "new_zeroed_trace_id",
    "get_trace_id",
    "get_span_id",
    "with_trace_id",
    "new_fixed_trace_id_in_context",
    "new_zeroed_trace_id_in_context",
    "inject",
    "extract",
    "TracingError",
    "ConfigError",
    "UnsupportedBackendError",
    "UnsupportedBackend",
    "BackendInitError",
    "InvalidArgumentError",
]
