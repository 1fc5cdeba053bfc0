"""Identifier and provider components for the tracing setup."""

from sftracing.tracer.id_generator import (
    SecureIdGenerator,
    new_fixed_trace_id,
    new_random_span_id,
    new_random_trace_id,
    new_zeroed_trace_id,
)
from sftracing.tracer.provider import TracingHandle
from sftracing.tracer.span_context import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanID, TraceID

__all__ = [
    "TraceID",
    "SpanID",
    "INVALID_TRACE_ID",
    "INVALID_SPAN_ID",
    "SecureIdGenerator",
    "new_random_trace_id",
    "new_random_span_id",
    "new_fixed_trace_id",
    "new_zeroed_trace_id",
    "TracingHandle",
]
