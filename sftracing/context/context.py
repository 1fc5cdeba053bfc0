"""Binding trace identifiers into OpenTelemetry contexts."""

from typing import Optional

from opentelemetry.context import Context
from opentelemetry.trace import (
    NonRecordingSpan,
    SpanContext,
    get_current_span,
    set_span_in_context,
)

from sftracing.tracer.id_generator import (
    new_fixed_trace_id,
    new_random_span_id,
    new_zeroed_trace_id,
)
from sftracing.tracer.span_context import SpanID, TraceID


def get_trace_id(ctx: Optional[Context] = None) -> TraceID:
    """
    Return the trace ID of the span held by ctx (or the current context).

    Returns INVALID_TRACE_ID when no span is present; check is_valid().
    """
    span_context = get_current_span(ctx).get_span_context()
    return TraceID.from_int(span_context.trace_id)


def get_span_id(ctx: Optional[Context] = None) -> SpanID:
    """Return the span ID held by ctx, or INVALID_SPAN_ID."""
    span_context = get_current_span(ctx).get_span_context()
    return SpanID.from_int(span_context.span_id)


def _with_span_context(ctx: Optional[Context], trace_id: TraceID, is_remote: bool) -> Context:
    span_context = SpanContext(
        trace_id=trace_id.to_int(),
        span_id=new_random_span_id().to_int(),
        is_remote=is_remote,
    )
    return set_span_in_context(NonRecordingSpan(span_context), ctx)


def with_trace_id(ctx: Optional[Context], trace_id: TraceID) -> Context:
    """
    Return a new context carrying a span with the given trace ID.

    The span ID is freshly randomized. ctx itself is not modified.
    """
    return _with_span_context(ctx, trace_id, is_remote=False)


def new_zeroed_trace_id_in_context(ctx: Optional[Context] = None) -> Context:
    """
    Like new_zeroed_trace_id, but inserts a remote span straight into a context
    so the trace ID seen downstream is controlled.

    This should be used only in testing to provide a fixed trace ID
    instead of generating a new one each time.
    """
    return _with_span_context(ctx, new_zeroed_trace_id(), is_remote=True)


def new_fixed_trace_id_in_context(ctx: Optional[Context], hex_trace_id: str) -> Context:
    """
    Like new_fixed_trace_id, but inserts a remote span straight into a context
    so the trace ID seen downstream is controlled.

    This should be used only in testing to provide a fixed trace ID
    instead of generating a new one each time.
    """
    return _with_span_context(ctx, new_fixed_trace_id(hex_trace_id), is_remote=True)
