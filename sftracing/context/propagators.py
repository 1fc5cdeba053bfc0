"""W3C trace context propagation using OpenTelemetry's standard propagators."""

from __future__ import annotations

from typing import Dict, Optional

from opentelemetry.context import Context
from opentelemetry.propagate import extract as otel_extract
from opentelemetry.propagate import inject as otel_inject
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator


def install_trace_context_propagator() -> None:
    """
    Set the global propagator to W3C trace context.

    Outgoing requests then carry `traceparent`/`tracestate` headers and
    incoming ones are continued in the same trace.
    """
    set_global_textmap(TraceContextTextMapPropagator())


def inject(carrier: Dict[str, str], ctx: Optional[Context] = None) -> None:
    """
    Inject trace context into carrier using the global propagator.

    If ctx is not provided, uses the current context.
    """
    otel_inject(carrier, context=ctx)


def extract(carrier: Dict[str, str], ctx: Optional[Context] = None) -> Context:
    """
    Extract trace context from carrier using the global propagator.

    Returns a context usable with get_trace_id() or tracer.start_span().
    """
    return otel_extract(carrier, context=ctx)
