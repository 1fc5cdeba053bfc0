"""Context utilities for trace identifiers."""

from sftracing.context.context import (
    get_span_id,
    get_trace_id,
    new_fixed_trace_id_in_context,
    new_zeroed_trace_id_in_context,
    with_trace_id,
)
from sftracing.context.propagators import (
    extract,
    inject,
    install_trace_context_propagator,
)

__all__ = [
    "get_trace_id",
    "get_span_id",
    "with_trace_id",
    "new_fixed_trace_id_in_context",
    "new_zeroed_trace_id_in_context",
    "install_trace_context_propagator",
    "inject",
    "extract",
]
