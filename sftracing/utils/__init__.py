"""Utility functions for sf-tracing."""

from sftracing.utils.helpers import (
    SPAN_ID_BYTES,
    TRACE_ID_BYTES,
    bytes_to_int,
    decode_hex,
    format_span_id,
    format_trace_id,
    int_to_bytes,
)

__all__ = [
    "TRACE_ID_BYTES",
    "SPAN_ID_BYTES",
    "format_trace_id",
    "format_span_id",
    "bytes_to_int",
    "int_to_bytes",
    "decode_hex",
]
