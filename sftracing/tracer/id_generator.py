"""Random and fixed trace/span identifier generation."""

from __future__ import annotations

import secrets

from opentelemetry.sdk.trace.id_generator import IdGenerator

from sftracing.errors import InvalidArgumentError
from sftracing.tracer.span_context import SpanID, TraceID
from sftracing.utils.helpers import SPAN_ID_BYTES, TRACE_ID_BYTES, decode_hex

_ZEROED_TRACE_ID_HEX = "0" * (TRACE_ID_BYTES * 2)


def _random_nonzero_bytes(length: int) -> bytes:
    while True:
        value = secrets.token_bytes(length)
        if any(value):
            return value


def new_random_trace_id() -> TraceID:
    """Return a random, valid trace ID drawn from the OS CSPRNG."""
    return TraceID(_random_nonzero_bytes(TRACE_ID_BYTES))


def new_random_span_id() -> SpanID:
    """Return a random, valid span ID drawn from the OS CSPRNG."""
    return SpanID(_random_nonzero_bytes(SPAN_ID_BYTES))


def new_fixed_trace_id(hex_trace_id: str) -> TraceID:
    """
    Return a mocked, fixed trace ID from an hexadecimal string.

    The string must contain exactly 32 hexadecimal characters (16 bytes).
    Any other input raises InvalidArgumentError; this is meant for
    hard-coded test fixtures and must not be fed untrusted input.
    """
    if len(hex_trace_id) != TRACE_ID_BYTES * 2:
        raise InvalidArgumentError(
            f"trace id hexadecimal value should have {TRACE_ID_BYTES * 2} characters, "
            f"received {len(hex_trace_id)} for {hex_trace_id!r}"
        )

    value = decode_hex(hex_trace_id)
    if value is None:
        raise InvalidArgumentError(f"unable to decode hex trace id {hex_trace_id!r}")

    return TraceID(value)


def new_zeroed_trace_id() -> TraceID:
    """Return a mocked, fixed trace ID containing only 0s."""
    return new_fixed_trace_id(_ZEROED_TRACE_ID_HEX)


class SecureIdGenerator(IdGenerator):
    """OpenTelemetry id generator backed by the same CSPRNG as new_random_*."""

    def generate_span_id(self) -> int:
        return new_random_span_id().to_int()

    def generate_trace_id(self) -> int:
        return new_random_trace_id().to_int()
