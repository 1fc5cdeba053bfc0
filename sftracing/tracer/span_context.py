"""Immutable trace and span identifiers."""

from dataclasses import dataclass

from sftracing.utils.helpers import (
    SPAN_ID_BYTES,
    TRACE_ID_BYTES,
    bytes_to_int,
    int_to_bytes,
)


@dataclass(frozen=True)
class TraceID:
    """A 16-byte trace identifier. The all-zero value means unset."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != TRACE_ID_BYTES:
            raise ValueError(
                f"trace id must be {TRACE_ID_BYTES} bytes, received {len(self.value)}"
            )

    @classmethod
    def from_int(cls, trace_id: int) -> "TraceID":
        return cls(int_to_bytes(trace_id, TRACE_ID_BYTES))

    def to_int(self) -> int:
        return bytes_to_int(self.value)

    def is_valid(self) -> bool:
        return any(self.value)

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class SpanID:
    """An 8-byte span identifier. The all-zero value means unset."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != SPAN_ID_BYTES:
            raise ValueError(
                f"span id must be {SPAN_ID_BYTES} bytes, received {len(self.value)}"
            )

    @classmethod
    def from_int(cls, span_id: int) -> "SpanID":
        return cls(int_to_bytes(span_id, SPAN_ID_BYTES))

    def to_int(self) -> int:
        return bytes_to_int(self.value)

    def is_valid(self) -> bool:
        return any(self.value)

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


INVALID_TRACE_ID = TraceID(bytes(TRACE_ID_BYTES))
INVALID_SPAN_ID = SpanID(bytes(SPAN_ID_BYTES))
