"""Helper functions for converting identifiers to and from OpenTelemetry form."""

from __future__ import annotations

import binascii
from typing import Optional

TRACE_ID_BYTES = 16
SPAN_ID_BYTES = 8


def format_trace_id(trace_id: int) -> str:
    """
    Format OTel trace_id (int) to hex string.

    Args:
        trace_id: OTel trace_id as a 128-bit int

    Returns:
        32-character hex string
    """
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """
    Format OTel span_id (int) to hex string.

    Args:
        span_id: OTel span_id as a 64-bit int

    Returns:
        16-character hex string
    """
    return format(span_id, '016x')


def bytes_to_int(value: bytes) -> int:
    return int.from_bytes(value, "big")


def int_to_bytes(value: int, length: int) -> bytes:
    return value.to_bytes(length, "big")


def decode_hex(hex_string: str) -> Optional[bytes]:
    """
    Decode a hex string, returning None when it contains non-hex characters.

    Unlike int(x, 16) this rejects signs, whitespace, underscores and 0x
    prefixes, so the byte length always matches len(hex_string) / 2.
    """
    try:
        return binascii.unhexlify(hex_string.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError):
        return None
