"""Console exporter for developer visibility."""

from __future__ import annotations

import os
import sys
from typing import IO, Optional

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from sftracing.utils.helpers import format_span_id, format_trace_id


def format_span(span: ReadableSpan) -> str:
    """
    Render a finished span as one human-readable line.

    Start/end timestamps are left out so output is stable across runs.
    """
    ctx = span.context
    line = (
        f"[span] name={span.name} trace_id={format_trace_id(ctx.trace_id)} "
        f"span_id={format_span_id(ctx.span_id)}"
    )
    if span.parent is not None:
        line += f" parent_id={format_span_id(span.parent.span_id)}"
    line += f" kind={span.kind.name} status={span.status.status_code.name}"
    if span.status.description:
        line += f" description={span.status.description!r}"
    if span.attributes:
        line += f" attrs={dict(span.attributes)}"
    for event in span.events:
        line += f" event={event.name}"
        if event.attributes:
            line += f"{dict(event.attributes)}"
    return line + os.linesep


def new_console_exporter(stream: Optional[IO[str]] = None) -> ConsoleSpanExporter:
    """Console exporter writing formatted spans to stream (stderr by default)."""
    return ConsoleSpanExporter(out=stream or sys.stderr, formatter=format_span)
