"""Tests for the human-readable console exporter."""

import io

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Status, StatusCode

from sftracing.exporter import format_span, new_console_exporter
from sftracing.utils import format_span_id, format_trace_id


def _finished_spans():
    memory = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(memory))
    tracer = provider.get_tracer("test")

    with tracer.start_as_current_span("parent"):
        with tracer.start_as_current_span("child") as child:
            child.set_attribute("db.system", "postgres")
            child.add_event("retry", {"attempt": 2})
            child.set_status(Status(StatusCode.ERROR, "boom"))

    provider.shutdown()
    return {span.name: span for span in memory.get_finished_spans()}


def test_format_span_is_readable_without_timestamps():
    spans = _finished_spans()
    child, parent = spans["child"], spans["parent"]

    line = format_span(child)

    assert line.startswith("[span] name=child ")
    assert f"trace_id={format_trace_id(child.context.trace_id)}" in line
    assert f"parent_id={format_span_id(parent.context.span_id)}" in line
    assert "status=ERROR description='boom'" in line
    assert "attrs={'db.system': 'postgres'}" in line
    assert "event=retry{'attempt': 2}" in line
    assert str(child.start_time) not in line
    assert str(child.end_time) not in line
    assert line.endswith("\n")


def test_root_span_has_no_parent():
    line = format_span(_finished_spans()["parent"])
    assert "parent_id=" not in line


def test_console_exporter_writes_to_stream():
    stream = io.StringIO()
    exporter = new_console_exporter(stream)

    exporter.export([_finished_spans()["parent"]])

    assert stream.getvalue().startswith("[span] name=parent ")
