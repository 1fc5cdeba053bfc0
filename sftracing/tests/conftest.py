"""Shared fixtures: isolate the OpenTelemetry globals and installed handle per test."""

import pytest
from opentelemetry import propagate, trace
from opentelemetry.util._once import Once

from sftracing import runtime_config


def _reset_otel_tracer_provider():
    # OpenTelemetry only lets the global provider be set once per process.
    trace._TRACER_PROVIDER_SET_ONCE = Once()
    trace._TRACER_PROVIDER = None


@pytest.fixture(autouse=True)
def isolated_tracing(monkeypatch):
    monkeypatch.delenv("SF_TRACING", raising=False)
    original_textmap = propagate.get_global_textmap()
    _reset_otel_tracer_provider()
    runtime_config.reset()

    yield

    handle = runtime_config.get_handle()
    if handle is not None:
        handle.shutdown()
    runtime_config.reset()
    _reset_otel_tracer_provider()
    propagate.set_global_textmap(original_textmap)
