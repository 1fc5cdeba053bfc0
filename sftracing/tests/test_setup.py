"""Tests for the setup_tracing() entry point."""

import logging
import unittest
from unittest.mock import patch

import grpc
import pytest
from opentelemetry import trace

from sftracing import (
    Backend,
    BackendInitError,
    ConfigError,
    UnsupportedBackendError,
    get_trace_id,
    get_tracer,
    get_tracing_handle,
    setup_tracing,
    shutdown_tracing,
)
from sftracing.version import __version__


class TestDisabledTracing(unittest.TestCase):
    """Tracing is strictly opt-in."""

    def test_empty_config_is_disabled(self):
        before = trace.get_tracer_provider()

        handle = setup_tracing("svc", config="")

        self.assertFalse(handle.enabled)
        self.assertIsNone(handle.backend)
        self.assertIs(trace.get_tracer_provider(), before)
        self.assertFalse(get_trace_id().is_valid())

    def test_unset_env_is_disabled(self):
        handle = setup_tracing("svc")
        self.assertFalse(handle.enabled)
        self.assertIs(get_tracing_handle(), handle)

    def test_disabled_handle_gives_noop_tracer(self):
        handle = setup_tracing("svc", config="")
        with handle.get_tracer("x").start_as_current_span("s") as span:
            self.assertFalse(span.get_span_context().is_valid)
            self.assertFalse(get_trace_id().is_valid())
        self.assertTrue(handle.force_flush())
        shutdown_tracing()


def test_env_selects_backend(monkeypatch):
    monkeypatch.setenv("SF_TRACING", "stdout://")
    handle = setup_tracing("svc")
    assert handle.enabled
    assert handle.backend is Backend.STDOUT


def test_explicit_config_overrides_env(monkeypatch):
    monkeypatch.setenv("SF_TRACING", "foo://")
    handle = setup_tracing("svc", config="stdout://")
    assert handle.backend is Backend.STDOUT


def test_malformed_ratio_fails():
    with pytest.raises(ConfigError, match="ratio"):
        setup_tracing("svc", config="cloudtrace://?project_id=p&ratio=abc")
    assert get_tracing_handle() is None


def test_unsupported_scheme_fails(monkeypatch):
    monkeypatch.setenv("SF_TRACING", "foo://")
    with pytest.raises(UnsupportedBackendError):
        setup_tracing("svc")
    assert get_tracing_handle() is None


def test_zipkin_setup_resolves_endpoint():
    handle = setup_tracing("svc", config="zipkin://localhost:9411?scheme=http")

    assert handle.backend is Backend.ZIPKIN
    assert trace.get_tracer_provider() is handle.provider
    assert handle.exporter.endpoint == "http://localhost:9411/api/v2/spans"


def test_collector_unreachable_fails():
    with patch("sftracing.backends.grpc.channel_ready_future") as mock_ready:
        mock_ready.return_value.result.side_effect = grpc.FutureTimeoutError()
        with pytest.raises(BackendInitError):
            setup_tracing("svc", config="otelcol://localhost:4317")
    assert get_tracing_handle() is None


def test_second_setup_keeps_first_handle(caplog):
    first = setup_tracing("svc", config="stdout://")

    with caplog.at_level(logging.WARNING, logger="sftracing.auto"):
        second = setup_tracing("other", config="zipkin://localhost:9411?scheme=http")

    assert second is first
    assert second.backend is Backend.STDOUT
    assert any("already called" in record.getMessage() for record in caplog.records)


def test_setup_logs_backend(caplog):
    with caplog.at_level(logging.INFO, logger="sftracing"):
        setup_tracing("svc", config="stdout://")
    assert any("stdout" in record.getMessage() for record in caplog.records)


def test_resource_attributes_are_merged():
    handle = setup_tracing(
        "svc",
        config="zipkin://localhost:9411?scheme=http",
        resource_attributes={"deployment.environment": "prod"},
    )
    attrs = handle.resource.attributes
    assert attrs["service.name"] == "svc"
    assert attrs["deployment.environment"] == "prod"


def test_get_tracer_uses_installed_handle():
    handle = setup_tracing("svc", config="stdout://")
    tracer = get_tracer()

    assert tracer is handle.get_tracer("sftracing")
    with tracer.start_as_current_span("op") as span:
        assert get_trace_id().to_int() == span.get_span_context().trace_id
    assert span.instrumentation_scope.version == __version__


def test_shutdown_tracing_flushes_provider():
    handle = setup_tracing("svc", config="stdout://")
    with patch.object(handle.provider, "force_flush", return_value=True) as mock_flush:
        with patch.object(handle.provider, "shutdown") as mock_shutdown:
            shutdown_tracing(timeout=2)
    mock_flush.assert_called_once_with(timeout_millis=2000)
    mock_shutdown.assert_called_once_with()
    assert get_tracing_handle() is handle


def test_shutdown_without_setup_is_noop():
    shutdown_tracing()
    assert get_tracing_handle() is None


if __name__ == "__main__":
    unittest.main()
