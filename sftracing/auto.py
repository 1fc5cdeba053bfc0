"""Process-wide tracing setup from the SF_TRACING configuration string."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from opentelemetry import trace

from sftracing import runtime_config
from sftracing.backends import assemble, build_parts
from sftracing.config import ENV_VAR, TracingConfig
from sftracing.tracer.provider import TracingHandle
from sftracing.version import __version__

logger = logging.getLogger(__name__)

TRACER_NAME = "sftracing"


def setup_tracing(
    service_name: str,
    config: Optional[Union[str, TracingConfig]] = None,
    resource_attributes: Optional[Mapping[str, str]] = None,
) -> TracingHandle:
    """
    Configure tracing for this process and return the installed handle.

    The configuration comes from ``config`` when given, otherwise from the
    SF_TRACING environment variable. An empty configuration disables tracing:
    no provider is installed and trace ids read from contexts stay invalid.

    Only the first call has an effect. Later calls log a warning and return
    the handle installed by the first one, whatever their arguments.

    Args:
        service_name: Value of the service.name resource attribute
        config: Configuration URL or an already parsed TracingConfig
        resource_attributes: Extra resource attributes, overriding the
            backend's own on key collision

    Raises:
        ConfigError: the configuration string is malformed
        UnsupportedBackendError: the scheme names no known backend
        BackendInitError: the backend's exporter or transport failed to build
    """
    with runtime_config.setup_lock:
        existing = runtime_config.get_handle()
        if existing is not None:
            logger.warning(
                f"setup_tracing() was already called for service "
                f"{runtime_config.get_service_name()!r}; keeping {existing!r}"
            )
            return existing

        if isinstance(config, TracingConfig):
            parsed = config
        elif config is None:
            parsed = TracingConfig.from_env()
        elif config.strip():
            parsed = TracingConfig.parse(config.strip())
        else:
            parsed = None

        if parsed is None:
            handle = TracingHandle.disabled()
            logger.info(f"Tracing disabled, {ENV_VAR} is empty")
        else:
            parts = build_parts(service_name, parsed)
            handle = assemble(parsed.backend, parts, resource_attributes)

        runtime_config.set_handle(handle)
        runtime_config.set_service_name(service_name)
        return handle


def get_tracing_handle() -> Optional[TracingHandle]:
    """Return the handle installed by setup_tracing(), if it ran."""
    return runtime_config.get_handle()


def get_tracer(name: str = TRACER_NAME) -> trace.Tracer:
    """
    Return a tracer from the installed handle.

    Before setup this falls back to the OpenTelemetry global tracer, which is
    a no-op until a provider is installed.
    """
    handle = runtime_config.get_handle()
    if handle is None:
        return trace.get_tracer(name, __version__)
    return handle.get_tracer(name, __version__)


def shutdown_tracing(timeout: Optional[float] = None) -> None:
    """
    Flush buffered spans and shut the pipeline down, for process exit.

    The handle stays installed; spans ended afterwards are not exported.
    """
    handle = runtime_config.get_handle()
    if handle is None or not handle.enabled:
        return
    handle.force_flush(timeout)
    handle.shutdown()
    logger.info(f"Tracing shut down for {handle!r}")
