"""Backend registry and pipeline assembly.

Each backend builder turns a parsed TracingConfig into the parts of an export
pipeline (exporter, resource, sampling policy). ``assemble`` then wires those
parts into a tracer provider with a batch span processor and installs it as
the process-wide default.
"""

from __future__ import annotations

import logging
import socket
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Mapping, Optional

import grpc
from opentelemetry import trace
from opentelemetry.exporter.cloud_trace import CloudTraceSpanExporter
from opentelemetry.exporter.jaeger.thrift import JaegerExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.zipkin.json import ZipkinExporter
from opentelemetry.resourcedetector.gcp_resource_detector import GoogleCloudResourceDetector
from opentelemetry.sdk.resources import (
    HOST_NAME,
    SERVICE_NAME,
    Resource,
    get_aggregated_resources,
)
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SpanExporter

from sftracing.config import Backend, TracingConfig, deployment_environment
from sftracing.context.propagators import install_trace_context_propagator
from sftracing.errors import BackendInitError, TracingError
from sftracing.exporter.console_exporter import new_console_exporter
from sftracing.processors.batch_processor import DEFAULT_BATCH_OPTIONS, BatchOptions, new_batch_processor
from sftracing.processors.sampler import SamplingPolicy
from sftracing.tracer.id_generator import SecureIdGenerator
from sftracing.tracer.provider import TracingHandle

logger = logging.getLogger(__name__)

# Upper bound on the blocking dial to an OpenTelemetry collector.
COLLECTOR_DIAL_TIMEOUT = 1.0


@dataclass(frozen=True)
class BackendParts:
    """What a backend contributes to the pipeline."""

    exporter: SpanExporter
    resource: Resource
    # None keeps the SDK default sampler.
    sampling: Optional[SamplingPolicy]
    # Whether to install the global W3C trace-context propagator.
    propagate: bool
    target: str


BackendBuilder = Callable[[str, TracingConfig], BackendParts]


@contextmanager
def _backend_init(backend: Backend, action: str) -> Iterator[None]:
    try:
        yield
    except TracingError:
        raise
    except Exception as err:
        raise BackendInitError(f"{action}: {err}", {"backend": backend.value}) from err


def _service_resource(service_name: str) -> Resource:
    return Resource({SERVICE_NAME: service_name})


def build_stdout(service_name: str, config: TracingConfig) -> BackendParts:
    with _backend_init(Backend.STDOUT, "creating stdout exporter"):
        exporter = new_console_exporter()

    resource = Resource.create({
        SERVICE_NAME: service_name,
        HOST_NAME: socket.gethostname(),
        "environment": deployment_environment(),
    })
    return BackendParts(
        exporter=exporter,
        resource=resource,
        sampling=None,
        propagate=False,
        target="stderr",
    )


def build_cloudtrace(service_name: str, config: TracingConfig) -> BackendParts:
    with _backend_init(Backend.CLOUDTRACE, "creating cloudtrace exporter"):
        exporter = CloudTraceSpanExporter(project_id=config.project_id or None)

    # GCP platform detection, on top of the SDK telemetry attributes
    with _backend_init(Backend.CLOUDTRACE, "creating resource"):
        detected = get_aggregated_resources(
            [GoogleCloudResourceDetector(raise_on_error=False)],
            initial_resource=Resource.create(),
        )
    resource = detected.merge(_service_resource(service_name))

    return BackendParts(
        exporter=exporter,
        resource=resource,
        sampling=config.sampling,
        propagate=True,
        target=f"project_id={config.project_id or '<default>'}",
    )


def build_otelcol(service_name: str, config: TracingConfig) -> BackendParts:
    # The OTLP exporter dials lazily, so probe the collector first to fail
    # fast on an unreachable address.
    channel = grpc.insecure_channel(config.address)
    try:
        grpc.channel_ready_future(channel).result(timeout=COLLECTOR_DIAL_TIMEOUT)
    except grpc.FutureTimeoutError as err:
        raise BackendInitError(
            "failed to create gRPC connection to collector",
            {"backend": Backend.OTELCOL.value, "address": config.address, "timeout": COLLECTOR_DIAL_TIMEOUT},
        ) from err
    finally:
        channel.close()

    with _backend_init(Backend.OTELCOL, "failed to create trace exporter"):
        exporter = OTLPSpanExporter(endpoint=f"http://{config.address}", insecure=True)

    return BackendParts(
        exporter=exporter,
        resource=_service_resource(service_name),
        sampling=SamplingPolicy.always(),
        propagate=True,
        target=config.address,
    )


def build_zipkin(service_name: str, config: TracingConfig) -> BackendParts:
    endpoint = f"{config.transport_scheme}://{config.address}/api/v2/spans"
    with _backend_init(Backend.ZIPKIN, "failed to create trace exporter"):
        exporter = ZipkinExporter(endpoint=endpoint)

    return BackendParts(
        exporter=exporter,
        resource=_service_resource(service_name),
        sampling=SamplingPolicy.always(),
        propagate=True,
        target=endpoint,
    )


def build_jaeger(service_name: str, config: TracingConfig) -> BackendParts:
    endpoint = f"{config.transport_scheme}://{config.address}/api/traces"
    with _backend_init(Backend.JAEGER, "failed to create trace exporter"):
        exporter = JaegerExporter(collector_endpoint=endpoint)

    return BackendParts(
        exporter=exporter,
        resource=_service_resource(service_name),
        sampling=SamplingPolicy.always(),
        propagate=True,
        target=endpoint,
    )


BACKENDS: Dict[Backend, BackendBuilder] = {
    Backend.STDOUT: build_stdout,
    Backend.CLOUDTRACE: build_cloudtrace,
    Backend.OTELCOL: build_otelcol,
    Backend.ZIPKIN: build_zipkin,
    Backend.JAEGER: build_jaeger,
}


def build_parts(service_name: str, config: TracingConfig) -> BackendParts:
    """Run the builder registered for config.backend."""
    return BACKENDS[config.backend](service_name, config)


def assemble(
    backend: Backend,
    parts: BackendParts,
    resource_attributes: Optional[Mapping[str, str]] = None,
    batch_options: BatchOptions = DEFAULT_BATCH_OPTIONS,
) -> TracingHandle:
    """
    Build the tracer provider for parts and install it process-wide.

    Installation is the last step. Nothing is rolled back if an earlier step
    fails after a side effect.
    """
    resource = parts.resource
    if resource_attributes:
        resource = resource.merge(Resource(dict(resource_attributes)))

    provider_kwargs = {}
    if parts.sampling is not None:
        provider_kwargs["sampler"] = parts.sampling.to_sampler()

    provider = TracerProvider(
        resource=resource,
        id_generator=SecureIdGenerator(),
        **provider_kwargs,
    )
    provider.add_span_processor(new_batch_processor(parts.exporter, batch_options))

    if parts.propagate:
        install_trace_context_propagator()

    trace.set_tracer_provider(provider)
    logger.info(f"Tracing enabled with {backend.value} backend ({parts.target})")

    return TracingHandle(
        backend=backend,
        provider=provider,
        exporter=parts.exporter,
        resource=resource,
        sampler=provider.sampler,
    )
