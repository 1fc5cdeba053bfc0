"""TracingHandle: the assembled OpenTelemetry pipeline returned by setup."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Dict, Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SpanExporter
from opentelemetry.sdk.trace.sampling import Sampler

if TYPE_CHECKING:
    from sftracing.config import Backend


class TracingHandle:
    """
    Holds the tracer provider installed for this process.

    Exactly one handle is installed per process (see sftracing.auto). Code that
    starts spans should take the handle, or a tracer obtained from it, as an
    explicit dependency rather than reaching into the OpenTelemetry globals.

    A disabled handle (tracing not configured) has no provider and hands out
    no-op tracers.
    """

    def __init__(
        self,
        backend: Optional["Backend"] = None,
        provider: Optional[TracerProvider] = None,
        exporter: Optional[SpanExporter] = None,
        resource: Optional[Resource] = None,
        sampler: Optional[Sampler] = None,
    ) -> None:
        self.backend = backend
        self.provider = provider
        self.exporter = exporter
        self.resource = resource
        self.sampler = sampler

        self._tracers: Dict[str, Any] = {}
        self._lock = threading.Lock()

    @classmethod
    def disabled(cls) -> "TracingHandle":
        return cls()

    @property
    def enabled(self) -> bool:
        return self.provider is not None

    def get_tracer(self, name: str, version: Optional[str] = None) -> trace.Tracer:
        """
        Get a tracer by instrumentation scope name.

        Tracers are cached per name; the version of the first call wins.
        """
        if self.provider is None:
            return trace.NoOpTracer()

        with self._lock:
            tracer = self._tracers.get(name)
            if tracer is None:
                tracer = self.provider.get_tracer(name, version)
                self._tracers[name] = tracer
            return tracer

    def force_flush(self, timeout: Optional[float] = None) -> bool:
        """Export all spans still buffered in the batch processor."""
        if self.provider is None:
            return True
        return self.provider.force_flush(timeout_millis=int(timeout * 1000) if timeout else 30000)

    def shutdown(self) -> None:
        """Flush and shut down the provider and its exporter."""
        if self.provider is None:
            return
        self.provider.shutdown()

    def __repr__(self) -> str:
        backend = self.backend.value if self.backend is not None else "disabled"
        return f"TracingHandle(backend={backend!r})"
