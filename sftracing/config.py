"""Parsing of the single tracing configuration string.

The configuration is one URL, normally taken from the ``SF_TRACING``
environment variable:

    stdout://
    cloudtrace://[host[:port]]?project_id=<project_id>&ratio=<0.25>
    otelcol://host[:port]
    zipkin://host[:port]?scheme=<http|https>
    jaeger://host[:port]?scheme=<http|https>

An empty or unset value disables tracing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from sftracing.errors import ConfigError, UnsupportedBackendError
from sftracing.processors.sampler import SamplingPolicy

logger = logging.getLogger(__name__)

ENV_VAR = "SF_TRACING"
ENVIRONMENT_ENV_VAR = "NAMESPACE"
DEFAULT_CLOUDTRACE_RATIO = 0.25
TRANSPORT_SCHEMES = ("http", "https")


class Backend(Enum):
    STDOUT = "stdout"
    CLOUDTRACE = "cloudtrace"
    OTELCOL = "otelcol"
    ZIPKIN = "zipkin"
    JAEGER = "jaeger"


_NETWORK_BACKENDS = (Backend.OTELCOL, Backend.ZIPKIN, Backend.JAEGER)
_HTTP_BACKENDS = (Backend.ZIPKIN, Backend.JAEGER)


def _first_values(query: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        values.setdefault(key, value)
    return values


@dataclass(frozen=True)
class TracingConfig:
    """Immutable result of parsing the tracing configuration string."""

    backend: Backend
    host: str = ""
    port: Optional[int] = None
    address: str = ""
    project_id: str = ""
    ratio: float = DEFAULT_CLOUDTRACE_RATIO
    transport_scheme: str = ""
    raw: str = ""

    @classmethod
    def parse(cls, raw: str) -> "TracingConfig":
        """
        Parse a configuration URL.

        Raises:
            ConfigError: the URL, its port, or a backend parameter is malformed
            UnsupportedBackendError: the scheme names no known backend
        """
        try:
            parts = urlsplit(raw)
            port = parts.port
        except ValueError as err:
            raise ConfigError(f"parsing {ENV_VAR} with value {raw!r}: {err}") from err

        try:
            backend = Backend(parts.scheme)
        except ValueError:
            raise UnsupportedBackendError(
                f"unsupported tracing scheme {parts.scheme!r}",
                {"supported": ",".join(b.value for b in Backend)},
            ) from None

        query = _first_values(parts.query)
        address = parts.netloc.rpartition("@")[2]

        if backend in _NETWORK_BACKENDS and not address:
            raise ConfigError(f"{backend.value} tracing requires host[:port]", {"value": raw})

        ratio = DEFAULT_CLOUDTRACE_RATIO
        if backend is Backend.CLOUDTRACE and "ratio" in query:
            try:
                ratio = float(query["ratio"])
            except ValueError as err:
                raise ConfigError(f"parsing ratio {query['ratio']!r}: {err}") from err
            SamplingPolicy.with_ratio(ratio)

        transport_scheme = ""
        if backend in _HTTP_BACKENDS:
            transport_scheme = query.get("scheme", "").lower()
            if transport_scheme not in TRANSPORT_SCHEMES:
                raise ConfigError(
                    f"{backend.value} tracing requires scheme=http or scheme=https",
                    {"scheme": query.get("scheme")},
                )

        logger.debug(f"Parsed tracing config: backend={backend.value} address={address!r}")
        return cls(
            backend=backend,
            host=parts.hostname or "",
            port=port,
            address=address,
            project_id=query.get("project_id", ""),
            ratio=ratio,
            transport_scheme=transport_scheme,
            raw=raw,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Optional["TracingConfig"]:
        """Parse SF_TRACING, or return None when it is unset or empty."""
        env = environ if environ is not None else os.environ
        raw = env.get(ENV_VAR, "").strip()
        if not raw:
            return None
        return cls.parse(raw)

    @property
    def sampling(self) -> SamplingPolicy:
        if self.backend is Backend.CLOUDTRACE:
            return SamplingPolicy.with_ratio(self.ratio)
        return SamplingPolicy.always()


def deployment_environment(environ: Optional[Mapping[str, str]] = None) -> str:
    """Name of the deployment environment, from NAMESPACE ("" when unset)."""
    env = environ if environ is not None else os.environ
    return env.get(ENVIRONMENT_ENV_VAR, "")
