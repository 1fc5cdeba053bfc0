"""Sampling policies for traces."""

import math
from dataclasses import dataclass
from typing import Optional

from opentelemetry.sdk.trace.sampling import ALWAYS_ON, Sampler, TraceIdRatioBased

from sftracing.errors import ConfigError


@dataclass(frozen=True)
class SamplingPolicy:
    """Head-based sampling: every trace, or a fixed fraction keyed on trace ID."""

    ratio: Optional[float] = None

    @classmethod
    def always(cls) -> "SamplingPolicy":
        return cls()

    @classmethod
    def with_ratio(cls, ratio: float) -> "SamplingPolicy":
        if not math.isfinite(ratio) or not 0.0 <= ratio <= 1.0:
            raise ConfigError("sampling ratio must be between 0.0 and 1.0", {"ratio": ratio})
        return cls(ratio=ratio)

    @property
    def is_always(self) -> bool:
        return self.ratio is None

    def to_sampler(self) -> Sampler:
        if self.ratio is None:
            return ALWAYS_ON
        return TraceIdRatioBased(self.ratio)
