"""Sampling and batching for the export pipeline."""

from sftracing.processors.batch_processor import (
    DEFAULT_BATCH_OPTIONS,
    BatchOptions,
    new_batch_processor,
)
from sftracing.processors.sampler import SamplingPolicy

__all__ = [
    "BatchOptions",
    "DEFAULT_BATCH_OPTIONS",
    "new_batch_processor",
    "SamplingPolicy",
]
