"""Batching span processor construction."""

from __future__ import annotations

from dataclasses import dataclass

from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter


@dataclass(frozen=True)
class BatchOptions:
    """Bounded queue and background flush settings for the batch processor."""

    max_queue_size: int = 5000
    max_export_batch_size: int = 512
    schedule_delay_millis: int = 5000
    export_timeout_millis: int = 30000


DEFAULT_BATCH_OPTIONS = BatchOptions()


def new_batch_processor(exporter: SpanExporter, options: BatchOptions = DEFAULT_BATCH_OPTIONS) -> BatchSpanProcessor:
    """
    Wrap exporter in a batch span processor.

    Spans are queued as they end and flushed by a background worker either
    every schedule_delay_millis or when a full batch is ready.
    """
    return BatchSpanProcessor(
        exporter,
        max_queue_size=options.max_queue_size,
        max_export_batch_size=options.max_export_batch_size,
        schedule_delay_millis=options.schedule_delay_millis,
        export_timeout_millis=options.export_timeout_millis,
    )
