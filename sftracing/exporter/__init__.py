"""Exporters for delivering spans to a human."""

from sftracing.exporter.console_exporter import format_span, new_console_exporter

__all__ = ["format_span", "new_console_exporter"]
