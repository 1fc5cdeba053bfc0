"""sf-tracing error hierarchy and exceptions."""

from __future__ import annotations


class TracingError(Exception):
    """Base exception for all tracing setup errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(TracingError):
    """Raised when the tracing configuration string is invalid."""
    pass


class UnsupportedBackendError(ConfigError):
    """Raised when the configuration names a backend that does not exist."""
    pass


class BackendInitError(TracingError):
    """Raised when the selected backend's exporter or transport cannot be built."""
    pass


class InvalidArgumentError(AssertionError):
    """
    Raised for a malformed fixed trace id.

    This is a programmer error (a bad hard-coded fixture), not a runtime
    condition, so it is an AssertionError and not a TracingError.
    """
    pass


UnsupportedBackend = UnsupportedBackendError
