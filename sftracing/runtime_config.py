"""Runtime state management for the installed tracing pipeline."""

import threading
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sftracing.tracer.provider import TracingHandle

# Global runtime state
_config = {
    "handle": None,
    "service_name": None,
}

# Serializes setup so only one handle is ever installed
setup_lock = threading.Lock()


def set_handle(value: Optional["TracingHandle"]) -> None:
    _config["handle"] = value


def get_handle() -> Optional["TracingHandle"]:
    return _config["handle"]


def set_service_name(value: Optional[str]) -> None:
    _config["service_name"] = value


def get_service_name() -> Optional[str]:
    return _config["service_name"]


def reset() -> None:
    """Forget the installed handle. Intended for test isolation only."""
    set_handle(None)
    set_service_name(None)
