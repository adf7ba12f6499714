"""Error hierarchy and structured error logging helpers."""

from .internal import (  # noqa: F401
    ConfigError,
    InternalError,
    NetworkError,
    TransportClosedError,
)

__all__ = ["InternalError", "NetworkError", "TransportClosedError", "ConfigError"]
