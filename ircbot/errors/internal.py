"""Centralized internal error hierarchy.

Only raise these inside application/network boundaries; wrap raw socket or
validation errors instead of surfacing them to callers.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transport/IO issues.
  TransportClosedError – Write attempted with no open transport.
  ConfigError          – Configuration file missing or invalid.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class TransportClosedError(NetworkError):
    """Raised when writing to a connection that was never opened or is closed.

    Writing after close is a caller error, so this always propagates.
    """


class ConfigError(InternalError):
    """Exception raised when the bot configuration cannot be loaded or validated."""


__all__ = [
    "InternalError",
    "NetworkError",
    "TransportClosedError",
    "ConfigError",
]
