from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import ConfigError, InternalError, NetworkError


def log_error(message: str, error: BaseException, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    The exception is classified into a coarse error type so repeated failures
    aggregate under one key.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    error_type = "unknown"
    if isinstance(error, NetworkError | OSError | ConnectionError):
        error_type = "network"
    elif isinstance(error, ConfigError):
        error_type = "config"
    elif isinstance(error, InternalError):
        error_type = "internal"

    context = dict(context or {})
    if isinstance(error, InternalError) and error.data:
        context.update(error.data)

    log_structured_error(
        error_type=error_type,
        message=f"{message}: {str(error)}",
        exception=error,
        context=context,
    )
