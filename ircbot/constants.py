"""
Configuration constants for the IRC bot

This module contains the defaults used by the connection and config layers.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Server defaults
IRC_DEFAULT_HOST = os.getenv("IRC_DEFAULT_HOST", "irc.freenode.org")
IRC_DEFAULT_PORT = _get_env_int("IRC_DEFAULT_PORT", 6667)
IRC_DEFAULT_ENCODING = os.getenv("IRC_DEFAULT_ENCODING", "utf-8")

# Socket timeouts
IRC_IDLE_TIMEOUT = _get_env_float(
    "IRC_IDLE_TIMEOUT", 3600.0
)  # Seconds without inbound data before a timeout event (1h default)
IRC_CONNECT_TIMEOUT = _get_env_float(
    "IRC_CONNECT_TIMEOUT", 15.0
)  # Upper bound on opening the TCP connection

# Stream reads
IRC_READ_CHUNK_SIZE = _get_env_int("IRC_READ_CHUNK_SIZE", 4096)

# Protocol
IRC_LINE_TERMINATOR = "\r\n"

# Config file
IRCBOT_CONF_FILE_DEFAULT = "ircbot.conf"
