"""IRC subsystem package.

Contains the line parser, the stream transport, the connection state machine
and the chat command dispatcher.
"""

from .connection import IRCConnection  # noqa: F401
from .dispatcher import CommandDispatcher, CommandTable  # noqa: F401
from .models import ConnectionState, DecodedMessage, TransportEvent  # noqa: F401
from .parser import parse_line  # noqa: F401
from .transport import StreamTransport, Transport  # noqa: F401

__all__ = [
    "CommandDispatcher",
    "CommandTable",
    "ConnectionState",
    "DecodedMessage",
    "IRCConnection",
    "StreamTransport",
    "Transport",
    "TransportEvent",
    "parse_line",
]
