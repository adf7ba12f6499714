"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    REGISTERING = auto()
    JOINED = auto()
    CLOSED = auto()


class TransportEvent(Enum):
    CONNECT = auto()
    DATA = auto()
    END = auto()
    TIMEOUT = auto()
    CLOSE = auto()


@dataclass(frozen=True, slots=True)
class DecodedMessage:
    command: str
    sender: str | None = None
    channel: str | None = None
    message: str = ""
