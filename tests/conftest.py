from __future__ import annotations

from typing import Any

import pytest

from ircbot.config.model import BotConfig
from ircbot.errors.internal import TransportClosedError
from ircbot.irc.connection import IRCConnection
from ircbot.irc.models import TransportEvent


class FakeTransport:
    """In-memory transport: records writes, events are fired by the test."""

    def __init__(
        self,
        host: str,
        port: int,
        *,
        encoding: str,
        idle_timeout: float,
        listener: Any,
    ) -> None:
        self.host = host
        self.port = port
        self.encoding = encoding
        self.idle_timeout = idle_timeout
        self.listener = listener
        self.sent: list[str] = []
        self.closed = False

    def write(self, data: str) -> None:
        if self.closed:
            raise TransportClosedError("closed")
        data.encode(self.encoding)
        self.sent.append(data)

    def close(self) -> None:
        self.closed = True
        self.listener(TransportEvent.CLOSE, None)

    def is_closing(self) -> bool:
        return self.closed


class FakeTransportFactory:
    def __init__(self) -> None:
        self.created: list[FakeTransport] = []

    def __call__(self, host: str, port: int, **kwargs: Any) -> FakeTransport:
        transport = FakeTransport(host, port, **kwargs)
        self.created.append(transport)
        return transport


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(
        host="irc.example.org",
        port=6667,
        nickname="bot",
        realname="Bot Real",
        prefix="!",
        channel="demo",
    )


@pytest.fixture
def transport_factory() -> FakeTransportFactory:
    return FakeTransportFactory()


@pytest.fixture
def commands() -> dict:
    return {"time": lambda: "12:00"}


@pytest.fixture
def connection(bot_config, commands, transport_factory) -> IRCConnection:
    return IRCConnection(bot_config, commands, transport_factory=transport_factory)


@pytest.fixture
def joined(connection, transport_factory) -> tuple[IRCConnection, FakeTransport]:
    """Connection past the handshake with the handshake writes cleared."""
    connection.connect()
    connection.handle_event(TransportEvent.CONNECT)
    transport = transport_factory.created[0]
    transport.sent.clear()
    return connection, transport
