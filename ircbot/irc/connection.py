"""Connection lifecycle for a single-channel IRC bot."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..config.model import BotConfig
from ..constants import IRC_LINE_TERMINATOR
from ..errors.handling import log_error
from ..errors.internal import TransportClosedError
from ..logs.logger import logger
from .dispatcher import CommandDispatcher, CommandTable
from .models import ConnectionState, TransportEvent
from .parser import parse_line
from .transport import StreamTransport, Transport, TransportFactory


class IRCConnection:  # pylint: disable=too-many-instance-attributes
    """Owns the transport, registers with the server and answers chat commands.

    State moves DISCONNECTED -> CONNECTING -> REGISTERING -> JOINED -> CLOSED.
    An instance connects at most once; CLOSED is terminal.
    """

    def __init__(
        self,
        config: BotConfig,
        commands: CommandTable,
        transport_factory: TransportFactory = StreamTransport,
    ):
        self.config = config
        self.transport: Transport | None = None
        self.state = ConnectionState.DISCONNECTED
        self.message_buffer = ""
        self.close_error: BaseException | None = None
        self._transport_factory = transport_factory
        self._closed = asyncio.Event()
        self.dispatcher = CommandDispatcher(self, commands)
        self._handlers = {
            TransportEvent.CONNECT: self._on_connect,
            TransportEvent.DATA: self._on_data,
            TransportEvent.END: self._on_end_of_stream,
            TransportEvent.TIMEOUT: self._on_timeout,
            TransportEvent.CLOSE: self._on_close,
        }

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.config.nickname,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def connect(self) -> None:
        if self.transport is not None:
            logger.log_event(
                "irc",
                "already_connected",
                level=logging.WARNING,
                user=self.config.nickname,
                state=self.state.name,
            )
            return
        logger.log_event(
            "irc",
            "connect_start",
            user=self.config.nickname,
            host=self.config.host,
            port=self.config.port,
        )
        self._set_state(ConnectionState.CONNECTING)
        self.transport = self._transport_factory(
            self.config.host,
            self.config.port,
            encoding=self.config.encoding,
            idle_timeout=self.config.timeout,
            listener=self.handle_event,
        )

    def handle_event(self, event: TransportEvent, payload: Any = None) -> None:
        self._handlers[event](payload)

    def _on_connect(self, _payload: Any = None) -> None:
        logger.log_event(
            "irc",
            "connected",
            user=self.config.nickname,
            host=self.config.host,
            port=self.config.port,
        )
        self._set_state(ConnectionState.REGISTERING)
        self.identify()
        self.join(self.config.channel)
        self._set_state(ConnectionState.JOINED)

    def _on_data(self, chunk: str) -> None:
        self.message_buffer += chunk
        *lines, self.message_buffer = self.message_buffer.split("\n")
        for line in lines:
            line = line.rstrip("\r")
            if not line.strip():
                continue
            try:
                self.action(line)
            except TransportClosedError:
                raise
            except Exception as e:  # noqa: BLE001
                # One unanswerable line must not take the connection down.
                log_error(
                    "Failed to handle server line",
                    e,
                    context={"user": self.config.nickname, "line": line},
                )

    def _on_end_of_stream(self, _payload: Any = None) -> None:
        logger.log_event(
            "irc", "end_of_stream", level=logging.WARNING, user=self.config.nickname
        )

    def _on_timeout(self, _payload: Any = None) -> None:
        logger.log_event(
            "irc",
            "timeout",
            level=logging.WARNING,
            user=self.config.nickname,
            timeout=self.config.timeout,
        )

    def _on_close(self, error: BaseException | None = None) -> None:
        self.close_error = error
        if error is not None:
            message = (
                f"Could not connect to {self.config.host}:{self.config.port}"
                if self.state is ConnectionState.CONNECTING
                else "Connection closed with error"
            )
            log_error(
                message,
                error,
                context={"user": self.config.nickname, "state": self.state.name},
            )
        else:
            logger.log_event(
                "irc", "closed", level=logging.WARNING, user=self.config.nickname
            )
        self.message_buffer = ""
        self._set_state(ConnectionState.CLOSED)
        self._closed.set()

    def identify(self) -> None:
        """Send the NICK/USER registration pair."""
        nickname = self.config.nickname
        self.write(f"NICK _{nickname}")
        self.write(f"USER {nickname} 0 * :{self.config.realname}")
        logger.log_event("irc", "registered", level=logging.DEBUG, user=nickname)

    def join(self, channel: str) -> None:
        self.write(f"JOIN #{channel}")
        logger.log_event("irc", "joined", user=self.config.nickname, channel=channel)

    def action(self, line: str) -> None:
        logger.log_event(
            "irc", "raw", level=logging.DEBUG, user=self.config.nickname, raw=line
        )
        decoded = parse_line(line)
        if decoded.command == "PRIVMSG":
            if decoded.message[:1] == self.config.prefix:
                self.dispatcher.dispatch(decoded.message)
        elif decoded.command == "PING":
            self.write(f"PONG {decoded.sender}")
            logger.log_event(
                "irc",
                "ping",
                level=logging.DEBUG,
                user=self.config.nickname,
                sender=decoded.sender,
            )

    def write(self, command: str) -> None:
        """Send one directive, CRLF-terminated.

        Raises:
            TransportClosedError: If there is no transport or it is closed.
        """
        if self.transport is None or self.transport.is_closing():
            raise TransportClosedError(
                "Cannot write to a connection that is not open",
                data={"state": self.state.name},
            )
        logger.log_event(
            "irc", "send", level=logging.DEBUG, user=self.config.nickname, line=command
        )
        self.transport.write(f"{command}{IRC_LINE_TERMINATOR}")

    def close(self) -> None:
        if self.transport is not None and not self.transport.is_closing():
            self.transport.close()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    @property
    def closed(self) -> bool:
        return self.state is ConnectionState.CLOSED
