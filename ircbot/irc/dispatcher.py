"""Chat command dispatch."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..errors.handling import log_error
from ..logs.logger import logger

if TYPE_CHECKING:  # pragma: no cover
    from .connection import IRCConnection

CommandFunc = Callable[[], str]
CommandTable = Mapping[str, CommandFunc]

_WHITESPACE = re.compile(r"\s+")


class CommandDispatcher:
    """Looks up prefixed chat commands and answers in the joined channel."""

    def __init__(self, client: IRCConnection, commands: CommandTable):
        self.client = client
        self.commands: CommandTable = MappingProxyType(dict(commands))

    @staticmethod
    def command_name(message: str) -> str:
        """Return the command word of ``message``, minus its prefix character."""
        return _WHITESPACE.sub("", message[1:].split(" ")[0])

    def dispatch(self, message: str) -> None:
        nickname = self.client.config.nickname
        channel = self.client.config.channel
        name = self.command_name(message)
        func = self.commands.get(name)
        if func is None:
            logger.log_event(
                "command",
                "unknown",
                level=logging.DEBUG,
                user=nickname,
                channel=channel,
                command=name,
            )
            return

        logger.log_event(
            "command", "invoked", user=nickname, channel=channel, command=name
        )
        try:
            result = func()
        except Exception as e:  # noqa: BLE001
            log_error(
                f"Command {name} failed",
                e,
                context={"user": nickname, "channel": channel, "command": name},
            )
            return
        self.client.write(f"PRIVMSG #{channel} {result}")
