from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from ircbot.errors.internal import TransportClosedError
from ircbot.irc.dispatcher import CommandDispatcher


@pytest.fixture
def client(bot_config):
    return SimpleNamespace(config=bot_config, write=MagicMock())


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("!time", "time"),
        ("!time with arguments", "time"),
        ("!ti\tme", "time"),
        ("!", ""),
        ("! time", ""),
    ],
)
def test_command_name(message, expected):
    assert CommandDispatcher.command_name(message) == expected


def test_dispatch_known_command_writes_result(client):
    dispatcher = CommandDispatcher(client, {"weather": lambda: "Sunny"})
    dispatcher.dispatch("!weather today")
    client.write.assert_called_once_with("PRIVMSG #demo Sunny")


def test_dispatch_unknown_command_writes_nothing(client):
    dispatcher = CommandDispatcher(client, {"weather": lambda: "Sunny"})
    dispatcher.dispatch("!bogus")
    client.write.assert_not_called()


def test_command_table_is_read_only_snapshot(client):
    table = {"weather": lambda: "Sunny"}
    dispatcher = CommandDispatcher(client, table)
    table["late"] = lambda: "too late"

    dispatcher.dispatch("!late")
    client.write.assert_not_called()
    with pytest.raises(TypeError):
        dispatcher.commands["late"] = lambda: "x"  # type: ignore[index]


def test_command_exception_is_logged_not_raised(client):
    def broken() -> str:
        raise ValueError("bad")

    dispatcher = CommandDispatcher(client, {"broken": broken})
    with patch("ircbot.irc.dispatcher.log_error") as mock_log_error:
        dispatcher.dispatch("!broken")
    client.write.assert_not_called()
    message, error = mock_log_error.call_args.args
    assert message == "Command broken failed"
    assert isinstance(error, ValueError)
    assert mock_log_error.call_args.kwargs["context"]["command"] == "broken"


def test_write_failure_propagates(client):
    client.write.side_effect = TransportClosedError("closed")
    dispatcher = CommandDispatcher(client, {"weather": lambda: "Sunny"})
    with pytest.raises(TransportClosedError):
        dispatcher.dispatch("!weather")


def test_command_called_once_per_dispatch(client):
    calls = []

    def counted() -> str:
        calls.append(1)
        return "ok"

    dispatcher = CommandDispatcher(client, {"count": counted})
    dispatcher.dispatch("!count")
    dispatcher.dispatch("!count")
    assert len(calls) == 2
    assert client.write.call_count == 2
