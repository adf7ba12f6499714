from __future__ import annotations

from unittest.mock import ANY, AsyncMock, MagicMock, patch

import pytest

from ircbot.commands import DEFAULT_COMMANDS
from ircbot.main import health_check, main, run


@pytest.mark.asyncio
async def test_main_connects_and_waits_for_close(bot_config):
    connection = MagicMock()
    connection.wait_closed = AsyncMock()
    connection.close_error = None
    with patch("ircbot.main.get_configuration", return_value=bot_config), \
         patch("ircbot.main.IRCConnection", return_value=connection) as conn_cls:
        await main()
    conn_cls.assert_called_once_with(bot_config, DEFAULT_COMMANDS)
    connection.connect.assert_called_once_with()
    connection.wait_closed.assert_awaited_once()
    connection.close.assert_called_once_with()


@pytest.mark.asyncio
async def test_main_config_failure_exits():
    with patch("ircbot.main.get_configuration", side_effect=SystemExit(1)), \
         patch("ircbot.main.IRCConnection") as conn_cls:
        with pytest.raises(SystemExit):
            await main()
    conn_cls.assert_not_called()


@pytest.mark.asyncio
async def test_main_unexpected_error_is_logged(bot_config):
    with patch("ircbot.main.get_configuration", return_value=bot_config), \
         patch("ircbot.main.IRCConnection", side_effect=RuntimeError("boom")), \
         patch("ircbot.main.log_error") as mock_log_error, \
         patch("sys.exit") as mock_exit:
        await main()
    mock_log_error.assert_called_once_with("Main application error", ANY)
    mock_exit.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_main_keyboard_interrupt_closes_connection(bot_config):
    connection = MagicMock()
    connection.wait_closed = AsyncMock(side_effect=KeyboardInterrupt)
    with patch("ircbot.main.get_configuration", return_value=bot_config), \
         patch("ircbot.main.IRCConnection", return_value=connection):
        await main()
    connection.close.assert_called_once_with()


def test_health_check_ok(bot_config):
    with patch("ircbot.main.get_configuration", return_value=bot_config):
        assert health_check() == 0


def test_health_check_failure():
    with patch("ircbot.main.get_configuration", side_effect=SystemExit(1)):
        assert health_check() == 1


def test_run_health_check_mode():
    with patch("ircbot.main.LoggerConfigurator"), \
         patch("ircbot.main.health_check", return_value=0) as check, \
         patch("sys.argv", ["ircbot", "--health-check"]):
        with pytest.raises(SystemExit) as exc:
            run()
    check.assert_called_once_with()
    assert exc.value.code == 0


def test_run_exits_zero_on_keyboard_interrupt():
    def interrupted(coro):
        coro.close()
        raise KeyboardInterrupt

    with patch("ircbot.main.LoggerConfigurator"), \
         patch("sys.argv", ["ircbot"]), \
         patch("ircbot.main.asyncio.run", side_effect=interrupted):
        with pytest.raises(SystemExit) as exc:
            run()
    assert exc.value.code == 0


def test_run_logs_top_level_error():
    def failing(coro):
        coro.close()
        raise RuntimeError("loop broke")

    with patch("ircbot.main.LoggerConfigurator"), \
         patch("sys.argv", ["ircbot"]), \
         patch("ircbot.main.asyncio.run", side_effect=failing), \
         patch("ircbot.main.log_error") as mock_log_error:
        with pytest.raises(SystemExit) as exc:
            run()
    mock_log_error.assert_called_once_with("Top-level error", ANY)
    assert exc.value.code == 1


@pytest.mark.asyncio
async def test_main_exits_nonzero_when_connection_closed_with_error(bot_config):
    connection = MagicMock()
    connection.wait_closed = AsyncMock()
    connection.close_error = ConnectionRefusedError("refused")
    with patch("ircbot.main.get_configuration", return_value=bot_config), \
         patch("ircbot.main.IRCConnection", return_value=connection):
        with pytest.raises(SystemExit) as exc:
            await main()
    assert exc.value.code == 1
    connection.close.assert_called_once_with()
