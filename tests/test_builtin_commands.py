from __future__ import annotations

import re
from datetime import datetime
from unittest.mock import patch

import pytest

from ircbot.commands import DEFAULT_COMMANDS, time_command, weather_command


def test_default_commands_table():
    assert set(DEFAULT_COMMANDS) == {"time", "weather"}
    with pytest.raises(TypeError):
        DEFAULT_COMMANDS["new"] = lambda: "x"  # type: ignore[index]


def test_time_command_format():
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}", time_command())


def test_time_command_uses_local_date():
    fixed = datetime(2024, 3, 7, 12, 0)
    with patch("ircbot.commands.builtin.datetime") as dt:
        dt.now.return_value = fixed
        assert time_command() == "07/03/2024"


def test_weather_command():
    assert weather_command() == "Sunny"
