"""Commands shipped with the bot."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType


def time_command() -> str:
    """Today's local date as DD/MM/YYYY."""
    return datetime.now().strftime("%d/%m/%Y")


def weather_command() -> str:
    return "Sunny"


DEFAULT_COMMANDS = MappingProxyType(
    {
        "time": time_command,
        "weather": weather_command,
    }
)
