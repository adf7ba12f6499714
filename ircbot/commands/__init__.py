from .builtin import DEFAULT_COMMANDS, time_command, weather_command  # noqa: F401

__all__ = ["DEFAULT_COMMANDS", "time_command", "weather_command"]
