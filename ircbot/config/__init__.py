"""Configuration package exports."""

from .config_loader import ConfigLoader, get_configuration  # noqa: F401
from .model import BotConfig  # noqa: F401

__all__ = ["BotConfig", "ConfigLoader", "get_configuration"]
