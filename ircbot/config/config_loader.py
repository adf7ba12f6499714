"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import os
import sys

from pydantic import ValidationError

from ..constants import IRCBOT_CONF_FILE_DEFAULT
from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import BotConfig


class ConfigLoader:
    """Loads the bot configuration from a JSON file."""

    def load(self, config_file: str | os.PathLike[str]) -> BotConfig:
        """Load and validate the configuration file.

        Args:
            config_file: Path to the JSON configuration file.

        Returns:
            Validated BotConfig.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        path = str(config_file)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            logger.log_event("config", "missing", level=logging.ERROR, path=path)
            raise ConfigError(
                f"Configuration file not found: {path}", data={"path": path}
            ) from e
        except (OSError, ValueError) as e:
            logger.log_event(
                "config", "invalid", level=logging.ERROR, path=path, error=str(e)
            )
            raise ConfigError(
                f"Configuration file unreadable: {path}", data={"path": path}
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration must be a JSON object", data={"path": path}
            )

        try:
            config = BotConfig.from_dict(data)
        except ValidationError as e:
            logger.log_event(
                "config",
                "invalid",
                level=logging.ERROR,
                path=path,
                error=f"{e.error_count()} validation error(s)",
            )
            raise ConfigError(
                f"Invalid configuration in {path}: {e}", data={"path": path}
            ) from e

        logger.log_event("config", "loaded", path=path, user=config.nickname)
        return config


def get_configuration() -> BotConfig:
    """Load the configuration named by IRCBOT_CONF_FILE.

    Raises:
        SystemExit: If the configuration cannot be loaded.
    """
    config_file = os.environ.get("IRCBOT_CONF_FILE", IRCBOT_CONF_FILE_DEFAULT)
    try:
        return ConfigLoader().load(config_file)
    except ConfigError:
        sys.exit(1)
