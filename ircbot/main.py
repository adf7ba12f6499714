#!/usr/bin/env python3
"""
Main entry point for the IRC bot
"""

import asyncio
import logging
import sys

from .commands import DEFAULT_COMMANDS
from .config import get_configuration
from .errors.handling import log_error
from .irc import IRCConnection
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def main() -> None:
    """Load the configuration, connect and run until the connection closes.

    Raises:
        SystemExit: If a critical error occurs during initialization.
    """
    connection: IRCConnection | None = None
    try:
        logger.log_event("app", "start")
        config = get_configuration()
        connection = IRCConnection(config, DEFAULT_COMMANDS)
        connection.connect()
        await connection.wait_closed()
        if connection.close_error is not None:
            sys.exit(1)
    except asyncio.CancelledError:
        raise
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    except Exception as e:
        log_error("Main application error", e)
        sys.exit(1)
    finally:
        if connection is not None:
            connection.close()
        logger.log_event("app", "shutdown")


def health_check() -> int:
    """Validate the configuration without connecting; return an exit code."""
    try:
        config = get_configuration()
    except SystemExit:
        logger.log_event(
            "app", "health_check_failed", level=logging.ERROR, error="configuration"
        )
        return 1
    logger.log_event(
        "app",
        "health_check_ok",
        nickname=config.nickname,
        host=config.host,
        port=config.port,
    )
    return 0


def run() -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: On health check mode, interrupt or a top-level error.
    """
    LoggerConfigurator().configure()

    if len(sys.argv) > 1 and sys.argv[1] == "--health-check":
        sys.exit(health_check())

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except asyncio.CancelledError:
        sys.exit(0)
    except Exception as e:
        log_error("Top-level error", e)
        sys.exit(1)


if __name__ == "__main__":
    run()
