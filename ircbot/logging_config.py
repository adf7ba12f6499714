"""Console logging setup (colorlog) and error accounting for the bot."""

import atexit
import logging
import os
import sys
import time
from collections import Counter, defaultdict, deque
from typing import Any

import colorlog

_error_log = logging.getLogger("ircbot.errors")


class ErrorAggregator:
    """Counts errors per type and spots bursts of the same type.

    ``record_error`` returns True when ``burst`` errors of one type land within
    ``window`` seconds; the burst is then forgotten so the next alert needs a
    fresh run of failures.
    """

    def __init__(self, window: float = 60.0, burst: int = 5):
        self.window = window
        self.burst = burst
        self.counts: Counter[str] = Counter()
        self.last_message: dict[str, str] = {}
        self._recent: defaultdict[str, deque[float]] = defaultdict(deque)

    def record_error(
        self, error_type: str, message: str, now: float | None = None
    ) -> bool:
        now = time.monotonic() if now is None else now
        self.counts[error_type] += 1
        self.last_message[error_type] = message
        recent = self._recent[error_type]
        recent.append(now)
        while now - recent[0] > self.window:
            recent.popleft()
        if len(recent) >= self.burst:
            recent.clear()
            return True
        return False

    def log_summary_report(self) -> None:
        if not self.counts:
            logging.info("No errors recorded this session")
            return
        logging.warning("Errors this session:")
        for error_type, count in self.counts.most_common():
            logging.warning(
                "  %s x%d, last: %s", error_type, count, self.last_message[error_type]
            )


error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log one error as ``[TYPE] message (ExceptionType) k=v ...`` and count it."""
    line = f"[{error_type.upper()}] {message}"
    if exception is not None:
        line += f" ({type(exception).__name__})"
    if context:
        line += " " + " ".join(f"{k}={v}" for k, v in context.items())
    _error_log.log(level, line)

    if error_aggregator.record_error(error_type, message):
        _error_log.critical(
            "🚨 %d %s errors within %.0fs",
            error_aggregator.burst,
            error_type,
            error_aggregator.window,
        )


def is_debug_enabled() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


class LoggerConfigurator:
    """Handles logging configuration using colorlog.

    Uses the DEBUG environment variable to pick the root log level.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr
        self.handler: logging.Handler | None = None
        self._summary_registered = False

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> None:
        """Install a colored handler on the root logger."""
        log_level = logging.DEBUG if is_debug_enabled() else logging.INFO

        root_logger = logging.getLogger()
        if self.handler is not None:
            root_logger.removeHandler(self.handler)

        self.handler = logging.StreamHandler(self.stream)
        self.handler.setFormatter(self.build_formatter())
        root_logger.addHandler(self.handler)
        root_logger.setLevel(log_level)

        if not self._summary_registered:
            atexit.register(self._log_final_error_summary)
            self._summary_registered = True

    def _log_final_error_summary(self) -> None:
        error_aggregator.log_summary_report()
