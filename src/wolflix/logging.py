"""Logging setup for the Wolflix CLI.

Two sinks are supported:

* a Rich console sink on stderr, whose level follows the CLI verbosity, and
* a "flight recorder": a bounded in-memory buffer of DEBUG records that is
  dumped to a log file once something at WARNING or above happens (or on
  exit, when forced).

Records from loggers outside the ``wolflix`` namespace are tagged with a short
``[package]`` prefix on the console so their origin stays visible.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "wolflix"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI decided about logging for one invocation.

    Attributes:
        console_level: Minimum level shown on the console.
        debug: Debug console layout (paths, timestamps, DEBUG level).
        color: Allow colored console output.
        log_path: Flight-recorder destination file.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Number of records the flight recorder buffers.
        force_flush: Dump the flight recorder on exit even without a WARNING.
        logger_levels: Per-logger minimum levels (apply to both sinks).
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def verbosity_to_level(verbose: int, quiet: int, base: int = logging.WARNING) -> int:
    """Shift ``base`` one level down per ``-v`` and one level up per ``-q``.

    The result is clamped to the DEBUG..CRITICAL range.
    """
    level = base - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for non-Wolflix records.

    Wolflix records get an empty prefix. Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def build_console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the Rich console handler described by ``settings``."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def build_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory buffer that flushes into ``path``.

    The target file is truncated when the handler is built, so each run
    starts with an empty log.

    Args:
        path: File the buffered records are written to.
        capacity: Number of records kept in memory before a forced flush.
        flush_level: A record at this level or above triggers a flush.
        flush_on_close: Flush whatever is buffered when the handler closes.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the configured sinks on the root logger.

    Any existing root configuration is replaced. The root logger itself
    passes everything through; the handlers and `logger_levels` filter.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [build_console_handler(settings)]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            build_flight_recorder(
                settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics.

    The diagnostics cover the interpreter, platform, process, working
    directory, key library versions, active handlers, flight-recorder
    settings and per-logger overrides.
    """
    logger.info(
        "WOLFLIX %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", version("click"))
    logger.debug("ulid-py: %s", version("ulid-py"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path if settings.log_path else "<none>",
            settings.flight_capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
