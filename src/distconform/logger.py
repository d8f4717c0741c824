"""
Logger configuration for distconform.

This module sets up the logger for distconform using the loguru library.
It configures console and optional file sinks from the logging settings and
can be reconfigured at runtime, for example by the CLI or from tests.

Environment Variables:
    - DISTCONFORM__LOGGING__DISABLED: Disable logging (default: false).
    - DISTCONFORM__LOGGING__CLEAR_LOGGERS: Clear existing sinks (default: true).
    - DISTCONFORM__LOGGING__CONSOLE_LOG_LEVEL: Console level (default: WARNING).
    - DISTCONFORM__LOGGING__LOG_FILE: Path to a log file (default: None).
    - DISTCONFORM__LOGGING__LOG_FILE_LEVEL: Log file level (default: None).

Usage:
    from distconform import logger, configure_logger, LoggingSettings

    # Configure metrics with default settings
    configure_logger(
        config=LoggingSettings(
            disabled=False,
            clear_loggers=True,
            console_log_level="DEBUG",
            log_file=None,
            log_file_level=None,
        )
    )

    logger.debug("This is a debug message")
    logger.info("This is an info message")
"""

from __future__ import annotations

import sys

from loguru import logger

from distconform.settings import LoggingSettings, settings

__all__ = ["configure_logger", "logger"]


def configure_logger(config: LoggingSettings = settings.logging):
    """
    Configure the logger for distconform.

    :param config: The configuration for the logger to use.
    """
    if config.disabled:
        logger.disable("distconform")
        return

    logger.enable("distconform")

    if config.clear_loggers:
        logger.remove()

    # log as a human readable string with the time, function, level, and message
    logger.add(
        sys.stderr,
        level=config.console_log_level.upper(),
        format="{time} | {function} | {level} - {message}",
    )

    if config.log_file or config.log_file_level:
        log_file = config.log_file or "distconform.log"
        log_file_level = config.log_file_level or "INFO"
        # log as json to the file for easier parsing
        logger.add(log_file, level=log_file_level.upper(), serialize=True)


configure_logger(config=settings.logging)
