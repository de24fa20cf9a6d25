"""Logging setup utilities for service_bindings.

The library only ever logs through module loggers under the
``service_bindings`` namespace. Applications that want those records
formatted and routed can call :func:`setup_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys

from service_bindings.config.settings import LoggingConfig

LOGGER_NAME = "service_bindings"


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the ``service_bindings`` logger.

    Sets the level, and attaches a stderr handler plus an optional file
    handler using the configured format. Handlers installed by an earlier
    call are replaced, so calling this twice does not duplicate output.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).

    Returns:
        The configured logger.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at %s level", config.level)
    return root_logger
