"""Logging setup for the package logger."""

import logging

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

PACKAGE_LOGGER = "biginteger"


class LogConfig:
    """Static helper applying the configured level to the package logger."""

    @staticmethod
    def configure() -> logging.Logger:
        """
        Attach a NullHandler to the package logger and set its level.

        The level comes from BIGINT_LOG_LEVEL. Handlers and formatting are left
        to the application.

        Returns:
            logging.Logger: The package logger
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
            package_logger.addHandler(logging.NullHandler())

        level_name = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            package_logger.warning(f"Unknown log level {level_name!r}, using WARNING")
            level = logging.WARNING

        package_logger.setLevel(level)
        return package_logger
