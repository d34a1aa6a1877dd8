"""Utility modules for configuration and logging."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .LogConfig import LogConfig

__all__ = ["EnvironmentManager", "EnvironmentVariables", "LogConfig"]
