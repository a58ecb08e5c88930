"""
Application managers for the Metro Journey Planner.

This module contains configuration management.
"""

from .config_manager import ConfigManager, ConfigData, ConfigurationError

__all__ = [
    "ConfigManager",
    "ConfigData",
    "ConfigurationError",
]
