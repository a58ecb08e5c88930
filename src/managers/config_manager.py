"""
Configuration management for the Metro Journey Planner.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, List, Dict
from pydantic import BaseModel, Field, field_validator

from version import __version__, __app_name__

logger = logging.getLogger(__name__)


class DataConfig(BaseModel):
    """Location of the station and fare data files."""

    data_directory: Optional[str] = None  # None uses the bundled src/data
    stations_file: str = "stations.json"
    fare_rules_file: str = "fareRules.json"


class NetworkConfig(BaseModel):
    """Network topology settings owned by the station directory."""

    interchange_stations: List[str] = Field(
        default_factory=lambda: ["Chennai Central", "Alandur"],
        description="Interchange station names, in tie-break priority order",
    )

    @field_validator('interchange_stations')
    @classmethod
    def validate_interchange_stations(cls, v):
        """Strip names and reject blanks."""
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError('Interchange station names cannot be empty')
        return names


class TimingConfig(BaseModel):
    """Travel time model settings."""

    time_per_stop_minutes: float = Field(1.5, ge=0)
    interchange_delay_minutes: int = Field(3, ge=0)


class TicketingConfig(BaseModel):
    """Ticket validity and display settings."""

    validity_minutes: Dict[str, int] = Field(
        default_factory=lambda: {
            "SJT": 120,
            "RJT": 180,
            "FAMILY": 300,
            "GROUP": 300,
            "SVP": 1440,
        }
    )
    default_validity_minutes: int = Field(120, gt=0)
    currency_symbol: str = "₹"


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    log_to_file: bool = True
    log_directory: Optional[str] = None

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate log level name."""
        level = v.upper()
        if level not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError('Log level must be DEBUG, INFO, WARNING, ERROR or CRITICAL')
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    data: DataConfig = Field(default_factory=DataConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)
    ticketing: TicketingConfig = Field(default_factory=TicketingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the per-user config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/MetroPlanner/config.json
        On Linux, uses XDG_CONFIG_HOME/MetroPlanner/config.json or ~/.config/MetroPlanner/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / __app_name__ / "config.json"
        else:  # Linux/Unix
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                return Path(xdg_config) / __app_name__ / "config.json"
            return Path.home() / ".config" / __app_name__ / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except Exception as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        if not self.save_config(ConfigData()):
            raise ConfigurationError(f"Could not create default config at {self.config_path}")

    def update_interchange_stations(self, names: List[str]) -> None:
        """
        Replace the interchange station list and save to file.

        Args:
            names: Interchange station names in priority order

        Raises:
            ConfigurationError: If a name is blank
        """
        if self.config is None:
            self.load_config()

        try:
            network = NetworkConfig(interchange_stations=names)
        except ValueError as e:
            raise ConfigurationError(f"Invalid interchange stations: {e}")
        self.config.network = network
        self.save_config(self.config)
        logger.info(f"Interchange stations updated: {network.interchange_stations}")

    def update_log_level(self, level: str) -> None:
        """
        Update the log level and save to file.

        Args:
            level: Log level name such as "DEBUG"
        """
        if self.config is None:
            self.load_config()

        if self.config and level.upper() in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            self.config.logging.level = level.upper()
            self.save_config(self.config)

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        if not self.config:
            return {"error": "Configuration not loaded"}

        return {
            "app_version": __version__,
            "data_directory": self.config.data.data_directory or "bundled",
            "interchange_stations": ", ".join(self.config.network.interchange_stations),
            "time_per_stop": f"{self.config.timing.time_per_stop_minutes} minutes",
            "interchange_delay": f"{self.config.timing.interchange_delay_minutes} minutes",
            "ticket_types": sorted(self.config.ticketing.validity_minutes),
            "log_level": self.config.logging.level,
        }
