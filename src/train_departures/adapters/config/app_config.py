"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from datetime import time
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from train_departures.adapters.cli.input_parser import parse_clock_time


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Station configuration
    station_name: str = Field(
        default="Central Station", description="Name of the station shown in the menu"
    )
    initial_clock: time = Field(
        default=time(0, 0), description="Station clock at startup (HH:MM)"
    )

    # TOML config file path with [[departures]] seed entries
    config_file: str | None = Field(
        default=None,
        description="Path to TOML file with departures to load at startup",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Column widths for the departure listing
    train_number_width: int = Field(default=15, description="Width of the train number column")
    line_width: int = Field(default=5, description="Width of the line column")
    destination_width: int = Field(default=20, description="Width of the destination column")
    time_width: int = Field(default=15, description="Width of the departure time column")
    track_width: int = Field(default=10, description="Width of the track column")

    @field_validator("initial_clock", mode="before")
    @classmethod
    def validate_initial_clock(cls, v: Any) -> Any:
        """Accept the clock as HH:MM text."""
        if isinstance(v, str):
            return parse_clock_time(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load departures configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

            # Station settings in the file only fill fields not set by options or environment
            station = toml_data.get("station", {})
            if isinstance(station, dict):
                if "name" in station and "station_name" not in self.model_fields_set:
                    self.station_name = station["name"]
                if "clock" in station and "initial_clock" not in self.model_fields_set:
                    self.initial_clock = parse_clock_time(str(station["clock"]))

            return toml_data

    def get_departures_config(self) -> list[dict[str, Any]]:
        """Parse and return the [[departures]] entries from the TOML file.

        Raises ValueError if 'departures' is not a list of tables.
        """
        toml_data = self._load_toml_data()
        departures = toml_data.get("departures", [])
        if not isinstance(departures, list):
            raise ValueError("TOML config 'departures' must be a list")
        return [d for d in departures if isinstance(d, dict)]
