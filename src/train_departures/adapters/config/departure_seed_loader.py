"""Loads the departures listed in the TOML config file into a station."""

import logging
from datetime import time, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from train_departures.adapters.config.app_config import AppConfig
from train_departures.adapters.cli.input_parser import parse_clock_time, parse_optional_duration
from train_departures.domain.models.station import Station

logger = logging.getLogger(__name__)


class DepartureSeed(BaseModel):
    """One [[departures]] entry of the config file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    train_number: int
    scheduled_time: time
    destination: str | None = None
    line: str | None = None
    # Kept loose; the station stores anything that is not a positive number as -1
    track: int | str | None = None
    delay: timedelta | None = None

    @field_validator("scheduled_time", mode="before")
    @classmethod
    def validate_scheduled_time(cls, v: Any) -> Any:
        """Accept the scheduled time as HH:MM text."""
        if isinstance(v, str):
            return parse_clock_time(v)
        return v

    @field_validator("delay", mode="before")
    @classmethod
    def validate_delay(cls, v: Any) -> Any:
        """Accept the delay as HH:MM text or a whole number of minutes."""
        if v is None or isinstance(v, timedelta):
            return v
        if isinstance(v, str):
            return parse_optional_duration(v)
        if isinstance(v, int) and not isinstance(v, bool):
            return timedelta(minutes=v)
        raise ValueError(f"delay must be HH:MM text or a number of minutes, got {v!r}")


class DepartureSeedLoader:
    """Fills a station from the app config."""

    @staticmethod
    def load_seed_from_data(seed_data: dict[str, Any]) -> DepartureSeed | None:
        """Validate a single seed entry, returning None when it is unusable."""
        try:
            return DepartureSeed.model_validate(seed_data)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Skipping invalid departure entry {seed_data!r}: {e}")
            return None

    @staticmethod
    def create_station(config: AppConfig) -> Station:
        """Create the station described by the config, including seed departures."""
        seeds_data = config.get_departures_config() if config.config_file else []
        station = Station(name=config.station_name, clock=config.initial_clock)
        added = DepartureSeedLoader.load_into(station, seeds_data)
        logger.info(f"Station '{station.name}' ready with {added} departure(s)")
        return station

    @staticmethod
    def load_into(station: Station, seeds_data: list[dict[str, Any]]) -> int:
        """Add the seed entries to the station and return how many were added."""
        added = 0
        for seed_data in seeds_data:
            seed = DepartureSeedLoader.load_seed_from_data(seed_data)
            if seed is None:
                continue

            result = station.add_departure(
                seed.track, seed.train_number, seed.line, seed.destination, seed.scheduled_time
            )
            if result.rejection is not None:
                logger.warning(
                    f"Skipping train {seed.train_number}: {result.rejection.message}"
                )
                continue

            if seed.delay is not None:
                station.set_delay(seed.train_number, seed.delay)
            added += 1
        return added
