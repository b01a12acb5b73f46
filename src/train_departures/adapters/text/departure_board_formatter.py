"""Formatter for the departure board."""

from collections.abc import Iterable
from datetime import time

from train_departures.adapters.config.app_config import AppConfig
from train_departures.domain.contracts.departure_board_formatter import (
    DepartureBoardFormatterProtocol,
)
from train_departures.domain.models.departure import Departure, normalize_destination
from train_departures.domain.models.station_result import Rejection, StationResult

HEADER = "Train number\tLine\tDestination\t\t\tDeparture time\tTrack"


class DepartureBoardFormatter(DepartureBoardFormatterProtocol):
    """Renders departures as left-justified, fixed-width columns."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the column widths.
        """
        self.config = config

    def format_time(self, value: time) -> str:
        return value.strftime("%H:%M")

    def format_track(self, departure: Departure) -> str:
        return str(departure.track) if departure.has_track else "-"

    def format_departure_row(self, departure: Departure) -> str:
        """Format one departure as a row of fixed-width columns."""
        columns = (
            (str(departure.train_number), self.config.train_number_width),
            (departure.line, self.config.line_width),
            (departure.destination, self.config.destination_width),
            (self.format_time(departure.effective_departure_time), self.config.time_width),
            (self.format_track(departure), self.config.track_width),
        )
        return "".join(text.ljust(width) for text, width in columns)

    def format_departures(
        self, departures: Iterable[Departure], destination: str | None = None
    ) -> str:
        """Format a listing of departures with its header."""
        rows = [self.format_departure_row(d) for d in departures]

        if destination is None:
            intro = "Here is a list of all the trains that are yet to depart:"
        else:
            destination = normalize_destination(destination)
            if not rows:
                return f"No trains to {destination} found."
            intro = f"Here is a list of all the trains that are yet to depart to {destination}:"

        return "\n".join([intro, HEADER, *rows]) + "\n"

    def format_next_departure(
        self, result: StationResult[Departure], destination: str | None
    ) -> str:
        """Format the next departure to a destination."""
        departure = result.value
        if departure is None:
            return f"No train to {normalize_destination(destination)} was found."
        return (
            f"The next train to {departure.destination} departs at "
            f"{self.format_time(departure.effective_departure_time)} "
            f"from track {self.format_track(departure)}"
        )

    def format_rejection(self, rejection: Rejection) -> str:
        """Format a refused station operation for the operator."""
        return rejection.message
