"""Protocol for rendering departures as text."""

from collections.abc import Iterable
from typing import Protocol

from train_departures.domain.models.departure import Departure
from train_departures.domain.models.station_result import Rejection, StationResult


class DepartureBoardFormatterProtocol(Protocol):
    """Protocol for turning station query results into display text."""

    def format_departure_row(self, departure: Departure) -> str:
        """Format one departure as a row of fixed-width columns.

        Args:
            departure: The departure to format.

        Returns:
            Row with train number, line, destination, effective time and track.
        """
        ...

    def format_departures(
        self, departures: Iterable[Departure], destination: str | None = None
    ) -> str:
        """Format a listing of departures with its header.

        Args:
            departures: Departures in display order.
            destination: Destination the listing was filtered by, if any.

        Returns:
            The listing, or a "No trains to <Destination> found." message when a
            destination filter matched nothing.
        """
        ...

    def format_next_departure(
        self, result: StationResult[Departure], destination: str | None
    ) -> str:
        """Format the next departure to a destination.

        Args:
            result: Outcome of the destination lookup.
            destination: The destination that was asked for.

        Returns:
            A one-line summary or "No train to <Destination> was found."
        """
        ...

    def format_rejection(self, rejection: Rejection) -> str:
        """Format a refused station operation for the operator."""
        ...
