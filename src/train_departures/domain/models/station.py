"""Station domain model."""

import logging
from collections.abc import Callable, Iterator
from datetime import time, timedelta

from train_departures.domain.models.departure import Departure, normalize_destination
from train_departures.domain.models.station_result import RejectionReason, StationResult

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0)


class UpcomingDepartures:
    """Lazy view over the departures still to leave, sorted by effective time.

    Each iteration re-reads the station, so the view can be iterated again
    after the clock or the departures change.
    """

    def __init__(self, collect: Callable[[], list[Departure]]) -> None:
        self._collect = collect

    def __iter__(self) -> Iterator[Departure]:
        yield from self._collect()

    def first(self) -> Departure | None:
        """Return the earliest upcoming departure in this view, if any."""
        return next(iter(self), None)


class Station:
    """The departures of a single station and its monotonic clock.

    Departures are only created through `add_departure` so that train number
    uniqueness and the clock check always apply. The underlying mapping is
    never handed out.
    """

    def __init__(self, name: str = "", clock: time = MIDNIGHT) -> None:
        """Initialize an empty station with its clock set to `clock`."""
        self.name = name
        self._clock = clock.replace(second=0, microsecond=0)
        self._departures: dict[int, Departure] = {}

    @property
    def clock(self) -> time:
        return self._clock

    def __len__(self) -> int:
        return len(self._departures)

    def __contains__(self, train_number: object) -> bool:
        return train_number in self._departures

    def train_exists(self, train_number: int) -> bool:
        """Check whether a departure with this train number is stored."""
        return train_number in self._departures

    def add_departure(
        self,
        track: int | str | None,
        train_number: int,
        line: str | None,
        destination: str | None,
        scheduled_time: time,
    ) -> StationResult[Departure]:
        """Create and store a new departure.

        Refused when the train number is not positive or already taken, or when
        the scheduled time is not strictly after the station clock.
        """
        if isinstance(train_number, bool) or not isinstance(train_number, int) or train_number <= 0:
            logger.info(f"Rejected departure with invalid train number {train_number!r}")
            return StationResult.rejected(
                RejectionReason.INVALID_TRAIN_NUMBER,
                f"Train number must be a positive integer, got {train_number}.",
            )
        if self.train_exists(train_number):
            logger.info(f"Rejected duplicate train number {train_number}")
            return StationResult.rejected(
                RejectionReason.DUPLICATE_TRAIN_NUMBER,
                f"Train number {train_number} already exists.",
            )
        departure = Departure(track, train_number, line, destination, scheduled_time)
        scheduled_time = departure.scheduled_time
        if scheduled_time <= self._clock:
            logger.info(
                f"Rejected train {train_number}: {scheduled_time:%H:%M} is not after "
                f"the clock {self._clock:%H:%M}"
            )
            return StationResult.rejected(
                RejectionReason.NOT_AFTER_CLOCK,
                f"Departure time {scheduled_time:%H:%M} must be after the current time "
                f"{self._clock:%H:%M}.",
            )

        self._departures[train_number] = departure
        logger.debug(f"Added {departure!r}")
        return StationResult.success(departure)

    def set_clock(self, new_time: time) -> StationResult[time]:
        """Move the station clock forward.

        Departures that have now left are not removed; the upcoming views
        simply stop returning them.
        """
        new_time = new_time.replace(second=0, microsecond=0)
        if new_time < self._clock:
            logger.info(f"Rejected clock change from {self._clock:%H:%M} to {new_time:%H:%M}")
            return StationResult.rejected(
                RejectionReason.CLOCK_BACKWARDS,
                f"The clock cannot be set back from {self._clock:%H:%M} to {new_time:%H:%M}.",
            )
        self._clock = new_time
        logger.debug(f"Clock set to {new_time:%H:%M}")
        return StationResult.success(new_time)

    def get_departure(self, train_number: int) -> StationResult[Departure]:
        """Look up a departure by train number."""
        departure = self._departures.get(train_number)
        if departure is None:
            return self._train_not_found(train_number)
        return StationResult.success(departure)

    def remove_departure(self, train_number: int) -> StationResult[Departure]:
        """Remove a departure by train number and return it."""
        departure = self._departures.pop(train_number, None)
        if departure is None:
            return self._train_not_found(train_number)
        logger.debug(f"Removed train {train_number}")
        return StationResult.success(departure)

    def set_delay(self, train_number: int, delay: timedelta | None) -> StationResult[Departure]:
        """Replace the delay of a departure (None resets it)."""
        result = self.get_departure(train_number)
        if result.value is not None:
            result.value.delay = delay
        return result

    def set_track(self, train_number: int, track: int | str | None) -> StationResult[Departure]:
        """Assign a track to a departure (non-positive values unassign it)."""
        result = self.get_departure(train_number)
        if result.value is not None:
            result.value.track = track
        return result

    def get_sorted_upcoming(self) -> UpcomingDepartures:
        """Departures leaving strictly after the clock, earliest first.

        Ties are broken by train number.
        """
        return UpcomingDepartures(lambda: self._collect_upcoming(None))

    def get_departures_to_destination(self, destination: str | None) -> UpcomingDepartures:
        """Upcoming departures to a destination, compared in canonical capitalisation."""
        return UpcomingDepartures(
            lambda: self._collect_upcoming(lambda d: d.matches_destination(destination))
        )

    def get_departure_by_destination(self, destination: str | None) -> StationResult[Departure]:
        """Return the next upcoming departure to a destination."""
        departure = self.get_departures_to_destination(destination).first()
        if departure is None:
            wanted = normalize_destination(destination)
            return StationResult.rejected(
                RejectionReason.DESTINATION_NOT_FOUND,
                f"No train to {wanted} was found.",
            )
        return StationResult.success(departure)

    def _collect_upcoming(
        self, predicate: Callable[[Departure], bool] | None
    ) -> list[Departure]:
        upcoming = [
            d
            for d in self._departures.values()
            if d.effective_departure_time > self._clock and (predicate is None or predicate(d))
        ]
        upcoming.sort(key=lambda d: (d.effective_departure_time, d.train_number))
        return upcoming

    def _train_not_found(self, train_number: int) -> StationResult[Departure]:
        logger.debug(f"Train {train_number} not found")
        return StationResult.rejected(
            RejectionReason.TRAIN_NOT_FOUND,
            f"No train with train number {train_number} was found.",
        )
