"""Departure domain model."""

import logging
from datetime import date, datetime, time, timedelta

logger = logging.getLogger(__name__)

UNASSIGNED_TRACK = -1
INVALID_DESTINATION = "Invalid destination"

# Anchor date for clock arithmetic; only the time part of the result is kept.
_ANCHOR_DATE = date(2000, 1, 1)
_ONE_MINUTE = timedelta(minutes=1)


def normalize_destination(destination: str | None) -> str:
    """Return the canonical capitalisation of a destination ("oSLO" -> "Oslo").

    An absent or empty destination becomes the "Invalid destination" placeholder.
    """
    if not destination:
        return INVALID_DESTINATION
    return destination[:1].upper() + destination[1:].lower()


def normalize_track(track: int | str | None) -> int:
    """Return the track number, or -1 when it is not a positive integer."""
    if isinstance(track, bool):
        return UNASSIGNED_TRACK
    try:
        value = int(track)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.debug(f"Unparseable track {track!r}, storing as unassigned")
        return UNASSIGNED_TRACK
    if value < 1:
        return UNASSIGNED_TRACK
    return value


def add_delay(scheduled_time: time, delay: timedelta) -> time:
    """Add a delay to a wall-clock time, wrapping at 24:00."""
    shifted = datetime.combine(_ANCHOR_DATE, scheduled_time) + delay
    return shifted.time()


class Departure:
    """A single scheduled train run from the station.

    Only the track and the delay can change after creation. The effective
    departure time is always derived from the scheduled time and the current
    delay, so setting the delay repeatedly never compounds.
    """

    def __init__(
        self,
        track: int | str | None,
        train_number: int,
        line: str | None,
        destination: str | None,
        scheduled_time: time,
    ) -> None:
        """Create a departure with no delay.

        Train number uniqueness and positivity are enforced by the owning Station.
        """
        if not isinstance(scheduled_time, time):
            raise TypeError(f"scheduled_time must be a datetime.time, got {type(scheduled_time)}")
        self._train_number = train_number
        self._line = line or ""
        self._destination = normalize_destination(destination)
        self._scheduled_time = scheduled_time.replace(second=0, microsecond=0)
        self._track = normalize_track(track)
        self._delay = timedelta()

    @property
    def train_number(self) -> int:
        return self._train_number

    @property
    def line(self) -> str:
        return self._line

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def scheduled_time(self) -> time:
        return self._scheduled_time

    @property
    def track(self) -> int:
        return self._track

    @track.setter
    def track(self, value: int | str | None) -> None:
        self._track = normalize_track(value)

    @property
    def has_track(self) -> bool:
        return self._track != UNASSIGNED_TRACK

    @property
    def delay(self) -> timedelta:
        return self._delay

    @delay.setter
    def delay(self, value: timedelta | None) -> None:
        # Replaces the previous delay in whole minutes; a missing or negative delay resets it.
        if value is None or value < timedelta():
            self._delay = timedelta()
            return
        self._delay = timedelta(minutes=value // _ONE_MINUTE)

    @property
    def effective_departure_time(self) -> time:
        """Scheduled time plus the current delay."""
        return add_delay(self._scheduled_time, self._delay)

    def matches_destination(self, destination: str | None) -> bool:
        """Check whether this departure goes to the destination, ignoring capitalisation."""
        return self._destination == normalize_destination(destination)

    def __repr__(self) -> str:
        return (
            f"Departure(train_number={self._train_number}, line={self._line!r}, "
            f"destination={self._destination!r}, scheduled_time={self._scheduled_time:%H:%M}, "
            f"delay={self._delay}, track={self._track})"
        )
