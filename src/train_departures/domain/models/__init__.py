"""Domain models for station departures."""

from train_departures.domain.models.departure import (
    INVALID_DESTINATION,
    UNASSIGNED_TRACK,
    Departure,
    add_delay,
    normalize_destination,
    normalize_track,
)
from train_departures.domain.models.station import Station, UpcomingDepartures
from train_departures.domain.models.station_result import (
    Rejection,
    RejectionReason,
    StationResult,
)

__all__ = [
    "INVALID_DESTINATION",
    "UNASSIGNED_TRACK",
    "Departure",
    "Rejection",
    "RejectionReason",
    "Station",
    "StationResult",
    "UpcomingDepartures",
    "add_delay",
    "normalize_destination",
    "normalize_track",
]
