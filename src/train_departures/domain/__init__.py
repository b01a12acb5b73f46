"""Domain layer - core business logic and models."""

from train_departures.domain.contracts import DepartureBoardFormatterProtocol
from train_departures.domain.models import (
    Departure,
    Rejection,
    RejectionReason,
    Station,
    StationResult,
)

__all__ = [
    "Departure",
    "DepartureBoardFormatterProtocol",
    "Rejection",
    "RejectionReason",
    "Station",
    "StationResult",
]
