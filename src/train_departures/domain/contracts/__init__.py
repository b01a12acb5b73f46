"""Contracts (protocols) implemented by adapters."""

from train_departures.domain.contracts.departure_board_formatter import (
    DepartureBoardFormatterProtocol,
)

__all__ = ["DepartureBoardFormatterProtocol"]
