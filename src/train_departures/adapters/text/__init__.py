"""Text rendering adapters."""

from train_departures.adapters.text.departure_board_formatter import DepartureBoardFormatter

__all__ = ["DepartureBoardFormatter"]
