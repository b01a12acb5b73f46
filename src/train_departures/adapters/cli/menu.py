"""Interactive menu for the station operator."""

import logging
from collections.abc import Callable
from enum import IntEnum

from train_departures.adapters.cli.input_parser import (
    parse_clock_time,
    parse_number,
    parse_optional_duration,
)
from train_departures.domain.contracts.departure_board_formatter import (
    DepartureBoardFormatterProtocol,
)
from train_departures.domain.models.departure import Departure
from train_departures.domain.models.station import Station
from train_departures.domain.models.station_result import StationResult

logger = logging.getLogger(__name__)


class MenuOption(IntEnum):
    """Numbered options of the operator menu."""

    LIST_UPCOMING = 1
    LIST_TO_DESTINATION = 2
    NEXT_TO_DESTINATION = 3
    ADD_DEPARTURE = 4
    SET_DELAY = 5
    SET_TRACK = 6
    GET_BY_TRAIN_NUMBER = 7
    REMOVE_BY_TRAIN_NUMBER = 8
    SET_CLOCK = 9
    EXIT = 10


MENU_TEXT = "\n".join(
    [
        "-------------------------------------------",
        "1: Print all upcoming departures",
        "2: Print all upcoming departures to a given destination",
        "3: Print the next departure to a given destination",
        "4: Add a new train departure",
        "5: Set delay for a train departure",
        "6: Set track for a train departure",
        "7: Get train by train number",
        "8: Remove train by train number",
        "9: Set the clock",
        "10: Exit",
        "Please enter a number between 1 and 10:",
    ]
)


class DepartureMenu:
    """Reads menu choices and drives the station until the operator exits.

    Malformed input is reported and the operator is asked again; nothing the
    operator types ends the loop except the exit option or end of input.
    """

    def __init__(
        self,
        station: Station,
        formatter: DepartureBoardFormatterProtocol,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self.station = station
        self.formatter = formatter
        self._input = input_func or input
        self._output = output_func or print
        self._handlers: dict[MenuOption, Callable[[], None]] = {
            MenuOption.LIST_UPCOMING: self.list_upcoming,
            MenuOption.LIST_TO_DESTINATION: self.list_to_destination,
            MenuOption.NEXT_TO_DESTINATION: self.next_to_destination,
            MenuOption.ADD_DEPARTURE: self.add_departure,
            MenuOption.SET_DELAY: self.set_delay,
            MenuOption.SET_TRACK: self.set_track,
            MenuOption.GET_BY_TRAIN_NUMBER: self.get_by_train_number,
            MenuOption.REMOVE_BY_TRAIN_NUMBER: self.remove_by_train_number,
            MenuOption.SET_CLOCK: self.set_clock,
        }

    def run(self) -> None:
        """Show the menu until the operator chooses to exit."""
        self._output(f"Welcome to {self.station.name}!")
        while True:
            try:
                choice = self._input(MENU_TEXT + "\n")
            except EOFError:
                break
            try:
                if not self.handle(choice):
                    break
            except EOFError:
                logger.debug("Input ended while answering a menu option")
                break
        self._output("Goodbye!")

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the operator asked to exit."""
        try:
            option = MenuOption(parse_number(choice))
        except ValueError:
            self._output("Invalid choice, please enter a number between 1 and 10.")
            return True

        if option is MenuOption.EXIT:
            return False

        try:
            self._handlers[option]()
        except ValueError as e:
            logger.debug(f"Invalid input for {option.name}: {e}")
            self._output(f"Invalid input: {e}")
        return True

    def _ask(self, prompt: str) -> str:
        return self._input(prompt + " ").strip()

    def _report(self, result: StationResult, success_message: str) -> None:
        if result.rejection is not None:
            self._output(self.formatter.format_rejection(result.rejection))
        else:
            self._output(success_message)

    def list_upcoming(self) -> None:
        self._output(self.formatter.format_departures(self.station.get_sorted_upcoming()))

    def list_to_destination(self) -> None:
        destination = self._ask("Enter destination:")
        departures = self.station.get_departures_to_destination(destination)
        self._output(self.formatter.format_departures(departures, destination))

    def next_to_destination(self) -> None:
        destination = self._ask("Enter destination:")
        result = self.station.get_departure_by_destination(destination)
        self._output(self.formatter.format_next_departure(result, destination))

    def add_departure(self) -> None:
        train_number = parse_number(self._ask("Enter train number:"))
        line = self._ask("Enter line:")
        destination = self._ask("Enter destination:")
        scheduled_time = parse_clock_time(self._ask("Enter departure time (HH:MM):"))
        # Tracks are free text here; anything but a positive number means unassigned
        track = self._ask("Enter track (leave blank if unknown):")

        result = self.station.add_departure(track, train_number, line, destination, scheduled_time)
        self._report(result, f"Train {train_number} was added.")

    def set_delay(self) -> None:
        train_number = parse_number(self._ask("Enter train number:"))
        delay = parse_optional_duration(self._ask("Enter delay (HH:MM, blank for none):"))
        result = self.station.set_delay(train_number, delay)
        self._report(result, self._describe(result, "delay set"))

    def set_track(self) -> None:
        train_number = parse_number(self._ask("Enter train number:"))
        track = self._ask("Enter track:")
        result = self.station.set_track(train_number, track)
        self._report(result, self._describe(result, "track set"))

    def get_by_train_number(self) -> None:
        train_number = parse_number(self._ask("Enter train number:"))
        result = self.station.get_departure(train_number)
        if result.value is None:
            self._report(result, "")
            return
        self._output(self.formatter.format_departure_row(result.value))

    def remove_by_train_number(self) -> None:
        train_number = parse_number(self._ask("Enter train number:"))
        result = self.station.remove_departure(train_number)
        self._report(result, f"Train {train_number} was removed.")

    def set_clock(self) -> None:
        new_time = parse_clock_time(self._ask("Enter new time (HH:MM):"))
        result = self.station.set_clock(new_time)
        self._report(result, f"Clock set to {new_time:%H:%M}.")

    def _describe(self, result: StationResult[Departure], action: str) -> str:
        if result.value is None:
            return ""
        row = self.formatter.format_departure_row(result.value)
        return f"Train {result.value.train_number}: {action}.\n{row}"
