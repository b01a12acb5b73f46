"""Tests for the interactive operator menu."""

from collections.abc import Iterator
from datetime import time, timedelta

import pytest

from train_departures.adapters.cli import DepartureMenu
from train_departures.adapters.config import AppConfig
from train_departures.adapters.text import DepartureBoardFormatter
from train_departures.domain.models import UNASSIGNED_TRACK, Station


class ScriptedTerminal:
    """Feeds prepared answers to the menu and records what it prints."""

    def __init__(self, answers: list[str]) -> None:
        self._answers: Iterator[str] = iter(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def print(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def station() -> Station:
    """Create a station with one Oslo train."""
    station = Station(name="Trondheim S")
    station.add_departure(1, 101, "L1", "oslo", time(8, 0))
    return station


def make_menu(station: Station, answers: list[str]) -> tuple[DepartureMenu, ScriptedTerminal]:
    terminal = ScriptedTerminal(answers)
    formatter = DepartureBoardFormatter(AppConfig(config_file=None, _env_file=None))
    menu = DepartureMenu(station, formatter, terminal.input, terminal.print)
    return menu, terminal


def test_run_exits_on_exit_option(station: Station) -> None:
    """Given the exit option, when running, then the loop stops and says goodbye."""
    menu, terminal = make_menu(station, ["10"])

    menu.run()

    assert terminal.output[0] == "Welcome to Trondheim S!"
    assert terminal.output[-1] == "Goodbye!"
    assert len(terminal.prompts) == 1


def test_run_stops_at_end_of_input(station: Station) -> None:
    """Given input runs out, when running, then the loop stops without error."""
    menu, terminal = make_menu(station, ["1"])

    menu.run()

    assert terminal.output[-1] == "Goodbye!"


@pytest.mark.parametrize("choice", ["abc", "0", "11", ""])
def test_invalid_choice_is_reported(station: Station, choice: str) -> None:
    """Given an invalid menu choice, when handling, then a message is shown and the loop continues."""
    menu, terminal = make_menu(station, [])

    assert menu.handle(choice) is True
    assert "Invalid choice" in terminal.text


def test_list_upcoming(station: Station) -> None:
    """Given a station with a train, when listing, then the train is printed."""
    menu, terminal = make_menu(station, [])

    menu.handle("1")

    assert "101" in terminal.text
    assert "Oslo" in terminal.text


def test_add_departure(station: Station) -> None:
    """Given answers for a new train, when adding, then the station stores it."""
    menu, terminal = make_menu(station, ["202", "R10", "BERGEN", "09:30", ""])

    menu.handle("4")

    departure = station.get_departure(202).value
    assert departure is not None
    assert departure.destination == "Bergen"
    assert departure.track == UNASSIGNED_TRACK
    assert "Train 202 was added." in terminal.text


def test_add_duplicate_departure_is_reported(station: Station) -> None:
    """Given an existing train number, when adding, then the rejection is shown."""
    menu, terminal = make_menu(station, ["101", "L9", "Bergen", "09:30", "2"])

    menu.handle("4")

    assert "Train number 101 already exists." in terminal.text
    kept = station.get_departure(101).value
    assert kept is not None
    assert kept.destination == "Oslo"


def test_add_departure_with_malformed_time(station: Station) -> None:
    """Given a malformed time, when adding, then the input error is shown and nothing is stored."""
    menu, terminal = make_menu(station, ["202", "R10", "Bergen", "half past nine", "1"])

    assert menu.handle("4") is True

    assert "Invalid input" in terminal.text
    assert not station.train_exists(202)


def test_set_delay_and_reset(station: Station) -> None:
    """Given a delay and then a blank delay, when setting, then the effective time follows."""
    menu, _ = make_menu(station, ["101", "00:15", "101", ""])
    departure = station.get_departure(101).value
    assert departure is not None

    menu.handle("5")
    assert departure.effective_departure_time == time(8, 15)

    menu.handle("5")
    assert departure.delay == timedelta()


def test_set_track(station: Station) -> None:
    """Given a new track, when setting it, then the departure is updated."""
    menu, terminal = make_menu(station, ["101", "3"])

    menu.handle("6")

    departure = station.get_departure(101).value
    assert departure is not None
    assert departure.track == 3
    assert "Train 101: track set." in terminal.text


def test_get_unknown_train(station: Station) -> None:
    """Given an unknown train number, when looking it up, then not found is shown."""
    menu, terminal = make_menu(station, ["999"])

    menu.handle("7")

    assert "No train with train number 999 was found." in terminal.text


def test_remove_train(station: Station) -> None:
    """Given a stored train, when removing it, then it is gone."""
    menu, terminal = make_menu(station, ["101"])

    menu.handle("8")

    assert not station.train_exists(101)
    assert "Train 101 was removed." in terminal.text


def test_set_clock_backwards_is_reported(station: Station) -> None:
    """Given an earlier time, when setting the clock, then the rejection is shown."""
    station.set_clock(time(7, 0))
    menu, terminal = make_menu(station, ["06:00"])

    menu.handle("9")

    assert station.clock == time(7, 0)
    assert "cannot be set back" in terminal.text


def test_next_departure_to_destination(station: Station) -> None:
    """Given a destination in any capitalisation, when asking for the next train, then it is shown."""
    menu, terminal = make_menu(station, ["OSLO", "bergen"])

    menu.handle("3")
    menu.handle("3")

    assert terminal.output[0] == "The next train to Oslo departs at 08:00 from track 1"
    assert terminal.output[1] == "No train to Bergen was found."


def test_list_to_destination_without_matches(station: Station) -> None:
    """Given a destination without trains, when listing, then a not found message is shown."""
    menu, terminal = make_menu(station, ["bergen"])

    menu.handle("2")

    assert terminal.output == ["No trains to Bergen found."]


def test_run_stops_when_input_ends_inside_option(station: Station) -> None:
    """Given input that ends while adding a train, when running, then the loop stops cleanly."""
    menu, terminal = make_menu(station, ["4", "202"])

    menu.run()

    assert terminal.output[-1] == "Goodbye!"
    assert not station.train_exists(202)


def test_answers_are_stripped(station: Station) -> None:
    """Given a destination with surrounding spaces, when asking for the next train, then it still matches."""
    menu, terminal = make_menu(station, ["  oslo "])

    menu.handle("3")

    assert terminal.output == ["The next train to Oslo departs at 08:00 from track 1"]


def test_added_line_and_destination_are_stripped(station: Station) -> None:
    """Given padded answers, when adding a train, then the stored line and destination are trimmed."""
    menu, _ = make_menu(station, [" 202 ", " R10 ", " bergen ", " 09:30 ", " 2 "])

    menu.handle("4")

    departure = station.get_departure(202).value
    assert departure is not None
    assert departure.line == "R10"
    assert departure.destination == "Bergen"
    assert departure.track == 2
