"""Interactive terminal adapter."""

from train_departures.adapters.cli.menu import DepartureMenu, MenuOption

__all__ = ["DepartureMenu", "MenuOption"]
