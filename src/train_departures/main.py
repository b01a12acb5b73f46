"""Main entry point for the station departure board."""

import argparse
import logging
import sys

from train_departures.adapters.cli import DepartureMenu
from train_departures.adapters.config import AppConfig
from train_departures.adapters.config.departure_seed_loader import DepartureSeedLoader
from train_departures.adapters.text import DepartureBoardFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Departure board for a single train station",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with an empty station
  train-departures

  # Load departures from a TOML file
  train-departures --config departures.toml
        """,
    )
    parser.add_argument("--config", dest="config_file", help="TOML file with departures")
    parser.add_argument("--station-name", help="Name of the station")
    parser.add_argument("--clock", dest="initial_clock", help="Start time of the clock (HH:MM)")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main application entry point."""
    args = parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}

    try:
        config = AppConfig(**overrides)
        logging.getLogger().setLevel(config.logging_level)
        station = DepartureSeedLoader.create_station(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    menu = DepartureMenu(station, DepartureBoardFormatter(config))
    try:
        menu.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
