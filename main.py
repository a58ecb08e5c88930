"""
Main entry point for the Metro Journey Planner.

This module sets up logging, loads the configuration, and runs the travel
planner from the command line: either a single journey given as arguments
or an interactive prompt. Settings and station catalog edits are also
available as options.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, List

from src.managers.config_manager import ConfigManager, ConfigData, ConfigurationError
from src.core.models.ticket import TicketType
from src.core.services.service_factory import ServiceFactory
from src.core.services.journey_planner import format_plan
from src.core.services.json_data_repository import DataRepositoryError
from src.core.services.station_catalog_service import StationCatalogError
from src.core.services.station_validator import StationValidationError
from src.core.services.ticket_pricing import FareUnavailableError
from src.utils.helpers import format_duration, format_fare
from version import __app_name__, get_version_string

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_log_directory(config: ConfigData) -> Path:
    """Per-platform log directory unless the configuration names one."""
    if config.logging.log_directory:
        return Path(config.logging.log_directory)
    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Logs" / __app_name__
    elif sys.platform == "win32":  # Windows
        return Path(os.environ.get("APPDATA", Path.home())) / __app_name__ / "logs"
    else:  # Linux and others
        return Path.home() / ".local" / "share" / __app_name__.lower() / "logs"


def setup_logging(config: ConfigData):
    """Setup application logging with file and console output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.logging.log_to_file:
        log_dir = get_log_directory(config)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_dir / "metro_planner.log")))

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def parse_ticket_type(value: str) -> TicketType:
    """argparse type for ticket types, ignoring case."""
    ticket_type = TicketType.from_input(value)
    if ticket_type is None:
        choices = ", ".join(t.value for t in TicketType)
        raise argparse.ArgumentTypeError(f"invalid ticket type '{value}' (choose from {choices})")
    return ticket_type


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="metro-planner", description="Plan metro journeys")
    parser.add_argument("from_station", nargs="?", help="Origin station name")
    parser.add_argument("to_station", nargs="?", help="Destination station name")
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("--ticket-type", type=parse_ticket_type,
                        help="Also quote tickets of this type")
    parser.add_argument("--passengers", type=int, default=1, help="Number of tickets to quote")
    parser.add_argument("--version", action="version", version=get_version_string())

    settings = parser.add_argument_group("settings")
    settings.add_argument("--show-config", action="store_true",
                          help="Print the configuration summary and exit")
    settings.add_argument("--set-interchanges", metavar="NAMES",
                          help="Save a comma-separated list of interchange stations")
    settings.add_argument("--set-log-level", type=str.upper, choices=LOG_LEVELS,
                          help="Save the log level")

    catalog = parser.add_argument_group("station catalog")
    catalog.add_argument("--add-station", metavar="NAME", help="Add a station to --line")
    catalog.add_argument("--line", help="Line for the new station")
    catalog.add_argument("--station-id", help="Id for the new station; next free id when omitted")
    catalog.add_argument("--parking", action="store_true", help="New station has parking")
    catalog.add_argument("--feeder", action="store_true", help="New station has a feeder service")
    catalog.add_argument("--delete-station", metavar="ID", help="Delete the station with this id")
    return parser


def apply_settings(manager: ConfigManager, args: argparse.Namespace) -> ConfigData:
    """Load the configuration, saving any settings given on the command line."""
    config = manager.load_config()
    if args.set_interchanges is not None:
        manager.update_interchange_stations(args.set_interchanges.split(","))
    if args.set_log_level:
        manager.update_log_level(args.set_log_level)
    return manager.config or config


def run_journey(factory: ServiceFactory, from_name: str, to_name: str,
                ticket_type: Optional[TicketType] = None, passengers: int = 1) -> int:
    """Plan and print one journey. Returns a process exit code."""
    currency = factory.config.ticketing.currency_symbol
    try:
        plan = factory.get_journey_planner().plan(from_name, to_name)
    except StationValidationError as e:
        print(e)
        return 2

    print(format_plan(plan, currency))
    if not plan.is_reachable:
        return 1
    print(f"Duration: {format_duration(plan.travel_time_minutes)}")

    if ticket_type:
        try:
            quote = factory.get_ticket_pricing().quote(plan.journey, ticket_type, passengers)
        except (ValueError, FareUnavailableError) as e:
            print(f"Cannot issue ticket: {e}")
            return 1
        print(
            f"Ticket: {quote.passengers} x {quote.ticket_type.value}, "
            f"total {format_fare(quote.total_fare, currency)}, "
            f"valid for {format_duration(quote.validity_minutes)}"
        )
    return 0


def edit_catalog(factory: ServiceFactory, args: argparse.Namespace) -> int:
    """Apply one station catalog edit. Returns a process exit code."""
    catalog = factory.get_station_catalog_service()
    try:
        if args.add_station:
            station = catalog.add_station(args.add_station, args.line,
                                          has_parking=args.parking, has_feeder=args.feeder,
                                          station_id=args.station_id)
            print(f"Added {station.name} ({station.id}) to the {station.line} line")
        else:
            station = catalog.delete_station(args.delete_station)
            print(f"Deleted {station.name} ({station.id})")
    except (StationValidationError, StationCatalogError) as e:
        print(e)
        return 2
    except (DataRepositoryError, ValueError) as e:
        logging.getLogger(__name__).error(f"Catalog edit failed: {e}")
        print(f"Catalog edit failed: {e}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    manager = ConfigManager(args.config)
    try:
        config = apply_settings(manager, args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    if args.show_config:
        for key, value in manager.get_config_summary().items():
            print(f"{key}: {value}")
        return 0

    setup_logging(config)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting {get_version_string()}")

    factory = ServiceFactory(config)
    try:
        factory.get_station_directory()
    except (DataRepositoryError, ValueError, FileNotFoundError) as e:
        logger.critical(f"Failed to load stations: {e}")
        print(f"Failed to load stations: {e}")
        return 1

    if args.add_station or args.delete_station:
        return edit_catalog(factory, args)
    if args.from_station and args.to_station:
        return run_journey(factory, args.from_station, args.to_station,
                           args.ticket_type, args.passengers)
    if args.set_interchanges is not None or args.set_log_level:
        return 0
    return interactive(factory)


def interactive(factory: ServiceFactory) -> int:
    """Prompt for journeys until the rider enters an empty origin."""
    while True:
        try:
            from_name = input("Enter From Station (blank to quit): ").strip()
            if not from_name:
                return 0
            to_name = input("Enter To Station: ").strip()
        except EOFError:
            return 0
        run_journey(factory, from_name, to_name)
        print()


if __name__ == "__main__":
    sys.exit(main())
