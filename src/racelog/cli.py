"""
racelog command line interface

Records one practice session, prints its lap times and averages, and
writes a fixed-width report.

Usage:
    racelog                                        # Prompt for everything
    racelog --driver Ana --track Spa --vehicle 1   # Non-interactive
    racelog --seed 42 --output out/report.txt      # Reproducible laps
    racelog --log-level DEBUG                      # Verbose logging
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from racelog.config import AppConfig
from racelog.session import SessionStore, UnknownVehicleCategoryError, VehicleCategory
from racelog.scoring import GeneratorConfig, LapTimeGenerator, average_lap, overall_average
from racelog.report import ExporterConfig, ReportExporter

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="racelog",
        description="Record a motorsport practice session and report lap averages",
    )
    
    # Session input
    parser.add_argument("--driver", help="Driver name (prompted if omitted)")
    parser.add_argument("--track", help="Track name (prompted if omitted)")
    parser.add_argument(
        "--vehicle",
        type=int,
        choices=[c.value for c in VehicleCategory],
        help="Vehicle: 1=GT3, 2=Formula, 3=Rally (prompted if omitted)"
    )
    
    # Lap synthesis
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for lap time generation"
    )
    
    # Output
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("report.txt"),
        help="Report file path (default: report.txt)"
    )
    
    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Log file path (in addition to stderr)"
    )
    
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Create application config from parsed arguments."""
    return AppConfig(
        driver_name=args.driver,
        track_name=args.track,
        vehicle_choice=args.vehicle,
        seed=args.seed,
        output=args.output,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def setup_logging(config: AppConfig) -> None:
    """Configure logging."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def _prompt_vehicle() -> int:
    print("\nChoose a vehicle:")
    for category in VehicleCategory:
        print(f"{category.value}. {category.label}")
    raw = input("Choice: ").strip()
    try:
        return int(raw)
    except ValueError:
        raise UnknownVehicleCategoryError(raw) from None


def run(config: AppConfig) -> int:
    """Record one session and write the report.
    
    Args:
        config: Run configuration
        
    Returns:
        Process exit code
    """
    print("=" * 40)
    print("     Welcome to Motorsports Simulator")
    print("=" * 40)
    print()
    
    driver = config.driver_name
    if driver is None:
        driver = input("Enter driver name: ")
    track = config.track_name
    if track is None:
        track = input("Enter track name: ")
    
    try:
        choice = config.vehicle_choice
        if choice is None:
            choice = _prompt_vehicle()
        category = VehicleCategory.from_choice(choice)
    except UnknownVehicleCategoryError as e:
        logger.error("Invalid vehicle choice: %r", e.value)
        print(f"\nInvalid vehicle choice: {e.value}. Expected 1, 2 or 3.")
        return 2
    
    generator = LapTimeGenerator(GeneratorConfig(seed=config.seed))
    session = generator.create_session(driver, track, category)
    
    store = SessionStore()
    if not store.add(session):
        print("\nSession could not be stored.")
        return 1
    
    print("\nLap Times:")
    for i, lap in enumerate(session.lap_times, start=1):
        print(f"Lap {i}: {lap:.2f} seconds")
    
    print(f"\nAverage Lap Time: {average_lap(session):.2f} seconds")
    print(f"Overall Average: {overall_average(store):.2f} seconds")
    
    exporter = ReportExporter(ExporterConfig(
        output_dir=str(config.output.parent),
        filename=config.output.name,
    ))
    report_path = exporter.export(store)
    
    print(f"\nReport saved to {report_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config)
    logger.debug("Starting run: %s", config)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
