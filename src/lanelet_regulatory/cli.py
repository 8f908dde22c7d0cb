"""Command line interface for inspecting bus stops in lanelet maps."""

import json
import logging
import sys
from dataclasses import asdict
from typing import Any

from lanelet_regulatory.adapters.config import AppConfig
from lanelet_regulatory.adapters.osm import OsmMapRepository
from lanelet_regulatory.application.services import BusStopService
from lanelet_regulatory.domain.errors import LaneletError
from lanelet_regulatory.domain.regulatory_elements import create_default_registry

logger = logging.getLogger(__name__)


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="lanelet-regulatory",
        description="Inspect bus stop regulatory elements in Lanelet2 OSM maps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List bus stops
  lanelet-regulatory bus-stops map.osm

  # List bus stops as JSON
  lanelet-regulatory bus-stops map.osm --json

  # Check a map for malformed regulatory elements
  lanelet-regulatory --strict validate map.osm

The map defaults to MAP_FILE (environment, .env or the [map] table of --config).
        """,
    )
    parser.add_argument("--config", help="TOML configuration file", default=None)
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first malformed regulatory element",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    bus_stops_parser = subparsers.add_parser("bus-stops", help="List bus stops in a map")
    bus_stops_parser.add_argument("map", nargs="?", help="Lanelet2 OSM map file")
    bus_stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    validate_parser = subparsers.add_parser("validate", help="Report malformed bus stops")
    validate_parser.add_argument("map", nargs="?", help="Lanelet2 OSM map file")

    return parser


def _load_config(args: Any) -> AppConfig:
    config = AppConfig(config_file=args.config) if args.config else AppConfig()
    config.apply_config_file()
    if args.strict:
        config.strict_loading = True
    return config


def _create_service(config: AppConfig) -> BusStopService:
    registry = create_default_registry(fallback_to_generic=config.fallback_to_generic)
    repository = OsmMapRepository(registry, strict=config.strict_loading)
    return BusStopService(repository)


def _command_bus_stops(service: BusStopService, map_file: str, as_json: bool) -> int:
    result = service.load_map(map_file)
    summaries = service.list_bus_stops(result.lanelet_map)

    if as_json:
        print(json.dumps([asdict(summary) for summary in summaries], indent=2))
        return 0

    if not summaries:
        print("No bus stops found.")
        return 0

    print(f"Found {len(summaries)} bus stop(s):\n")
    for summary in summaries:
        areas = ", ".join(str(area_id) for area_id in summary.bus_stop_ids)
        print(f"  Bus stop {summary.id}")
        print(f"    Areas:     {areas}")
        print(f"    Stop line: {summary.stop_line_id}")
    return 0


def _command_validate(service: BusStopService, map_file: str) -> int:
    result = service.load_map(map_file)
    issues = [*result.issues, *service.find_invalid_bus_stops(result.lanelet_map)]

    if not issues:
        print(f"{map_file}: OK")
        return 0

    print(f"{map_file}: {len(issues)} issue(s)")
    for issue in issues:
        print(f"  [{issue.element_id}] {issue.reason}")
    return 1


def _execute_command(args: Any, config: AppConfig) -> int:
    """Execute the command specified in args."""
    map_file = args.map or config.map_file
    if not map_file:
        print("Error: no map file given and MAP_FILE is not set", file=sys.stderr)
        return 2

    service = _create_service(config)
    if args.command == "bus-stops":
        return _command_bus_stops(service, map_file, args.json)
    return _command_validate(service, map_file)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = _load_config(args)
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )
        return _execute_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except (LaneletError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
