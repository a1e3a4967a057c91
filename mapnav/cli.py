"""Interactive shell for the map navigation system.

Presents a numbered menu, reads free-text names and numeric distances
line by line, and reports every outcome without ever leaving the loop
on a domain error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from .config import AppConfig, GraphConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import (
    ConfigurationError,
    InvalidDistanceError,
    LocationNotFoundError,
    MapNavigationError,
)
from .domain.models import NoPath
from .services import MapNavigationService

MENU = (
    "\n=== Map Navigation System ===\n"
    "1. Add Location\n"
    "2. Add Road Between Locations\n"
    "3. Display Map\n"
    "4. Find Shortest Path\n"
    "5. Exit"
)


class MapShell:
    """Menu-driven front-end over a MapNavigationService.

    Streams are injectable so sessions can be scripted in tests.
    """

    def __init__(
        self,
        service: MapNavigationService,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def run(self) -> int:
        """Run the menu loop until Exit or end of input."""
        actions = {
            1: self.add_location,
            2: self.add_road,
            3: self.display_map,
            4: self.find_shortest_path,
        }

        while True:
            self._print(MENU)
            try:
                line = self._prompt("Enter your choice: ")
                try:
                    choice = int(line.strip())
                except ValueError:
                    choice = None

                if choice == 5:
                    self._print("Exiting...")
                    return 0

                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._print("Invalid choice.")
                    continue

                action()
            except EOFError:
                self._print("")
                return 0

    def add_location(self) -> None:
        name = self._prompt("Enter location name: ")

        try:
            self.service.add_location(name)
        except MapNavigationError as e:
            self._print(f"{e.message}.")
            return

        self._print(f"Location '{name}' added.")

    def add_road(self) -> None:
        source = self._prompt("Enter source location: ")
        destination = self._prompt("Enter destination location: ")
        raw_distance = self._prompt("Enter distance between them: ")

        try:
            distance = int(raw_distance.strip())
        except ValueError:
            self._print("Invalid distance. Please enter a whole number.")
            return

        try:
            self.service.add_road(source, destination, distance)
        except LocationNotFoundError:
            self._print("One or both locations not found. Please add them first.")
            return
        except InvalidDistanceError:
            self._print(f"Invalid distance {distance}. Distances cannot be negative.")
            return

        self._print(
            f"Road added between '{source}' and '{destination}' "
            f"with distance {distance}."
        )

    def display_map(self) -> None:
        self._print("\n--- Map ---")
        for line in self.service.render_map():
            self._print(line)

    def find_shortest_path(self) -> None:
        source = self._prompt("Enter source location: ")
        destination = self._prompt("Enter destination location: ")

        try:
            result = self.service.shortest_path(source, destination)
        except LocationNotFoundError:
            self._print("Invalid source or destination.")
            return

        if isinstance(result, NoPath):
            self._print(f"No path exists from {source} to {destination}.")
            return

        self._print(
            f"Shortest distance from {source} to {destination} is {result.distance}"
        )
        self._print(f"Path: {result.describe()}")

    def _prompt(self, text: str) -> str:
        """Show a prompt and read one line without its line ending.

        Raises:
            EOFError: When the input stream is exhausted.
        """
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _print(self, text: str) -> None:
        self.stdout.write(f"{text}\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mapnav",
        description="Build a road map interactively and query shortest paths",
    )
    parser.add_argument(
        "--max-locations",
        type=int,
        default=None,
        help="Maximum number of locations (overrides MAPNAV_GRAPH_MAX_LOCATIONS)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides MAPNAV_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Apply command-line overrides on top of the environment configuration.

    Raises:
        ConfigurationError: If the environment or an override fails
            validation.
    """
    try:
        base = get_config()
    except ValidationError as e:
        setting = _failed_setting(e)
        raise ConfigurationError(
            f"Invalid environment setting: {setting}",
            setting_name=setting,
            cause=e,
        )
    graph = base.graph
    observability = base.observability

    if args.max_locations is not None:
        try:
            graph = GraphConfig(max_locations=args.max_locations)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid --max-locations",
                setting_name="max_locations",
                expected_type="positive integer",
                cause=e,
            )
    if args.log_level is not None:
        try:
            observability = ObservabilityConfig(
                level=args.log_level, format=observability.format
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Unknown log level: {args.log_level}",
                setting_name="level",
                expected_type="logging level name",
                cause=e,
            )

    return AppConfig(graph=graph, observability=observability)


def _failed_setting(error: ValidationError) -> str:
    locations = [".".join(str(part) for part in err["loc"]) for err in error.errors()]
    return ", ".join(locations)


def configure_logging(config: ObservabilityConfig) -> None:
    # stderr keeps log records out of the prompt stream
    logging.basicConfig(
        level=config.level,
        format=config.format,
        stream=sys.stderr,
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"mapnav: {e.message}", file=sys.stderr)
        return 2

    configure_logging(config.observability)

    container = Container.create_default(config)
    service = container.resolve(MapNavigationService)
    return MapShell(service, stdin=stdin, stdout=stdout).run()


if __name__ == "__main__":
    sys.exit(main())
