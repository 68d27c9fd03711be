from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

import yaml

from aliases import AliasTable
from graph import Edge
from loaders import REFERENCE_DATE, DataLoadError
from roadtrip import RoadTrip


logger = logging.getLogger(__name__)

EXIT_WORD = "EXIT"


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def print_route(
    trip: RoadTrip, country1: str, country2: str, out: Optional[TextIO] = None
) -> List[Edge]:
    out = out or sys.stdout
    route = trip.find_route(country1, country2)
    path = trip.format_route(route, country1, country2)
    print(f"Route from {country1} to {country2}:", file=out)
    if path:
        for step in path:
            print(f"* {step}", file=out)
    else:
        print(f"No route found between {country1} and {country2}.", file=out)
    return route


def _ask_country(
    trip: RoadTrip, prompt: str, read: Callable[[str], str], out: TextIO
) -> Optional[str]:
    """Prompt until a known country is entered; None means the user quit."""
    while True:
        name = read(prompt)
        if name.strip().upper() == EXIT_WORD:
            return None
        if trip.is_known(name):
            return name
        print("Invalid country name. Please enter a valid country name.", file=out)


def prompt_loop(
    trip: RoadTrip,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> List[Edge]:
    """Ask for country pairs and print their routes until EXIT or end of input.

    Returns the last route found so it can be plotted.
    """
    out = out or sys.stdout
    last_route: List[Edge] = []
    try:
        while True:
            first = _ask_country(
                trip, "Enter the name of the first country (type EXIT to quit): ", read, out
            )
            if first is None:
                break
            second = _ask_country(
                trip, "Enter the name of the second country (type EXIT to quit): ", read, out
            )
            if second is None:
                break
            last_route = print_route(trip, first, second, out) or last_route
    except EOFError:
        pass
    print("Exiting the program.", file=out)
    return last_route


def resolve_data_paths(args: argparse.Namespace, config: Dict) -> List[Path]:
    if args.files:
        return list(args.files)
    data = config.get("data") or {}
    if not isinstance(data, dict):
        return []
    names = ("borders", "capdist", "state_name")
    return [Path(data[name]) for name in names if data.get(name)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find border-crossing routes between countries."
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="borders.txt capdist.csv state_name.tsv (overrides --config).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration with data paths and extra aliases.",
    )
    parser.add_argument(
        "--route",
        nargs=2,
        metavar=("FROM", "TO"),
        help="Print a single route and exit instead of prompting.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Save a picture of the last route found to this path.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log graph construction details.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config: Dict = {}
    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, yaml.YAMLError) as exc:
            parser.error(f"Cannot read config {args.config}: {exc}")
        if not isinstance(config, dict):
            parser.error(f"Config {args.config} must be a YAML mapping.")
    paths = resolve_data_paths(args, config)
    if len(paths) != 3:
        parser.error("Please provide three file names: borders.txt capdist.csv state_name.tsv!")

    aliases = AliasTable.default().with_overrides(config.get("aliases") or {})
    # YAML reads an unquoted 2020-12-31 as a date; str() gives back the ISO form.
    reference_date = str(config.get("reference_date", REFERENCE_DATE))

    try:
        trip = RoadTrip.from_files(*paths, aliases=aliases, reference_date=reference_date)
    except DataLoadError as exc:
        logger.error("Could not build the country graph: %s", exc)
        return 1

    if args.route:
        route = print_route(trip, *args.route)
    else:
        route = prompt_loop(trip)

    if args.plot:
        if not route:
            print("No route to plot.", file=sys.stderr)
            return 0
        from visualize import draw_route

        draw_route(trip.graph, route, output=args.plot)
        print(f"Route plot stored at: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
