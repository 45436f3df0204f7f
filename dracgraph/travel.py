"""Find least-hops flight routes between cities under a distance limit."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from .wgraph import WeightedGraph

NAMES_FILE = "ha30_name.txt"
DIST_FILE = "ha30_dist.txt"
MAX_CITIES = 40
DEFAULT_MAX_FLIGHT = 10000
KM_PER_MILE = 1.609344

_INTEGER = re.compile(r"[+-]?\d+")


def load_cities(path: str | Path) -> list[str]:
    """Read city names, one per line."""
    names = Path(path).read_text().splitlines()
    if len(names) > MAX_CITIES:
        raise ValueError(f"too many cities: at most {MAX_CITIES} are allowed")
    return names


def load_distances(path: str | Path, ncities: int) -> WeightedGraph:
    """Read a row-by-row distance matrix and return the graph of flights.

    Distances are scaled by 100 and converted from miles to kilometres.
    Reading stops at the first token that is not an integer.
    """
    graph = WeightedGraph(ncities)
    for n, token in enumerate(Path(path).read_text().split()):
        if not _INTEGER.fullmatch(token):
            break
        from_city, to_city = divmod(n, ncities)
        distance = int(int(token) * 100.0 * KM_PER_MILE)
        graph.insert_edge(to_city, from_city, distance)
    return graph


def city_id(name: str, cities: Sequence[str]) -> int:
    """Return the index of ``name`` in ``cities``; raise ValueError if absent."""
    try:
        return list(cities).index(name)
    except ValueError:
        raise ValueError(f"unknown city: {name!r}") from None


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Show the flight graph, or a least-hops route between two cities."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (0, 2, 3):
        print(
            "Usage: travel [Start-city Destination-city] [Max-flight-dist]",
            file=sys.stderr,
        )
        return 1

    try:
        cities = load_cities(NAMES_FILE)
    except OSError:
        print(f"Couldn't open file: {NAMES_FILE}", file=sys.stderr)
        return 1
    try:
        world = load_distances(DIST_FILE, len(cities))
    except OSError:
        print(f"Couldn't open file: {DIST_FILE}", file=sys.stderr)
        return 1

    max_flight = _atoi(args[2]) if len(args) == 3 else DEFAULT_MAX_FLIGHT
    if max_flight == 0:
        max_flight = DEFAULT_MAX_FLIGHT

    if not args:
        world.show(cities)
        return 0

    try:
        src = city_id(args[0], cities)
    except ValueError:
        print("Source city name invalid", file=sys.stderr)
        return 1
    try:
        dest = city_id(args[1], cities)
    except ValueError:
        print("Destination city name invalid", file=sys.stderr)
        return 1

    path = world.find_path(src, dest, max_flight)
    if not path:
        print(f"No route from {args[0]} to {args[1]}")
        return 0
    print(f"Least-hops route:\n{cities[path[0]]}")
    for stop in path[1:]:
        print(f"->{cities[stop]}")
    return 0