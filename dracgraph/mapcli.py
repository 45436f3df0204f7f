"""Command-line tools for the map of Europe: place lookup, links, full map."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .europe_map import EuropeMap
from .places import (
    LocationID,
    TransportID,
    abbrev_to_id,
    id_to_name,
    name_to_id,
)

EX_USAGE = 64

_CONNECTION_LINES = {
    TransportID.ROAD: "Road connection",
    TransportID.RAIL: "Rail connection",
    TransportID.BOAT: "Boat connection",
}


def _args(argv: Sequence[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def _lookup(text: str) -> LocationID:
    """Treat two-character text as a code, anything else as a full name."""
    return abbrev_to_id(text) if len(text) == 2 else name_to_id(text)


def conn_main(argv: Sequence[str] | None = None) -> int:
    """Report whether and how two places are directly connected."""
    args = _args(argv)
    if len(args) < 2:
        print("conn: usage: conn <place1> <place2>", file=sys.stderr)
        return EX_USAGE

    ids = [_lookup(text) for text in args[:2]]
    for text, place in zip(args, ids):
        if place == LocationID.NOWHERE:
            print(f"conn: invalid place name '{text}'", file=sys.stderr)
            return EX_USAGE

    start, end = ids
    europe = EuropeMap()
    print(f"Between {id_to_name(start)} and {id_to_name(end)} ...")

    kinds = europe.connections(start, end)
    if not kinds:
        print("No direct connection")
    for kind in kinds:
        print(_CONNECTION_LINES.get(kind, "Weird connection"))
    return 0


def euro_main(argv: Sequence[str] | None = None) -> int:
    """Build the map of Europe and print every link in it."""
    print("Map of Europe\n=============\n")
    EuropeMap().show()
    return 0


def place_main(argv: Sequence[str] | None = None) -> int:
    """Look up a place by full name or by two-letter code."""
    args = _args(argv)
    if not args:
        print("Usage pl Place (name or abbrev)", file=sys.stderr)
        return 1

    text = args[0]
    if len(text) > 2:
        place = name_to_id(text)
        if place != LocationID.NOWHERE:
            print(f"{text} has ID {int(place)}")
    else:
        place = abbrev_to_id(text)
        if place != LocationID.NOWHERE:
            print(f"{text} is {id_to_name(place)} ({int(place)})")

    if place == LocationID.NOWHERE:
        print(f"Invalid place '{text}'")
    return 0