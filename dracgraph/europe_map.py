"""The map of Europe as an undirected multigraph of places."""

from __future__ import annotations

from collections import deque

from .places import (
    CONNECTIONS,
    NUM_MAP_LOCATIONS,
    LocationID,
    TransportID,
    id_to_name,
    transport_to_name,
    valid_place,
)


class EuropeMap:
    """Adjacency lists of every place, linked by road, rail and boat."""

    def __init__(self) -> None:
        self._adjacency: list[deque[tuple[LocationID, TransportID]]] = [
            deque() for _ in range(NUM_MAP_LOCATIONS)
        ]
        self._num_links = 0
        for link in CONNECTIONS:
            self._add_link(link.v, link.w, link.t)

    def _add_link(
        self, start: LocationID, end: LocationID, transport: TransportID
    ) -> None:
        if (end, transport) in self._adjacency[start]:
            return
        self._adjacency[start].appendleft((end, transport))
        self._adjacency[end].appendleft((start, transport))
        self._num_links += 1

    def num_vertices(self) -> int:
        """Return the number of places on the map."""
        return len(self._adjacency)

    def num_edges(self, transport: int) -> int:
        """Count adjacency entries of one transport type (ANY counts all).

        Every link appears once in the list of each of its ends.
        """
        transport = TransportID(transport)
        return sum(
            1
            for neighbours in self._adjacency
            for _, kind in neighbours
            if transport == TransportID.ANY or kind == transport
        )

    def connections(self, start: int, end: int) -> list[TransportID]:
        """Return the transport types of every direct link from start to end."""
        for place in (start, end):
            if not valid_place(place):
                raise ValueError(f"not a place on the map: {place!r}")
        return [kind for place, kind in self._adjacency[start] if place == end]

    def show(self) -> None:
        """Print the map, one line per adjacency entry."""
        print(f"V={self.num_vertices()}, E={self._num_links}")
        for place, neighbours in enumerate(self._adjacency):
            for other, kind in neighbours:
                print(
                    f"{id_to_name(place)} connects to {id_to_name(other)} "
                    f"by {transport_to_name(kind)}"
                )