"""Undirected weighted graph on vertices 0..N-1, stored as a matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class WeightedGraph:
    """An adjacency matrix of edge weights; weight 0 means no edge."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices <= 0:
            raise ValueError("a graph needs at least one vertex")
        self._nv = num_vertices
        self._ne = 0
        self._edges = [[0] * num_vertices for _ in range(num_vertices)]

    def valid_vertex(self, v: int) -> bool:
        """Return True if ``v`` is a vertex of this graph."""
        return 0 <= v < self._nv

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not self.valid_vertex(v):
                raise ValueError(f"invalid vertex: {v!r}")

    def insert_edge(self, v: int, w: int, weight: int) -> None:
        """Set the edge v-w to ``weight`` unless an edge is already there."""
        self._check(v, w)
        if self._edges[v][w] != 0 and self._edges[w][v] != 0:
            return
        self._edges[v][w] = weight
        self._edges[w][v] = weight
        self._ne += 1

    def remove_edge(self, v: int, w: int) -> None:
        """Remove the edge v-w if there is one."""
        self._check(v, w)
        if self._edges[v][w] == 0 and self._edges[w][v] == 0:
            return
        self._edges[v][w] = 0
        self._edges[w][v] = 0
        self._ne -= 1

    def weight(self, v: int, w: int) -> int:
        """Return the weight of edge v-w, 0 if there is none."""
        self._check(v, w)
        return self._edges[v][w]

    def show(self, names: Sequence[str]) -> None:
        """Print every vertex by name with its neighbours and weights."""
        print(f"#vertices={self._nv}, #edges={self._ne}\n")
        for v, row in enumerate(self._edges):
            print(f"{v} {names[v]}")
            for w, wt in enumerate(row):
                if wt:
                    print(f"\t{names[w]} ({wt})")
            print()

    def find_path(self, src: int, dest: int, max_weight: int) -> list[int]:
        """Return a least-hops path from src to dest, or [] if none.

        Only edges whose weight is at most ``max_weight`` are used.
        """
        self._check(src, dest)
        previous: dict[int, int | None] = {src: None}
        queue = deque([src])
        while queue:
            v = queue.popleft()
            if v == dest:
                break
            for w, wt in enumerate(self._edges[v]):
                if wt and wt <= max_weight and w not in previous:
                    previous[w] = v
                    queue.append(w)

        if dest not in previous:
            return []
        path = []
        step: int | None = dest
        while step is not None:
            path.append(step)
            step = previous[step]
        return path[::-1]