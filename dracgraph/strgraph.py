"""Directed graph whose vertices are strings, with a fixed capacity."""

from __future__ import annotations


class StringGraph:
    """A graph of at most ``max_vertices`` named vertices."""

    def __init__(self, max_vertices: int) -> None:
        if max_vertices < 0:
            raise ValueError("max_vertices must not be negative")
        self._max = max_vertices
        self._names: list[str] = []
        self._index: dict[str, int] = {}
        self._edges: set[tuple[int, int]] = set()

    def _vertex(self, name: str) -> int | None:
        """Return the index of ``name``, adding it if there is room."""
        if name in self._index:
            return self._index[name]
        if len(self._names) >= self._max:
            return None
        self._index[name] = len(self._names)
        self._names.append(name)
        return self._index[name]

    def add_edge(self, src: str, dest: str) -> bool:
        """Add an edge src -> dest; return False if the graph is full."""
        v = self._vertex(src)
        if v is None:
            return False
        w = self._vertex(dest)
        if w is None:
            return False
        self._edges.add((v, w))
        return True

    def is_connected(self, src: str, dest: str) -> bool:
        """Return True if there is an edge src -> dest."""
        v = self._index.get(src)
        w = self._index.get(dest)
        if v is None or w is None:
            return False
        return (v, w) in self._edges

    def num_vertices(self) -> int:
        """Return the number of vertices currently in the graph."""
        return len(self._names)

    def show(self, mode: int) -> None:
        """Print the graph: mode 1 as a 0/1 matrix, otherwise as lists."""
        if not self._names:
            print("Graph is empty")
            return
        count = len(self._names)
        print(f"Graph has {count} vertices:")
        if mode == 1:
            for i in range(count):
                print("".join("1" if (i, j) in self._edges else "0" for j in range(count)))
            return
        for i, name in enumerate(self._names):
            print(f"Vertex: {name}")
            print("connects to")
            for j, other in enumerate(self._names):
                if (i, j) in self._edges:
                    print(f"   {other}")