"""Graph exercises around the Fury of Dracula map, string collections, a crawler and route finding."""

__version__ = "0.1.0"

__all__ = [
    "places",
    "europe_map",
    "mapcli",
    "strgraph",
    "strcollections",
    "demos",
    "html",
    "urlfile",
    "crawl",
    "wgraph",
    "travel",
]