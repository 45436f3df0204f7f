"""Build a graph of part of the web by following links breadth-first."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

from .html import iter_urls
from .strcollections import SortedStringSet, StringQueue
from .strgraph import StringGraph
from .urlfile import url_open

BUFSIZE = 1024
REQUIRED_DOMAIN = "unsw.edu.au"
MIN_URLS = 40


def set_first_url(base: str) -> tuple[str, str]:
    """Return ``(base, first)``: the normalised base URL and the first page.

    The first page is the base with ``/index.html`` added unless it is
    already there; the base loses that suffix or a trailing slash.
    """
    index = base.find("/index.html")
    if index != -1:
        return base[:index], base
    if base.endswith("/"):
        return base[:-1], base + "index.html"
    return base, base + "/index.html"


def crawl(
    base_url: str,
    max_urls: int,
    opener: Callable[[str], Any] = url_open,
    delay: float = 1.0,
) -> StringGraph:
    """Follow links from ``base_url`` and return the graph of pages found.

    Only URLs inside the required domain are opened.  The graph holds at
    most ``max_urls`` vertices.  Raises OSError if a page cannot be opened.
    """
    _, first = set_first_url(base_url)
    todo = StringQueue()
    todo.enter(first)
    graph = StringGraph(max_urls)
    seen = SortedStringSet()

    while not todo.is_empty() and graph.num_vertices() < max_urls:
        current = todo.leave()
        if REQUIRED_DOMAIN not in current:
            continue
        try:
            page = opener(current)
        except OSError as exc:
            raise OSError(f"Couldn't open {current}") from exc

        with page:
            while not page.at_eof():
                line = page.readline(BUFSIZE - 1)
                for found in iter_urls(line, current):
                    print(f"Found: '{found}'")
                    if graph.num_vertices() < max_urls or (
                        found in seen and current in seen
                    ):
                        graph.add_edge(current, found)
                    if found not in seen:
                        seen.insert(found)
                        todo.enter(found)
        if delay > 0:
            time.sleep(delay)

    return graph


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Crawl from a base URL and print the resulting graph two ways."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: crawl BaseURL MaxURLs", file=sys.stderr)
        return 1

    max_urls = max(_atoi(args[1]), MIN_URLS)
    try:
        graph = crawl(args[0], max_urls)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1

    graph.show(0)
    graph.show(1)
    return 0