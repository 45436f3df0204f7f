"""Randomised exercisers for the string graph and string collections."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence

from .strcollections import SortedStringSet, StringQueue, StringStack
from .strgraph import StringGraph

CHOICES = "abcd efgh ijkl mnop qrst uvw xyz"


def random_string(rng: random.Random, max_extra: int, capital_first: bool) -> str:
    """Return a random string of fewer than ``max_extra`` chosen characters.

    With ``capital_first`` the string also starts with a capital letter.
    """
    count = rng.randrange(max_extra)
    head = chr(ord("A") + rng.randrange(26)) if capital_first else ""
    return head + "".join(rng.choice(CHOICES) for _ in range(count))


def _iterations(argv: Sequence[str] | None, default: int) -> int:
    """Read the iteration count the way atoi would; never fewer than 20."""
    args = sys.argv[1:] if argv is None else list(argv)
    count = default
    if args:
        match = re.match(r"\s*([+-]?\d+)", args[0])
        count = int(match.group(1)) if match else 0
    return max(count, 20)


def graph_demo_main(argv: Sequence[str] | None = None) -> int:
    """Add random edges between ten random names, showing the graph each time."""
    rng = random.Random()
    count = _iterations(argv, 10)
    names = [random_string(rng, 10, True) for _ in range(10)]
    graph = StringGraph(10)
    for _ in range(count):
        src = names[rng.randrange(10)]
        dest = names[rng.randrange(10)]
        graph.add_edge(src, dest)
        print(f"Added {src} -> {dest}")
        graph.show(0)
    return 0


def stack_demo_main(argv: Sequence[str] | None = None) -> int:
    """Randomly push and pop strings, showing the stack each time."""
    rng = random.Random()
    stack = StringStack()
    for _ in range(_iterations(argv, 20)):
        if rng.randrange(10) > 5:
            if not stack.is_empty():
                print(f"Remove {stack.pop()}")
        else:
            value = random_string(rng, 48, True)
            stack.push(value)
            print(f"Insert {value}")
        stack.show()
    return 0


def queue_demo_main(argv: Sequence[str] | None = None) -> int:
    """Randomly enter and leave strings, showing the queue each time."""
    rng = random.Random()
    queue = StringQueue()
    for _ in range(_iterations(argv, 20)):
        if rng.randrange(10) > 5:
            if not queue.is_empty():
                print(f"Remove {queue.leave()}")
        else:
            value = random_string(rng, 48, True)
            queue.enter(value)
            print(f"Insert {value}")
        queue.show()
    return 0


def set_demo_main(argv: Sequence[str] | None = None) -> int:
    """Insert random strings into a set, showing the set each time."""
    rng = random.Random()
    strings = SortedStringSet()
    for _ in range(_iterations(argv, 20)):
        value = random_string(rng, 49, False)
        strings.insert(value)
        print(f"Insert {value}")
        strings.show()
    return 0