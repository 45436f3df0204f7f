# dracgraph

Small graph programs and data structures built around the map of Europe
from *the Fury of Dracula*, together with a string-keyed web crawler and
a breadth-first flight-route finder. Only the standard library is used.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## The map of Europe

`dracgraph.places` holds the 71 places of the board with their names,
two-letter abbreviations and types (`PlaceType.LAND` or `PlaceType.SEA`),
and every road, rail and boat connection between them (`PLACES`,
`CONNECTIONS`). Lookups that find nothing return `LocationID.NOWHERE`;
asking for the type of something that is not a real place raises
`ValueError`.

```python
from dracgraph.places import name_to_id, abbrev_to_id, id_to_name, is_sea

paris = name_to_id("Paris")
print(id_to_name(abbrev_to_id("LO")))   # London
print(is_sea(abbrev_to_id("NS")))       # True
```

`dracgraph.europe_map.EuropeMap` builds the board as an undirected graph:

```python
from dracgraph.europe_map import EuropeMap
from dracgraph.places import TransportID, name_to_id

europe = EuropeMap()
europe.num_vertices()                    # 71
europe.num_edges(TransportID.RAIL)       # rail adjacency entries: each link counts once per end
europe.connections(name_to_id("Paris"), name_to_id("Brussels"))  # list of TransportID
europe.show()
```

Commands:

    dracgraph-euro                 # print the whole map
    dracgraph-conn Paris BU        # how two places are directly connected
    dracgraph-place "Le Havre"     # look up a place by name or abbreviation

`dracgraph-conn` reads a two-character argument as an abbreviation and
anything else as a full name; it exits with status 64 on a bad argument.

## String collections and graph

`dracgraph.strcollections` provides `SortedStringSet` (kept in ascending
order), `StringQueue` and `StringStack`. Taking from an empty queue or
stack raises `IndexError`. `dracgraph.strgraph.StringGraph` is a directed
graph of strings with a fixed vertex limit; `add_edge` returns `False`
when a new vertex would not fit, and `show(1)` prints the adjacency matrix
while `show(0)` prints neighbour lists.

Random-exercise demos (the count is never less than 20):

    dracgraph-set-demo 30
    dracgraph-queue-demo 30
    dracgraph-stack-demo 30
    dracgraph-graph-demo 30

## Crawler

`dracgraph.html` extracts link targets from HTML (`iter_urls`,
`get_next_url`) and also has `normalize_word` and `normalize_url`.
`dracgraph.urlfile.URLFile` (or `url_open`) reads a local file or a
remote URL through one text buffer, with `read`, `readline`, `at_eof`,
`rewind` and use as a context manager.

`dracgraph.crawl.crawl(base_url, max_urls)` walks pages breadth first
from the base URL and records the links between them in a `StringGraph`.
Only URLs containing `unsw.edu.au` are opened, and it waits one second
after each page (`delay`). A page that cannot be opened raises `OSError`.

    dracgraph-crawl <base-url> 40

The command prints each link as it is found, then the graph as neighbour
lists and as a matrix. The vertex limit is never less than 40.

## Flight routes

`dracgraph.wgraph.WeightedGraph` is an undirected weighted graph whose
`find_path(src, dest, max_weight)` returns a least-hops path as a list of
vertices, using only edges whose weight is at most `max_weight`, or `[]`
when there is none.

`dracgraph-travel` reads `ha30_name.txt` (one city per line, at most 40)
and `ha30_dist.txt` (a whitespace-separated distance matrix in miles)
from the current directory. Each distance is stored as the mileage times
100, converted to kilometres. The default limit is 10000.

    dracgraph-travel                      # show the whole graph
    dracgraph-travel Berlin Chicago       # least-hops route
    dracgraph-travel Berlin Chicago 6000  # only edges with weight up to 6000

## What is not included

The package ships no city data: the two `ha30_*.txt` files must be
supplied by the user before `dracgraph-travel` can run.