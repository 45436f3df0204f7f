[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dracgraph"
version = "0.1.0"
description = "Graph exercises: the Fury of Dracula map of Europe, string collections, a small web crawler and a flight-route finder"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency", "breadth-first search", "crawler", "dracula", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dracgraph-conn = "dracgraph.mapcli:conn_main"
dracgraph-euro = "dracgraph.mapcli:euro_main"
dracgraph-place = "dracgraph.mapcli:place_main"
dracgraph-graph-demo = "dracgraph.demos:graph_demo_main"
dracgraph-stack-demo = "dracgraph.demos:stack_demo_main"
dracgraph-queue-demo = "dracgraph.demos:queue_demo_main"
dracgraph-set-demo = "dracgraph.demos:set_demo_main"
dracgraph-crawl = "dracgraph.crawl:main"
dracgraph-travel = "dracgraph.travel:main"

[tool.hatch.build.targets.wheel]
packages = ["dracgraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
