"""
graphwalk.

Introductory algorithms over plain Python sequences: breadth-first search
with reachability and shortest-path queries, plus bubble and selection sort.
"""

from graphwalk.graph import (
    bfs,
    is_reachable,
    shortest_path,
    shortest_path_length,
    validate,
    visited_count,
)

__version__ = "0.1.0"

__all__ = [
    "validate",
    "bfs",
    "is_reachable",
    "shortest_path_length",
    "shortest_path",
    "visited_count",
]
