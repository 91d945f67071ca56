"""
Graph traversal module.

Provides breadth-first queries over integer-indexed adjacency lists:
- bfs: Discovery order from a source node
- is_reachable: Directed reachability check
- shortest_path_length / shortest_path: Unweighted shortest paths

Usage:
    from graphwalk.graph import bfs, validate

    if validate(graph):
        order = bfs(0, graph)
"""

from graphwalk.graph.errors import GraphInputError, InvalidGraphError, NodeOutOfRangeError
from graphwalk.graph.traversal import (
    GraphTraversal,
    bfs,
    graph_traversal,
    is_reachable,
    shortest_path,
    shortest_path_length,
    validate,
    visited_count,
)

__all__ = [
    "GraphTraversal",
    "graph_traversal",
    "validate",
    "bfs",
    "is_reachable",
    "shortest_path_length",
    "shortest_path",
    "visited_count",
    "GraphInputError",
    "InvalidGraphError",
    "NodeOutOfRangeError",
]
