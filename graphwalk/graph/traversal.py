"""
Breadth-first traversal over integer-indexed adjacency lists.

A graph is a sequence of N adjacency lists; entry i holds the indices of the
nodes that node i has an edge to. Edges are directed as stored.

Usage:
    from graphwalk.graph import bfs, is_reachable, shortest_path_length

    graph = [[1], [2], [3], [4], []]
    bfs(0, graph)                      # [0, 1, 2, 3, 4]
    shortest_path_length(0, 4, graph)  # 4
    is_reachable(4, 0, graph)          # False

Invalid input never raises: each query returns its "not found" value
(empty list, False, or NO_PATH).
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from numbers import Integral

import numpy as np

from graphwalk.config import NO_PATH
from graphwalk.graph.errors import GraphInputError, InvalidGraphError, NodeOutOfRangeError

logger = logging.getLogger(__name__)


def _is_sequence(obj: object) -> bool:
    """True for list-like containers (numpy arrays included), False for str/bytes/dicts."""
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def _is_index(value: object) -> bool:
    """Integral values only; bool is an int subclass but not a node index."""
    return isinstance(value, Integral) and not isinstance(value, bool)


class GraphTraversal:
    """
    Stateless BFS queries over a caller-owned adjacency list.

    Every public method validates the graph (and any node arguments) first
    and short-circuits to its sentinel on failure. The graph is never
    mutated; visited flags and the frontier queue live only for the
    duration of one call.
    """

    # =========================================================================
    # Input Checks
    # =========================================================================

    def _check_graph(self, graph: Sequence[Sequence[int]]) -> int:
        """
        Check the adjacency list and return its node count.

        Raises:
            InvalidGraphError: If the graph is empty, malformed, or references
                a neighbor outside [0, N)
        """
        if not _is_sequence(graph):
            raise InvalidGraphError(
                f"graph must be a sequence of adjacency lists, got {type(graph).__name__}"
            )

        node_count = len(graph)
        if node_count == 0:
            raise InvalidGraphError("graph has no nodes")

        for node, neighbors in enumerate(graph):
            if not _is_sequence(neighbors):
                raise InvalidGraphError(
                    f"adjacency list of node {node} is {type(neighbors).__name__}, not a sequence",
                    node=node,
                )
            for neighbor in neighbors:
                if not _is_index(neighbor) or not 0 <= neighbor < node_count:
                    raise InvalidGraphError(
                        f"node {node} lists neighbor {neighbor!r} outside [0, {node_count})",
                        node=node,
                        neighbor=neighbor,
                    )

        return node_count

    def _check_node(self, node: int, node_count: int, role: str) -> None:
        """Raise NodeOutOfRangeError unless 0 <= node < node_count."""
        if not _is_index(node) or not 0 <= node < node_count:
            raise NodeOutOfRangeError(node, node_count, role=role)

    def _check_query(
        self, start: int, target: int, graph: Sequence[Sequence[int]]
    ) -> int:
        node_count = self._check_graph(graph)
        self._check_node(start, node_count, "start")
        self._check_node(target, node_count, "target")
        return node_count

    # =========================================================================
    # Public Queries
    # =========================================================================

    def validate(self, graph: Sequence[Sequence[int]]) -> bool:
        """Return True iff the graph has at least one node and every neighbor index is in range."""
        try:
            self._check_graph(graph)
        except GraphInputError as e:
            logger.debug(f"Graph rejected: {e}")
            return False
        return True

    def bfs(self, start: int, graph: Sequence[Sequence[int]]) -> list[int]:
        """
        Breadth-first traversal from start.

        Args:
            start: Source node index
            graph: Adjacency list

        Returns:
            Nodes in the order they were first discovered. Only the part of
            the graph reachable from start is included. Empty if the graph
            is invalid or start is out of range.
        """
        try:
            node_count = self._check_graph(graph)
            self._check_node(start, node_count, "start")
        except GraphInputError as e:
            logger.debug(f"bfs: {e}")
            return []

        order: list[int] = []
        visited = np.zeros(node_count, dtype=bool)

        visited[start] = True
        queue = deque([start])

        while queue:
            current = queue.popleft()
            order.append(int(current))

            for neighbor in graph[current]:
                if 0 <= neighbor < node_count and not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return order

    def is_reachable(
        self, start: int, target: int, graph: Sequence[Sequence[int]]
    ) -> bool:
        """
        Whether a directed path leads from start to target.

        A node always reaches itself, even with no edges. The search stops as
        soon as target shows up among the neighbors being expanded.
        """
        try:
            node_count = self._check_query(start, target, graph)
        except GraphInputError as e:
            logger.debug(f"is_reachable: {e}")
            return False

        if start == target:
            return True

        visited = np.zeros(node_count, dtype=bool)
        visited[start] = True
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in graph[current]:
                if neighbor == target:
                    return True
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return False

    def shortest_path_length(
        self, start: int, target: int, graph: Sequence[Sequence[int]]
    ) -> int:
        """
        Number of edges on a shortest path from start to target.

        Returns:
            0 when start == target, the edge count when target is reachable,
            NO_PATH (-1) when it is not or when the input is invalid
        """
        try:
            node_count = self._check_query(start, target, graph)
        except GraphInputError as e:
            logger.debug(f"shortest_path_length: {e}")
            return NO_PATH

        if start == target:
            return 0

        visited = np.zeros(node_count, dtype=bool)
        visited[start] = True
        queue = deque([(start, 0)])

        while queue:
            current, depth = queue.popleft()
            for neighbor in graph[current]:
                if neighbor == target:
                    return depth + 1
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append((neighbor, depth + 1))

        return NO_PATH

    def shortest_path(
        self, start: int, target: int, graph: Sequence[Sequence[int]]
    ) -> list[int]:
        """
        Node sequence of a shortest path from start to target.

        Among equally short paths, the one BFS meets first (following each
        adjacency list in stored order) is returned.

        Returns:
            [start, ..., target], [start] when start == target, or an empty
            list when no path exists or the input is invalid
        """
        try:
            self._check_query(start, target, graph)
        except GraphInputError as e:
            logger.debug(f"shortest_path: {e}")
            return []

        if start == target:
            return [int(start)]

        # Maps node to the node it was discovered from
        parents: dict[int, int | None] = {int(start): None}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in graph[current]:
                neighbor = int(neighbor)
                if neighbor in parents:
                    continue

                parents[neighbor] = int(current)

                if neighbor == target:
                    path = []
                    node: int | None = neighbor
                    while node is not None:
                        path.append(node)
                        node = parents[node]
                    return list(reversed(path))

                queue.append(neighbor)

        return []

    @staticmethod
    def visited_count(result: Sequence[int]) -> int:
        """Number of nodes in a traversal result."""
        return len(result)


# Module-level shared instance; it holds no state between calls
graph_traversal = GraphTraversal()

validate = graph_traversal.validate
bfs = graph_traversal.bfs
is_reachable = graph_traversal.is_reachable
shortest_path_length = graph_traversal.shortest_path_length
shortest_path = graph_traversal.shortest_path
visited_count = graph_traversal.visited_count
