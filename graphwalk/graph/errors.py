"""
Error types for graph input checks.

These never reach callers of the public traversal functions: the boundary
catches them and returns the operation's sentinel instead. They exist so the
checks themselves can say exactly what was wrong.
"""

from __future__ import annotations


class GraphInputError(ValueError):
    """Base class for rejected traversal input."""


class InvalidGraphError(GraphInputError):
    """
    The adjacency list itself is unusable.

    Attributes:
        node: Node whose adjacency list failed the check (None for whole-graph problems)
        neighbor: Offending neighbor entry, if any
    """

    def __init__(self, message: str, node: int | None = None, neighbor: object = None) -> None:
        super().__init__(message)
        self.node = node
        self.neighbor = neighbor


class NodeOutOfRangeError(GraphInputError):
    """A start or target index falls outside [0, node_count)."""

    def __init__(self, node: object, node_count: int, role: str = "node") -> None:
        super().__init__(f"{role} {node!r} out of range [0, {node_count})")
        self.node = node
        self.node_count = node_count
        self.role = role
