"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest


@pytest.fixture
def chain_graph() -> list[list[int]]:
    """Directed chain 0 -> 1 -> 2 -> 3 -> 4."""
    return [[1], [2], [3], [4], []]


@pytest.fixture
def disconnected_graph() -> list[list[int]]:
    """Nodes 0 and 1 linked both ways; node 2 isolated."""
    return [[1], [0], []]


@pytest.fixture
def cycle_graph() -> list[list[int]]:
    """Directed cycle 0 -> 1 -> 2 -> 0."""
    return [[1], [2], [0]]


@pytest.fixture
def tree_graph() -> list[list[int]]:
    """
    Directed tree rooted at 0:

        0 -> 1, 2
        1 -> 3, 4
        2 -> 5
    """
    return [[1, 2], [3, 4], [5], [], [], []]


@pytest.fixture
def diamond_graph() -> list[list[int]]:
    """Two equally short paths from 0 to 3: via 1 and via 2."""
    return [[1, 2], [3], [3], []]


@pytest.fixture
def two_component_graph() -> list[list[int]]:
    """Undirected: {0, 1, 2} form a triangle, {3, 4} an edge, 5 isolated."""
    return [[1, 2], [0, 2], [0, 1], [4], [3], []]


@pytest.fixture
def sample_sequences() -> list[list[int]]:
    """Assorted integer sequences covering common sorting edge cases."""
    return [
        [],
        [42],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [3, 1, 4, 1, 5, 9, 2, 6, 5, 3],
        [64, 25, 12, 22, 11],
        [-5, 3, -2, 8, -1],
        [2, 1],
        [7, 7, 7],
    ]
