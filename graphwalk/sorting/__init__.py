"""
Sorting module.

Provides copy-returning comparison sorts:
- BubbleSort: Stable adjacent-swap sort with early exit
- SelectionSort: Minimum-selection sort with at most n - 1 swaps
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from graphwalk.config import (
    BENCHMARK_SEED,
    BENCHMARK_VALUE_RANGE,
    DEFAULT_BENCHMARK_ITERATIONS,
    DEFAULT_BENCHMARK_SIZE,
    DEFAULT_SORT_ORDER,
)
from graphwalk.sorting.base import (
    AlgorithmInfo,
    BenchmarkResult,
    SortAlgorithm,
    SortMetrics,
    SortResult,
    is_sorted,
    parse_order,
)
from graphwalk.sorting.bubble import BubbleSort
from graphwalk.sorting.selection import SelectionSort

logger = logging.getLogger(__name__)

__all__ = [
    "SortAlgorithm",
    "SortMetrics",
    "SortResult",
    "AlgorithmInfo",
    "BenchmarkResult",
    "BubbleSort",
    "SelectionSort",
    "get_sorter",
    "bubble_sort",
    "selection_sort",
    "is_sorted",
    "parse_order",
    "run_benchmark",
]


def get_sorter(name: str) -> SortAlgorithm:
    """
    Get a sort algorithm by name.

    Args:
        name: Algorithm identifier (bubble, selection)

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    sorters = {
        "bubble": BubbleSort,
        "selection": SelectionSort,
    }

    if name not in sorters:
        available = ", ".join(sorters.keys())
        raise ValueError(f"Unknown sort algorithm '{name}'. Available: {available}")

    return sorters[name]()


def bubble_sort(elements: Sequence[Any] | None, order: str | None = DEFAULT_SORT_ORDER) -> list[Any]:
    """Return a bubble-sorted copy of elements."""
    return BubbleSort().sort(elements, order).sorted_elements


def selection_sort(elements: Sequence[Any] | None, order: str | None = DEFAULT_SORT_ORDER) -> list[Any]:
    """Return a selection-sorted copy of elements."""
    return SelectionSort().sort(elements, order).sorted_elements


def run_benchmark(
    name: str,
    array_size: int = DEFAULT_BENCHMARK_SIZE,
    iterations: int = DEFAULT_BENCHMARK_ITERATIONS,
    seed: int | None = BENCHMARK_SEED,
) -> BenchmarkResult:
    """
    Time an algorithm on freshly generated random integer arrays.

    Args:
        name: Algorithm identifier passed to get_sorter()
        array_size: Length of each random array
        iterations: Number of arrays to sort; <= 0 skips sorting entirely
        seed: Seed for numpy's generator (None for fresh entropy)

    Returns:
        BenchmarkResult with the mean execution time in nanoseconds

    Raises:
        ValueError: If the algorithm is unknown or array_size is negative
    """
    sorter = get_sorter(name)
    if array_size < 0:
        raise ValueError(f"array_size must be non-negative, got {array_size}")

    if iterations <= 0:
        return BenchmarkResult(
            algorithm=sorter.name,
            array_size=array_size,
            iterations=0,
            average_time_ns=0.0,
        )

    rng = np.random.default_rng(seed)
    low, high = BENCHMARK_VALUE_RANGE
    total_ns = 0

    for i in range(iterations):
        values = rng.integers(low, high, size=array_size).tolist()
        result = sorter.sort(values)
        total_ns += result.metrics.execution_time_ns
        logger.debug(
            f"{sorter.name} run {i + 1}/{iterations}: "
            f"{result.metrics.comparison_count:,} comparisons, "
            f"{result.metrics.swap_count:,} swaps"
        )

    average = total_ns / iterations
    logger.info(
        f"{sorter.name} sort of {array_size:,} items: {average:,.0f} ns average over {iterations} runs"
    )

    return BenchmarkResult(
        algorithm=sorter.name,
        array_size=array_size,
        iterations=iterations,
        average_time_ns=average,
    )
