"""
Sort algorithm base class and result records.

All algorithms implement _sort_in_place() on a private copy; sort() handles
copying, order parsing and timing so the caller's sequence is never touched.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from graphwalk.config import DEFAULT_SORT_ORDER, ORDER_ASC, ORDER_DESC


def parse_order(order: str | None) -> bool:
    """
    Translate an order name into an ascending flag.

    Args:
        order: "asc" or "desc" (case-insensitive); None means ascending

    Returns:
        True for ascending, False for descending

    Raises:
        ValueError: If order is not a recognised name
    """
    if order is None:
        return True
    if not isinstance(order, str):
        raise ValueError(f"Sort order must be a string, got {type(order).__name__}")
    normalized = order.lower()
    if normalized == ORDER_ASC:
        return True
    if normalized == ORDER_DESC:
        return False
    raise ValueError(f"Unknown sort order '{order}'. Available: {ORDER_ASC}, {ORDER_DESC}")


def is_sorted(elements: Sequence[Any] | None, order: str | None = DEFAULT_SORT_ORDER) -> bool:
    """Check that elements are in the given order. Empty and single-item sequences are sorted."""
    ascending = parse_order(order)
    if elements is None or len(elements) <= 1:
        return True
    for i in range(len(elements) - 1):
        if ascending and elements[i] > elements[i + 1]:
            return False
        if not ascending and elements[i] < elements[i + 1]:
            return False
    return True


@dataclass
class SortMetrics:
    """
    Work done by a single sort call.

    Attributes:
        comparison_count: Element comparisons performed
        swap_count: Element swaps performed
        execution_time_ns: Wall time spent sorting (nanoseconds)
    """

    comparison_count: int = 0
    swap_count: int = 0
    execution_time_ns: int = 0


@dataclass
class AlgorithmInfo:
    """Static facts about an algorithm."""

    name: str
    stable: bool
    time_complexity: str
    space_complexity: str
    in_place: bool = False


@dataclass
class SortResult:
    """
    Outcome of a sort call.

    Attributes:
        sorted_elements: New list holding the sorted values
        metrics: Comparison/swap counts and timing
        order: Order that was requested ("asc" or "desc")
        algorithm: Name of the algorithm that produced the result
        timestamp: When the sort ran
    """

    sorted_elements: list[Any]
    metrics: SortMetrics
    order: str
    algorithm: str
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_sorted(self) -> bool:
        return is_sorted(self.sorted_elements, self.order)


@dataclass
class BenchmarkResult:
    """Average sort time over repeated random inputs."""

    algorithm: str
    array_size: int
    iterations: int
    average_time_ns: float


class SortAlgorithm(ABC):
    """
    Abstract base class for comparison sorts.

    Subclasses provide the algorithm body; the base class guarantees the
    copy-returning contract.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'bubble')."""
        ...

    @property
    @abstractmethod
    def info(self) -> AlgorithmInfo:
        """Complexity and stability facts."""
        ...

    @abstractmethod
    def _sort_in_place(self, items: list[Any], ascending: bool, metrics: SortMetrics) -> None:
        """
        Sort items in place, counting work in metrics.

        Args:
            items: Private copy of the caller's elements
            ascending: Sort direction
            metrics: Counters to update (timing is handled by sort())
        """
        ...

    def sort(
        self, elements: Sequence[Any] | None, order: str | None = DEFAULT_SORT_ORDER
    ) -> SortResult:
        """
        Return a sorted copy of elements along with work metrics.

        None is treated as an empty sequence.

        Raises:
            ValueError: If order is not "asc" or "desc"
        """
        ascending = parse_order(order)
        items = list(elements) if elements is not None else []
        metrics = SortMetrics()

        start_ns = time.perf_counter_ns()
        if len(items) > 1:
            self._sort_in_place(items, ascending, metrics)
        metrics.execution_time_ns = time.perf_counter_ns() - start_ns

        return SortResult(
            sorted_elements=items,
            metrics=metrics,
            order=ORDER_ASC if ascending else ORDER_DESC,
            algorithm=self.name,
        )

    @staticmethod
    def _out_of_order(left: Any, right: Any, ascending: bool) -> bool:
        return left > right if ascending else left < right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
