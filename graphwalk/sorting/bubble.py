"""
Bubble sort with early exit.

Repeatedly swaps adjacent out-of-order pairs. After pass i the last i
elements are in their final place; a pass without swaps ends the sort, so
already-sorted input costs a single pass.
"""

from __future__ import annotations

from typing import Any

from graphwalk.sorting.base import AlgorithmInfo, SortAlgorithm, SortMetrics


class BubbleSort(SortAlgorithm):
    """Stable O(n^2) adjacent-swap sort, O(n) on sorted input."""

    @property
    def name(self) -> str:
        return "bubble"

    @property
    def info(self) -> AlgorithmInfo:
        return AlgorithmInfo(
            name="Bubble Sort",
            stable=True,
            time_complexity="O(n^2)",
            space_complexity="O(n)",
        )

    def _sort_in_place(self, items: list[Any], ascending: bool, metrics: SortMetrics) -> None:
        n = len(items)
        for i in range(n - 1):
            swapped = False
            for j in range(n - i - 1):
                metrics.comparison_count += 1
                if self._out_of_order(items[j], items[j + 1], ascending):
                    items[j], items[j + 1] = items[j + 1], items[j]
                    metrics.swap_count += 1
                    swapped = True
            if not swapped:
                break
