"""
Selection sort.

Grows a sorted prefix one element at a time by selecting the smallest (or
largest, for descending order) element of the unsorted tail.
"""

from __future__ import annotations

from typing import Any

from graphwalk.sorting.base import AlgorithmInfo, SortAlgorithm, SortMetrics


class SelectionSort(SortAlgorithm):
    """O(n^2) in every case; at most n - 1 swaps. Not stable."""

    @property
    def name(self) -> str:
        return "selection"

    @property
    def info(self) -> AlgorithmInfo:
        return AlgorithmInfo(
            name="Selection Sort",
            stable=False,
            time_complexity="O(n^2)",
            space_complexity="O(n)",
        )

    def _sort_in_place(self, items: list[Any], ascending: bool, metrics: SortMetrics) -> None:
        n = len(items)
        for i in range(n - 1):
            best = i
            for j in range(i + 1, n):
                metrics.comparison_count += 1
                if self._out_of_order(items[best], items[j], ascending):
                    best = j

            # Only swap when a better element was found
            if best != i:
                items[i], items[best] = items[best], items[i]
                metrics.swap_count += 1
