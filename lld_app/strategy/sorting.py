"""Interchangeable sorting algorithms behind one interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)


class SortStrategy(ABC):
    """Sorts a list and returns a new list, leaving the input untouched."""

    name: str = "sort"

    @abstractmethod
    def sort(self, items: list[Any]) -> list[Any]:
        pass


class BubbleSort(SortStrategy):
    name = "bubble"

    def sort(self, items: list[Any]) -> list[Any]:
        result = list(items)
        n = len(result)
        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                if result[j] > result[j + 1]:
                    result[j], result[j + 1] = result[j + 1], result[j]
                    swapped = True
            if not swapped:
                break
        return result


class MergeSort(SortStrategy):
    name = "merge"

    def sort(self, items: list[Any]) -> list[Any]:
        if len(items) <= 1:
            return list(items)

        middle = len(items) // 2
        left = self.sort(items[:middle])
        right = self.sort(items[middle:])

        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            # <= keeps the sort stable
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


class QuickSort(SortStrategy):
    name = "quick"

    def sort(self, items: list[Any]) -> list[Any]:
        if len(items) <= 1:
            return list(items)

        pivot = items[len(items) // 2]
        less = [item for item in items if item < pivot]
        equal = [item for item in items if item == pivot]
        greater = [item for item in items if item > pivot]
        return self.sort(less) + equal + self.sort(greater)


class Sorter:
    """Context object that sorts with whichever strategy it currently holds."""

    def __init__(self, strategy: Optional[SortStrategy] = None) -> None:
        self.strategy = strategy or MergeSort()

    def set_strategy(self, strategy: SortStrategy) -> None:
        self.strategy = strategy

    def sort(self, items: list[Any]) -> list[Any]:
        logger.debug("Sorting", strategy=self.strategy.name, size=len(items))
        return self.strategy.sort(items)
