"""Sorting algorithms that yield a frame for every visible step."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterator, MutableSequence, Optional, Union

from .events import Controls

ARRAY_SIZE = 70
MAX_VALUE = 100


@dataclass(frozen=True)
class Frame:
    """A snapshot of the array with the indices to highlight."""

    values: tuple
    current: Optional[int]
    second: Optional[int]
    mode: str


class Algorithm(IntEnum):
    """The algorithms on offer, numbered as in the menus."""

    SELECTION = 1
    INSERTION = 2
    BUBBLE = 3
    MERGE = 4
    QUICK = 5
    HEAP = 6

    @property
    def mode(self) -> str:
        return self.name.lower()

    @property
    def label(self) -> str:
        return f"{self.name.capitalize()} Sort"

    @property
    def title(self) -> str:
        return f"{self.label} Visualizer"


def _frame(values: MutableSequence[int], current, second, mode: str) -> Frame:
    return Frame(tuple(values), current, second, mode)


def selection_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place by selection, yielding each step."""
    n = len(values)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if values[j] < values[smallest]:
                smallest = j
            yield _frame(values, j, smallest, "selection")
        values[i], values[smallest] = values[smallest], values[i]
        yield _frame(values, i, smallest, "selection")


def insertion_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place by insertion, yielding each step."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            yield _frame(values, i, j + 1, "insertion")
            j -= 1
        values[j + 1] = key
        yield _frame(values, j + 1, i, "insertion")


def bubble_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place by bubbling, yielding each comparison."""
    n = len(values)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
            yield _frame(values, j, j + 1, "bubble")


def _merge(values, left: int, mid: int, right: int) -> Iterator[Frame]:
    lower = list(values[left : mid + 1])
    upper = list(values[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(lower) and j < len(upper):
        if lower[i] <= upper[j]:
            values[k] = lower[i]
            i += 1
        else:
            values[k] = upper[j]
            j += 1
        k += 1
        yield _frame(values, k - 1, None, "merge")
    for rest in (lower[i:], upper[j:]):
        for item in rest:
            values[k] = item
            k += 1
            yield _frame(values, k - 1, None, "merge")


def _merge_sort(values, left: int, right: int) -> Iterator[Frame]:
    if left < right:
        mid = left + (right - left) // 2
        yield from _merge_sort(values, left, mid)
        yield from _merge_sort(values, mid + 1, right)
        yield from _merge(values, left, mid, right)


def merge_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place by top-down merging, yielding each write."""
    yield from _merge_sort(values, 0, len(values) - 1)


def _quick_sort(values, low: int, high: int) -> Iterator[Frame]:
    if low < high:
        pivot = values[high]
        i = low - 1
        for j in range(low, high):
            if values[j] < pivot:
                i += 1
                values[i], values[j] = values[j], values[i]
                yield _frame(values, i, j, "quick")
            yield _frame(values, j, high, "quick")
        values[i + 1], values[high] = values[high], values[i + 1]
        yield _frame(values, i + 1, high, "quick")
        yield from _quick_sort(values, low, i)
        yield from _quick_sort(values, i + 2, high)


def quick_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place by quicksort with the last element as pivot."""
    yield from _quick_sort(values, 0, len(values) - 1)


def _heapify(values, size: int, root: int) -> Iterator[Frame]:
    largest = root
    left = 2 * root + 1
    right = 2 * root + 2
    if left < size and values[left] > values[largest]:
        largest = left
    if right < size and values[right] > values[largest]:
        largest = right
    if largest != root:
        values[root], values[largest] = values[largest], values[root]
        yield _frame(values, largest, root, "heap")
        yield from _heapify(values, size, largest)


def heap_sort(values: MutableSequence[int]) -> Iterator[Frame]:
    """Sort values in place with a max-heap, yielding each step."""
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(values, n, i)
        yield _frame(values, i, None, "heap")
    for i in range(n - 1, 0, -1):
        values[0], values[i] = values[i], values[0]
        yield _frame(values, i, None, "heap")
        yield from _heapify(values, i, 0)


_SORTS: dict = {
    Algorithm.SELECTION: selection_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
    Algorithm.HEAP: heap_sort,
}


def random_values(count: int = ARRAY_SIZE, rng: Optional[random.Random] = None) -> list:
    """Return count random integers in the range 0..99."""
    rng = rng or random.Random()
    return [rng.randrange(MAX_VALUE) for _ in range(count)]


def frames_for(
    algorithm: Union[Algorithm, int], values: MutableSequence[int]
) -> Iterator[Frame]:
    """Return the frame generator of an algorithm; ValueError if unknown."""
    return _SORTS[Algorithm(algorithm)](values)


def run_sort(
    algorithm: Union[Algorithm, int],
    values: MutableSequence[int],
    controls: Controls,
    on_frame: Callable[[Frame], object],
) -> bool:
    """Play a sort step by step under the given controls.

    Returns True if the sort ran to the end, False if it was stopped.
    """
    steps = frames_for(algorithm, values)
    while True:
        if not controls.wait_for_resume():
            return False
        frame = next(steps, None)
        if frame is None:
            return True
        on_frame(frame)
        controls.sleep()