"""Records to sort and the classic comparison sorts that order them by value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class WordSum:
    """A sort key, optionally together with the word it was computed from."""

    word: Optional[str]
    sum: int

    @classmethod
    def from_word(cls, word: str) -> "WordSum":
        """Build a record keyed by the positional character value of ``word``."""
        return cls(word, word_value(word))

    @classmethod
    def from_number(cls, value: int) -> "WordSum":
        """Build a record keyed by a plain number."""
        return cls(None, value)


def word_value(word: str) -> int:
    """Sum of each character's code multiplied by its 1-based position."""
    return sum(ord(ch) * position for position, ch in enumerate(word, start=1))


def bubble_sort(items: List[WordSum]) -> None:
    """Sort in place by repeatedly swapping adjacent out-of-order pairs."""
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j].sum > items[j + 1].sum:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def selection_sort(items: List[WordSum]) -> None:
    """Sort in place by moving the smallest remaining record to the front."""
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=lambda k: items[k].sum)
        items[smallest], items[i] = items[i], items[smallest]


def insertion_sort(items: List[WordSum]) -> None:
    """Sort in place by inserting each record into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j].sum > key.sum:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def _merge(items: List[WordSum], low: int, mid: int, high: int) -> None:
    left = items[low : mid + 1]
    right = items[mid + 1 : high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i].sum <= right[j].sum:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    items[k : high + 1] = left[i:] + right[j:]


def _merge_sort(items: List[WordSum], low: int, high: int) -> None:
    if low < high:
        mid = low + (high - low) // 2
        _merge_sort(items, low, mid)
        _merge_sort(items, mid + 1, high)
        _merge(items, low, mid, high)


def merge_sort(items: List[WordSum]) -> None:
    """Sort in place by recursive halving and stable merging."""
    _merge_sort(items, 0, len(items) - 1)


def _partition(items: List[WordSum], low: int, high: int) -> int:
    pivot = items[high].sum
    i = low - 1
    for j in range(low, high):
        if items[j].sum < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: List[WordSum]) -> None:
    """Sort in place with Lomuto partitioning around the last record."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))


def shell_sort(items: List[WordSum]) -> None:
    """Sort in place with gapped insertion, halving the gap each pass."""
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = items[i]
            j = i
            while j >= gap and items[j - gap].sum > temp.sum:
                items[j] = items[j - gap]
                j -= gap
            items[j] = temp
        gap //= 2


def format_items(items: Iterable[WordSum]) -> str:
    """Render records as ``(word, sum)`` pairs, ``NULL`` standing for no word."""
    return "".join(
        f"({item.word if item.word is not None else 'NULL'}, {item.sum}) "
        for item in items
    )