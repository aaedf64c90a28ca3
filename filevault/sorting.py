"""Ordering of file records: a quicksort with pluggable comparisons."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from .models import FileRecord

T = TypeVar("T")


def quicksort(items: Iterable[T], compare: Callable[[T, T], int]) -> list[T]:
    """Return a new list of ``items`` ordered by ``compare``.

    Uses Lomuto partitioning with the last element as pivot; elements for
    which ``compare(item, pivot) <= 0`` go to the left of the pivot.
    """
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[high]
        boundary = low
        for j in range(low, high):
            if compare(result[j], pivot) <= 0:
                result[boundary], result[j] = result[j], result[boundary]
                boundary += 1
        result[boundary], result[high] = result[high], result[boundary]
        pending.append((boundary + 1, high))
        pending.append((low, boundary - 1))
    return result


def to_lowercase(text: str) -> str:
    """Lower-case the ASCII letters A-Z, leaving every other character alone."""
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text
    )


def compare_file_name(a: FileRecord, b: FileRecord) -> int:
    """Compare records by name, ignoring ASCII case; negative if ``a`` first."""
    name_a = to_lowercase(a.name)
    name_b = to_lowercase(b.name)
    return (name_a > name_b) - (name_a < name_b)


def compare_file_size(a: FileRecord, b: FileRecord) -> int:
    """Compare records so that larger files come first."""
    if a.file_size < b.file_size:
        return 1
    if a.file_size > b.file_size:
        return -1
    return 0


def sort_by_name(files: Iterable[FileRecord]) -> list[FileRecord]:
    """Return the records in alphabetical order of name."""
    return quicksort(files, compare_file_name)


def sort_by_size(files: Iterable[FileRecord]) -> list[FileRecord]:
    """Return the records from largest to smallest file size."""
    return quicksort(files, compare_file_size)