"""Suffix arrays built by prefix doubling over cyclic shifts, and pattern search with them."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import pairwise
from typing import Sequence


def sort_characters(text: str) -> list[int]:
    """Positions of ``text`` ordered by character; equal characters keep their order."""
    return sorted(range(len(text)), key=text.__getitem__)


def character_classes(text: str, order: Sequence[int]) -> list[int]:
    """Class of each position: equal characters share a class, classes rise with the character."""
    classes = [0] * len(text)
    for prev, cur in pairwise(order):
        classes[cur] = classes[prev] + (text[cur] != text[prev])
    return classes


def sort_doubled(text: str, length: int, order: Sequence[int], classes: Sequence[int]) -> list[int]:
    """Order of the cyclic shifts of size ``2 * length``, given the order of those of ``length``."""
    n = len(text)
    starts = ((position - length) % n for position in order)
    return sorted(starts, key=classes.__getitem__)


def update_classes(order: Sequence[int], classes: Sequence[int], length: int) -> list[int]:
    """Classes of the cyclic shifts of size ``2 * length`` from their order and the old classes."""
    n = len(order)
    new_classes = [0] * n
    for prev, cur in pairwise(order):
        same = (
            classes[cur] == classes[prev]
            and classes[(cur + length) % n] == classes[(prev + length) % n]
        )
        new_classes[cur] = new_classes[prev] + (not same)
    return new_classes


def build_suffix_array(text: str) -> list[int]:
    """Start positions of the cyclic shifts of ``text`` in sorted order.

    When ``text`` ends with a unique smallest character such as ``$``,
    this is the suffix array.
    """
    if not text:
        return []
    order = sort_characters(text)
    classes = character_classes(text, order)
    length = 1
    while length <= len(text):
        order = sort_doubled(text, length, order, classes)
        classes = update_classes(order, classes, length)
        length *= 2
    return order


def find_occurrences(text: str, pattern: str, order: Sequence[int] | None = None) -> list[int]:
    """Sorted start positions of ``pattern`` in ``text`` found through its suffix array."""
    if order is None:
        order = build_suffix_array(text)
    size = len(pattern)

    def prefix(position: int) -> str:
        return text[position:position + size]

    low = bisect_left(order, pattern, key=prefix)
    high = bisect_right(order, pattern, key=prefix)
    return sorted(order[low:high])