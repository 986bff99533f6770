"""Maximum of every window of fixed width over a sequence."""

from __future__ import annotations

from collections import deque
from typing import Iterable


def sliding_window_max(values: Iterable[int], width: int) -> list[int]:
    """Return the maximum of each run of ``width`` consecutive values."""
    items = list(values)
    if width <= 0 or width > len(items):
        raise ValueError("width must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(items):
        while window and items[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - width:
            window.popleft()
        if i >= width - 1:
            maxima.append(items[window[0]])
    return maxima