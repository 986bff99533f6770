"""Stack utilities: a stack that tracks its maximum, and recursive-style stack transforms.

Stacks given as sequences have their top at the end.
"""

from __future__ import annotations

from typing import Iterable, Sequence


class MaxStack:
    """Stack that reports its largest value in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        current = value if not self._entries else max(value, self._entries[-1][1])
        self._entries.append((value, current))

    def pop(self) -> int:
        if not self._entries:
            raise IndexError("pop from empty stack")
        return self._entries.pop()[0]

    def max(self) -> int:
        if not self._entries:
            raise IndexError("max of empty stack")
        return self._entries[-1][1]

    def __len__(self) -> int:
        return len(self._entries)


def run_max_queries(lines: Iterable[str]) -> list[int]:
    """Run ``push N`` / ``pop`` / ``max`` queries; return the answers to ``max``.

    A ``max`` on an empty stack gives no answer; unknown queries are ignored.
    """
    stack = MaxStack()
    answers: list[int] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        query = parts[0]
        if query == "push":
            stack.push(int(parts[1]))
        elif query == "pop":
            stack.pop()
        elif query == "max" and len(stack):
            answers.append(stack.max())
    return answers


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack sorted so that the largest value is on top."""
    result: list[int] = []
    for value in stack:
        held: list[int] = []
        while result and result[-1] > value:
            held.append(result.pop())
        result.append(value)
        result.extend(reversed(held))
    return result


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return the stack without the element ``len // 2`` places below the top."""
    items = list(stack)
    if not items:
        raise IndexError("cannot delete from an empty stack")
    del items[len(items) - 1 - len(items) // 2]
    return items


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack with its order reversed."""
    return list(reversed(stack))