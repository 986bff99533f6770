"""Dynamic-programming classics: knapsack, rod cutting, subset sum, matrix chains."""

from __future__ import annotations

from typing import Sequence


def _check_knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of items, each used at most once, within ``capacity``."""
    _check_knapsack(values, weights, capacity)
    previous = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        previous = [
            previous[w] if weight > w else max(previous[w], value + previous[w - weight])
            for w in range(capacity + 1)
        ]
    return previous[capacity]


def knapsack_compact(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Same answer as :func:`knapsack`, using a single row of memory."""
    _check_knapsack(values, weights, capacity)
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for w in range(capacity, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]


def rod_cutting(prices: Sequence[int]) -> int:
    """Best revenue from a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``; pieces may
    repeat and part of the rod may be left unsold.
    """
    best = [0] * (len(prices) + 1)
    for length in range(1, len(prices) + 1):
        best[length] = max(
            [best[length - 1]] + [prices[piece - 1] + best[length - piece] for piece in range(1, length + 1)]
        )
    return best[-1]


def subset_sum_table(nums: Sequence[int], target: int) -> list[list[bool]]:
    """Table whose cell ``[i][j]`` says if some of the first ``i`` numbers sum to ``j``."""
    if target < 0:
        raise ValueError("target must not be negative")
    if any(num < 0 for num in nums):
        raise ValueError("numbers must not be negative")
    rows = [[True] + [False] * target]
    for num in nums:
        previous = rows[-1]
        rows.append([previous[j] or (num <= j and previous[j - num]) for j in range(target + 1)])
    return rows


def subset_sum(nums: Sequence[int], target: int) -> bool:
    """Whether some subset of ``nums`` adds up to ``target``."""
    return subset_sum_table(nums, target)[-1][target]


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    count = len(dims) - 1
    if count <= 1:
        return 0
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for i in range(count - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1] for k in range(i, j)
            )
    return cost[0][count - 1]