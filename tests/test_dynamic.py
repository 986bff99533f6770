import random

import pytest

from algoshelf.dynamic import (
    knapsack,
    knapsack_compact,
    matrix_chain_cost,
    rod_cutting,
    subset_sum,
    subset_sum_table,
)


def test_knapsack_classic_example():
    assert knapsack([60, 100, 120], [10, 20, 30], 50) == 220


@pytest.mark.parametrize("seed", range(6))
def test_knapsack_variants_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(0, 10)
    values = [rng.randint(1, 40) for _ in range(n)]
    weights = [rng.randint(0, 15) for _ in range(n)]
    capacity = rng.randint(0, 40)
    assert knapsack(values, weights, capacity) == knapsack_compact(values, weights, capacity)


def test_knapsack_everything_fits():
    values, weights = [3, 4, 5], [1, 2, 3]
    assert knapsack(values, weights, sum(weights)) == sum(values)
    assert knapsack_compact(values, weights, sum(weights)) == sum(values)


def test_knapsack_zero_capacity():
    assert knapsack([5, 6], [1, 2], 0) == 0
    assert knapsack_compact([5, 6], [1, 2], 0) == 0


@pytest.mark.parametrize("solver", [knapsack, knapsack_compact])
def test_knapsack_bad_input(solver):
    with pytest.raises(ValueError):
        solver([1, 2], [1], 5)
    with pytest.raises(ValueError):
        solver([1], [1], -1)
    with pytest.raises(ValueError):
        solver([1], [-2], 3)


def test_rod_cutting_classic_example():
    assert rod_cutting([1, 5, 8, 9, 10, 17, 17, 20]) == 22


def test_rod_cutting_lower_bounds():
    prices = [3, 5, 9, 9, 10]
    best = rod_cutting(prices)
    assert best >= prices[-1]
    assert best >= len(prices) * prices[0]


def test_rod_cutting_empty_and_negative():
    assert rod_cutting([]) == 0
    assert rod_cutting([-1, -2]) == 0


def test_subset_sum_table_shape_and_edges():
    nums, target = [3, 34, 4, 12, 5, 2], 9
    table = subset_sum_table(nums, target)
    assert len(table) == len(nums) + 1
    assert all(len(row) == target + 1 for row in table)
    assert all(row[0] for row in table)
    assert not any(table[0][1:])


def test_subset_sum_totals():
    nums = [3, 34, 4, 12, 5, 2]
    assert subset_sum(nums, sum(nums)) is True
    assert subset_sum(nums, sum(nums) + 1) is False
    assert all(subset_sum(nums, num) for num in nums)


def test_subset_sum_bad_input():
    with pytest.raises(ValueError):
        subset_sum([1, 2], -1)
    with pytest.raises(ValueError):
        subset_sum([1, -2], 3)


def test_matrix_chain_classic_example():
    assert matrix_chain_cost([40, 20, 30, 10, 30]) == 26000


def test_matrix_chain_trivial_chains():
    assert matrix_chain_cost([]) == 0
    assert matrix_chain_cost([10, 20]) == 0


def test_matrix_chain_never_worse_than_left_to_right():
    dims = [5, 10, 3, 12, 5, 50, 6]
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))
    assert matrix_chain_cost(dims) <= left_to_right