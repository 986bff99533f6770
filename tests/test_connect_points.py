import math

import pytest

from algoshelf.connect_points import Point, minimum_connection_length

SAMPLE = [(0, 0), (0, 2), (1, 1), (3, 0), (3, 2)]


def test_unit_square():
    assert minimum_connection_length([(0, 0), (0, 1), (1, 0), (1, 1)]) == pytest.approx(3.0)


def test_five_point_sample():
    assert minimum_connection_length(SAMPLE) == pytest.approx(7.064495102, abs=1e-8)


def test_single_point():
    assert minimum_connection_length([Point(4, 4)]) == 0.0


def test_two_points_is_their_distance():
    assert minimum_connection_length([Point(0, 0), Point(3, 4)]) == pytest.approx(math.dist((0, 0), (3, 4)))


def test_point_and_tuple_inputs_agree():
    as_points = [Point(x, y) for x, y in SAMPLE]
    assert minimum_connection_length(as_points) == minimum_connection_length(SAMPLE)


def test_permutation_and_translation_invariant():
    base = minimum_connection_length(SAMPLE)
    assert minimum_connection_length(list(reversed(SAMPLE))) == pytest.approx(base)
    assert minimum_connection_length([(x + 7, y - 3) for x, y in SAMPLE]) == pytest.approx(base)


def test_scaling_scales_length():
    base = minimum_connection_length(SAMPLE)
    assert minimum_connection_length([(2 * x, 2 * y) for x, y in SAMPLE]) == pytest.approx(2 * base)


def test_not_longer_than_chain():
    chain = sum(math.dist(a, b) for a, b in zip(SAMPLE, SAMPLE[1:]))
    assert minimum_connection_length(SAMPLE) <= chain + 1e-12


def test_duplicate_point_adds_nothing():
    assert minimum_connection_length(SAMPLE + [SAMPLE[0]]) == pytest.approx(minimum_connection_length(SAMPLE))