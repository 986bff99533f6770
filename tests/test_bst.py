import random

from algoshelf.bst import BSTNode, build, height, in_order, insert


def test_empty_tree():
    assert build([]) is None
    assert height(None) == 0
    assert in_order(None) == []


def test_insert_into_empty_returns_new_root():
    root = insert(None, 5)
    assert root.value == 5
    assert root.left is None and root.right is None


def test_in_order_is_sorted():
    rng = random.Random(7)
    values = [rng.randint(0, 100) for _ in range(60)]
    assert in_order(build(values)) == sorted(values)


def test_sorted_input_makes_a_chain():
    values = list(range(1, 21))
    assert height(build(values)) == len(values)


def test_balanced_shape_height():
    assert height(build([2, 1, 3])) == 2


def test_equal_values_go_left():
    root = build([5, 5])
    assert root.left is not None and root.left.value == 5
    assert root.right is None


def test_insert_keeps_root():
    root = BSTNode(10)
    assert insert(root, 20) is root
    assert insert(root, 1) is root
    assert in_order(root) == [1, 10, 20]


def test_long_chain_does_not_overflow():
    values = list(range(3000, 0, -1))
    root = build(values)
    assert height(root) == 3000
    assert in_order(root) == sorted(values)