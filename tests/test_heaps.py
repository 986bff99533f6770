import operator

import pytest

from algoshelf.heaps import MaxHeap, MinHeap, heap_sort

VALUES = [5, 3, 17, 10, 84, 19, 6, 22, 9]


def obeys_heap_order(items, outranks_or_equal):
    return all(
        outranks_or_equal(items[(i - 1) // 2], items[i]) for i in range(1, len(items))
    )


def make(cls, values=VALUES):
    heap = cls(len(values))
    for value in values:
        heap.insert(value)
    return heap


def test_max_heap_extracts_descending():
    heap = MaxHeap(len(VALUES))
    for value in VALUES:
        heap.insert(value)
    assert obeys_heap_order(heap.items(), operator.ge)
    assert [heap.extract_max() for _ in range(len(VALUES))] == sorted(VALUES, reverse=True)
    assert len(heap) == 0


def test_min_heap_extracts_ascending():
    heap = MinHeap(len(VALUES))
    for value in VALUES:
        heap.insert(value)
    assert obeys_heap_order(heap.items(), operator.le)
    assert [heap.extract_min() for _ in range(len(VALUES))] == sorted(VALUES)


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_full_heap_rejects_insert(cls):
    heap = make(cls, [1, 2])
    with pytest.raises(IndexError):
        heap.insert(3)
    assert len(heap) == 2


def test_empty_extract_raises():
    with pytest.raises(IndexError):
        MaxHeap(3).extract_max()
    with pytest.raises(IndexError):
        MinHeap(3).extract_min()


@pytest.mark.parametrize("cls,order", [(MaxHeap, operator.ge), (MinHeap, operator.le)])
@pytest.mark.parametrize("position", range(len(VALUES)))
def test_remove_position(cls, order, position):
    heap = make(cls)
    target = heap.items()[position]
    assert heap.remove(position) == target
    remaining = list(VALUES)
    remaining.remove(target)
    assert sorted(heap.items()) == sorted(remaining)
    assert obeys_heap_order(heap.items(), order)


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_remove_bad_position(cls):
    heap = make(cls, [1, 2])
    with pytest.raises(IndexError):
        heap.remove(2)
    with pytest.raises(IndexError):
        cls(2).remove(0)


@pytest.mark.parametrize("cls,order", [(MaxHeap, operator.ge), (MinHeap, operator.le)])
@pytest.mark.parametrize("new_value", [-100, 0, 12, 1000])
def test_change_priority(cls, order, new_value):
    heap = make(cls)
    old = heap.items()[4]
    heap.change_priority(4, new_value)
    expected = list(VALUES)
    expected.remove(old)
    expected.append(new_value)
    assert sorted(heap.items()) == sorted(expected)
    assert obeys_heap_order(heap.items(), order)


def test_change_priority_bad_position():
    heap = MaxHeap(1)
    heap.insert(1)
    with pytest.raises(IndexError):
        heap.change_priority(1, 5)
    assert heap.items() == [1]


@pytest.mark.parametrize("values", [[], [1], [2, 1], VALUES, [4, 4, -1, 0, 4, 3]])
def test_heap_sort(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_leaves_input():
    values = [3, 1, 2]
    assert heap_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_negative_capacity():
    with pytest.raises(ValueError):
        MaxHeap(-1)