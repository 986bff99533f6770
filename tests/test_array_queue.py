import pytest

from algoshelf.array_queue import ArrayQueue


def filled(capacity, *values):
    queue = ArrayQueue(capacity)
    for value in values:
        queue.enqueue(value)
    return queue


def test_fifo_order():
    queue = filled(4, 1, 2, 3)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_full_queue_rejects_enqueue():
    queue = filled(2, 1, 2)
    assert queue.is_full()
    with pytest.raises(IndexError):
        queue.enqueue(3)


def test_empty_dequeue_raises():
    with pytest.raises(IndexError):
        ArrayQueue(3).dequeue()


def test_slots_include_free_zeros():
    assert filled(4, 5, 6).slots() == [5, 6, 0, 0]


def test_render_lists_every_slot():
    assert filled(3, 5, 6).render() == "5-6-0-"


def test_dequeue_shifts_values_forward():
    queue = filled(3, 4, 8, 9)
    queue.dequeue()
    assert queue.slots() == [8, 9, 0]
    assert not queue.is_full()


def test_update_drops_values_in_front():
    queue = filled(4, 1, 2, 3, 4)
    queue.update(2, 9)
    assert queue.slots() == [9, 4, 0, 0]


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_update_out_of_range(index):
    with pytest.raises(IndexError):
        filled(4, 1, 2).update(index, 7)


def test_count_skips_zero_slots():
    queue = filled(4, 0, 7)
    assert queue.count() == 1


def test_peek_reads_slot():
    queue = filled(3, 10, 20)
    assert queue.peek(1) == 20
    assert queue.peek(2) == 0
    with pytest.raises(IndexError):
        queue.peek(3)


def test_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-1)