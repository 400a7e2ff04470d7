import pytest

from algolab.queues import (
    BoundedDeque,
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    QueueOverflowError,
    QueueUnderflowError,
)


def test_linear_queue_worked_example():
    queue = LinearQueue()
    for value in (4, 6, 5):
        queue.enqueue(value)
    assert list(queue) == [4, 6, 5]
    assert queue.dequeue() == 4
    queue.enqueue(89)
    assert list(queue) == [6, 5, 89]
    assert queue.dequeue() == 6
    assert list(queue) == [5, 89]
    assert len(queue) == 2


def test_linear_queue_does_not_reuse_slots():
    queue = LinearQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)


def test_linear_queue_underflow():
    with pytest.raises(QueueUnderflowError):
        LinearQueue().dequeue()


def test_circular_queue_worked_example():
    queue = CircularQueue()
    for value in (5, 4, 6):
        queue.enqueue(value)
    assert list(queue) == [5, 4, 6]
    assert queue.dequeue() == 5
    assert list(queue) == [4, 6]
    queue.enqueue(5)
    assert list(queue) == [4, 6, 5]


def test_circular_queue_wraps_around():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(4)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3


def test_circular_queue_preserves_order_through_many_cycles():
    queue = CircularQueue(4)
    taken = []
    for value in range(20):
        queue.enqueue(value)
        if len(queue) == 4:
            taken.append(queue.dequeue())
    while len(queue):
        taken.append(queue.dequeue())
    assert taken == list(range(20))
    with pytest.raises(QueueUnderflowError):
        queue.dequeue()


def test_deque_worked_example():
    deque = BoundedDeque()
    for value in (2, 3, 4, 5):
        deque.push_back(value)
    assert list(deque) == [2, 3, 4, 5]
    assert deque.pop_front() == 2
    assert list(deque) == [3, 4, 5]
    deque.push_front(10)
    assert list(deque) == [10, 3, 4, 5]
    assert deque.pop_back() == 5
    assert list(deque) == [10, 3, 4]


def test_deque_cannot_push_before_first_slot():
    deque = BoundedDeque(5)
    deque.push_back(1)
    with pytest.raises(QueueOverflowError):
        deque.push_front(0)
    assert list(deque) == [1]


def test_deque_overflow_at_rear():
    deque = BoundedDeque(2)
    deque.push_back(1)
    deque.push_back(2)
    with pytest.raises(QueueOverflowError):
        deque.push_back(3)
    assert len(deque) == 2


def test_deque_empties_and_underflows():
    deque = BoundedDeque(3)
    deque.push_front(7)
    assert deque.pop_back() == 7
    assert len(deque) == 0
    with pytest.raises(QueueUnderflowError):
        deque.pop_front()
    with pytest.raises(QueueUnderflowError):
        deque.pop_back()
    deque.push_back(8)
    assert list(deque) == [8]


def test_linked_queue_worked_example():
    queue = LinkedQueue()
    for value in (2, 3, 4, 5, 6):
        queue.enqueue(value)
    assert list(queue) == [2, 3, 4, 5, 6]
    assert queue.dequeue() == 2
    assert list(queue) == [3, 4, 5, 6]
    assert len(queue) == 4


def test_linked_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    with pytest.raises(QueueUnderflowError):
        queue.dequeue()
    queue.enqueue(9)
    assert list(queue) == [9]