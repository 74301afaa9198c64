import pytest

from algodojo.containers import BoundedQueue, BoundedStack, MinStack


def test_queue_is_fifo():
    queue = BoundedQueue()
    for item in [4, 8, 15]:
        queue.enqueue(item)
    assert [queue.dequeue() for _ in range(3)] == [4, 8, 15]
    assert len(queue) == 0


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        BoundedQueue().dequeue()


def test_queue_full_raises():
    queue = BoundedQueue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_queue_slots_return_only_after_draining():
    queue = BoundedQueue(capacity=2)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    with pytest.raises(OverflowError):
        queue.enqueue("c")
    assert queue.dequeue() == "b"
    queue.enqueue("c")
    assert queue.dequeue() == "c"


def test_queue_default_capacity_is_one_hundred():
    queue = BoundedQueue()
    for item in range(100):
        queue.enqueue(item)
    with pytest.raises(OverflowError):
        queue.enqueue(100)
    assert len(queue) == 100


def test_stack_is_lifo():
    stack = BoundedStack()
    for item in [1, 2, 3]:
        stack.push(item)
    assert stack.top() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]


def test_stack_overflow():
    stack = BoundedStack(capacity=1)
    stack.push(7)
    with pytest.raises(OverflowError, match="stack overflow"):
        stack.push(8)
    assert stack.top() == 7


def test_stack_underflow():
    stack = BoundedStack()
    with pytest.raises(IndexError, match="stack underflow"):
        stack.pop()
    with pytest.raises(IndexError, match="stack underflow"):
        stack.top()


def test_min_stack_tracks_minimum():
    stack = MinStack()
    stack.push(5)
    stack.push(3)
    stack.push(7)
    assert stack.minimum() == 3
    assert stack.pop() == 7
    assert stack.minimum() == 3
    assert stack.pop() == 3
    assert stack.minimum() == 5


def test_min_stack_duplicate_minimums():
    stack = MinStack()
    for item in [2, 2, 9]:
        stack.push(item)
    stack.pop()
    stack.pop()
    assert stack.minimum() == 2
    assert len(stack) == 1


def test_min_stack_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.minimum()