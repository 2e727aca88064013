import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.containers import (
    ArrayQueue,
    ArrayStack,
    LinkedQueue,
    PopCostlyStack,
    PushCostlyStack,
    RecursiveStackQueue,
    TwoStackQueue,
)


def _stacks():
    return [ArrayStack(), PushCostlyStack(), PopCostlyStack()]


def _peek_queues():
    return [ArrayQueue(), LinkedQueue(), TwoStackQueue()]


def _all_queues():
    return [ArrayQueue(), LinkedQueue(), TwoStackQueue(), RecursiveStackQueue()]


def test_stack_intro_sequence():
    for s in (ArrayStack(), PushCostlyStack(), PopCostlyStack()):
        for value in (5, 4, 3, 2):
            s.push(value)
        assert s.top() == 2
        s.pop()
        s.pop()
        s.pop()
        assert s.top() == 5
        assert s.empty() is False
        s.pop()
        assert s.empty() is True


def test_stack_pop_returns_last_pushed():
    for s in (ArrayStack(), PushCostlyStack(), PopCostlyStack()):
        s.push(5)
        s.push(4)
        assert s.pop() == 4
        assert s.pop() == 5


def test_stack_empty_errors():
    for s in (ArrayStack(), PushCostlyStack(), PopCostlyStack()):
        with pytest.raises(IndexError):
            s.pop()
        with pytest.raises(IndexError):
            s.top()


@given(values=st.lists(st.integers(), max_size=50))
def test_stack_is_lifo(values):
    for s in (ArrayStack(), PushCostlyStack(), PopCostlyStack()):
        for value in values:
            s.push(value)
        assert len(s) == len(values)
        popped = [s.pop() for _ in values]
        assert popped == list(reversed(values))
        assert s.empty()


def test_array_stack_overflow():
    s = ArrayStack(capacity=2)
    s.push(1)
    s.push(2)
    with pytest.raises(OverflowError):
        s.push(3)
    assert s.top() == 2


def test_array_stack_default_capacity_is_one_hundred():
    s = ArrayStack()
    for value in range(100):
        s.push(value)
    with pytest.raises(OverflowError):
        s.push(100)


def test_array_stack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=-1)


def test_array_queue_sequence():
    q = ArrayQueue()
    for value in (5, 4, 3, 2):
        q.push(value)
    assert q.peek() == 5
    q.pop()
    assert q.peek() == 4
    assert q.empty() is False


def test_linked_queue_sequence():
    q = LinkedQueue()
    for value in (5, 4, 2):
        q.push(value)
    assert q.peek() == 5
    q.pop()
    assert q.peek() == 4


def test_two_stack_queue_sequence():
    q = TwoStackQueue()
    for value in (1, 2, 3):
        q.push(value)
    assert q.peek() == 1
    q.pop()
    q.pop()
    assert q.peek() == 3


def test_queue_peek_empty_raises():
    for q in (ArrayQueue(), LinkedQueue(), TwoStackQueue()):
        with pytest.raises(IndexError):
            q.peek()


def test_queue_pop_empty_raises():
    for q in (ArrayQueue(), LinkedQueue(), TwoStackQueue(), RecursiveStackQueue()):
        with pytest.raises(IndexError):
            q.pop()
        assert q.empty() is True


@given(values=st.lists(st.integers(), max_size=50))
def test_queue_is_fifo(values):
    for q in (ArrayQueue(), LinkedQueue(), TwoStackQueue(), RecursiveStackQueue()):
        for value in values:
            q.push(value)
        assert len(q) == len(values)
        assert [q.pop() for _ in values] == values
        assert q.empty()


def test_queue_interleaved_operations():
    for q in (ArrayQueue(), LinkedQueue(), TwoStackQueue(), RecursiveStackQueue()):
        q.push(7)
        q.push(8)
        assert q.pop() == 7
        q.push(9)
        assert q.pop() == 8
        assert q.pop() == 9
        assert q.empty()


def test_linked_queue_reusable_after_draining():
    q = LinkedQueue()
    q.push(1)
    q.pop()
    q.push(2)
    q.push(3)
    assert q.pop() == 2
    assert q.peek() == 3


def test_array_queue_capacity_counts_every_push():
    q = ArrayQueue(capacity=2)
    q.push(1)
    q.pop()
    q.push(2)
    with pytest.raises(OverflowError):
        q.push(3)
    assert q.peek() == 2


def test_array_queue_default_capacity_is_one_hundred():
    q = ArrayQueue()
    for value in range(100):
        q.push(value)
    with pytest.raises(OverflowError):
        q.push(100)
    assert len(q) == 100