import pytest

from algonotes.containers import (
    DEFAULT_STACK_CAPACITY,
    ArrayStack,
    LinkedQueue,
    LinkedStack,
    Vector,
)


def test_stack_is_lifo():
    for stack in (ArrayStack(), LinkedStack()):
        for value in [1, 2, 3, 4]:
            stack.push(value)
        assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]
        assert stack.is_empty()


def test_stack_peek_does_not_remove():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push("a")
        stack.push("b")
        assert stack.peek() == "b"
        assert len(stack) == 2


def test_stack_iterates_top_to_bottom():
    for stack in (ArrayStack(), LinkedStack()):
        for value in [10, 20, 30]:
            stack.push(value)
        assert list(stack) == [30, 20, 10]


def test_array_stack_underflow():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()
    assert len(stack) == 0


def test_linked_stack_underflow():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()
    assert len(stack) == 0


def test_stack_len_tracks_operations():
    for stack in (ArrayStack(), LinkedStack()):
        for value in range(5):
            stack.push(value)
        assert stack.pop() == 4
        assert len(stack) == 4
        assert stack.is_empty() is False


def test_array_stack_default_capacity():
    stack = ArrayStack()
    for value in range(DEFAULT_STACK_CAPACITY):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(-1)
    assert len(stack) == DEFAULT_STACK_CAPACITY


def test_array_stack_custom_capacity():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert stack.pop() == 2
    assert stack.is_full() is False


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=0)


def test_queue_is_fifo():
    queue = LinkedQueue()
    for value in [1, 2, 3]:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_queue_iterates_front_to_rear_and_peeks():
    queue = LinkedQueue()
    for value in "abc":
        queue.enqueue(value)
    assert list(queue) == ["a", "b", "c"]
    assert queue.peek() == "a"
    assert len(queue) == 3


def test_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_queue_underflow():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()
    assert len(queue) == 0


def test_vector_push_and_index():
    vector = Vector()
    for value in range(10):
        vector.push_back(value * 2)
    assert [vector[i] for i in range(len(vector))] == [v * 2 for v in range(10)]
    assert list(vector) == [v * 2 for v in range(10)]


def test_vector_capacity_doubles():
    vector = Vector()
    assert vector.capacity == 1
    for value in range(37):
        vector.push_back(value)
        cap = vector.capacity
        assert cap >= len(vector)
        assert cap & (cap - 1) == 0
        assert cap < 2 * len(vector) or cap == 1


def test_vector_pop_back():
    vector = Vector()
    for value in "xyz":
        vector.push_back(value)
    vector.pop_back()
    assert list(vector) == ["x", "y"]
    assert len(vector) == 2


def test_vector_pop_back_on_empty_is_ignored():
    vector = Vector()
    vector.pop_back()
    assert len(vector) == 0
    assert vector.is_empty()


@pytest.mark.parametrize("index", [3, 100, -1])
def test_vector_index_out_of_range(index):
    vector = Vector()
    for value in range(3):
        vector.push_back(value)
    with pytest.raises(IndexError):
        _ = vector[index]
    assert len(vector) == 3
    assert list(vector) == [0, 1, 2]


def test_vector_index_after_pop_is_out_of_range():
    vector = Vector()
    vector.push_back(5)
    vector.pop_back()
    with pytest.raises(IndexError):
        _ = vector[0]
    assert len(vector) == 0
    assert vector.is_empty() is True