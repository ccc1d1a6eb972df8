import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.errors import CapacityError, EmptyError
from algokit.stacks import (
    DEFAULT_CAPACITY,
    REVERSE_CAPACITY,
    BoundedStack,
    reverse_string,
)


def test_default_capacity_is_five():
    stack = BoundedStack()
    assert stack.capacity == 5
    assert DEFAULT_CAPACITY == stack.capacity


def test_push_then_peek_returns_last_pushed():
    stack = BoundedStack()
    for value in (2, 4, 6):
        stack.push(value)
    assert stack.peek() == 6
    assert len(stack) == 3


def test_iteration_runs_top_to_bottom():
    stack = BoundedStack()
    for value in (89, 58, 19, 23, 45):
        stack.push(value)
    assert list(stack) == [45, 23, 19, 58, 89]


def test_pop_returns_values_in_reverse_order():
    stack = BoundedStack()
    for value in (89, 58, 19):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [19, 58, 89]
    assert stack.is_empty()


def test_overflow_raises_capacity_error_and_keeps_contents():
    stack = BoundedStack()
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(CapacityError):
        stack.push(60)
    assert list(stack) == [50, 40, 30, 20, 10]


def test_pop_empty_raises():
    with pytest.raises(EmptyError):
        BoundedStack().pop()


def test_peek_empty_raises():
    with pytest.raises(EmptyError):
        BoundedStack().peek()


def test_peek_does_not_remove():
    stack = BoundedStack(3)
    stack.push(7)
    assert stack.peek() == 7
    assert stack.peek() == 7
    assert len(stack) == 1


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        BoundedStack(capacity)


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_push_pop_round_trip(values):
    stack = BoundedStack(len(values))
    for value in values:
        stack.push(value)
    assert stack.is_full()
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


def test_reverse_string_source_example():
    assert reverse_string("SRINAGAR") == "RAGANIRS"


def test_reverse_empty_string():
    assert reverse_string("") == ""


@given(st.text(max_size=REVERSE_CAPACITY))
def test_reverse_string_twice_is_identity(text):
    once = reverse_string(text)
    assert len(once) == len(text)
    assert reverse_string(once) == text


def test_reverse_string_at_capacity():
    text = "ab" * (REVERSE_CAPACITY // 2)
    assert reverse_string(reverse_string(text)) == text


def test_reverse_string_over_capacity_raises():
    with pytest.raises(CapacityError):
        reverse_string("x" * (REVERSE_CAPACITY + 1))