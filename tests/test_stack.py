import copy

import pytest

from fungeplus.config import FungeConfig
from fungeplus.stack import (
    Stack,
    StackStack,
    pop_string,
    pop_vector,
    push_string,
    push_vector,
)
from fungeplus.vector import Vector


@pytest.fixture
def config():
    return FungeConfig()


def test_push_pop_is_lifo(config):
    s = Stack(config)
    for value in (1, 2, 3):
        s.push(value)
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]


def test_empty_stack_yields_zero(config):
    s = Stack(config)
    assert s.pop() == 0
    assert s.peek() == 0
    assert len(s) == 0


def test_queue_mode_pops_oldest(config):
    config.queuemode = True
    s = Stack(config)
    s.push(1)
    s.push(2)
    assert s.peek() == 1
    assert s.pop() == 1


def test_invert_mode_pushes_to_bottom(config):
    config.invertmode = True
    s = Stack(config)
    s.push(1)
    s.push(2)
    assert s.pop() == 1
    assert s.pop() == 2


def test_indexing_from_top(config):
    s = Stack(config)
    s.push(10)
    s.push(20)
    assert s[1] == 20
    assert s[2] == 10
    assert s[3] == 0
    assert s[0] == 0
    assert list(s) == [20, 10]


def test_cells_wrap_to_64_bits(config):
    s = Stack(config)
    s.push(2**63)
    assert s.pop() == -(2**63)


def test_clear(config):
    s = Stack(config)
    s.push(5)
    s.clear()
    assert len(s) == 0


def test_stack_stack(config):
    ss = StackStack(config)
    assert len(ss) == 1
    with pytest.raises(IndexError):
        ss.second()
    bottom = ss.top()
    ss.push()
    assert len(ss) == 2
    assert ss.second() is bottom
    assert ss.at(1) is bottom
    assert ss.at(0) is ss.top()
    with pytest.raises(IndexError):
        ss.at(2)
    ss.pop()
    assert ss.top() is bottom
    with pytest.raises(IndexError):
        ss.pop()


def test_deepcopy_is_independent(config):
    ss = StackStack(config)
    ss.top().push(7)
    clone = copy.deepcopy(ss)
    clone.top().push(8)
    assert len(ss.top()) == 1
    assert clone.top().pop() == 8
    assert clone.top().pop() == 7


def test_vector_round_trip(config):
    s = Stack(config)
    v = Vector(4, -5, 6)
    assert push_vector(s, v, 3) == 3
    assert pop_vector(s, 3) == v
    assert len(s) == 0


def test_vector_push_order(config):
    s = Stack(config)
    push_vector(s, Vector(4, 9), 2)
    assert s.pop() == 9
    assert s.pop() == 4


def test_pop_vector_from_empty_is_origin(config):
    assert pop_vector(Stack(config), 2) == Vector(0, 0)


def test_string_round_trip(config):
    s = Stack(config)
    assert push_string(s, "hi") == len("hi") + 1
    assert s[1] == ord("h")
    assert s[len(s)] == 0
    assert pop_string(s) == "hi"
    assert len(s) == 0