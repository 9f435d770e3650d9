"""Funge stacks, the stack of stacks, and helpers for vectors and strings on them."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .config import FungeConfig
from .vector import Vector

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def _cell(value: int) -> int:
    """Wrap a value into a signed 64-bit cell."""
    value = int(value) & _MASK
    return value - (1 << 64) if value & _SIGN else value


class Stack:
    """A stack that yields zero when empty and honours queue and invert modes."""

    def __init__(self, config: FungeConfig) -> None:
        self._config = config
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        if self._config.invertmode:
            self._items.appendleft(_cell(value))
        else:
            self._items.append(_cell(value))

    def pop(self) -> int:
        if not self._items:
            return 0
        if self._config.queuemode:
            return self._items.popleft()
        return self._items.pop()

    def peek(self) -> int:
        if not self._items:
            return 0
        return self._items[0] if self._config.queuemode else self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, p: int) -> int:
        """The ``p``-th value counted from the top, starting at 1; 0 when out of range."""
        if 0 < p <= len(self._items):
            return self._items[-p]
        return 0

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __deepcopy__(self, memo: dict) -> Stack:
        clone = Stack(self._config)
        clone._items = deque(self._items)
        return clone


class StackStack:
    """A stack of stacks; there is always at least one."""

    def __init__(self, config: FungeConfig) -> None:
        self._config = config
        self._stacks = [Stack(config)]

    def top(self) -> Stack:
        return self._stacks[-1]

    def second(self) -> Stack:
        if len(self._stacks) < 2:
            raise IndexError("there is no second stack")
        return self._stacks[-2]

    def at(self, x: int) -> Stack:
        """The ``x``-th stack counted from the top, starting at 0."""
        if not 0 <= x < len(self._stacks):
            raise IndexError(f"no stack at depth {x}")
        return self._stacks[-1 - x]

    def push(self) -> None:
        self._stacks.append(Stack(self._config))

    def pop(self) -> None:
        if len(self._stacks) < 2:
            raise IndexError("cannot remove the only stack")
        self._stacks.pop()

    def __len__(self) -> int:
        return len(self._stacks)

    def __iter__(self) -> Iterator[Stack]:
        return reversed(self._stacks)

    def __deepcopy__(self, memo: dict) -> StackStack:
        clone = StackStack(self._config)
        clone._stacks = [s.__deepcopy__(memo) for s in self._stacks]
        return clone


def push_vector(stack: Stack, vector: Vector, dimensions: int) -> int:
    """Push the first ``dimensions`` components; return how many were pushed."""
    for d in range(dimensions):
        stack.push(vector[d])
    return dimensions


def pop_vector(stack: Stack, dimensions: int) -> Vector:
    """Pop a vector pushed by :func:`push_vector`."""
    values = [stack.pop() for _ in range(dimensions)]
    return Vector(*reversed(values))


def push_string(stack: Stack, text: str) -> int:
    """Push a zero-terminated string so its first character ends on top."""
    stack.push(0)
    for ch in reversed(text):
        stack.push(ord(ch))
    return len(text) + 1


def pop_string(stack: Stack) -> str:
    """Pop characters up to and including the terminating zero."""
    chars = []
    value = stack.pop()
    while value != 0:
        chars.append(chr(value & 0xFF))
        value = stack.pop()
    return "".join(chars)