"""The standard toys fingerprint: stack helpers and block copies of Funge-space."""

from __future__ import annotations

import random as _random
import string
from typing import Callable, Optional

from ..field import SPACE
from ..instructions import Fingerprint
from ..stack import pop_vector, push_vector
from ..vector import Vector, VectorRange

_INT64_MAX = (1 << 63) - 1

_RANDOM_ARROWS = {0: ">", 1: "<", 2: "v", 3: "^", 4: "h", 5: "l"}


def _size_to_range(size: Vector) -> Optional[Vector]:
    """Turn a box size into the offset of its far corner; None if any side is empty."""
    corner = []
    for s in size:
        if s == 0:
            return None
        corner.append(s - 1 if s > 0 else s + 1)
    return Vector(*corner)


class FingerprintTOYS(Fingerprint):
    """Assorted small instructions for stacks, movement and Funge-space blocks."""

    name = "TOYS"
    commands = string.ascii_uppercase

    def __init__(self, field, ip, stack, config) -> None:
        super().__init__(field, ip, stack, config)
        self._rng = _random.Random()
        self._handlers: dict[int, Callable[[], None]] = {
            ord("A"): self._repeat,
            ord("B"): self._butterfly,
            ord("C"): lambda: self._copy_from_stack(low=True, move=False),
            ord("D"): lambda: self._adjust(-1),
            ord("E"): self._sum,
            ord("F"): self._fill_from_stack,
            ord("G"): self._read_to_stack,
            ord("H"): self._shift,
            ord("I"): lambda: self._adjust(1),
            ord("J"): self._shift_column,
            ord("K"): lambda: self._copy_from_stack(low=False, move=False),
            ord("L"): lambda: self._peek_side(self.ip.delta.left()),
            ord("M"): lambda: self._copy_from_stack(low=True, move=True),
            ord("N"): self._negate,
            ord("O"): self._shift_row,
            ord("P"): self._product,
            ord("Q"): self._put_behind,
            ord("R"): lambda: self._peek_side(self.ip.delta.right()),
            ord("S"): self._fill_value,
            ord("T"): self._dimension_branch,
            ord("U"): self._random_arrow,
            ord("V"): lambda: self._copy_from_stack(low=False, move=True),
            ord("W"): self._wait,
            ord("X"): lambda: self._step_position(0, 0),
            ord("Y"): lambda: self._step_position(1, 1),
            ord("Z"): lambda: self._step_position(2, 2),
        }

    def execute(self, cmd: int) -> bool:
        handler = self._handlers.get(cmd)
        if handler is None:
            return False
        handler()
        return True

    def copy_space(self, src: Vector, size: Vector, dest: Vector, low: bool, move: bool) -> None:
        """Copy the box of ``size`` at ``src`` to ``dest``.

        ``low`` walks from the near corner outwards, otherwise from the far
        corner back; ``move`` clears each source cell after copying it.
        """
        bound = _size_to_range(size)
        if bound is None:
            return
        start, end = (Vector(0), bound) if low else (bound, Vector(0))
        for offset in VectorRange(start, end):
            self.field.set(dest + offset, self.field.get(src + offset))
            if move:
                self.field.set(src + offset, SPACE)

    def _pop_vector(self) -> Vector:
        return pop_vector(self.stack.top(), self.config.dimensions)

    def _repeat(self) -> None:
        top = self.stack.top()
        n = top.pop()
        a = top.pop()
        for _ in range(n):
            top.push(a)

    def _butterfly(self) -> None:
        top = self.stack.top()
        b = top.pop()
        a = top.pop()
        top.push(a + b)
        top.push(a - b)

    def _copy_from_stack(self, low: bool, move: bool) -> None:
        dest = self._pop_vector()
        size = self._pop_vector()
        src = self._pop_vector()
        self.copy_space(src, size, dest, low, move)

    def _adjust(self, amount: int) -> None:
        top = self.stack.top()
        top.push(top.pop() + amount)

    def _sum(self) -> None:
        top = self.stack.top()
        total = 0
        while len(top) > 0:
            total += top.pop()
        top.push(total)

    def _product(self) -> None:
        top = self.stack.top()
        product = 1
        while len(top) > 0:
            product *= top.pop()
        top.push(product)

    def _fill_from_stack(self) -> None:
        dest = self._pop_vector()
        bound = _size_to_range(self._pop_vector())
        if bound is None:
            return
        top = self.stack.top()
        for offset in VectorRange(Vector(0), bound):
            self.field.set(dest + offset, top.pop())

    def _read_to_stack(self) -> None:
        src = self._pop_vector()
        bound = _size_to_range(self._pop_vector())
        if bound is None:
            return
        top = self.stack.top()
        for offset in VectorRange(bound, Vector(0)):
            top.push(self.field.get(src + offset))

    def _fill_value(self) -> None:
        dest = self._pop_vector()
        size = self._pop_vector()
        value = self.stack.top().pop()
        bound = _size_to_range(size)
        if bound is None:
            return
        for offset in VectorRange(Vector(0), bound):
            self.field.set(dest + offset, value)

    def _shift(self) -> None:
        top = self.stack.top()
        b = top.pop()
        a = top.pop()
        top.push(a << b if b > 0 else a >> -b)

    def _shift_column(self) -> None:
        n = self.stack.top().pop()
        if n == 0:
            return
        ymin = self.field.min(1)
        ymax = self.field.max(1)
        x = self.ip.pos[0]
        self.copy_space(Vector(x, ymin), Vector(1, ymax - ymin + 1), Vector(x, ymin + n), n < 0, True)

    def _shift_row(self) -> None:
        n = self.stack.top().pop()
        if n == 0:
            return
        xmin = self.field.min(0)
        xmax = self.field.max(0)
        y = self.ip.pos[1]
        self.copy_space(Vector(xmin, y), Vector(xmax - xmin + 1, 1), Vector(xmin + n, y), n < 0, True)

    def _peek_side(self, direction: Vector) -> None:
        self.stack.top().push(self.field.get(self.ip.pos + direction))

    def _put_behind(self) -> None:
        value = self.stack.top().pop()
        self.field.set(self.ip.pos - self.ip.delta, value)

    def _negate(self) -> None:
        top = self.stack.top()
        top.push(int(not top.pop()))

    def _dimension_branch(self) -> None:
        top = self.stack.top()
        n = top.pop()
        sign = 1 if top.pop() == 0 else -1
        if 0 <= n < self.config.dimensions:
            self.ip.set_delta(Vector().replace(n, sign))
        else:
            self.ip.reverse()

    def _random_arrow(self) -> None:
        choices = min(self.config.dimensions, 3) * 2
        r = self._rng.randint(0, _INT64_MAX) % choices
        axis = r >> 1
        delta = Vector().replace(axis, -1 if r & 1 else 1)
        self.ip.write(ord(_RANDOM_ARROWS.get(r, "?")))
        self.ip.set_delta(delta)

    def _wait(self) -> None:
        top = self.stack.top()
        pos = self._pop_vector()
        value = top.pop()
        cell = self.field.get(pos)
        if cell < value:
            top.push(value)
            push_vector(top, pos, self.config.dimensions)
            self.ip.reverse()
            self.ip.next()
            self.ip.reverse()
        elif cell > value:
            self.ip.reverse()

    def _step_position(self, d: int, needed: int) -> None:
        if self.config.dimensions > needed or d == 0:
            self.ip.pos = self.ip.pos.replace(d, self.ip.pos[d] + 1)
        else:
            self.ip.reverse()