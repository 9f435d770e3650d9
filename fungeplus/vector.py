"""N-dimensional integer vectors and rectangular ranges over them."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest
from typing import Iterator

_DIGITS = "0123456789"


def _normalize(values: list[int]) -> tuple[int, ...]:
    """Drop trailing zero components, keeping at least one component."""
    while len(values) > 1 and values[-1] == 0:
        values.pop()
    return tuple(values)


@total_ordering
class Vector:
    """An immutable vector whose unset components read as zero."""

    __slots__ = ("_values",)

    def __init__(self, *args: int) -> None:
        self._values = _normalize([int(a) for a in args])

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __bool__(self) -> bool:
        return any(self._values)

    def __getitem__(self, d: int) -> int:
        if d < 0:
            raise IndexError(f"negative dimension {d}")
        return self._values[d] if d < len(self._values) else 0

    def replace(self, d: int, value: int) -> Vector:
        """Return a copy with component ``d`` set to ``value``."""
        if d < 0:
            raise IndexError(f"negative dimension {d}")
        values = list(self._values)
        values.extend([0] * (d + 1 - len(values)))
        values[d] = int(value)
        return Vector(*values)

    def __neg__(self) -> Vector:
        return Vector(*(-x for x in self._values))

    def left(self) -> Vector:
        """Rotate 90 degrees to the left in the x/y plane."""
        x, y = self[0], self[1]
        return self.replace(0, y).replace(1, -x)

    def right(self) -> Vector:
        """Rotate 90 degrees to the right in the x/y plane."""
        x, y = self[0], self[1]
        return self.replace(0, -y).replace(1, x)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in zip_longest(self, other, fillvalue=0)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in zip_longest(self, other, fillvalue=0)))

    def _key(self) -> tuple[int, ...]:
        values = list(self._values)
        while values and values[-1] == 0:
            values.pop()
        return tuple(values)

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        pairs = list(zip_longest(self, other, fillvalue=0))
        for lhs, rhs in reversed(pairs):
            if lhs != rhs:
                return lhs < rhs
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._values) + ")"

    def __repr__(self) -> str:
        return "Vector(" + ", ".join(str(v) for v in self._values) + ")"

    @classmethod
    def parse(cls, text: str) -> Vector:
        """Read a vector written as ``(x, y, ...)``; anything else gives an empty vector."""
        chars = (c for c in text if not c.isspace())
        if next(chars, None) != "(":
            return cls()
        result = cls()
        dim = 0
        value = 0
        negative = False
        for c in chars:
            if c == ")":
                break
            if c in _DIGITS:
                value = value * 10 + int(c)
            elif c == ",":
                result = result.replace(dim, -value if negative else value)
                dim += 1
                value = 0
                negative = False
            elif value == 0 and c == "-":
                negative = True
            else:
                break
        return result.replace(dim, -value if negative else value)


class VectorRange:
    """Every vector in the box spanned by two corners, both included.

    The x component varies fastest; each component counts towards its
    corner in ``last``.
    """

    def __init__(self, first: Vector, last: Vector) -> None:
        self.first = first
        self.last = last
        step = 1 if last[0] >= first[0] else -1
        self.end = last.replace(0, last[0] + step)

    def __iter__(self) -> Iterator[Vector]:
        current = self.first
        while current != self.end:
            yield current
            current = self._advance(current)

    def _advance(self, current: Vector) -> Vector:
        for d in range(max(len(self.first), len(self.end))):
            n = current[d] + (1 if self.end[d] >= self.first[d] else -1)
            current = current.replace(d, n)
            if current == self.end:
                break
            if self.last[d] >= self.first[d]:
                overflow = n > self.last[d]
            else:
                overflow = n < self.last[d]
            if not overflow:
                break
            current = current.replace(d, self.first[d])
        return current