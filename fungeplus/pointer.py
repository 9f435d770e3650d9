"""The instruction pointer: position, movement and storage offset of one thread."""

from __future__ import annotations

import itertools

from .config import FungeConfig, Topology
from .field import Field
from .vector import Vector

_TORUS_WIDTH = 80
_TORUS_HEIGHT = 25


class InstructionPointer:
    """Tracks where one thread is, where it is heading and its storage offset."""

    _ids = itertools.count()

    def __init__(self, field: Field, config: FungeConfig) -> None:
        self.id = next(InstructionPointer._ids)
        self.field = field
        self._config = config
        self.stopped = False
        self.pos = Vector(0)
        self.delta = Vector(1)
        self.storage = Vector(0)

    def copy(self) -> InstructionPointer:
        """Return a pointer in the same state with a fresh id."""
        clone = InstructionPointer(self.field, self._config)
        clone.stopped = self.stopped
        clone.pos = self.pos
        clone.delta = self.delta
        clone.storage = self.storage
        return clone

    def current(self) -> int:
        """The instruction under the pointer."""
        return self.field[self.pos]

    def write(self, value: int) -> None:
        """Overwrite the cell under the pointer."""
        self.field.set(self.pos, value)

    def set_delta(self, delta: Vector) -> None:
        """Change direction; in hover mode the new delta is added instead."""
        if self._config.hovermode:
            self.delta = self.delta + delta
        else:
            self.delta = delta

    def reverse(self) -> None:
        self.delta = -self.delta

    def left(self) -> None:
        self.delta = self.delta.left()

    def right(self) -> None:
        self.delta = self.delta.right()

    def stop(self) -> None:
        self.stopped = True

    def _in_field(self) -> bool:
        return all(
            self.field.min(d) <= self.pos[d] <= self.field.max(d)
            for d in range(self._config.dimensions)
        )

    def next(self) -> None:
        """Advance one step, wrapping around the edges of Funge-space."""
        if self.stopped:
            return
        self.pos = self.pos + self.delta
        if self._config.topo is Topology.TORUS:
            if self.pos[0] > _TORUS_WIDTH:
                self.pos = self.pos.replace(0, 0)
            elif self.pos[0] < 0:
                self.pos = self.pos.replace(0, _TORUS_WIDTH - 1)
            if self.pos[1] > _TORUS_HEIGHT:
                self.pos = self.pos.replace(1, 0)
            elif self.pos[1] < 0:
                self.pos = self.pos.replace(1, _TORUS_HEIGHT - 1)
        elif not self._in_field():
            back = -self.delta
            self.pos = self.pos + back
            while self._in_field():
                self.pos = self.pos + back
            self.pos = self.pos + self.delta

    def __str__(self) -> str:
        return str(self.pos)