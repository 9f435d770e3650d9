"""Funge-space: the sparse grid of instructions."""

from __future__ import annotations

import io
import sys
from enum import Enum
from typing import IO, Callable, Optional

from .config import CellMode, FungeConfig
from .vector import Vector

SPACE = ord(" ")
_FORM_FEED = ord("\f")
_VERTICAL_TAB = ord("\v")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class FileFormat(Enum):
    BF = "bf"
    BEQ = "beq"


def _to_char(value: int) -> int:
    return ((int(value) + 128) & 0xFF) - 128


def _read_text(stream: IO) -> str:
    data = stream.read()
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


def _write_text(stream: IO, text: str) -> None:
    if isinstance(stream, io.TextIOBase):
        stream.write(text)
    else:
        stream.write(text.encode("latin-1"))


def _advance(d: int, v: Vector, extent: Vector) -> tuple[Vector, Vector]:
    v = v.replace(d, v[d] + 1)
    if v[d] > extent[d]:
        extent = extent.replace(d, v[d])
    return v, extent


def _rewind(d: int, v: Vector, start: Vector, extent: Vector) -> tuple[Vector, Vector]:
    if v[d] > extent[d]:
        extent = extent.replace(d, v[d])
    return v.replace(d, start[d]), extent


def _number(params: list[str], name: str) -> int:
    if not params:
        raise ValueError(f"{name} needs a value")
    return int(params[0])


class Field:
    """Sparse Funge-space holding one cell value per position."""

    def __init__(self, config: FungeConfig) -> None:
        self._config = config
        self._cells: dict[Vector, int] = {}
        self._maxs: list[int] = []
        self._mins: list[int] = []
        self.on_write: Optional[Callable[[Field, Vector, int], None]] = None

    def load(self, stream: IO, fmt: FileFormat = FileFormat.BF, dimensions: int = 0) -> None:
        """Read a program and fix the number of dimensions in the configuration."""
        if fmt is FileFormat.BEQ:
            self.parse_beq(stream)
        else:
            self.parse(Vector(0), stream)
        self._config.dimensions = dimensions or len(self._maxs)

    def parse(self, start: Vector, stream: IO, binary: bool = False) -> Vector:
        """Load source text at ``start``; return the size of the loaded box."""
        text = _read_text(stream)
        if not binary:
            text = text.replace("\r\n", "\n")
        three_d = self._config.dimensions == 0 or self._config.dimensions >= 3
        v = start
        extent = start
        last = 0
        for ch in text:
            code = ord(ch)
            if not binary and ch in "\n\r":
                if last not in (_FORM_FEED, _VERTICAL_TAB):
                    v, extent = _advance(1, v, extent)
                    v, extent = _rewind(0, v, start, extent)
            elif not binary and code == _FORM_FEED:
                if three_d:
                    v, extent = _rewind(0, v, start, extent)
                    v, extent = _rewind(1, v, start, extent)
                    v, extent = _advance(2, v, extent)
                    last = _FORM_FEED
            elif not binary and code == _VERTICAL_TAB:
                if three_d:
                    v, extent = _rewind(0, v, start, extent)
                    v, extent = _rewind(1, v, start, extent)
                    v, extent = _rewind(2, v, start, extent)
                    v, extent = _advance(3, v, extent)
                    last = _VERTICAL_TAB
            else:
                if code != SPACE:
                    self.set(v, code)
                v, extent = _advance(0, v, extent)
                last = code
        return extent - start

    def parse_beq(self, stream: IO) -> None:
        """Load a program written in the line-block format with control headers."""
        lines = iter(_read_text(stream).split("\n"))
        dims = 0
        for line in lines:
            origin = Vector()
            count = 0
            dim = 0
            for control in line.split(","):
                name, *params = control.split(" ")
                if name == "Dimensions":
                    if dims == 0:
                        dims = _number(params, name)
                    else:
                        print("Unexpected dimensions", file=sys.stderr)
                elif name == "Lines":
                    count = _number(params, name)
                elif name == "Origin":
                    if not params:
                        raise ValueError("Origin needs a value")
                    parts = params[0].split(":")
                    for dim, part in enumerate(parts):
                        origin = origin.replace(dim, int(part))
                    dim = len(parts)
                elif name == "Coord":
                    if not params:
                        raise ValueError("Coord needs a value")
                    parts = params[0].split(":")
                    for offset, part in enumerate(parts):
                        if part:
                            origin = origin.replace(dim + offset, int(part))
                    dim += len(parts)
            pos = origin
            for _ in range(count):
                for ch in next(lines, ""):
                    self.set(pos, ord(ch))
                    pos = pos.replace(0, pos[0] + 1)
                pos = pos.replace(0, origin[0]).replace(1, pos[1] + 1)
        if self._config.dimensions == 0:
            self._config.dimensions = dims or len(self._maxs)

    def dump(self, start: Vector, delta: Vector, stream: IO, binary: bool = False) -> None:
        """Write the rectangle at ``start`` of size ``delta``; text mode drops trailing spaces."""
        end = start + delta
        out: list[str] = []
        pending: list[str] = []
        v = start
        while v < end:
            value = self.get(v)
            pending.append(chr(value & 0xFF))
            if value != SPACE or binary:
                out.extend(pending)
                pending.clear()
            v = v.replace(0, v[0] + 1)
            if v[0] >= end[0]:
                out.append("\n")
                if not binary:
                    pending.clear()
                v = v.replace(1, v[1] + 1).replace(0, start[0])
            if v[1] >= end[1]:
                break
        _write_text(stream, "".join(out))

    def set(self, pos: Vector, value: int) -> None:
        dims = len(pos)
        self._maxs.extend([0] * (dims - len(self._maxs)))
        self._mins.extend([0] * (dims - len(self._mins)))
        if self.on_write is not None:
            self.on_write(self, pos, value)
        if value == SPACE:
            self._cells.pop(pos, None)
            for d in range(dims):
                if self._maxs[d] == pos[d]:
                    self._maxs[d] = max((key[d] for key in self._cells), default=_INT64_MIN)
                if self._mins[d] == pos[d]:
                    self._mins[d] = min((key[d] for key in self._cells), default=_INT64_MAX)
        else:
            for d, coord in enumerate(pos):
                if self._maxs[d] < coord:
                    self._maxs[d] = coord
                if self._mins[d] > coord:
                    self._mins[d] = coord
            if self._config.cells is CellMode.CHAR:
                self._cells[pos] = _to_char(value)
            else:
                self._cells[pos] = int(value)

    def get(self, pos: Vector) -> int:
        value = self._cells.get(pos, SPACE)
        if self._config.cells is CellMode.CHAR:
            return _to_char(value)
        return value

    def __getitem__(self, pos: Vector) -> int:
        return self.get(pos)

    def min(self, d: int) -> int:
        return self._mins[d] if d < len(self._mins) else 0

    def max(self, d: int) -> int:
        return self._maxs[d] if d < len(self._maxs) else 0

    def __str__(self) -> str:
        rows = []
        for y in range(self.min(1), self.max(1) + 1):
            row = "".join(
                chr(self.get(Vector(x, y)) & 0xFF) for x in range(self.min(0), self.max(0) + 1)
            )
            rows.append(row + "\n")
        return "".join(rows)