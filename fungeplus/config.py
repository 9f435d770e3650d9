"""Interpreter configuration and shared constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag


class Topology(Enum):
    TORUS = "torus"
    LAHEY = "lahey"


class StringMode(Enum):
    MULTISPACE = "multispace"
    SGML = "sgml"
    C = "c"


class CellMode(Enum):
    CHAR = "char"
    INT = "int"


class ThreadMode(Enum):
    NATIVE = "native"
    FUNGE = "funge"


class EnvFlags(IntFlag):
    CONCURRENT = 0b00001
    FILE_IN = 0b00010
    FILE_OUT = 0b00100
    EXECUTE = 0b01000
    UNBUFFERED_IO = 0b10000


class OperatingParadigm(IntEnum):
    UNAVAILABLE = 0
    SYSTEM = 1
    SHELL = 2
    FUNGE = 3


FILE_IN_BINARY = 0b1
FILE_OUT_TEXT = 0b1

FUNGE_HANDPRINT = 0x464E2B2B  # "FN++"
FUNGE_VERSION = 1
CELL_BYTES = 8

STANDARDS: dict[str, tuple[int, int]] = {
    "une93": (1, 93),
    "une98": (1, 98),
    "be93": (2, 93),
    "be98": (2, 98),
    "tre98": (3, 98),
}


@dataclass
class FungeConfig:
    """Settings shared by every part of one interpreter run."""

    args: list[str] = field(default_factory=list)
    env: list[str] = field(default_factory=list)
    fingerprints: list[int] = field(default_factory=list)
    dimensions: int = 0
    standard: int = 98
    topo: Topology = Topology.LAHEY
    strings: StringMode = StringMode.SGML
    cells: CellMode = CellMode.INT
    threads: ThreadMode = ThreadMode.FUNGE
    debug: bool = False
    concurrent: bool = True
    execute: bool = True
    filesystem: bool = True
    fingerprint: bool = True
    hovermode: bool = False
    invertmode: bool = False
    queuemode: bool = False
    switchmode: bool = False

    def apply_standard(self, name: str) -> None:
        """Select a language standard such as ``be98`` and its matching defaults."""
        try:
            self.dimensions, self.standard = STANDARDS[name]
        except KeyError:
            raise ValueError(f"Unsupported standard: {name}") from None
        if self.standard == 93:
            self.topo = Topology.TORUS
            self.strings = StringMode.MULTISPACE
            self.cells = CellMode.CHAR
        else:
            self.topo = Topology.LAHEY
            self.strings = StringMode.SGML
            self.cells = CellMode.INT