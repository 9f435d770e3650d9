"""Base classes for execution states, instruction strategies and fingerprints."""

from __future__ import annotations

import random as _random
from abc import ABC, abstractmethod
from typing import Any

from .config import FungeConfig
from .field import Field
from .pointer import InstructionPointer
from .stack import StackStack

_INT64_MAX = (1 << 63) - 1


class State(ABC):
    """A mode of execution (normal or string) for one runner."""

    def __init__(self, runner: Any, stack: StackStack, ip: InstructionPointer, config: FungeConfig) -> None:
        self.runner = runner
        self.stack = stack
        self.ip = ip
        self.config = config

    @abstractmethod
    def execute(self, cmd: int) -> bool:
        """Run one instruction; return whether it was handled."""


class Strategy(ABC):
    """A set of instructions belonging to one language standard."""

    commands: str = ""

    def __init__(
        self,
        field: Field,
        ip: InstructionPointer,
        stack: StackStack,
        state: State,
        config: FungeConfig,
    ) -> None:
        self.field = field
        self.ip = ip
        self.stack = stack
        self.state = state
        self.config = config
        self._rng = _random.Random()

    @property
    def instructions(self) -> tuple[int, ...]:
        """Codes of the instructions this strategy provides."""
        return tuple(ord(c) for c in self.commands)

    @abstractmethod
    def execute(self, cmd: int) -> bool:
        """Run one instruction; return whether it was handled."""

    def random(self) -> int:
        """A uniformly random non-negative cell value."""
        return self._rng.randint(0, _INT64_MAX)


class Fingerprint(ABC):
    """A loadable extension that gives meaning to some upper-case instructions."""

    name: str = ""
    commands: str = ""

    def __init__(
        self,
        field: Field,
        ip: InstructionPointer,
        stack: StackStack,
        config: FungeConfig,
    ) -> None:
        self.field = field
        self.ip = ip
        self.stack = stack
        self.config = config

    @property
    def instructions(self) -> tuple[int, ...]:
        """Codes of the instructions this fingerprint provides."""
        return tuple(ord(c) for c in self.commands)

    @abstractmethod
    def execute(self, cmd: int) -> bool:
        """Run one instruction; return whether it was handled."""