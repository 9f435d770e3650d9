"""An interactive line-oriented debugger for running Funge programs."""

from __future__ import annotations

import sys
import threading
from collections import deque
from dataclasses import dataclass, field as dc_field
from enum import Enum, auto
from typing import IO, Callable, Iterator, Optional

from .vector import Vector

MAX_BACKTRACE = 10
PROMPT = "\x1b[33m(defunge)\x1b[0m "
_RESET = "\x1b[0m"
_IP_COLOR = "\x1b[41;1m"
_CENTER_COLOR = "\x1b[42;1m"


class _Mode(Enum):
    START = auto()
    RUN = auto()
    STEP = auto()
    BREAK = auto()


@dataclass
class _Thread:
    ip: object
    stack: object
    backtrace: deque = dc_field(default_factory=lambda: deque(maxlen=MAX_BACKTRACE))
    mode: _Mode = _Mode.START


@dataclass
class _Session:
    field: object
    ip: object
    tid: int


def _ints(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def _char(value: int) -> str:
    return chr(value & 0xFF)


class FungeDebugger:
    """Breakpoints, watchpoints, stepping and inspection of instruction pointers."""

    def __init__(self, config, input: Optional[IO] = None, output: Optional[IO] = None) -> None:
        self.config = config
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.breakpoints: set[Vector] = set()
        self.watchpoints: set[Vector] = set()
        self._threads: dict[int, _Thread] = {}
        self._lock = threading.RLock()
        self._last_thread = 0
        self._commands: dict[str, Callable[[_Session, str], bool]] = {}
        for names, handler in (
            (("run",), self._cmd_run),
            (("quit", "q"), self._cmd_quit),
            (("step", "stp", "s"), self._cmd_step),
            (("peek", "p"), self._cmd_peek),
            (("get", "g"), self._cmd_get),
            (("list", "l"), self._cmd_list),
            (("break", "bp"), self._cmd_break),
            (("watch", "wp"), self._cmd_watch),
            (("delta", "dir", "d"), self._cmd_delta),
            (("storage",), self._cmd_storage),
            (("position", "pos"), self._cmd_position),
            (("thread", "t"), self._cmd_thread),
            (("backtrace", "bt"), self._cmd_backtrace),
            (("setdelta",), self._cmd_setdelta),
            (("setpos",), self._cmd_setpos),
            (("read",), self._cmd_read),
        ):
            for name in names:
                self._commands[name] = handler
        self._print("Funge++ Debugger")
        self._print("".join(arg + " " for arg in config.args))

    def _print(self, text: str = "", end: str = "\n") -> None:
        self.output.write(text + end)
        self.output.flush()

    def debug(self, field, stack, ip) -> None:
        """Record a step of ``ip`` and stop for commands when required."""
        with self._lock:
            tid = ip.id
            if tid not in self._threads:
                self._threads[tid] = _Thread(ip, stack)
                self._print(f"New IP {tid}")
            self._last_thread = tid
            thread = self._threads[tid]
            if ip.pos in self.breakpoints:
                self._print(f"Breakpoint {ip.pos}")
                thread.mode = _Mode.BREAK
            thread.backtrace.appendleft(ip.pos)
            if thread.mode is _Mode.RUN:
                return
            self.print_ip(ip)
            session = _Session(field, ip, tid)
            while thread.mode is not _Mode.RUN:
                self._print(PROMPT, end="")
                line = self.input.readline()
                if not line:
                    thread.mode = _Mode.RUN
                    break
                cmd, _, rest = line.strip().partition(" ")
                handler = self._commands.get(cmd)
                if handler is not None and handler(session, rest):
                    break

    def watch_write(self, field, pos: Vector, value: int) -> None:
        """Stop when a watched cell is about to be written."""
        if pos not in self.watchpoints:
            return
        with self._lock:
            thread = self._threads.get(self._last_thread)
            if thread is not None:
                thread.mode = _Mode.BREAK
            self._print(f"Watchpoint {pos}")
            old = field.get(pos)
            self._print(f'Old value = ({old}) "{_char(old)}"')
            self._print(f'New value = ({value}) "{_char(value)}"')
            if thread is not None:
                self.debug(field, thread.stack, thread.ip)

    def print_ip(self, ip) -> None:
        self._print(f'{ip.id}: {ip.pos} "{_char(ip.current())}"')

    def print_field(self, field, center: Vector, size: Vector) -> None:
        """Show the cells around ``center``, highlighting pointers and the centre."""
        start = center - size
        end = center + size
        pos = start
        parts: list[str] = []
        while pos != end:
            colored = False
            if any(t.ip.pos == pos for t in self._threads.values()):
                parts.append(_IP_COLOR)
                colored = True
            if pos == center:
                parts.append(_CENTER_COLOR)
                colored = True
            parts.append(_char(field.get(pos)))
            if colored:
                parts.append(_RESET)
            pos = pos.replace(0, pos[0] + 1)
            if pos[0] > end[0]:
                pos = pos.replace(1, pos[1] + 1).replace(0, start[0])
                parts.append("\n")
        self._print("".join(parts))

    def _cmd_run(self, session: _Session, rest: str) -> bool:
        self._threads[session.tid].mode = _Mode.RUN
        return False

    def _cmd_quit(self, session: _Session, rest: str) -> bool:
        raise SystemExit(1)

    def _cmd_step(self, session: _Session, rest: str) -> bool:
        self._threads[session.tid].mode = _Mode.STEP
        return True

    def _cmd_peek(self, session: _Session, rest: str) -> bool:
        stacks = self._threads[session.tid].stack
        numbers = list(_ints(rest))
        count = numbers[0] if numbers else 0
        if count == 0:
            for s in stacks:
                self._print("".join(f"{s[i + 1]} " for i in range(len(s))))
        else:
            depth = numbers[1] if len(numbers) > 1 else 0
            if 0 <= depth < len(stacks):
                self._print(str(stacks.at(depth)[count]))
            else:
                self._print(f"No stack {depth}")
        return False

    def _cmd_get(self, session: _Session, rest: str) -> bool:
        self.print_field(session.field, Vector.parse(rest), Vector(3, 3))
        return False

    def _cmd_list(self, session: _Session, rest: str) -> bool:
        size = next(_ints(rest), 0) or 3
        ip = self._threads[session.tid].ip
        self.print_field(session.field, ip.pos, Vector(abs(size), abs(size)))
        return False

    def _cmd_break(self, session: _Session, rest: str) -> bool:
        self.breakpoints.add(Vector.parse(rest))
        for point in sorted(self.breakpoints):
            self._print(f"Breakpoint {point}")
        return False

    def _cmd_watch(self, session: _Session, rest: str) -> bool:
        self.watchpoints.add(Vector.parse(rest))
        for point in sorted(self.watchpoints):
            self._print(f"Watchpoint {point}")
        return False

    def _cmd_delta(self, session: _Session, rest: str) -> bool:
        self._print(f"Delta {self._threads[session.tid].ip.delta}")
        return False

    def _cmd_storage(self, session: _Session, rest: str) -> bool:
        self._print(f"Storage {self._threads[session.tid].ip.storage}")
        return False

    def _cmd_position(self, session: _Session, rest: str) -> bool:
        self.print_ip(session.ip)
        return False

    def _cmd_thread(self, session: _Session, rest: str) -> bool:
        old = session.tid
        session.tid = next(_ints(rest), old)
        if session.tid == old:
            for thread in self._threads.values():
                self.print_ip(thread.ip)
        elif session.tid in self._threads:
            self.print_ip(self._threads[session.tid].ip)
        else:
            self._print(f"No thread {session.tid}")
            session.tid = old
        return False

    def _cmd_backtrace(self, session: _Session, rest: str) -> bool:
        self._print("Backtrace")
        for i, pos in enumerate(self._threads[session.tid].backtrace):
            self._print(f'#{i}  {pos} "{_char(session.field.get(pos))}"')
        return False

    def _cmd_setdelta(self, session: _Session, rest: str) -> bool:
        ip = self._threads[session.tid].ip
        ip.set_delta(Vector.parse(rest))
        self._print(f"Delta {ip.delta}")
        return False

    def _cmd_setpos(self, session: _Session, rest: str) -> bool:
        self._threads[session.tid].ip.pos = Vector.parse(rest)
        self.print_ip(session.ip)
        return False

    def _cmd_read(self, session: _Session, rest: str) -> bool:
        value = session.field.get(Vector.parse(rest))
        self._print(f'Value = ({value}) "{_char(value)}"')
        return False