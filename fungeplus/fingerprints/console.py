"""Fingerprints that talk to the console, the clock and an external Perl."""

from __future__ import annotations

import math
import subprocess
import sys
import time
from typing import IO

from ..instructions import Fingerprint
from ..stack import pop_string, push_string

_DIGIT_MAP = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
# Only 54 symbols are defined; the remaining slots of the 64-entry table are NUL.
_BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz+/" + "\0" * 10
_BASE85 = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    "!#$%&()*+-;<=>?@^_`{|{~"
)
_BASE_MAPS = {36: _BASE36, 58: _BASE58, 64: _BASE64, 85: _BASE85}

_ESC = "\x1b["


def _emit(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_token(stream: IO) -> str:
    """Read one whitespace-delimited word."""
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars)


class FingerprintBASE(Fingerprint):
    """Print and read numbers in arbitrary bases."""

    name = "BASE"
    commands = "BHINO"

    _FIXED = {ord("B"): 2, ord("H"): 16, ord("O"): 8}

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd in self._FIXED:
            _emit(self.format_number(top.pop(), self._FIXED[cmd]))
        elif cmd == ord("N"):
            base = top.pop()
            num = top.pop()
            _emit(self.format_number(num, base))
        elif cmd == ord("I"):
            base = top.pop()
            top.push(self.read_number(base))
        else:
            return False
        return True

    def format_number(self, num: int, base: int) -> str:
        """Render ``num`` in ``base`` followed by a space; bases below 2 print in unary."""
        if base <= 1:
            return "0" * max(num, 0) + " "
        sign = "-" if num < 0 else ""
        num = abs(num)
        digits = []
        while True:
            num, digit = divmod(num, base)
            digits.append(digit)
            if num <= 0:
                break
        digits.reverse()
        if base <= len(_DIGIT_MAP):
            body = "".join(_DIGIT_MAP[d] for d in digits)
        elif base in _BASE_MAPS:
            body = "".join(_BASE_MAPS[base][d] for d in digits)
        else:
            body = ",".join(str(d) for d in digits)
        return sign + body + " "

    def read_number(self, base: int) -> int:
        """Read a word from standard input and interpret it in ``base``."""
        word = _read_token(sys.stdin)
        if base <= 1:
            return len(word)
        if base > len(_DIGIT_MAP):
            return 0
        num = 0
        for ch in word:
            index = _DIGIT_MAP.find(ch)
            if index < 0 or index > base:
                break
            num = num * base + index
        return num


class FingerprintTERM(Fingerprint):
    """Cursor movement and screen clearing with terminal escape codes."""

    name = "TERM"
    commands = "CDGHLSU"

    _FIXED = {
        ord("C"): _ESC + "2J\n",
        ord("H"): _ESC + "0;0H\n",
        ord("L"): _ESC + "0K\n",
        ord("S"): _ESC + "0J\n",
    }

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd in self._FIXED:
            _emit(self._FIXED[cmd])
        elif cmd in (ord("D"), ord("U")):
            n = top.pop()
            down = (n >= 0) == (cmd == ord("D"))
            _emit(f"{_ESC}{abs(n)}{'B' if down else 'A'}\n")
        elif cmd == ord("G"):
            y = top.pop()
            x = top.pop()
            _emit(f"{_ESC}{x};{y}H\n")
        else:
            return False
        return True


class FingerprintPERL(Fingerprint):
    """Evaluate Perl expressions through an external interpreter."""

    name = "PERL"
    commands = "EIS"

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd in (ord("E"), ord("I")):
            if not self.config.execute:
                self.ip.reverse()
                return True
            result = self.perl(pop_string(top))
            if cmd == ord("E"):
                push_string(top, str(result))
            else:
                top.push(result)
        elif cmd == ord("S"):
            top.push(1)
        else:
            return False
        return True

    def perl(self, code: str) -> int:
        """Run ``code`` with perl and return the exit status it produced."""
        script = "exit(eval{" + code + "})"
        try:
            completed = subprocess.run(["perl", "-e", script], check=False)
        except FileNotFoundError:
            return 127
        return max(completed.returncode, 0)


class FingerprintHRTI(Fingerprint):
    """High resolution timer measured in microseconds."""

    name = "HRTI"
    commands = "EGMST"

    def __init__(self, field, ip, stack, config) -> None:
        super().__init__(field, ip, stack, config)
        self._mark = 0

    def _elapsed_us(self) -> int:
        return (time.monotonic_ns() - self._mark) // 1000

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd == ord("E"):
            self._mark = 0
        elif cmd == ord("G"):
            resolution = time.get_clock_info("monotonic").resolution
            top.push(math.ceil(resolution * 1_000_000.0))
        elif cmd == ord("M"):
            self._mark = time.monotonic_ns()
        elif cmd == ord("S"):
            top.push(self._elapsed_us() % 1_000_000)
        elif cmd == ord("T"):
            if self._mark == 0:
                self.ip.reverse()
            else:
                top.push(self._elapsed_us())
        else:
            return False
        return True