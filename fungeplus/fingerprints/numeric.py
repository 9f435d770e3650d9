"""Fingerprints for arithmetic, logic, constants and interpreter modes."""

from __future__ import annotations

import math
import operator
import sys
from typing import Callable

from ..instructions import Fingerprint
from ..stack import Stack


def _trunc_mod(b: int, a: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(b) % abs(a)
    return -r if b < 0 else r


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _binary(stack: Stack, op: Callable[[int, int], int]) -> None:
    a = stack.pop()
    b = stack.pop()
    stack.push(op(b, a))


_BITW_OPS: dict[int, Callable[[int, int], int]] = {
    ord("A"): operator.and_,
    ord("L"): lambda b, a: b << (a & 63),
    ord("O"): operator.or_,
    ord("R"): lambda b, a: b >> (a & 63),
    ord("X"): operator.xor,
}


class FingerprintBITW(Fingerprint):
    """Bitwise operators."""

    name = "BITW"
    commands = "ALNORX"

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd == ord("N"):
            top.push(~top.pop())
            return True
        op = _BITW_OPS.get(cmd)
        if op is None:
            return False
        _binary(top, op)
        return True


_BOOL_OPS: dict[int, Callable[[int, int], int]] = {
    ord("A"): lambda b, a: int(bool(b) and bool(a)),
    ord("O"): lambda b, a: int(bool(b) or bool(a)),
    ord("X"): lambda b, a: int((not b) != (not a)),
}


class FingerprintBOOL(Fingerprint):
    """Boolean operators; ``L`` and ``R`` are claimed but left unhandled."""

    name = "BOOL"
    commands = "ALNORX"

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd == ord("N"):
            top.push(int(not top.pop()))
            return True
        op = _BOOL_OPS.get(cmd)
        if op is None:
            return False
        _binary(top, op)
        return True


_MODU_OPS: dict[int, Callable[[int, int], int]] = {
    ord("M"): operator.mod,
    ord("U"): lambda b, a: abs(b) % abs(a),
    ord("R"): _trunc_mod,
}


class FingerprintMODU(Fingerprint):
    """Modulo arithmetic; a zero divisor yields zero."""

    name = "MODU"
    commands = "MRU"

    def execute(self, cmd: int) -> bool:
        op = _MODU_OPS.get(cmd)
        if op is None:
            return False
        _binary(self.stack.top(), lambda b, a: 0 if a == 0 else op(b, a))
        return True


def _pop_complex(stack: Stack) -> tuple[int, int]:
    imag = stack.pop()
    real = stack.pop()
    return real, imag


def _push_complex(stack: Stack, real: int, imag: int) -> None:
    stack.push(real)
    stack.push(imag)


def _format_complex(real: int, imag: int) -> str:
    if imag == 0:
        return f"{real} "
    if real == 0:
        return f"{imag}i "
    if imag < 0:
        return f"{real}{imag}i "
    return f"{real}+{imag}i "


class FingerprintCPLI(Fingerprint):
    """Complex integers stored as a real part followed by an imaginary part."""

    name = "CPLI"
    commands = "ADMOSV"

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd == ord("O"):
            real, imag = _pop_complex(top)
            sys.stdout.write(_format_complex(real, imag))
            sys.stdout.flush()
        elif cmd == ord("V"):
            real, imag = _pop_complex(top)
            top.push(_round_half_away(math.hypot(real, imag)))
        elif cmd in (ord("A"), ord("S"), ord("M"), ord("D")):
            br, bi = _pop_complex(top)
            ar, ai = _pop_complex(top)
            if cmd == ord("A"):
                _push_complex(top, ar + br, ai + bi)
            elif cmd == ord("S"):
                _push_complex(top, ar - br, ai - bi)
            elif cmd == ord("M"):
                _push_complex(top, ar * br - ai * bi, ar * bi + ai * br)
            elif br == 0 and bi == 0:
                # Division by zero has no defined result; push zero instead.
                _push_complex(top, 0, 0)
            else:
                q = complex(ar, ai) / complex(br, bi)
                _push_complex(top, _round_half_away(q.real), _round_half_away(q.imag))
        else:
            return False
        return True


_ROMAN = {"C": 100, "D": 500, "I": 1, "L": 50, "M": 1000, "V": 5, "X": 10}


class FingerprintROMA(Fingerprint):
    """Push the value of a Roman numeral letter."""

    name = "ROMA"
    commands = "CDILMVX"

    def execute(self, cmd: int) -> bool:
        value = _ROMAN.get(chr(cmd)) if 0 <= cmd < 0x110000 else None
        if value is None:
            return False
        self.stack.top().push(value)
        return True


class FingerprintNULL(Fingerprint):
    """Every upper-case letter reflects the pointer."""

    name = "NULL"
    commands = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def execute(self, cmd: int) -> bool:
        if ord("A") <= cmd <= ord("Z"):
            self.ip.reverse()
            return True
        return False


_MODES = {
    ord("H"): "hovermode",
    ord("I"): "invertmode",
    ord("Q"): "queuemode",
    ord("S"): "switchmode",
}


class FingerprintMODE(Fingerprint):
    """Toggle hover, invert, queue and switch modes."""

    name = "MODE"
    commands = "HIQS"

    def execute(self, cmd: int) -> bool:
        attr = _MODES.get(cmd)
        if attr is None:
            return False
        setattr(self.config, attr, not getattr(self.config, attr))
        return True