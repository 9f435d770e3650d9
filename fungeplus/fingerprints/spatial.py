"""Fingerprints for extra dimensions, orthogonal helpers and cell references."""

from __future__ import annotations

import random as _random
import sys

from ..instructions import Fingerprint
from ..stack import pop_string, pop_vector, push_vector
from ..vector import Vector

_INT64_MAX = (1 << 63) - 1


def _axis(d: int, sign: int) -> Vector:
    return Vector().replace(d, sign)


class FingerprintNFUN(Fingerprint):
    """Movement along the fourth, fifth, sixth and arbitrary dimensions."""

    name = "NFUN"
    commands = "ABHILMQTUVXYZ"

    _FIXED = {
        ord("A"): (3, -1),
        ord("V"): (3, 1),
        ord("H"): (4, -1),
        ord("L"): (4, 1),
        ord("C"): (5, -1),
        ord("D"): (5, 1),
    }
    _BRANCH = {ord("I"): 3, ord("M"): 4, ord("R"): 5}

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd in self._FIXED:
            d, sign = self._FIXED[cmd]
            self.ip.set_delta(_axis(d, sign))
            dim = d + 1
        elif cmd in self._BRANCH:
            d = self._BRANCH[cmd]
            self.ip.set_delta(_axis(d, 1 if top.pop() == 0 else -1))
            dim = d + 1
        elif cmd in (ord("X"), ord("Y"), ord("Z")):
            n = top.pop()
            if cmd == ord("X"):
                sign = 1 if top.pop() == 0 else -1
            else:
                sign = -1 if cmd == ord("Y") else 1
            if n < 0:
                self.ip.reverse()
                return True
            self.ip.set_delta(_axis(n, sign))
            dim = n
        else:
            return False
        if self.config.dimensions < dim:
            self.config.dimensions = dim
        return True


class FingerprintORTH(Fingerprint):
    """Orthogonal easement: bit operations and direct x/y access."""

    name = "ORTH"
    commands = "AEGOPSVWXYZ"

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        if cmd in (ord("A"), ord("E"), ord("O")):
            a = top.pop()
            b = top.pop()
            if cmd == ord("A"):
                top.push(b & a)
            elif cmd == ord("E"):
                top.push(b ^ a)
            else:
                top.push(b | a)
        elif cmd == ord("G"):
            x = top.pop()
            y = top.pop()
            top.push(self.field.get(Vector(x, y)))
        elif cmd == ord("P"):
            x = top.pop()
            y = top.pop()
            value = top.pop()
            self.field.set(Vector(x, y), value)
        elif cmd == ord("S"):
            sys.stdout.write(pop_string(top) + "\n")
            sys.stdout.flush()
        elif cmd in (ord("V"), ord("W")):
            d = 0 if cmd == ord("V") else 1
            self.ip.set_delta(self.ip.delta.replace(d, top.pop()))
        elif cmd in (ord("X"), ord("Y")):
            d = 0 if cmd == ord("X") else 1
            self.ip.pos = self.ip.pos.replace(d, top.pop())
        elif cmd == ord("Z"):
            if top.pop() == 0:
                self.ip.next()
        else:
            return False
        return True


class FingerprintREFC(Fingerprint):
    """Store vectors under random reference numbers and look them up again."""

    name = "REFC"
    commands = "RD"

    def __init__(self, field, ip, stack, config) -> None:
        super().__init__(field, ip, stack, config)
        self._refs: dict[int, Vector] = {}
        self._rng = _random.Random()

    def _new_ref(self) -> int:
        ref = self._rng.randint(0, _INT64_MAX)
        while ref in self._refs:
            ref = self._rng.randint(0, _INT64_MAX)
        return ref

    def execute(self, cmd: int) -> bool:
        top = self.stack.top()
        dims = self.config.dimensions
        if cmd == ord("R"):
            vector = pop_vector(top, dims)
            ref = self._new_ref()
            self._refs[ref] = vector
            top.push(ref)
        elif cmd == ord("D"):
            vector = self._refs.get(top.pop())
            if vector is not None:
                push_vector(top, vector, dims)
        else:
            return False
        return True