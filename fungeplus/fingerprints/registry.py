"""Loading and unloading of fingerprints onto the upper-case instructions."""

from __future__ import annotations

import string

from ..instructions import Fingerprint, Strategy
from .console import FingerprintBASE, FingerprintHRTI, FingerprintPERL, FingerprintTERM
from .numeric import (
    FingerprintBITW,
    FingerprintBOOL,
    FingerprintCPLI,
    FingerprintMODE,
    FingerprintMODU,
    FingerprintNULL,
    FingerprintROMA,
)
from .spatial import FingerprintNFUN, FingerprintORTH, FingerprintREFC
from .toys import FingerprintTOYS

_MASK = (1 << 64) - 1

_FINGERPRINTS: tuple[type[Fingerprint], ...] = (
    FingerprintBASE,
    FingerprintBITW,
    FingerprintBOOL,
    FingerprintCPLI,
    FingerprintHRTI,
    FingerprintMODE,
    FingerprintMODU,
    FingerprintNFUN,
    FingerprintNULL,
    FingerprintORTH,
    FingerprintPERL,
    FingerprintREFC,
    FingerprintROMA,
    FingerprintTERM,
    FingerprintTOYS,
)


def fingerprint_id(name: str) -> int:
    """The numeric id of a fingerprint name, one byte per character."""
    value = 0
    for ch in name:
        value = ((value << 8) + ord(ch)) & _MASK
    return value


class FingerprintStrategy(Strategy):
    """Dispatches upper-case instructions to the most recently loaded fingerprint."""

    commands = string.ascii_uppercase

    def __init__(self, field, ip, stack, state, config) -> None:
        super().__init__(field, ip, stack, state, config)
        self.available: dict[int, Fingerprint] = {
            fingerprint_id(cls.name): cls(field, ip, stack, config) for cls in _FINGERPRINTS
        }
        self._loaded: dict[int, list[Fingerprint]] = {}
        for fingerprint in config.fingerprints:
            self.load(fingerprint)

    def execute(self, cmd: int) -> bool:
        handlers = self._loaded.get(cmd)
        if not handlers:
            return False
        return handlers[-1].execute(cmd)

    def load(self, fingerprint: int) -> bool:
        """Put a fingerprint's instructions on top; False if it is unknown."""
        found = self.available.get(fingerprint)
        if found is None:
            return False
        for inst in found.instructions:
            self._loaded.setdefault(inst, []).append(found)
        return True

    def unload(self, fingerprint: int) -> bool:
        """Remove the top meaning of each of a fingerprint's instructions."""
        found = self.available.get(fingerprint)
        if found is None:
            return False
        for inst in found.instructions:
            handlers = self._loaded.get(inst)
            if handlers:
                handlers.pop()
        return True