import pytest

from fungeplus.config import FungeConfig
from fungeplus.field import Field
from fungeplus.fingerprints.registry import FingerprintStrategy, fingerprint_id
from fungeplus.instructions import State
from fungeplus.pointer import InstructionPointer
from fungeplus.stack import StackStack
from fungeplus.vector import Vector


class RecordingState(State):
    def __init__(self, runner, stack, ip, config):
        super().__init__(runner, stack, ip, config)
        self.seen = []

    def execute(self, cmd):
        self.seen.append(cmd)
        return True


def build(fingerprints=()):
    config = FungeConfig(dimensions=2, fingerprints=list(fingerprints))
    field = Field(config)
    ip = InstructionPointer(field, config)
    stack = StackStack(config)
    state = RecordingState(None, stack, ip, config)
    return FingerprintStrategy(field, ip, stack, state, config), ip, stack


def test_fingerprint_ids_match_known_constants():
    assert fingerprint_id("NULL") == 0x4E554C4C
    assert fingerprint_id("TOYS") == 0x544F5953
    assert fingerprint_id("BASE") == 0x42415345


def test_nothing_loaded_is_unhandled():
    strategy, _, _ = build()
    assert strategy.execute(ord("A")) is False


def test_load_unknown_fails():
    strategy, _, _ = build()
    assert strategy.load(fingerprint_id("XXXX")) is False
    assert strategy.unload(fingerprint_id("XXXX")) is False


def test_null_reverses():
    strategy, ip, _ = build()
    assert strategy.load(fingerprint_id("NULL")) is True
    assert strategy.execute(ord("Q")) is True
    assert ip.delta == Vector(-1)


def test_roman_numerals_loaded():
    strategy, _, stack = build()
    strategy.load(fingerprint_id("ROMA"))
    assert strategy.execute(ord("X")) is True
    assert stack.top().pop() == 10


def test_later_load_overrides_and_unload_restores():
    strategy, ip, stack = build()
    strategy.load(fingerprint_id("ROMA"))
    strategy.load(fingerprint_id("NULL"))
    strategy.execute(ord("I"))
    assert ip.delta == Vector(-1)
    assert len(stack.top()) == 0
    strategy.unload(fingerprint_id("NULL"))
    strategy.execute(ord("I"))
    assert stack.top().pop() == 1


def test_unload_when_not_loaded_is_harmless():
    strategy, _, _ = build()
    assert strategy.unload(fingerprint_id("ROMA")) is True
    assert strategy.execute(ord("I")) is False


def test_configured_fingerprints_are_preloaded():
    strategy, _, stack = build([fingerprint_id("ROMA")])
    strategy.execute(ord("M"))
    assert stack.top().pop() == 1000


@pytest.mark.parametrize("name", ["BASE", "BITW", "BOOL", "CPLI", "HRTI", "MODE", "MODU",
                                  "NFUN", "NULL", "ORTH", "PERL", "REFC", "ROMA", "TERM", "TOYS"])
def test_every_fingerprint_is_available(name):
    strategy, _, _ = build()
    assert strategy.load(fingerprint_id(name)) is True