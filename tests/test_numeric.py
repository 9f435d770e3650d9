import pytest

from fungeplus.config import FungeConfig
from fungeplus.field import Field
from fungeplus.fingerprints.numeric import (
    FingerprintBITW,
    FingerprintBOOL,
    FingerprintCPLI,
    FingerprintMODE,
    FingerprintMODU,
    FingerprintNULL,
    FingerprintROMA,
)
from fungeplus.pointer import InstructionPointer
from fungeplus.stack import StackStack
from fungeplus.vector import Vector

ALL = [
    FingerprintBITW,
    FingerprintBOOL,
    FingerprintCPLI,
    FingerprintMODE,
    FingerprintMODU,
    FingerprintNULL,
    FingerprintROMA,
]


def make(cls):
    config = FungeConfig(dimensions=2)
    field = Field(config)
    ip = InstructionPointer(field, config)
    stack = StackStack(config)
    return cls(field, ip, stack, config)


def run(fp, cmd, *values):
    top = fp.stack.top()
    for v in values:
        top.push(v)
    handled = fp.execute(ord(cmd))
    return handled, list(top)


@pytest.mark.parametrize("cls", ALL)
def test_unknown_instruction_is_not_handled(cls):
    fp = make(cls)
    assert fp.execute(ord("?")) is False


def test_bitw_and():
    handled, stack = run(make(FingerprintBITW), "A", 0b1100, 0b1010)
    assert handled is True
    assert stack == [0b1000]


@pytest.mark.parametrize("b,a", [(12, 10), (-5, 3), (0, 7), (255, -256)])
def test_bitw_or_is_and_plus_xor(b, a):
    _, or_ = run(make(FingerprintBITW), "O", b, a)
    _, and_ = run(make(FingerprintBITW), "A", b, a)
    _, xor_ = run(make(FingerprintBITW), "X", b, a)
    assert or_[0] == and_[0] + xor_[0]


def test_bitw_not_twice_is_identity():
    fp = make(FingerprintBITW)
    run(fp, "N", 1234)
    _, stack = run(fp, "N")
    assert stack == [1234]


def test_bitw_not_zero_is_all_ones():
    _, stack = run(make(FingerprintBITW), "N", 0)
    assert stack == [-1]


def test_bitw_shift_round_trip():
    fp = make(FingerprintBITW)
    run(fp, "L", 5, 3)
    _, stack = run(fp, "R", 3)
    assert stack == [5]


def test_bitw_shift_right_keeps_sign():
    _, stack = run(make(FingerprintBITW), "R", -8, 1)
    assert stack[0] < 0


def test_bitw_shift_left_wraps_to_cell():
    _, stack = run(make(FingerprintBITW), "L", 1, 63)
    assert stack == [-(1 << 63)]


@pytest.mark.parametrize(
    "cmd,b,a,expected",
    [
        ("A", 5, 0, 0),
        ("A", 5, -2, 1),
        ("O", 0, 0, 0),
        ("O", 0, 9, 1),
        ("X", 3, 4, 0),
        ("X", 3, 0, 1),
    ],
)
def test_bool_binary(cmd, b, a, expected):
    _, stack = run(make(FingerprintBOOL), cmd, b, a)
    assert stack == [expected]


def test_bool_not():
    fp = make(FingerprintBOOL)
    _, stack = run(fp, "N", 7)
    assert stack == [0]
    _, stack = run(fp, "N")
    assert stack == [1]


def test_bool_claims_l_and_r_without_handling():
    fp = make(FingerprintBOOL)
    assert ord("L") in fp.instructions
    assert fp.execute(ord("L")) is False
    assert fp.execute(ord("R")) is False


@pytest.mark.parametrize("b", [-17, -3, 0, 4, 22])
@pytest.mark.parametrize("a", [3, 5])
def test_modu_m_is_non_negative_residue(b, a):
    _, stack = run(make(FingerprintMODU), "M", b, a)
    r = stack[0]
    assert 0 <= r < a
    assert (b - r) % a == 0


@pytest.mark.parametrize("b,a", [(-7, 3), (7, -3), (-7, -3), (7, 3)])
def test_modu_r_follows_dividend_and_u_is_absolute(b, a):
    _, rem = run(make(FingerprintMODU), "R", b, a)
    _, unsigned = run(make(FingerprintMODU), "U", b, a)
    assert unsigned[0] >= 0
    assert abs(rem[0]) == unsigned[0]
    assert rem[0] == 0 or (rem[0] < 0) == (b < 0)


@pytest.mark.parametrize("cmd", ["M", "R", "U"])
def test_modu_zero_divisor_gives_zero(cmd):
    _, stack = run(make(FingerprintMODU), cmd, 9, 0)
    assert stack == [0]


def test_cpli_add_then_subtract_round_trips():
    fp = make(FingerprintCPLI)
    run(fp, "A", 3, 4, 1, 2)
    _, stack = run(fp, "S", 1, 2)
    assert stack == [4, 3]


def test_cpli_i_squared_is_minus_one():
    _, stack = run(make(FingerprintCPLI), "M", 0, 1, 0, 1)
    assert stack == [0, -1]


def test_cpli_divide_undoes_multiply():
    fp = make(FingerprintCPLI)
    run(fp, "M", 3, 4, 1, 2)
    _, stack = run(fp, "D", 1, 2)
    assert stack == [4, 3]


def test_cpli_divide_by_zero_gives_zero():
    _, stack = run(make(FingerprintCPLI), "D", 3, 4, 0, 0)
    assert stack == [0, 0]


def test_cpli_magnitude():
    _, stack = run(make(FingerprintCPLI), "V", 3, 4)
    assert stack == [5]


@pytest.mark.parametrize(
    "real,imag,text",
    [(3, 0, "3 "), (0, 4, "4i "), (3, -4, "3-4i "), (3, 4, "3+4i ")],
)
def test_cpli_output(real, imag, text, capsys):
    _, stack = run(make(FingerprintCPLI), "O", real, imag)
    assert capsys.readouterr().out == text
    assert stack == []


@pytest.mark.parametrize(
    "letter,value",
    [("C", 100), ("D", 500), ("I", 1), ("L", 50), ("M", 1000), ("V", 5), ("X", 10)],
)
def test_roma_values(letter, value):
    _, stack = run(make(FingerprintROMA), letter)
    assert stack == [value]


def test_null_reflects_on_every_letter():
    fp = make(FingerprintNULL)
    assert len(fp.instructions) == 26
    fp.ip.set_delta(Vector(0, 1))
    assert fp.execute(ord("Q")) is True
    assert fp.ip.delta == -Vector(0, 1)
    assert fp.execute(ord("a")) is False


@pytest.mark.parametrize(
    "letter,attr",
    [("H", "hovermode"), ("I", "invertmode"), ("Q", "queuemode"), ("S", "switchmode")],
)
def test_mode_toggles(letter, attr):
    fp = make(FingerprintMODE)
    before = getattr(fp.config, attr)
    assert fp.execute(ord(letter)) is True
    assert getattr(fp.config, attr) is (not before)
    fp.execute(ord(letter))
    assert getattr(fp.config, attr) is before


def test_mode_queue_changes_pop_order():
    fp = make(FingerprintMODE)
    fp.execute(ord("Q"))
    top = fp.stack.top()
    top.push(11)
    top.push(22)
    assert top.pop() == 11