import pytest

from fungeplus.config import FungeConfig, Topology
from fungeplus.field import Field
from fungeplus.pointer import InstructionPointer
from fungeplus.vector import Vector


@pytest.fixture
def config():
    return FungeConfig(dimensions=2)


@pytest.fixture
def field(config):
    f = Field(config)
    for x, ch in enumerate("abc"):
        f.set(Vector(x, 0), ord(ch))
    return f


@pytest.fixture
def ip(field, config):
    return InstructionPointer(field, config)


def test_starts_at_origin_heading_east(ip):
    assert ip.pos == Vector(0)
    assert ip.delta == Vector(1)
    assert ip.storage == Vector(0)
    assert ip.current() == ord("a")


def test_next_moves_by_delta(ip):
    ip.next()
    assert ip.pos == Vector(1, 0)
    assert ip.current() == ord("b")


def test_lahey_wraps_east_edge_to_west(ip, field):
    ip.pos = Vector(2, 0)
    ip.next()
    assert ip.pos == Vector(field.min(0), 0)
    assert ip.delta == Vector(1)


def test_lahey_wraps_west_edge_to_east(ip, field):
    ip.set_delta(Vector(-1))
    ip.next()
    assert ip.pos == Vector(field.max(0), 0)
    assert ip.current() == ord("c")


def test_torus_wraps_past_right_edge(ip, config):
    config.topo = Topology.TORUS
    ip.pos = Vector(80, 0)
    ip.next()
    assert ip.pos[0] == 0


def test_torus_wraps_past_left_edge(ip, config):
    config.topo = Topology.TORUS
    ip.set_delta(Vector(-1))
    ip.next()
    assert ip.pos[0] == 79


def test_torus_wraps_vertically(ip, config):
    config.topo = Topology.TORUS
    ip.set_delta(Vector(0, -1))
    ip.next()
    assert ip.pos[1] == 24
    ip.pos = Vector(0, 25)
    ip.set_delta(Vector(0, 1))
    ip.next()
    assert ip.pos[1] == 0


def test_reverse_negates_delta(ip):
    ip.set_delta(Vector(2, -3))
    ip.reverse()
    assert ip.delta == -Vector(2, -3)


def test_left_and_right_are_inverse(ip):
    start = Vector(2, -3)
    ip.set_delta(start)
    ip.left()
    assert ip.delta == start.left()
    ip.right()
    assert ip.delta == start


def test_hover_mode_adds_delta(ip, config):
    config.hovermode = True
    ip.set_delta(Vector(0, 1))
    assert ip.delta == Vector(1) + Vector(0, 1)


def test_stopped_pointer_does_not_move(ip):
    ip.stop()
    ip.next()
    assert ip.stopped is True
    assert ip.pos == Vector(0)


def test_write_sets_cell_under_pointer(ip, field):
    ip.pos = Vector(5, 5)
    ip.write(ord("z"))
    assert field.get(Vector(5, 5)) == ord("z")
    assert ip.current() == ord("z")


def test_copy_has_new_id_and_independent_motion(ip):
    ip.storage = Vector(4, 4)
    clone = ip.copy()
    assert clone.id > ip.id
    assert clone.pos == ip.pos
    assert clone.storage == ip.storage
    clone.next()
    assert ip.pos == Vector(0)
    assert clone.pos == Vector(1)


def test_str_shows_position(ip):
    ip.pos = Vector(2, 7)
    assert str(ip) == str(Vector(2, 7))