import pytest

from banglisp.errors import BangError
from banglisp.types import Environment, Frame, make_fixnum, make_package, make_symbol, intern


@pytest.fixture
def x():
    return make_symbol("x")


def frame_of(*pairs):
    frame = Frame()
    for sym, value in pairs:
        frame.add_binding(sym, value)
    return frame


def test_lookup_miss_returns_none(x):
    assert Environment().lookup(x) is None


def test_innermost_frame_wins(x):
    env = Environment()
    outer, inner = make_fixnum(1), make_fixnum(2)
    env.push_frame(frame_of((x, outer)))
    env.push_frame(frame_of((x, inner)))
    assert env.lookup(x) is inner
    env.pop_frame()
    assert env.lookup(x) is outer


def test_first_binding_in_a_frame_wins(x):
    first, second = make_fixnum(1), make_fixnum(2)
    env = Environment([frame_of((x, first), (x, second))])
    assert env.lookup(x) is first


def test_lookup_compares_identity_not_name():
    a = intern("x", make_package("a"))
    b = intern("x", make_package("b"))
    env = Environment([frame_of((a, make_fixnum(1)))])
    assert env.lookup(a) is not None
    assert env.lookup(b) is None


def test_update_value(x):
    y = make_symbol("y")
    env = Environment([frame_of((x, make_fixnum(1))), frame_of((x, make_fixnum(2)))])
    new = make_fixnum(3)
    assert env.update_value(x, new)
    assert env.lookup(x) is new
    # only the innermost binding changes
    assert env.frames[1].bindings[0].value.payload == 2
    assert not env.update_value(y, new)


def test_scope_pops_on_error(x):
    env = Environment()
    with pytest.raises(RuntimeError):
        with env.scope(frame_of((x, make_fixnum(1))), Frame()):
            assert env.depth == 2
            raise RuntimeError("boom")
    assert env.depth == 0


def test_scope_pushes_last_frame_innermost(x):
    env = Environment()
    with env.scope(frame_of((x, make_fixnum(1))), frame_of((x, make_fixnum(2)))):
        assert env.lookup(x).payload == 2


def test_pop_more_than_pushed(x):
    env = Environment([Frame()])
    with pytest.raises(BangError):
        env.pop_frame(2)
    assert env.depth == 1


def test_capture_shares_frames_not_the_stack(x):
    env = Environment()
    env.push_frame(frame_of((x, make_fixnum(1))))
    captured = env.capture()
    env.pop_frame()
    assert env.lookup(x) is None
    assert captured.lookup(x).payload == 1

    captured.update_value(x, make_fixnum(5))
    env.push_frame(captured.frames[0])
    assert env.lookup(x).payload == 5


def test_str_and_repr(x):
    env = Environment([frame_of((x, make_fixnum(1))), Frame()])
    assert str(env) == "{x: 1} -> ..."
    assert repr(env) == "<Environment chain: {x: 1} -> {}>"
