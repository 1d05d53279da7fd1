import pytest

from banglisp.errors import BangTypeError, BangUnsupportedArgumentType
from banglisp.types import (
    NIL,
    T,
    Kind,
    car,
    cdr,
    cons,
    eq,
    intern,
    is_atom,
    is_null,
    make_fixnum,
    make_float,
    make_list,
    make_number,
    make_package,
    make_string,
    make_symbol,
    to_pylist,
)
from banglisp.types.cons import list_length


def test_nil_is_self_referential():
    assert car(NIL) is NIL
    assert cdr(NIL) is NIL
    assert NIL.payload.value is NIL
    assert NIL.payload.plist is NIL
    assert NIL.payload.constant


def test_t_evaluates_to_itself():
    assert T.payload.value is T
    assert T.payload.constant


def test_is_null_only_for_the_singleton():
    assert is_null(NIL)
    assert not is_null(make_symbol("nil"))
    assert not is_null(T)
    assert not is_null(make_fixnum(0))


@pytest.mark.parametrize(
    "obj, expected",
    [
        (make_fixnum(1), True),
        (make_float(1.5), True),
        (make_string("s"), True),
        (make_symbol("s"), True),
        (NIL, True),
        (cons(make_fixnum(1), NIL), False),
        (make_package("p"), False),
    ],
)
def test_is_atom(obj, expected):
    assert is_atom(obj) is expected


def test_function_kinds_are_not_atoms(ctx):
    assert not is_atom(ctx.intern("car").payload.function)
    assert not is_atom(ctx.intern("if").payload.function)


def test_eq_is_identity():
    a, b = make_fixnum(7), make_fixnum(7)
    assert eq(a, a)
    assert not eq(a, b)


def test_ids_are_monotonic():
    first, second, third = make_string("a"), make_string("a"), make_fixnum(1)
    assert first.id < second.id < third.id


def test_make_number_keeps_numeric_kind():
    assert make_number(3).kind is Kind.FIXNUM
    assert make_number(3.0).kind is Kind.FLOAT


def test_interning_is_per_package():
    p1, p2 = make_package("one"), make_package("two")
    x1 = intern("x", p1)
    assert intern("x", p1) is x1
    x2 = intern("x", p2)
    assert x2 is not x1
    assert str(x1) == str(x2) == "x"
    assert x1.payload.package is p1
    assert x2.payload.package is p2


def test_value_and_function_cells_are_independent():
    sym = make_symbol("f")
    sym.payload.value = make_fixnum(1)
    assert sym.payload.function is NIL
    assert sym.payload.plist is NIL


def test_list_helpers():
    items = [make_fixnum(i) for i in range(3)]
    lst = make_list(items)
    assert to_pylist(lst) == items
    assert list_length(lst) == 3
    assert to_pylist(NIL) == []


def test_improper_list_is_rejected():
    dotted = make_list([make_fixnum(1)], make_fixnum(2))
    with pytest.raises(BangTypeError):
        to_pylist(dotted)


def test_car_of_non_list():
    with pytest.raises(BangUnsupportedArgumentType):
        car(make_fixnum(1))
    with pytest.raises(BangUnsupportedArgumentType):
        cdr(make_string("x"))


@pytest.mark.parametrize(
    "obj, expected",
    [
        (make_fixnum(42), "42"),
        (make_fixnum(-3), "-3"),
        (make_float(3.14), "3.14E+00"),
        (make_float(1.0), "1E+00"),
        (make_float(-0.5), "-5E-01"),
        (make_float(12345.678), "1.2345678E+04"),
        (make_string("hi"), '"hi"'),
        (make_string('a"b'), '"a\\"b"'),
        (make_string("line\nbreak"), '"line\\nbreak"'),
        (NIL, "nil"),
        (make_list([make_fixnum(1), make_string("a")]), '(1 "a")'),
        (cons(make_fixnum(1), make_fixnum(2)), "(1 . 2)"),
        (make_list([make_fixnum(1), make_fixnum(2)], make_fixnum(3)), "(1 2 . 3)"),
        (make_list([make_list([make_fixnum(1)]), NIL]), "((1) nil)"),
    ],
)
def test_rendering(obj, expected):
    assert str(obj) == expected


def test_rendering_of_opaque_objects(interp):
    assert str(interp.eval("#'car")) == "#<builtin car>"
    assert str(interp.eval("#'if")) == "#<special-form if>"
    assert str(interp.eval("(lambda (x) x)")) == "#<function lambda>"
    interp.eval("(defun square (x) (* x x))")
    assert str(interp.eval("#'square")) == "#<function square>"
    assert str(interp.ctx.default_package) == "#<package CL-USER>"
