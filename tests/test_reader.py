import io
from string import ascii_letters

import pytest
from hypothesis import given, strategies as st

from banglisp.errors import BangSyntaxError
from banglisp.reader.parser import Reader
from banglisp.runtime_context import RuntimeContext
from banglisp.types.object import Kind
from banglisp.types.symbol import NIL


@pytest.mark.parametrize(
    "source, kind, expected",
    [
        ("42", Kind.FIXNUM, 42),
        ("0", Kind.FIXNUM, 0),
        ("-7", Kind.FIXNUM, -7),
        ("3.25", Kind.FLOAT, 3.25),
        ("-0.5", Kind.FLOAT, -0.5),
        ("10.0", Kind.FLOAT, 10.0),
        ('"hello"', Kind.STRING, "hello"),
        ('""', Kind.STRING, ""),
        (r'"a\nb"', Kind.STRING, "a\nb"),
        (r'"say \"hi\""', Kind.STRING, 'say "hi"'),
        (r'"back\\slash"', Kind.STRING, "back\\slash"),
        (r'"\q"', Kind.STRING, "q"),
    ],
)
def test_read_literals(read, source, kind, expected):
    obj = read(source)
    assert obj.kind is kind
    assert obj.payload == expected
    assert type(obj.payload) is type(expected)


@pytest.mark.parametrize("name", ["foo", "+", "-", "<=", "let*", "&rest", "a1", "null?", "set!", "x_y", "%"])
def test_read_symbols(read, name):
    obj = read(name)
    assert obj.kind is Kind.SYMBOL
    assert obj.payload.name_str == name


@pytest.mark.parametrize(
    "source, rendered",
    [
        ("(1 2 3)", "(1 2 3)"),
        ("(a (b c) d)", "(a (b c) d)"),
        ("(a . b)", "(a . b)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("(a . (b c))", "(a b c)"),
        ("'x", "(quote x)"),
        ("'(1 2)", "(quote (1 2))"),
        ("#'car", "(function car)"),
        ("(1 ; comment\n 2)", "(1 2)"),
        ("  ; leading comment\n  42", "42"),
        ('("a" 1.5)', '("a" 1.5E+00)'),
        ("(-)", "(-)"),
        ("(- 1)", "(- 1)"),
    ],
)
def test_read_structure(read, source, rendered):
    assert str(read(source)) == rendered


def test_empty_list_is_nil(read):
    assert read("()") is NIL
    assert read("nil") is NIL
    assert read("( )") is NIL


def test_dotted_pair_cells(read):
    pair = read("(a . 1)")
    assert pair.kind is Kind.CONS_CELL
    assert pair.payload.car.payload.name_str == "a"
    assert pair.payload.cdr.kind is Kind.FIXNUM


@pytest.mark.parametrize(
    "source",
    [
        "1.2.3",
        "12abc",
        "1.",
        '"abc',
        '"abc\\',
        "(1 2",
        "(1 (2 3)",
        "(a . b c)",
        "(a . b",
        "( . a)",
        "(a .b)",
        "foo'bar",
        ")",
        "@",
        "'",
        "[1]",
    ],
)
def test_read_errors(read, source):
    with pytest.raises(BangSyntaxError):
        read(source)


@pytest.mark.parametrize(
    "source",
    [
        "9223372036854775808",
        "-9223372036854775809",
        "1" + "0" * 5000,
        "-" + "9" * 5000,
        "1" + "0" * 400 + ".5",
    ],
)
def test_out_of_range_number_literals(read, source):
    with pytest.raises(BangSyntaxError) as err:
        read(source)
    assert "out of range" in str(err.value)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
        ("000000000000000000000042", 42),
    ],
)
def test_fixnum_range_edges(read, source, expected):
    assert read(source).payload == expected


def test_syntax_error_reports_line(ctx):
    reader = Reader.from_string("1\n\n(1 2", ctx)
    reader.read()
    with pytest.raises(BangSyntaxError) as err:
        reader.read()
    assert err.value.line == 3


def test_reads_consecutive_forms(ctx):
    reader = Reader(io.StringIO('(a b) 42 "s"\n; trailing comment'), ctx)
    assert str(reader.read()) == "(a b)"
    assert reader.read().payload == 42
    assert reader.read().payload == "s"
    assert reader.read() is None
    assert reader.read() is None


def test_read_stops_after_expression(ctx):
    reader = Reader(io.StringIO("foo(bar)"), ctx)
    assert str(reader.read()) == "foo"
    assert str(reader.read()) == "(bar)"


def test_read_all(ctx):
    forms = list(Reader.from_string("1 2 (3)", ctx).read_all())
    assert [str(f) for f in forms] == ["1", "2", "(3)"]


def test_same_spelling_reads_as_same_symbol(read):
    assert read("foo") is read("foo")
    lst = read("(foo (bar foo))")
    inner = lst.payload.cdr.payload.car
    assert lst.payload.car is inner.payload.cdr.payload.car


def test_equal_number_literals_are_distinct_objects(read):
    a, b = read("1"), read("1")
    assert a.payload == b.payload
    assert a is not b
    assert a.id != b.id


def test_symbols_are_interned_per_context():
    first, second = RuntimeContext(), RuntimeContext()
    assert Reader.from_string("foo", first).read() is not Reader.from_string("foo", second).read()


def test_quote_uses_interned_quote_symbol(ctx, read):
    assert read("'x").payload.car is ctx.intern("quote")


def test_discard_line(ctx):
    reader = Reader.from_string("1 2 3\n4", ctx)
    assert reader.read().payload == 1
    reader.discard_line()
    assert reader.read().payload == 4


@given(st.integers(min_value=-2**63, max_value=2**63 - 1))
def test_integer_literals(n):
    obj = Reader.from_string(str(n), RuntimeContext()).read()
    assert obj.kind is Kind.FIXNUM
    assert obj.payload == n


@given(st.text(alphabet=ascii_letters, min_size=1, max_size=12))
def test_interning_is_stable(name):
    ctx = RuntimeContext()
    reader = Reader.from_string(f"{name} ({name})", ctx)
    sym = reader.read()
    assert reader.read().payload.car is sym
    assert sym is ctx.intern(name)
