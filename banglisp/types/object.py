"""Tagged heap objects.

Every value the reader produces and the evaluator manipulates is an
:class:`Object`: a unique, never-reused id, a :class:`Kind` tag and a
kind-specific payload. Objects are never reclaimed, so ids only grow.
"""

from __future__ import annotations

import enum
from itertools import count

_next_id = count()

# fixnums are 64-bit signed integers
FIXNUM_MIN = -(2**63)
FIXNUM_MAX = 2**63 - 1


class Kind(enum.Enum):
    FIXNUM = 1
    FLOAT = 2
    STRING = 3
    SYMBOL = 4
    PACKAGE = 5
    CONS_CELL = 6
    SPECIAL_FORM = 7
    BUILTIN_FUNCTION = 8
    CLOSURE = 9

    def __str__(self) -> str:
        return self.name


ATOM_KINDS = frozenset({Kind.FIXNUM, Kind.FLOAT, Kind.STRING, Kind.SYMBOL})
NUMBER_KINDS = frozenset({Kind.FIXNUM, Kind.FLOAT})
FUNCTION_KINDS = frozenset({Kind.SPECIAL_FORM, Kind.BUILTIN_FUNCTION, Kind.CLOSURE})


class Object:
    """A tagged value with identity; equality is identity."""

    __slots__ = ("id", "kind", "payload")

    def __init__(self, kind: Kind, payload):
        self.id: int = next(_next_id)
        self.kind: Kind = kind
        self.payload = payload

    def __str__(self) -> str:
        from banglisp.printer import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f"<Object #{self.id} {self.kind}: {self}>"


def make_fixnum(value: int) -> Object:
    return Object(Kind.FIXNUM, int(value))


def make_float(value: float) -> Object:
    return Object(Kind.FLOAT, float(value))


def make_number(value: int | float) -> Object:
    """Box a Python number, keeping the integer/float distinction."""
    if isinstance(value, float):
        return make_float(value)
    return make_fixnum(value)


def in_fixnum_range(value: int) -> bool:
    return FIXNUM_MIN <= value <= FIXNUM_MAX


def make_string(value: str) -> Object:
    return Object(Kind.STRING, value)


def eq(a: Object, b: Object) -> bool:
    return a.id == b.id


def is_atom(obj: Object) -> bool:
    return obj.kind in ATOM_KINDS


def is_number(obj: Object) -> bool:
    return obj.kind in NUMBER_KINDS


def is_function(obj: Object) -> bool:
    return obj.kind in FUNCTION_KINDS

