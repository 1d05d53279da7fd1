"""Cons cells and the list helpers built on them.

Every traversal checks for nil before touching car/cdr, so the
self-referential nil singleton never causes an infinite walk.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from banglisp.errors import BangTypeError, BangUnsupportedArgumentType
from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL


class ConsCell:
    __slots__ = ("car", "cdr")

    def __init__(self, car: Object, cdr: Object):
        self.car: Object = car
        self.cdr: Object = cdr


def cons(car: Object, cdr: Object) -> Object:
    return Object(Kind.CONS_CELL, ConsCell(car, cdr))


def is_cons(obj: Object) -> bool:
    return obj.kind is Kind.CONS_CELL


def car(obj: Object, operation: str = "car") -> Object:
    if obj is NIL:
        return NIL
    if obj.kind is not Kind.CONS_CELL:
        raise BangUnsupportedArgumentType(operation, obj)
    return obj.payload.car


def cdr(obj: Object, operation: str = "cdr") -> Object:
    if obj is NIL:
        return NIL
    if obj.kind is not Kind.CONS_CELL:
        raise BangUnsupportedArgumentType(operation, obj)
    return obj.payload.cdr


def make_list(items: Iterable[Object], tail: Object = NIL) -> Object:
    """Build a list from `items`, ending in `tail` (nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = cons(item, result)
    return result


def iter_list(obj: Object) -> Iterator[Object]:
    """Yield the elements of a proper list; an improper tail is an error."""
    node = obj
    while node is not NIL:
        if node.kind is not Kind.CONS_CELL:
            raise BangTypeError(f"not a proper list: {obj}")
        yield node.payload.car
        node = node.payload.cdr


def to_pylist(obj: Object) -> list[Object]:
    return list(iter_list(obj))


def list_length(obj: Object) -> int:
    return sum(1 for _ in iter_list(obj))
