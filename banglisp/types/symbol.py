from __future__ import annotations

from banglisp.errors import BangConstantError, BangTypeError
from banglisp.types.object import Kind, Object, make_string


class Symbol:
    """Payload of a SYMBOL object.

    The value and function cells are independent: assigning one never touches
    the other. An unbound value cell is ``None``; an empty function cell and
    an empty property list are ``NIL``.
    """

    __slots__ = ("name", "value", "function", "plist", "package", "constant")

    def __init__(self, name: Object, package: Object | None = None):
        self.name: Object = name
        self.value: Object | None = None
        self.function: Object = NIL
        self.plist: Object = NIL
        self.package: Object | None = package
        self.constant: bool = False

    @property
    def name_str(self) -> str:
        return self.name.payload

    def __repr__(self):
        return f"Symbol({self.name_str!r})"


def make_symbol(name: str, package: Object | None = None) -> Object:
    """Create a fresh, uninterned symbol."""
    return Object(Kind.SYMBOL, Symbol(make_string(name), package))


def _make_nil() -> Object:
    # nil is its own value, function-less, and has an empty plist (itself)
    sym = Symbol.__new__(Symbol)
    nil = Object(Kind.SYMBOL, sym)
    sym.name = make_string("nil")
    sym.value = nil
    sym.function = nil
    sym.plist = nil
    sym.package = None
    sym.constant = True
    return nil


NIL: Object = _make_nil()


def _make_t() -> Object:
    t = make_symbol("t")
    t.payload.value = t
    t.payload.constant = True
    return t


T: Object = _make_t()


def check_variable(obj: Object, what: str = "variable") -> Object:
    """Ensure `obj` is a symbol that may be bound; return it."""
    if obj.kind is not Kind.SYMBOL:
        raise BangTypeError(f"{what} must be a symbol, got {obj}")
    if obj.payload.constant:
        raise BangConstantError(obj.payload.name_str)
    return obj
