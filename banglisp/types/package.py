"""Packages: the name -> symbol tables that make interning possible."""

from __future__ import annotations

import logging

from banglisp.errors import BangTypeError
from banglisp.types.object import Kind, Object, make_string
from banglisp.types.symbol import make_symbol

logger = logging.getLogger(__name__)


class Package:
    __slots__ = ("name", "table")

    def __init__(self, name: Object):
        self.name: Object = name
        self.table: dict[str, Object] = {}

    @property
    def name_str(self) -> str:
        return self.name.payload

    def find_symbol(self, name: str) -> Object | None:
        return self.table.get(name)

    def import_symbol(self, sym: Object) -> None:
        """Register an already existing symbol under its own name."""
        if sym.kind is not Kind.SYMBOL:
            raise BangTypeError(f"cannot import non-symbol {sym} into {self.name_str}")
        self.table[sym.payload.name_str] = sym

    def __repr__(self):
        return f"Package({self.name_str!r}, {len(self.table)} symbols)"


def make_package(name: str) -> Object:
    return Object(Kind.PACKAGE, Package(make_string(name)))


def intern(name: str, package: Object) -> Object:
    """Return the one symbol called `name` in `package`, creating it if needed."""
    pkg: Package = package.payload
    sym = pkg.find_symbol(name)
    if sym is None:
        sym = make_symbol(name, package)
        pkg.table[name] = sym
        logger.debug("interned %s in %s", name, pkg.name_str)
    return sym
