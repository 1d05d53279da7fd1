"""Textual rendering of objects, the only serialized form banglisp has.

- fixnums as decimal
- floats in shortest round-trip scientific notation (``3.14E+00``)
- strings double-quoted with their escapes restored
- symbols by name, lists in parens with `` . tail`` for an improper tail
- function kinds and packages as opaque ``#<...>`` tokens
"""

from __future__ import annotations

from io import StringIO

import numpy as np

from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL

_STRING_ESCAPES = str.maketrans({'"': '\\"', "\\": "\\\\", "\n": "\\n"})


def format_float(value: float) -> str:
    if not np.isfinite(value):
        return str(value).upper()
    return np.format_float_scientific(value, unique=True, trim="-", exp_digits=2).upper()


def _write_list(buffer: StringIO, obj: Object) -> None:
    buffer.write("(")
    node = obj
    first = True
    while node is not NIL:
        if not first:
            buffer.write(" ")
        first = False
        cell = node.payload
        _write(buffer, cell.car)
        node = cell.cdr
        if node is not NIL and node.kind is not Kind.CONS_CELL:
            buffer.write(" . ")
            _write(buffer, node)
            break
    buffer.write(")")


def _write(buffer: StringIO, obj: Object) -> None:
    match obj.kind:
        case Kind.FIXNUM:
            buffer.write(str(obj.payload))
        case Kind.FLOAT:
            buffer.write(format_float(obj.payload))
        case Kind.STRING:
            buffer.write('"' + obj.payload.translate(_STRING_ESCAPES) + '"')
        case Kind.SYMBOL:
            buffer.write(obj.payload.name_str)
        case Kind.CONS_CELL:
            _write_list(buffer, obj)
        case Kind.PACKAGE:
            buffer.write(f"#<package {obj.payload.name_str}>")
        case Kind.SPECIAL_FORM:
            buffer.write(f"#<special-form {obj.payload.name}>")
        case Kind.BUILTIN_FUNCTION:
            buffer.write(f"#<builtin {obj.payload.name}>")
        case Kind.CLOSURE:
            name = obj.payload.name
            buffer.write(f"#<function {name.payload.name_str if name is not None else 'lambda'}>")


def to_string(obj: Object) -> str:
    with StringIO() as buffer:
        _write(buffer, obj)
        return buffer.getvalue()
