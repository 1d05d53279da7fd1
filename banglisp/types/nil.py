from __future__ import annotations

from banglisp.types.object import Object
from banglisp.types.symbol import NIL, T


def is_null(obj: Object) -> bool:
    return obj is NIL


def is_true(obj: Object) -> bool:
    """Anything but nil counts as true in a conditional."""
    return obj is not NIL


def to_boolean(flag: bool) -> Object:
    return T if flag else NIL


__all__ = ["NIL", "T", "is_null", "is_true", "to_boolean"]
