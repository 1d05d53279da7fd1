from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from banglisp import LispValue
from banglisp.errors import BangWrongNumberOfArguments
from banglisp.types.object import Kind, Object

# (args, env, ctx, evaluate_fn) -> Object
NativeCode = Callable[..., LispValue]


@dataclass(frozen=True)
class NativeFunction:
    """Payload shared by special forms and builtin functions."""

    name: str
    code: NativeCode
    arity: int
    variadic: bool = False

    def check_arity(self, got: int) -> None:
        if self.variadic:
            if got < self.arity:
                raise BangWrongNumberOfArguments(self.arity, True, got)
        elif got != self.arity:
            raise BangWrongNumberOfArguments(self.arity, False, got)


def make_special_form(name: str, code: NativeCode, arity: int, variadic: bool = False) -> Object:
    return Object(Kind.SPECIAL_FORM, NativeFunction(name, code, arity, variadic))


def make_builtin(name: str, code: NativeCode, arity: int, variadic: bool = False) -> Object:
    return Object(Kind.BUILTIN_FUNCTION, NativeFunction(name, code, arity, variadic))
