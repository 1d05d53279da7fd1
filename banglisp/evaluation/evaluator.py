"""Core evaluator for banglisp.

Numbers and strings evaluate to themselves, symbols through the lexical
environment and then their global value cell, and a cons cell is an
invocation of the function bound to the symbol in its car.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banglisp import LispValue
from banglisp.errors import BangTypeError, BangUnboundVariable, BangUndefinedFunction
from banglisp.evaluation.apply import apply
from banglisp.types.environment import Environment
from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL

if TYPE_CHECKING:
    from banglisp.runtime_context import RuntimeContext


def evaluate(expr: Object, env: Environment, ctx: RuntimeContext) -> LispValue:
    match expr.kind:
        case Kind.FIXNUM | Kind.FLOAT | Kind.STRING:
            return expr

        case Kind.SYMBOL:
            value = env.lookup(expr)
            if value is not None:
                return value
            value = expr.payload.value
            if value is None:
                raise BangUnboundVariable(expr.payload.name_str)
            return value

        case Kind.CONS_CELL:
            head = expr.payload.car
            if head.kind is not Kind.SYMBOL:
                raise BangTypeError(f"first element of cons cell is not a symbol: {expr}")
            operator = head.payload.function
            if operator is NIL:
                raise BangUndefinedFunction(head.payload.name_str)
            return apply(operator, expr.payload.cdr, env, ctx, evaluate)

        case _:
            raise BangTypeError(f"cannot evaluate {expr.kind} object {expr}")
