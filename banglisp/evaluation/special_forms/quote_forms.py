from __future__ import annotations

from banglisp import EvaluatorFn, LispValue, SExpression
from banglisp.errors import BangTypeError
from banglisp.evaluation.apply import resolve_function
from banglisp.types.environment import Environment
from banglisp.types.object import Kind


def quote_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (quote expr)
    return tail[0]


def function_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """(function name) returns the function bound to `name` without calling it;
    (function (lambda ...)) builds the closure."""
    arg = tail[0]
    if arg.kind is Kind.SYMBOL:
        return resolve_function(arg)
    if (
        arg.kind is Kind.CONS_CELL
        and arg.payload.car.kind is Kind.SYMBOL
        and arg.payload.car.payload.name_str == "lambda"
    ):
        return evaluate_fn(arg, env, ctx)
    raise BangTypeError(f"function expects a symbol or a lambda expression, got {arg}")
