from typing import Iterable

from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.types.environment import Environment
from banglisp.types.symbol import NIL


def evaluate_body(body: Iterable[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    result: LispValue = NIL
    for expr in body:
        result = evaluate_fn(expr, env, ctx)
    return result


def progn_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_body(tail, env, ctx, evaluate_fn)
