"""let and let*.

`let` evaluates every initializer in the enclosing environment and only then
makes the new bindings visible, all in one frame. `let*` binds one frame per
variable so each initializer sees the variables before it. Either way every
frame pushed is popped again, also when the body fails.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Optional

from banglisp import EvaluatorFn, LispValue, SExpression
from banglisp.errors import BangTypeError
from banglisp.evaluation.special_forms.progn_form import evaluate_body
from banglisp.types.cons import to_pylist
from banglisp.types.environment import Environment, Frame
from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL, check_variable


def _parse_binding(spec: Object) -> tuple[Object, Optional[Object]]:
    """`name`, `(name)` or `(name init)` -> (name, init or None)."""
    if spec.kind is Kind.SYMBOL:
        return check_variable(spec, "let variable"), None
    if spec.kind is Kind.CONS_CELL:
        items = to_pylist(spec)
        if len(items) in (1, 2):
            return check_variable(items[0], "let variable"), items[1] if len(items) == 2 else None
    raise BangTypeError(f"malformed let binding: {spec}")


def _parse_bindings(bindings: Object) -> list[tuple[Object, Optional[Object]]]:
    if bindings is not NIL and bindings.kind is not Kind.CONS_CELL:
        raise BangTypeError(f"let bindings must be a list, got {bindings}")
    return [_parse_binding(spec) for spec in to_pylist(bindings)]


def let_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (let ((var init)...) body...)
    bindings, *body = tail
    frame = Frame()
    for name, init in _parse_bindings(bindings):
        value = evaluate_fn(init, env, ctx) if init is not None else NIL
        frame.add_binding(name, value)

    with env.scope(frame):
        return evaluate_body(body, env, ctx, evaluate_fn)


def let_star_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (let* ((var init)...) body...)
    bindings, *body = tail
    with ExitStack() as stack:
        for name, init in _parse_bindings(bindings):
            value = evaluate_fn(init, env, ctx) if init is not None else NIL
            frame = Frame()
            frame.add_binding(name, value)
            stack.enter_context(env.scope(frame))
        return evaluate_body(body, env, ctx, evaluate_fn)
