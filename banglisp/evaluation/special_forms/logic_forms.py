from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.types.environment import Environment
from banglisp.types.nil import NIL, T, to_boolean


def not_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """(not x) is t exactly when x evaluates to nil."""
    return to_boolean(evaluate_fn(tail[0], env, ctx) is NIL)


def and_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until one is nil,
    which is returned immediately. If all operands are non-nil, returns the
    value of the last operand. With zero operands, returns t.
    """
    result: LispValue = T
    for expr in tail:
        result = evaluate_fn(expr, env, ctx)
        if result is NIL:
            return NIL
    return result


def or_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first non-nil operand value without evaluating
    the rest, or nil when every operand is nil (or there are none).
    """
    for expr in tail:
        val = evaluate_fn(expr, env, ctx)
        if val is not NIL:
            return val
    return NIL
