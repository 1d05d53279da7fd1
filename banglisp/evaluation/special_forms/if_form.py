from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.types.environment import Environment
from banglisp.types.nil import NIL, is_true


def if_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (if cond then else...)
    cond = evaluate_fn(tail[0], env, ctx)

    if is_true(cond):
        return evaluate_fn(tail[1], env, ctx)

    # Several else-forms run in order like an implicit progn
    result: LispValue = NIL
    for expr in tail[2:]:
        result = evaluate_fn(expr, env, ctx)
    return result
