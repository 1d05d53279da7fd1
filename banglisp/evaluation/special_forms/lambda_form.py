from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.types.closure import make_closure
from banglisp.types.environment import Environment


def lambda_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda (params...) body...)
    # Zero body forms is allowed; calling the closure then returns nil.
    params, *body = tail
    return make_closure(None, params, body, env)
