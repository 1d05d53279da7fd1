from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.types.environment import Environment
from banglisp.types.symbol import check_variable


def setq_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """(setq var value)

    Assigns the innermost lexical binding of `var` when there is one,
    otherwise its global value cell. Returns the assigned value.
    """
    var_sym, val_expr = tail
    check_variable(var_sym, "setq target")
    value = evaluate_fn(val_expr, env, ctx)
    if not env.update_value(var_sym, value):
        var_sym.payload.value = value
    return value
