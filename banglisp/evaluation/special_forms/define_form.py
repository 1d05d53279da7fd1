from banglisp import EvaluatorFn
from banglisp import SExpression, LispValue
from banglisp.errors import BangConstantError, BangTypeError
from banglisp.types.closure import make_closure
from banglisp.types.environment import Environment
from banglisp.types.object import Kind


def defun_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (defun name (params...) body...)
    Interns `name` in the current package and stores a named closure in its
    function cell. The value cell is left alone. Returns the name symbol.
    """
    name, params, *body = tail
    if name.kind is not Kind.SYMBOL:
        raise BangTypeError(f"defun name must be a symbol, got {name}")

    sym = ctx.intern(name.payload.name_str)
    if sym.payload.constant:
        raise BangConstantError(sym.payload.name_str)
    if sym.payload.function.kind is Kind.SPECIAL_FORM:
        raise BangTypeError(f"cannot redefine special form {sym}")

    sym.payload.function = make_closure(sym, params, body, env)
    return sym
