"""Application engine for banglisp.

The set of operator kinds is closed, so dispatch is one match over the kind:

- special forms receive their arguments unevaluated, arity-checked first;
- builtins get their arguments evaluated left to right, then arity-checked;
- closures get evaluated arguments bound into a frame on their captured
  environment.

`apply_values` is the same dispatch for arguments that were already
evaluated (funcall and apply).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from banglisp import EvaluatorFn, LispValue
from banglisp.errors import BangTypeError, BangUndefinedFunction
from banglisp.types.cons import to_pylist
from banglisp.types.environment import Environment
from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL

if TYPE_CHECKING:
    from banglisp.runtime_context import RuntimeContext


def _argument_list(raw_args: Object) -> list[Object]:
    try:
        return to_pylist(raw_args)
    except BangTypeError:
        raise BangTypeError(f"malformed argument list: {raw_args}") from None


def apply(
    operator: Object,
    raw_args: Object,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `operator` to the unevaluated argument list `raw_args`."""
    match operator.kind:
        case Kind.SPECIAL_FORM:
            return apply_values(operator, _argument_list(raw_args), env, ctx, evaluate_fn)
        case Kind.BUILTIN_FUNCTION | Kind.CLOSURE:
            args = [evaluate_fn(arg, env, ctx) for arg in _argument_list(raw_args)]
            return apply_values(operator, args, env, ctx, evaluate_fn)
        case _:
            raise BangTypeError(f"cannot apply non-function {operator}")


def apply_values(
    operator: Object,
    args: list[Object],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `operator` to arguments that need no further evaluation.

    A special form takes `args` as its raw argument forms.
    """
    match operator.kind:
        case Kind.SPECIAL_FORM | Kind.BUILTIN_FUNCTION:
            fn = operator.payload
            fn.check_arity(len(args))
            return fn.code(args, env, ctx, evaluate_fn)
        case Kind.CLOSURE:
            return operator.payload.call(args, ctx, evaluate_fn)
        case _:
            raise BangTypeError(f"cannot apply non-function {operator}")


def resolve_function(designator: Object) -> Object:
    """Turn a function designator (a function object or a symbol) into a function object."""
    if designator.kind is Kind.SYMBOL:
        fn = designator.payload.function
        if fn is NIL:
            raise BangUndefinedFunction(designator.payload.name_str)
        return fn
    if designator.kind in (Kind.SPECIAL_FORM, Kind.BUILTIN_FUNCTION, Kind.CLOSURE):
        return designator
    raise BangTypeError(f"not a function designator: {designator}")
