"""Function application and output builtins.

These need the calling environment and the runtime context, unlike the pure
value builtins in the other modules.
"""

from __future__ import annotations

from banglisp import EvaluatorFn, LispValue
from banglisp.errors import BangTypeError, BangUnsupportedArgumentType
from banglisp.evaluation.apply import apply_values, resolve_function
from banglisp.printer import to_string
from banglisp.types.cons import to_pylist
from banglisp.types.environment import Environment
from banglisp.types.object import Object


def funcall(args: list[Object], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (funcall fn arg...)
    fn = resolve_function(args[0])
    return apply_values(fn, args[1:], env, ctx, evaluate_fn)


def apply_builtin(args: list[Object], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    # (apply fn list)
    fn = resolve_function(args[0])
    try:
        fn_args = to_pylist(args[1])
    except BangTypeError:
        raise BangUnsupportedArgumentType("apply", args[1]) from None
    return apply_values(fn, fn_args, env, ctx, evaluate_fn)


def print_builtin(args: list[Object], env: Environment, ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    ctx.output.write(to_string(args[0]) + "\n")
    return args[0]


def register(ctx) -> None:
    ctx.install_builtin("funcall", funcall, 1, True)
    ctx.install_builtin("apply", apply_builtin, 2)
    ctx.install_builtin("print", print_builtin, 1)
