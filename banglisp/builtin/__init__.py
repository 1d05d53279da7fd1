"""Builtin functions installed into every runtime context's default package."""

from banglisp.builtin import env_builtin, lists, numbers, symbols


def install_builtins(ctx) -> None:
    numbers.register(ctx)
    lists.register(ctx)
    symbols.register(ctx)
    env_builtin.register(ctx)
