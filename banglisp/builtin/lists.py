from __future__ import annotations

from banglisp.types.cons import car, cdr, cons, is_cons, make_list
from banglisp.types.nil import is_null, to_boolean
from banglisp.types.object import Kind, Object, eq, is_atom, is_function, is_number


# -------------------------------
# Identity and basic predicates
# -------------------------------
def eq_builtin(args: list[Object], *_) -> Object:
    # (eq a b) compares identity only
    return to_boolean(eq(args[0], args[1]))


def null(args: list[Object], *_) -> Object:
    return to_boolean(is_null(args[0]))


def atom(args: list[Object], *_) -> Object:
    return to_boolean(is_atom(args[0]))


def consp(args: list[Object], *_) -> Object:
    return to_boolean(is_cons(args[0]))


def symbolp(args: list[Object], *_) -> Object:
    return to_boolean(args[0].kind is Kind.SYMBOL)


def numberp(args: list[Object], *_) -> Object:
    return to_boolean(is_number(args[0]))


def stringp(args: list[Object], *_) -> Object:
    return to_boolean(args[0].kind is Kind.STRING)


def functionp(args: list[Object], *_) -> Object:
    return to_boolean(is_function(args[0]))


# -------------------------------
# Cons cells
# -------------------------------
def cons_builtin(args: list[Object], *_) -> Object:
    return cons(args[0], args[1])


def car_builtin(args: list[Object], *_) -> Object:
    return car(args[0])


def cdr_builtin(args: list[Object], *_) -> Object:
    return cdr(args[0])


def list_builtin(args: list[Object], *_) -> Object:
    return make_list(args)


def register(ctx) -> None:
    ctx.install_builtin("eq", eq_builtin, 2)
    ctx.install_builtin("null", null, 1)
    ctx.install_builtin("atom", atom, 1)
    ctx.install_builtin("consp", consp, 1)
    ctx.install_builtin("symbolp", symbolp, 1)
    ctx.install_builtin("numberp", numberp, 1)
    ctx.install_builtin("stringp", stringp, 1)
    ctx.install_builtin("functionp", functionp, 1)

    ctx.install_builtin("cons", cons_builtin, 2)
    ctx.install_builtin("car", car_builtin, 1)
    ctx.install_builtin("first", car_builtin, 1)
    ctx.install_builtin("cdr", cdr_builtin, 1)
    ctx.install_builtin("rest", cdr_builtin, 1)
    ctx.install_builtin("list", list_builtin, 0, True)
