"""Accessors for the cells of a symbol, property lists and packages."""

from __future__ import annotations

from banglisp.errors import (
    BangConstantError,
    BangUnboundVariable,
    BangUndefinedFunction,
    BangUnsupportedArgumentType,
)
from banglisp.types.cons import cons, is_cons
from banglisp.types.nil import NIL, to_boolean
from banglisp.types.object import Kind, Object


def _symbol(operation: str, obj: Object):
    if obj.kind is not Kind.SYMBOL:
        raise BangUnsupportedArgumentType(operation, obj)
    return obj.payload


def _name_designator(operation: str, obj: Object) -> str:
    # strings and symbols both name things
    if obj.kind is Kind.STRING:
        return obj.payload
    if obj.kind is Kind.SYMBOL:
        return obj.payload.name_str
    raise BangUnsupportedArgumentType(operation, obj)


# -------------------------------
# Symbol cells
# -------------------------------
def symbol_name(args: list[Object], *_) -> Object:
    return _symbol("symbol-name", args[0]).name


def symbol_value(args: list[Object], *_) -> Object:
    # The global value cell only; lexical bindings are invisible here
    sym = _symbol("symbol-value", args[0])
    if sym.value is None:
        raise BangUnboundVariable(sym.name_str)
    return sym.value


def symbol_function(args: list[Object], *_) -> Object:
    sym = _symbol("symbol-function", args[0])
    if sym.function is NIL:
        raise BangUndefinedFunction(sym.name_str)
    return sym.function


def symbol_plist(args: list[Object], *_) -> Object:
    return _symbol("symbol-plist", args[0]).plist


def symbol_package(args: list[Object], *_) -> Object:
    package = _symbol("symbol-package", args[0]).package
    return package if package is not None else NIL


def boundp(args: list[Object], *_) -> Object:
    return to_boolean(_symbol("boundp", args[0]).value is not None)


def fboundp(args: list[Object], *_) -> Object:
    return to_boolean(_symbol("fboundp", args[0]).function is not NIL)


# -------------------------------
# Property lists: (indicator value indicator value ...)
# -------------------------------
def get(args: list[Object], *_) -> Object:
    # (get symbol indicator)
    node = _symbol("get", args[0]).plist
    while is_cons(node) and is_cons(node.payload.cdr):
        if node.payload.car.id == args[1].id:
            return node.payload.cdr.payload.car
        node = node.payload.cdr.payload.cdr
    return NIL


def put(args: list[Object], *_) -> Object:
    # (put symbol indicator value)
    sym_obj, indicator, value = args
    sym = _symbol("put", sym_obj)
    if sym.constant:
        raise BangConstantError(sym.name_str)
    node = sym.plist
    while is_cons(node) and is_cons(node.payload.cdr):
        if node.payload.car.id == indicator.id:
            node.payload.cdr.payload.car = value
            return value
        node = node.payload.cdr.payload.cdr
    sym.plist = cons(indicator, cons(value, sym.plist))
    return value


# -------------------------------
# Packages
# -------------------------------
def _package(ctx, operation: str, obj: Object) -> Object:
    if obj.kind is Kind.PACKAGE:
        return obj
    package = ctx.find_package(_name_designator(operation, obj))
    if package is None:
        raise BangUnsupportedArgumentType(operation, obj)
    return package


def intern_builtin(args: list[Object], env, ctx, evaluate_fn) -> Object:
    # (intern "name" [package])
    if args[0].kind is not Kind.STRING:
        raise BangUnsupportedArgumentType("intern", args[0])
    package = _package(ctx, "intern", args[1]) if len(args) > 1 else None
    return ctx.intern(args[0].payload, package)


def make_package_builtin(args: list[Object], env, ctx, evaluate_fn) -> Object:
    return ctx.make_package(_name_designator("make-package", args[0]))


def find_package(args: list[Object], env, ctx, evaluate_fn) -> Object:
    package = ctx.find_package(_name_designator("find-package", args[0]))
    return package if package is not None else NIL


def package_name(args: list[Object], *_) -> Object:
    if args[0].kind is not Kind.PACKAGE:
        raise BangUnsupportedArgumentType("package-name", args[0])
    return args[0].payload.name


def register(ctx) -> None:
    ctx.install_builtin("symbol-name", symbol_name, 1)
    ctx.install_builtin("symbol-value", symbol_value, 1)
    ctx.install_builtin("symbol-function", symbol_function, 1)
    ctx.install_builtin("symbol-plist", symbol_plist, 1)
    ctx.install_builtin("symbol-package", symbol_package, 1)
    ctx.install_builtin("boundp", boundp, 1)
    ctx.install_builtin("fboundp", fboundp, 1)
    ctx.install_builtin("get", get, 2)
    ctx.install_builtin("put", put, 3)

    ctx.install_builtin("intern", intern_builtin, 1, True)
    ctx.install_builtin("make-package", make_package_builtin, 1)
    ctx.install_builtin("find-package", find_package, 1)
    ctx.install_builtin("package-name", package_name, 1)
