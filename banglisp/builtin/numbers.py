"""Arithmetic, comparison and trigonometry on the two numeric kinds.

Mixing a fixnum with a float always yields a float; fixnums alone stay
fixnums, within the 64-bit signed range. Fixnum division and `mod` truncate
toward zero.
"""

from __future__ import annotations

import math
import operator
from itertools import pairwise
from typing import Callable

from banglisp.errors import BangArithmeticOverflow, BangDivisionByZero, BangUnsupportedArgumentType
from banglisp.types.nil import to_boolean
from banglisp.types.object import Kind, Object, in_fixnum_range, is_number, make_fixnum, make_float

Number = int | float


def numeric_values(operation: str, args: list[Object]) -> tuple[list[Number], bool]:
    """Unbox numeric arguments; the flag tells whether any of them is a float."""
    has_float = False
    values: list[Number] = []
    for arg in args:
        if not is_number(arg):
            raise BangUnsupportedArgumentType(operation, arg)
        if arg.kind is Kind.FLOAT:
            has_float = True
        values.append(arg.payload)
    if has_float:
        values = [float(v) for v in values]
    return values, has_float


def _box(operation: str, value: Number, has_float: bool) -> Object:
    if has_float:
        return make_float(value)
    if not in_fixnum_range(value):
        raise BangArithmeticOverflow(operation)
    return make_fixnum(value)


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _divide(operation: str, a: Number, b: Number, has_float: bool) -> Number:
    if b == 0:
        raise BangDivisionByZero(operation)
    if has_float:
        return a / b
    return _truncating_div(a, b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Object], *_) -> Object:
    # (+ n1 n2 ...)
    values, has_float = numeric_values("+", args)
    return _box("+", sum(values, 0.0 if has_float else 0), has_float)


def sub(args: list[Object], *_) -> Object:
    # (- n) negates; (- n1 n2 ...) subtracts the rest from n1
    values, has_float = numeric_values("-", args)
    if len(values) == 1:
        return _box("-", -values[0], has_float)
    result = values[0]
    for v in values[1:]:
        result -= v
    return _box("-", result, has_float)


def mul(args: list[Object], *_) -> Object:
    values, has_float = numeric_values("*", args)
    return _box("*", math.prod(values, start=1.0 if has_float else 1), has_float)


def div(args: list[Object], *_) -> Object:
    # (/ n) is the reciprocal of n
    values, has_float = numeric_values("/", args)
    if len(values) == 1:
        return _box("/", _divide("/", 1, values[0], has_float), has_float)
    result = values[0]
    for v in values[1:]:
        result = _divide("/", result, v, has_float)
    return _box("/", result, has_float)


def mod(args: list[Object], *_) -> Object:
    result = None
    for arg in args:
        if arg.kind is not Kind.FIXNUM:
            raise BangUnsupportedArgumentType("mod", arg)
        if result is None:
            result = arg.payload
        elif arg.payload == 0:
            raise BangDivisionByZero("mod")
        else:
            result -= arg.payload * _truncating_div(result, arg.payload)
    return make_fixnum(result)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[Number, Number], bool]):
    def compare(args: list[Object], *_) -> Object:
        values, _ = numeric_values(name, args)
        return to_boolean(all(op(a, b) for a, b in pairwise(values)))

    compare.__name__ = f"compare_{op.__name__}"
    return compare


num_eq = _comparison("=", operator.eq)
lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)
gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)


# -------------------------------
# Trigonometry
# -------------------------------
def _unary_float(name: str, fn: Callable[[float], float]):
    def apply_fn(args: list[Object], *_) -> Object:
        values, _ = numeric_values(name, args)
        try:
            return make_float(fn(values[0]))
        except ValueError:
            # infinities are outside the domain
            raise BangUnsupportedArgumentType(name, args[0]) from None

    apply_fn.__name__ = name
    return apply_fn


def register(ctx) -> None:
    ctx.install_builtin("+", add, 0, True)
    ctx.install_builtin("-", sub, 1, True)
    ctx.install_builtin("*", mul, 0, True)
    ctx.install_builtin("/", div, 1, True)
    ctx.install_builtin("mod", mod, 1, True)

    ctx.install_builtin("=", num_eq, 1, True)
    ctx.install_builtin("<", lt, 1, True)
    ctx.install_builtin("<=", lte, 1, True)
    ctx.install_builtin(">", gt, 1, True)
    ctx.install_builtin(">=", gte, 1, True)

    ctx.install_builtin("sin", _unary_float("sin", math.sin), 1)
    ctx.install_builtin("cos", _unary_float("cos", math.cos), 1)
    ctx.install_builtin("tan", _unary_float("tan", math.tan), 1)
