"""Closure representation and argument binding for banglisp."""

from __future__ import annotations

import logging
from typing import Optional

from banglisp import EvaluatorFn, LispValue
from banglisp.errors import BangTypeError, BangWrongNumberOfArguments
from banglisp.types.cons import iter_list, make_list
from banglisp.types.environment import Environment, Frame
from banglisp.types.object import Kind, Object
from banglisp.types.symbol import NIL, check_variable

logger = logging.getLogger(__name__)

REST_MARKER = "&rest"


class Closure:
    """A first-class function: parameters, body forms and the captured environment."""

    __slots__ = ("name", "params", "rest", "body", "env")

    def __init__(
        self,
        name: Optional[Object],
        params: list[Object],
        body: list[Object],
        env: Environment,
        rest: Optional[Object] = None,
    ):
        self.name: Optional[Object] = name
        self.params: list[Object] = params
        self.rest: Optional[Object] = rest
        self.body: list[Object] = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def variadic(self) -> bool:
        return self.rest is not None

    def bind(self, args: list[Object]) -> Frame:
        """Bind evaluated `args` positionally into a fresh frame."""
        if self.variadic:
            if len(args) < self.arity:
                raise BangWrongNumberOfArguments(self.arity, True, len(args))
        elif len(args) != self.arity:
            raise BangWrongNumberOfArguments(self.arity, False, len(args))

        frame = Frame()
        for param, arg in zip(self.params, args):
            frame.add_binding(param, arg)
        if self.rest is not None:
            frame.add_binding(self.rest, make_list(args[self.arity:]))
        return frame

    def call(self, args: list[Object], ctx, evaluate_fn: EvaluatorFn) -> LispValue:
        """Run the body in the captured environment; the frame is popped on every exit.

        Each activation works on its own copy of the frame list, so a recursive
        call never sees the let-bindings of an outer activation.
        """
        frame = self.bind(args)
        result = NIL
        with self.env.capture().scope(frame) as env:
            for form in self.body:
                result = evaluate_fn(form, env, ctx)
        return result


def parse_lambda_list(params: Object) -> tuple[list[Object], Optional[Object]]:
    """Split a raw parameter list into positional parameters and an optional &rest name."""
    positional: list[Object] = []
    rest: Optional[Object] = None
    items = list(iter_list(params))
    i = 0
    while i < len(items):
        p = check_variable(items[i], "parameter")
        if p.payload.name_str == REST_MARKER:
            if i + 2 != len(items):
                raise BangTypeError(f"{REST_MARKER} must be followed by exactly one parameter")
            rest = check_variable(items[i + 1], "parameter")
            break
        positional.append(p)
        i += 1
    return positional, rest


def make_closure(name: Optional[Object], params: Object, body: list[Object], env: Environment) -> Object:
    """Build a CLOSURE object that captures `env`."""
    positional, rest = parse_lambda_list(params)
    fn = Closure(name, positional, list(body), env.capture(), rest)
    logger.debug("created closure %s with %d parameter(s)", name if name is not None else "lambda", fn.arity)
    return Object(Kind.CLOSURE, fn)
