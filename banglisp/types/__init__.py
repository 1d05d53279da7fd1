"""Object model of banglisp: tagged objects, symbols, packages, cons cells,
environments and closures."""

from banglisp.types.object import (
    Kind,
    Object,
    eq,
    is_atom,
    is_function,
    is_number,
    make_fixnum,
    make_float,
    make_number,
    make_string,
)
from banglisp.types.symbol import NIL, T, Symbol, make_symbol
from banglisp.types.nil import is_null, is_true, to_boolean
from banglisp.types.cons import ConsCell, car, cdr, cons, iter_list, make_list, to_pylist
from banglisp.types.package import Package, intern, make_package
from banglisp.types.environment import Binding, Environment, Frame
from banglisp.types.closure import Closure, make_closure
