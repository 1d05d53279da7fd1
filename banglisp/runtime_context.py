"""Process-wide interpreter state, held in an explicit value.

A RuntimeContext owns the default package (holding nil, t, pi and every
installed special form and builtin), the global environment and the output
stream. It is built once at startup and threaded through evaluation, so
several interpreters can live side by side without sharing symbols.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Optional, TextIO

from banglisp.config import get_default_package_name
from banglisp.errors import BangError
from banglisp.types.environment import Environment
from banglisp.types.native import NativeCode, make_builtin, make_special_form
from banglisp.types.object import Object, make_float
from banglisp.types.package import intern, make_package
from banglisp.types.symbol import NIL, T

logger = logging.getLogger(__name__)


class RuntimeContext:
    def __init__(self, package_name: Optional[str] = None, output: Optional[TextIO] = None):
        self.packages: dict[str, Object] = {}
        self.default_package: Object = self.make_package(package_name or get_default_package_name())
        self.current_package: Object = self.default_package
        self.global_env: Environment = Environment()
        self._output = output

        pkg = self.default_package.payload
        pkg.import_symbol(NIL)
        pkg.import_symbol(T)
        self.intern("pi").payload.value = make_float(math.pi)

        # Lazy imports: both registries import the evaluator, which needs types only
        from banglisp.evaluation.special_forms import install_special_forms
        from banglisp.builtin import install_builtins

        install_special_forms(self)
        install_builtins(self)
        logger.debug(
            "runtime context ready: package %s with %d symbols",
            pkg.name_str,
            len(pkg.table),
        )

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    # --- packages and symbols ---
    def make_package(self, name: str) -> Object:
        if name in self.packages:
            raise BangError(f"package {name} already exists")
        package = make_package(name)
        self.packages[name] = package
        return package

    def find_package(self, name: str) -> Optional[Object]:
        return self.packages.get(name)

    def intern(self, name: str, package: Optional[Object] = None) -> Object:
        return intern(name, package if package is not None else self.current_package)

    # --- installation of native operators ---
    def install_special_form(self, name: str, code: NativeCode, arity: int, variadic: bool = False) -> None:
        self.intern(name, self.default_package).payload.function = make_special_form(name, code, arity, variadic)

    def install_builtin(self, name: str, code: NativeCode, arity: int, variadic: bool = False) -> None:
        self.intern(name, self.default_package).payload.function = make_builtin(name, code, arity, variadic)
