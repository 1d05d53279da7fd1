from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from banglisp import LispValue
from banglisp.config import get_load_path
from banglisp.errors import BangStackExhausted
from banglisp.evaluation.evaluator import evaluate
from banglisp.reader.parser import Reader
from banglisp.runtime_context import RuntimeContext
from banglisp.types.object import Object
from banglisp.types.symbol import NIL

logger = logging.getLogger(__name__)

# Each Lisp call nests about a dozen Python frames
RECURSION_LIMIT = 10000


class Interpreter:
    """
    Orchestrates reading and evaluating banglisp code.
    Keeps one RuntimeContext (packages, global environment) across calls.
    """

    def __init__(self, ctx: Optional[RuntimeContext] = None, output: Optional[TextIO] = None):
        self.ctx: RuntimeContext = ctx if ctx is not None else RuntimeContext(output=output)
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)

    def evaluate(self, expr: Object) -> LispValue:
        """Evaluate one parsed form in the global environment."""
        try:
            return evaluate(expr, self.ctx.global_env, self.ctx)
        except RecursionError as e:
            raise BangStackExhausted("evaluation nested too deeply") from e

    def read(self, reader: Reader) -> Optional[Object]:
        """Read the next form, or None at end of input."""
        try:
            return reader.read()
        except RecursionError as e:
            raise BangStackExhausted("expression nested too deeply to read") from e

    def _eval_reader(self, reader: Reader) -> Iterator[LispValue]:
        while (expr := self.read(reader)) is not None:
            yield self.evaluate(expr)

    def eval_stream(self, stream: TextIO) -> Iterator[LispValue]:
        return self._eval_reader(Reader(stream, self.ctx))

    def eval_all(self, code: str) -> Iterator[LispValue]:
        """Evaluate every form of `code`, yielding each value in turn."""
        return self._eval_reader(Reader.from_string(code, self.ctx))

    def eval(self, code: str) -> LispValue:
        """Evaluate every form of `code` and return the last value (nil if none)."""
        result: LispValue = NIL
        for result in self.eval_all(code):
            pass
        return result

    def resolve_path(self, path: str | Path) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        for root in get_load_path():
            candidate = root / p
            if candidate.is_file():
                return candidate
        return p

    def load(self, path: str | Path) -> LispValue:
        """Read and evaluate every form in a source file; return the last value."""
        resolved = self.resolve_path(path)
        logger.debug("loading %s", resolved)
        result: LispValue = NIL
        with open(resolved, encoding="utf-8") as f:
            for result in self.eval_stream(f):
                pass
        logger.info("loaded %s", resolved)
        return result
