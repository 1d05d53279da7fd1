"""Command line driver: load files, or run a read-eval-print loop on stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from banglisp.config import get_log_level
from banglisp.errors import BangError, BangSyntaxError
from banglisp.interpreter import Interpreter
from banglisp.reader.parser import Reader
from banglisp.printer import to_string

PROMPT = "> "


def repl(interp: Interpreter, stdin=None, stdout=None) -> None:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    reader = Reader(stdin, interp.ctx)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            expr = interp.read(reader)
            if expr is None:
                stdout.write("\n")
                return
            stdout.write(to_string(interp.evaluate(expr)) + "\n")
        except BangSyntaxError as e:
            stdout.write(f"{e}\n")
            reader.discard_line()
        except BangError as e:
            stdout.write(f"{e}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="banglisp", description="A small Lisp interpreter.")
    parser.add_argument("files", nargs="*", help="source files to load instead of starting the REPL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    if not args.files:
        repl(interp)
        return 0

    for path in args.files:
        try:
            interp.load(path)
        except (BangError, OSError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
