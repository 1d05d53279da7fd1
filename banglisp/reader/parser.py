"""
  banglisp reader

- Streaming: consumes one character at a time from any text stream and stops
  right after the expression it was asked for, so consecutive `read` calls
  walk a file form by form.
- Builds heap objects directly: numbers, strings, interned symbols and cons
  cells (dotted tails included).
- Reader shorthands:
    'x   -> (quote x)
    #'x  -> (function x)
"""

from __future__ import annotations

import io
import math
from string import ascii_letters, digits
from typing import TYPE_CHECKING, Iterator, Optional, TextIO

from banglisp.errors import BangSyntaxError
from banglisp.types.cons import make_list
from banglisp.types.object import Object, in_fixnum_range, make_fixnum, make_float, make_string

if TYPE_CHECKING:
    from banglisp.runtime_context import RuntimeContext


_SPACES = set(" \f\n\r\t\v")
_DIGITS = set(digits)
_LETTERS = set(ascii_letters)
_PUNCTS = set("+-*/%><=?!&_")
_INITIAL_SYMBOL_CHARS = _LETTERS | _PUNCTS
_SYMBOL_CHARS = _INITIAL_SYMBOL_CHARS | _DIGITS
_DELIMITERS = _SPACES | set('()";')


def is_delimiter(c: str) -> bool:
    # end of input delimits too
    return c == "" or c in _DELIMITERS


class CharStream:
    """Character source with unlimited push-back and line tracking.

    `read` returns "" at end of input, like file objects do.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pushback: list[str] = []
        self.line = 1

    def read(self) -> str:
        c = self._pushback.pop() if self._pushback else self._stream.read(1)
        if c == "\n":
            self.line += 1
        return c

    def unread(self, c: str) -> None:
        if not c:
            return
        if c == "\n":
            self.line -= 1
        self._pushback.append(c)

    def peek(self) -> str:
        c = self.read()
        self.unread(c)
        return c


class Reader:
    """Reads s-expressions from a character stream, interning symbols into
    the context's current package."""

    def __init__(self, stream: TextIO | CharStream, ctx: RuntimeContext):
        self.chars = stream if isinstance(stream, CharStream) else CharStream(stream)
        self.ctx = ctx

    @classmethod
    def from_string(cls, source: str, ctx: RuntimeContext) -> Reader:
        return cls(io.StringIO(source), ctx)

    def read(self) -> Optional[Object]:
        """Read one expression, or return None at a clean end of input."""
        self._skip_whitespace()
        c = self.chars.read()
        if c == "":
            return None
        return self._dispatch(c)

    def read_all(self) -> Iterator[Object]:
        while (expr := self.read()) is not None:
            yield expr

    def discard_line(self) -> None:
        """Drop the rest of the current input line, e.g. after an error at a prompt."""
        c = self.chars.read()
        while c not in ("\n", ""):
            c = self.chars.read()

    # --- internals ---
    def _error(self, message: str) -> BangSyntaxError:
        return BangSyntaxError(message, self.chars.line)

    def _skip_whitespace(self) -> None:
        while True:
            c = self.chars.read()
            if c == "":
                return
            if c in _SPACES:
                continue
            if c == ";":
                while c not in ("\n", ""):
                    c = self.chars.read()
                continue
            self.chars.unread(c)
            return

    def _read_required(self, eof_message: str) -> Object:
        self._skip_whitespace()
        c = self.chars.read()
        if c == "":
            raise self._error(eof_message)
        return self._dispatch(c)

    def _dispatch(self, c: str) -> Object:
        if c in _DIGITS or (c == "-" and self.chars.peek() in _DIGITS):
            return self._read_number(c)
        if c == '"':
            return self._read_string()
        if c in _INITIAL_SYMBOL_CHARS:
            return self._read_symbol(c)
        if c == "(":
            return self._read_list()
        if c == "'":
            expr = self._read_required("quote is not followed by an expression")
            return make_list([self.ctx.intern("quote"), expr])
        if c == "#" and self.chars.peek() == "'":
            self.chars.read()
            expr = self._read_required("#' is not followed by an expression")
            return make_list([self.ctx.intern("function"), expr])
        if c == ")":
            raise self._error("unexpected ')'")
        raise self._error(f"unsupported character {c!r}")

    def _read_number(self, first: str) -> Object:
        chars = [first]
        has_point = False
        while True:
            c = self.chars.read()
            if c in _DIGITS:
                chars.append(c)
            elif c == ".":
                if has_point:
                    raise self._error("float value contains multiple dots")
                has_point = True
                chars.append(c)
            else:
                break

        if not is_delimiter(c):
            raise self._error(f"could not parse number {''.join(chars) + c!r}")
        self.chars.unread(c)

        text = "".join(chars)
        if has_point:
            if text.endswith("."):
                raise self._error(f"decimal point must be followed by digits: {text!r}")
            value = float(text)
            if not math.isfinite(value):
                raise self._error(f"float literal out of range: {text[:20]}...")
            return make_float(value)

        # more digits than any fixnum has; int() would refuse very long text anyway
        if len(text.lstrip("-").lstrip("0")) > 19:
            raise self._error(f"fixnum literal out of range: {text[:20]}...")
        value = int(text)
        if not in_fixnum_range(value):
            raise self._error(f"fixnum literal out of range: {text}")
        return make_fixnum(value)

    def _read_string(self) -> Object:
        chars: list[str] = []
        while True:
            c = self.chars.read()
            if c == "":
                raise self._error("string literal is not terminated")
            if c == '"':
                break
            if c == "\\":
                c = self.chars.read()
                if c == "":
                    raise self._error("string literal is not terminated")
                if c == "n":
                    c = "\n"
            chars.append(c)
        return make_string("".join(chars))

    def _read_symbol(self, first: str) -> Object:
        chars = [first]
        c = self.chars.read()
        while c in _SYMBOL_CHARS:
            chars.append(c)
            c = self.chars.read()
        if not is_delimiter(c):
            raise self._error(f"symbol not followed by delimiter: {''.join(chars) + c!r}")
        self.chars.unread(c)
        return self.ctx.intern("".join(chars))

    def _read_list(self) -> Object:
        items: list[Object] = []
        while True:
            self._skip_whitespace()
            c = self.chars.read()
            if c == "":
                raise self._error("list is not closed")
            if c == ")":
                return make_list(items)
            if c == ".":
                if not is_delimiter(self.chars.peek()):
                    raise self._error("dot not followed by delimiter")
                if not items:
                    raise self._error("dot without a preceding list element")
                tail = self._read_required("list is not closed")
                self._skip_whitespace()
                c = self.chars.read()
                if c == "":
                    raise self._error("list is not closed")
                if c != ")":
                    raise self._error("list is not closed by right paren after dotted tail")
                return make_list(items, tail)
            self.chars.unread(c)
            items.append(self._read_required("list is not closed"))


def read_from_string(source: str, ctx: RuntimeContext) -> Optional[Object]:
    """Read the first expression of `source`."""
    return Reader.from_string(source, ctx).read()
