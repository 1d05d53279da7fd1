"""Runtime environment for banglisp.

The Environment is a stack of binding Frames, innermost first. Lookups walk
the frames from the innermost outwards and compare symbols by identity, never
by name, because two packages may hold distinct symbols that print the same.
Anything not bound lexically falls back to the symbol's global value cell;
that fallback is the caller's job.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from banglisp.errors import BangError
from banglisp.types.object import Object


class Binding:
    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Object, value: Object):
        self.symbol: Object = symbol
        self.value: Object = value


class Frame:
    """One level of bindings, mutable in place."""

    __slots__ = ("bindings",)

    def __init__(self, bindings: Optional[list[Binding]] = None):
        self.bindings: list[Binding] = bindings if bindings is not None else []

    def add_binding(self, symbol: Object, value: Object) -> None:
        self.bindings.append(Binding(symbol, value))

    def find(self, symbol: Object) -> Optional[Binding]:
        for b in self.bindings:
            if b.symbol.id == symbol.id:
                return b
        return None

    def _write(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{b.symbol}: {b.value}" for b in self.bindings))
        buffer.write("}")


class Environment:
    """Ordered list of frames implementing lexical scope."""

    __slots__ = ("frames",)

    def __init__(self, frames: Optional[list[Frame]] = None):
        self.frames: list[Frame] = frames if frames is not None else []

    def find(self, symbol: Object) -> Optional[Binding]:
        """Find the innermost binding of `symbol`, or None."""
        for frame in self.frames:
            b = frame.find(symbol)
            if b is not None:
                return b
        return None

    def lookup(self, symbol: Object) -> Optional[Object]:
        """Return the lexical value of `symbol`, or None when it is not bound here."""
        b = self.find(symbol)
        return b.value if b is not None else None

    def update_value(self, symbol: Object, value: Object) -> bool:
        """Mutate the innermost binding of `symbol`; False if there is none."""
        b = self.find(symbol)
        if b is None:
            return False
        b.value = value
        return True

    def push_frame(self, frame: Frame) -> None:
        self.frames.insert(0, frame)

    def pop_frame(self, count: int = 1) -> None:
        if count > len(self.frames):
            raise BangError(f"cannot pop {count} frames from an environment of depth {len(self.frames)}")
        del self.frames[:count]

    @contextmanager
    def scope(self, *frames: Frame) -> Iterator[Environment]:
        """Push `frames` (the last one ends up innermost) and pop them on exit."""
        for frame in frames:
            self.push_frame(frame)
        try:
            yield self
        finally:
            self.pop_frame(len(frames))

    def capture(self) -> Environment:
        """A view for closures: shares every Frame, but not the frame list."""
        return Environment(list(self.frames))

    @property
    def depth(self) -> int:
        return len(self.frames)

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for outer frames."""
        with StringIO() as buffer:
            if self.frames:
                self.frames[0]._write(buffer)
            else:
                buffer.write("{}")
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in self.frames:
                frame_buf = StringIO()
                frame._write(frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
