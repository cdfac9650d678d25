"""Runtime environment for Cinder.

The Environment is an ordered stack of Frames. Frame 0 is the global frame
holding built-ins and top-level definitions; frames above it are local scopes
pushed on block entry and on function activation.

Lookup sees every frame, innermost first. Mutation skips the global frame, so
global bindings are fixed once defined and only locals can be reassigned.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator

from cinder.errors import DuplicateBinding, ImmutableGlobal, UnboundName
from cinder.types.value import Expr


class Frame:
    """One lexical scope: a mapping from names to shared values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Expr] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v.render()}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()


class Environment:
    """Stack of Frames with lookup, definition and mutation rules."""

    __slots__ = ("frames", "call_depth")

    def __init__(self, frames: list[Frame] | None = None, call_depth: int = 0):
        # A fresh environment always starts with its global frame
        self.frames: list[Frame] = frames if frames is not None else [Frame()]
        # Number of function activations enclosing this environment
        self.call_depth: int = call_depth

    @property
    def global_frame(self) -> Frame:
        return self.frames[0]

    @property
    def depth(self) -> int:
        return len(self.frames)

    def globals_only(self) -> Environment:
        """Return an environment whose only frame is this one's global frame.

        The frame object is shared, not copied, so definitions added to the
        global frame later are visible through both environments.
        """
        return Environment([self.frames[0]], self.call_depth)

    def new_frame(self) -> None:
        self.frames.append(Frame())

    def pop_frame(self) -> None:
        if len(self.frames) == 1:
            raise RuntimeError("Cannot pop the global frame")
        self.frames.pop()

    @contextmanager
    def scope(self) -> Iterator[Frame]:
        """Push a frame for the duration of the `with` block."""
        self.new_frame()
        try:
            yield self.frames[-1]
        finally:
            self.pop_frame()

    def add(self, name: str, value: Expr) -> None:
        """Bind `name` in the topmost frame.

        Raises DuplicateBinding if the topmost frame already binds `name`.
        Binding a name that an outer frame also binds is allowed.
        """
        frame = self.frames[-1]
        if name in frame.vars:
            raise DuplicateBinding(f"Variable {name} already present", name)
        frame.vars[name] = value

    def change(self, name: str, value: Expr) -> None:
        """Rebind an existing local `name`, innermost frame first.

        Raises ImmutableGlobal if only the global frame binds `name`, and
        UnboundName if no frame does.
        """
        for frame in reversed(self.frames[1:]):
            if name in frame.vars:
                frame.vars[name] = value
                return
        if name in self.frames[0].vars:
            raise ImmutableGlobal(f"Cannot change global {name}", name)
        raise UnboundName(f"Variable {name} not found", name)

    def get(self, name: str) -> Expr:
        """Look up `name`, innermost frame first.

        Raises UnboundName if no frame binds it.
        """
        for frame in reversed(self.frames):
            if name in frame.vars:
                return frame.vars[name]
        raise UnboundName(f"Variable {name} not found", name)

    def __contains__(self, name: str) -> bool:
        return any(name in frame.vars for frame in self.frames)

    def __str__(self) -> str:
        """Innermost frame with an indicator for outer frames."""
        with StringIO() as buffer:
            self.frames[-1]._write_vars(buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(str(f) for f in reversed(self.frames)))
            buffer.write(">")
            return buffer.getvalue()
