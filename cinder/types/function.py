"""Callable values: native built-ins and user-defined functions.

Both evaluate to themselves. Invoking them is the job of
`cinder.evaluation.expressions.apply`, which dispatches on their variant.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Callable, Optional

from cinder.types.nil import Nil
from cinder.types.value import Expr, Variant

if TYPE_CHECKING:
    from cinder.evaluation.statements import Block


class Builtin(Expr):
    """A named native operation taking exactly one argument."""

    __slots__ = ("name", "behavior")

    variant = Variant.BUILTIN
    arity = 1

    def __init__(self, name: str, behavior: Callable[[Expr], Optional[Expr]]):
        self.name = name
        self.behavior = behavior

    def evaluate(self, env) -> Builtin:
        return self

    def call(self, arg: Expr) -> Expr:
        result = self.behavior(arg)
        return Nil if result is None else result

    def render(self) -> str:
        return f"<builtin {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"


class Function(Expr):
    """A user-defined function with formal parameters and a body block.

    Functions do not capture the scope they are written in. A call runs the
    body with only the global frame and the parameter frame visible.
    """

    __slots__ = ("params", "body")

    variant = Variant.FUNCTION

    def __init__(self, params: list[str], body: Block):
        self.params: list[str] = list(params)
        self.body: Block = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def evaluate(self, env) -> Function:
        return self

    def render(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(", ".join(self.params))
            buffer.write(") ")
            buffer.write(self.body.render())
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Function({self.params!r})"
