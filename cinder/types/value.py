"""Capabilities shared by every node of a Cinder program tree.

`Expr` is anything that evaluates to a value, `Stmt` anything executed for
effect, and `Cell` an `Expr` that can also be changed in place. The concrete
variant of a value is recovered at runtime through its `variant` tag, never
through isinstance checks on the caller side.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cinder.types.environment import Environment


class Variant(Enum):
    LITERAL = auto()
    NIL = auto()
    BUILTIN = auto()
    FUNCTION = auto()
    CALL = auto()
    VARIABLE = auto()
    CELL = auto()


class Expr(ABC):
    """A value, or an expression that evaluates to one."""

    __slots__ = ()

    variant: Variant

    @abstractmethod
    def evaluate(self, env: Environment) -> Expr: ...

    @abstractmethod
    def render(self) -> str: ...

    def __str__(self) -> str:
        return self.render()


class Stmt(ABC):
    """An action executed against an environment for its effect only."""

    __slots__ = ()

    @abstractmethod
    def execute(self, env: Environment) -> None: ...

    @abstractmethod
    def render(self) -> str: ...

    def __str__(self) -> str:
        return self.render()


class Cell(Expr):
    """A value that can be mutated in place.

    Changing a cell updates the object itself, so every frame holding it sees
    the new content. This is different from `Environment.change`, which
    rebinds a name to another value.
    """

    __slots__ = ()

    variant = Variant.CELL

    @abstractmethod
    def change(self, env: Environment, value: Expr) -> None: ...
