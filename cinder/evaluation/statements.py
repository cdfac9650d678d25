"""Statements: actions executed against an Environment for effect.

Definitions and blocks make up the program tree proper; assignment, cell
updates, expression statements and returns are what function bodies are
written with.
"""

from __future__ import annotations

from io import StringIO

from cinder.errors import NotACell, ReturnOutsideFunction
from cinder.types.environment import Environment
from cinder.types.nil import Nil
from cinder.types.return_signal import ReturnSignal
from cinder.types.value import Cell, Expr, Stmt, Variant


class AddVar(Stmt):
    """let name = init

    Binds the evaluated initializer in the topmost frame.
    """

    __slots__ = ("name", "init")

    def __init__(self, name: str, init: Expr):
        self.name = name
        self.init = init

    def execute(self, env: Environment) -> None:
        value = self.init.evaluate(env)
        env.add(self.name, value)

    def render(self) -> str:
        return f"let {self.name} = {self.init.render()}"


class Definition(Stmt):
    """A top-level AddVar, executed against the global environment."""

    __slots__ = ("stmt",)

    def __init__(self, stmt: AddVar):
        if not isinstance(stmt, AddVar):
            raise TypeError(f"Definition wraps an AddVar, got {type(stmt).__name__}")
        self.stmt = stmt

    @property
    def name(self) -> str:
        return self.stmt.name

    def execute(self, env: Environment) -> None:
        self.stmt.execute(env)

    def render(self) -> str:
        return f"DEFINE {self.stmt.render()}"


class Block(Stmt):
    """A sequence of statements run in a frame of their own.

    The frame is removed when the block finishes, whether it completes or
    unwinds, so nothing defined inside is reachable afterwards.
    """

    __slots__ = ("statements",)

    def __init__(self, statements: list[Stmt]):
        self.statements: list[Stmt] = list(statements)

    def execute(self, env: Environment) -> None:
        with env.scope():
            for stmt in self.statements:
                stmt.execute(env)

    def render(self) -> str:
        with StringIO() as buffer:
            buffer.write("{\n")
            for stmt in self.statements:
                for line in stmt.render().splitlines():
                    buffer.write(f"    {line}\n")
            buffer.write("}")
            return buffer.getvalue()


class Assign(Stmt):
    """name = value, rebinding a local name."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: Expr):
        self.name = name
        self.value = value

    def execute(self, env: Environment) -> None:
        env.change(self.name, self.value.evaluate(env))

    def render(self) -> str:
        return f"{self.name} = {self.value.render()}"


class SetCell(Stmt):
    """target := value, updating a Cell in place."""

    __slots__ = ("target", "value")

    def __init__(self, target: Expr, value: Expr):
        self.target = target
        self.value = value

    def execute(self, env: Environment) -> None:
        cell = self.target.evaluate(env)
        if cell.variant is not Variant.CELL:
            raise NotACell(f"Value {cell.render()} is not a cell")
        assert isinstance(cell, Cell)
        cell.change(env, self.value.evaluate(env))

    def render(self) -> str:
        return f"{self.target.render()} := {self.value.render()}"


class ExprStmt(Stmt):
    """Evaluates an expression and discards its value."""

    __slots__ = ("expr",)

    def __init__(self, expr: Expr):
        self.expr = expr

    def execute(self, env: Environment) -> None:
        self.expr.evaluate(env)

    def render(self) -> str:
        return self.expr.render()


class Return(Stmt):
    __slots__ = ("expr",)

    def __init__(self, expr: Expr | None = None):
        self.expr = expr

    def execute(self, env: Environment) -> None:
        if env.call_depth == 0:
            raise ReturnOutsideFunction("Return outside of a function call")
        value = Nil if self.expr is None else self.expr.evaluate(env)
        raise ReturnSignal(value)

    def render(self) -> str:
        if self.expr is None:
            return "return"
        return f"return {self.expr.render()}"
