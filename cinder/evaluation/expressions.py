"""Expressions that need the environment to produce a value, and call dispatch.

`apply` centralizes call semantics so that `CallExpr` and the program driver
invoke callables the same way:
- Builtins receive exactly one evaluated argument.
- Functions run in a fresh activation built from the global frame only, with
  one frame binding the parameters.
- Every other variant is rejected as not callable.
"""

from __future__ import annotations

from cinder import config
from cinder.errors import ArityMismatch, CallDepthExceeded, NotCallable
from cinder.types.environment import Environment
from cinder.types.function import Builtin, Function
from cinder.types.nil import Nil
from cinder.types.return_signal import ReturnSignal
from cinder.types.value import Expr, Variant


class Variable(Expr):
    """A reference to a bound name."""

    __slots__ = ("name",)

    variant = Variant.VARIABLE

    def __init__(self, name: str):
        self.name = name

    def evaluate(self, env: Environment) -> Expr:
        return env.get(self.name)

    def render(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"


class CallExpr(Expr):
    """A pending invocation of a callee against an ordered argument list."""

    __slots__ = ("callee", "args")

    variant = Variant.CALL

    def __init__(self, callee: Expr, args: list[Expr]):
        self.callee = callee
        self.args: list[Expr] = list(args)

    def evaluate(self, env: Environment) -> Expr:
        head = self.callee.evaluate(env)
        # Left to right; side effects of arguments are observable
        args = [arg.evaluate(env) for arg in self.args]
        return apply(head, args, env)

    def render(self) -> str:
        return f"{self.callee.render()}({', '.join(a.render() for a in self.args)})"

    def __repr__(self) -> str:
        return f"CallExpr({self.callee!r}, {self.args!r})"


def call_function(fn: Function, args: list[Expr], env: Environment) -> Expr:
    """Run a user-defined Function with already-evaluated arguments.

    The activation environment holds the global frame and a parameter frame,
    nothing from the caller. The body's result is the value of the first
    Return it executes, or Nil.
    """
    if len(args) != fn.arity:
        raise ArityMismatch(
            f"Function expects {fn.arity} argument(s), got {len(args)}"
        )

    activation = env.globals_only()
    activation.call_depth += 1
    limit = config.max_call_depth()
    if activation.call_depth > limit:
        raise CallDepthExceeded(f"Call depth exceeded limit of {limit}")

    activation.new_frame()
    for name, value in zip(fn.params, args):
        activation.add(name, value)

    try:
        fn.body.execute(activation)
    except ReturnSignal as ret:
        return ret.value
    except RecursionError:
        # Deeply nested blocks can exhaust the host stack below the limit
        raise CallDepthExceeded(
            f"Call depth exceeded host stack at depth {activation.call_depth}"
        ) from None
    return Nil


def apply(head: Expr, args: list[Expr], env: Environment) -> Expr:
    """Invoke an evaluated callee with evaluated arguments.

    Raises NotCallable for any variant other than BUILTIN or FUNCTION, and
    ArityMismatch when the argument count does not fit the callee.
    """
    match head.variant:
        case Variant.BUILTIN:
            assert isinstance(head, Builtin)
            if len(args) != head.arity:
                raise ArityMismatch(
                    f"Builtin {head.name} expects {head.arity} argument(s), got {len(args)}",
                    head.name,
                )
            return head.call(args[0])
        case Variant.FUNCTION:
            assert isinstance(head, Function)
            return call_function(head, args, env)
        case _:
            raise NotCallable(f"Value {head.render()} is not callable")
