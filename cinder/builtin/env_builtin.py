"""Built-in functions for the Cinder global environment.

Each builtin takes exactly one evaluated argument. `register` installs them
into the global frame before any user definition runs, so a user definition
reusing one of these names is a duplicate binding.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from cinder.types.cell import Box
from cinder.types.environment import Environment
from cinder.types.function import Builtin
from cinder.types.nil import Nil
from cinder.types.value import Expr

logger = logging.getLogger(__name__)


def print_builtin(arg: Expr) -> Expr:
    """Write the rendered argument followed by a newline; returns Nil."""
    print(arg.render())
    return Nil


def box_builtin(arg: Expr) -> Box:
    """Wrap the argument in a fresh mutable Box."""
    return Box(arg)


BUILTINS: dict[str, Callable[[Expr], Optional[Expr]]] = {
    "print": print_builtin,
    "box": box_builtin,
}


def register_one(
    env: Environment, name: str, behavior: Callable[[Expr], Optional[Expr]]
) -> Builtin:
    """Bind a single native behavior under `name` in the topmost frame."""
    builtin = Builtin(name, behavior)
    env.add(name, builtin)
    logger.debug("Registered builtin %s", name)
    return builtin


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, behavior in BUILTINS.items():
        register_one(env, name, behavior)
