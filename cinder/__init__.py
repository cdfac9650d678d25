# Cinder: the evaluation core of a small interpreted language.
#
# The package consumes an already-built tree of statements (cinder.evaluation)
# and values (cinder.types); building that tree from source text is left to a
# front end. Errors are the CinderError hierarchy in cinder.errors.

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from cinder.config import configure_logging  # noqa: E402
from cinder.errors import CinderError  # noqa: E402
from cinder.types import (  # noqa: E402
    Box,
    Builtin,
    Cell,
    Environment,
    Expr,
    Frame,
    Function,
    Literal,
    Nil,
    Stmt,
    Variant,
)
from cinder.evaluation import (  # noqa: E402
    AddVar,
    Assign,
    Block,
    CallExpr,
    Definition,
    ExprStmt,
    Return,
    SetCell,
    Variable,
)
from cinder.interpreter import Program, run_program  # noqa: E402

__all__ = [
    "configure_logging",
    "CinderError",
    "Box",
    "Builtin",
    "Cell",
    "Environment",
    "Expr",
    "Frame",
    "Function",
    "Literal",
    "Nil",
    "Stmt",
    "Variant",
    "AddVar",
    "Assign",
    "Block",
    "CallExpr",
    "Definition",
    "ExprStmt",
    "Return",
    "SetCell",
    "Variable",
    "Program",
    "run_program",
]
