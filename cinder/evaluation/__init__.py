from cinder.evaluation.expressions import CallExpr, Variable, apply, call_function
from cinder.evaluation.statements import (
    AddVar,
    Assign,
    Block,
    Definition,
    ExprStmt,
    Return,
    SetCell,
)

__all__ = [
    "CallExpr",
    "Variable",
    "apply",
    "call_function",
    "AddVar",
    "Assign",
    "Block",
    "Definition",
    "ExprStmt",
    "Return",
    "SetCell",
]
