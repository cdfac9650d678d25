from cinder.types.value import Cell, Expr, Stmt, Variant
from cinder.types.nil import Nil, NilType
from cinder.types.environment import Environment, Frame
from cinder.types.literal import Literal
from cinder.types.function import Builtin, Function
from cinder.types.cell import Box

__all__ = [
    "Cell",
    "Expr",
    "Stmt",
    "Variant",
    "Nil",
    "NilType",
    "Environment",
    "Frame",
    "Literal",
    "Builtin",
    "Function",
    "Box",
]
