"""Syntax tree nodes for the C-minus language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .types import Type


class BinOp(enum.Enum):
    """Binary operators, valued by their source spelling."""

    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    EQ = "=="
    NEQ = "!="
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, lhs: int, rhs: int) -> int:
        """Apply the operator with C integer semantics; comparisons give 0 or 1."""
        if self is BinOp.DIV:
            return _c_div(lhs, rhs)
        if self is BinOp.MOD:
            return lhs - rhs * _c_div(lhs, rhs)
        return int(_OPERATIONS[self](lhs, rhs))


def _c_div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


_OPERATIONS = {
    BinOp.LT: lambda a, b: a < b,
    BinOp.LTE: lambda a, b: a <= b,
    BinOp.GT: lambda a, b: a > b,
    BinOp.GTE: lambda a, b: a >= b,
    BinOp.EQ: lambda a, b: a == b,
    BinOp.NEQ: lambda a, b: a != b,
    BinOp.ADD: lambda a, b: a + b,
    BinOp.SUB: lambda a, b: a - b,
    BinOp.MUL: lambda a, b: a * b,
}


@dataclass
class Node:
    """Common attributes of every tree node.

    ``methods`` and ``variables`` hold the symbol tables attached during
    semantic analysis; they take no part in equality.
    """

    lineno: int = field(default=0, kw_only=True)
    type: Type = field(default=Type.ERR, kw_only=True)
    methods: Any = field(default=None, kw_only=True, compare=False, repr=False)
    variables: Any = field(default=None, kw_only=True, compare=False, repr=False)


@dataclass
class Num(Node):
    value: int
    type: Type = field(default=Type.INT, kw_only=True)


@dataclass
class StringLiteral(Node):
    value: str


@dataclass
class BinaryExpr(Node):
    op: BinOp
    lhs: Node
    rhs: Node


@dataclass
class Call(Node):
    name: str
    args: list[Node] = field(default_factory=list)


@dataclass
class Assign(Node):
    target: Node
    expr: Node


@dataclass
class Variable(Node):
    name: str


@dataclass
class ArrayAccess(Node):
    name: str
    index: Node


@dataclass
class Return(Node):
    expr: Optional[Node] = None


@dataclass
class While(Node):
    cond: Node
    body: Node


@dataclass
class IfThen(Node):
    cond: Node
    then: Node
    otherwise: Optional[Node] = None


@dataclass
class Compound(Node):
    decls: list[Node] = field(default_factory=list)
    stmts: list[Node] = field(default_factory=list)


@dataclass
class Param(Node):
    type_spec: Type
    name: str
    ref: bool = False


@dataclass
class Function(Node):
    ret_type: Type
    name: str
    params: list[Param]
    body: Node


@dataclass
class VarDecl(Node):
    type_spec: Type
    name: str
    size: int = 0
    ref: bool = False


@dataclass
class Print(Node):
    args: list[Node] = field(default_factory=list)