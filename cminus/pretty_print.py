"""Indented, human-readable rendering of syntax trees."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from .ast import (
    ArrayAccess,
    Assign,
    BinaryExpr,
    Call,
    Compound,
    Function,
    IfThen,
    Node,
    Num,
    Param,
    Print,
    Return,
    StringLiteral,
    VarDecl,
    Variable,
    While,
)
from .types import Type
from .utils import indentation


def _children(nodes, indent: int) -> Iterator[str]:
    for child in nodes:
        yield from _lines(child, indent)


def _lines(node: Optional[Node], indent: int) -> Iterator[str]:
    if node is None:
        return
    pad = indentation(indent)
    match node:
        case Num():
            yield f"{pad}{node.value}"
        case StringLiteral():
            yield f'{pad}"{node.value}"'
        case BinaryExpr():
            yield f"{pad}{node.op.symbol}"
            yield from _children((node.lhs, node.rhs), indent + 2)
        case Call():
            yield f"{pad}Call: {node.name}"
            yield from _children(node.args, indent + 2)
        case Assign():
            yield f"{pad}="
            yield from _children((node.target, node.expr), indent + 2)
        case ArrayAccess():
            yield f"{pad}Array name: {node.name}"
            yield from _lines(node.index, indent + 2)
        case Variable():
            yield f"{pad}variable name: {node.name}"
        case Return():
            yield f"{pad}Return statement"
            yield from _lines(node.expr, indent + 2)
        case While():
            yield f"{pad}While statement"
            yield from _children((node.cond, node.body), indent + 2)
        case IfThen():
            yield f"{pad}If statement"
            yield from _children((node.cond, node.then), indent + 2)
            if node.otherwise is not None:
                yield f"{pad}Else"
                yield from _lines(node.otherwise, indent + 2)
        case Compound():
            yield f"{pad}Declarations:"
            yield from _children(node.decls, indent + 2)
            yield f"{pad}Statements:"
            yield from _children(node.stmts, indent + 2)
        case Param():
            suffix = "[]" if node.ref else ""
            yield f"{pad}{Type(node.type_spec).spelling()} {node.name}{suffix}"
        case Function():
            yield f"{pad}{Type(node.ret_type).spelling()} {node.name}"
            yield f"{indentation(indent + 2)}Parameters:"
            yield from _children(node.params, indent + 4)
            yield from _lines(node.body, indent + 2)
        case VarDecl():
            size = node.size if node.ref else 1
            suffix = "[]" if node.ref else ""
            yield f"{pad}{Type(node.type_spec).spelling()} {node.name} {size} {suffix}"
        case Print():
            yield f"{pad}Print:"
            yield from _children(node.args, indent + 2)
        case _:
            yield f"{pad}Unknown AST node kind: {type(node).__name__}"


def format_tree(node: Optional[Node]) -> str:
    """Return the indented rendering of ``node``, one line per tree element."""
    return "".join(f"{line}\n" for line in _lines(node, 0))


def pretty_print(node: Optional[Node], out: Optional[TextIO] = None) -> None:
    """Write the rendering of ``node`` to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(format_tree(node))