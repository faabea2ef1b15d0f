"""Semantic analysis: scope resolution and type checking of a program."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

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
from .symtab import SymbolTable
from .types import Type


@dataclass(frozen=True)
class Diagnostic:
    """A semantic error found at a source line."""

    lineno: int
    message: str

    def __str__(self) -> str:
        return f"error:{self.lineno}: {self.message}"


class Analyzer:
    """Attaches symbol tables and types to a tree and collects diagnostics.

    When ``err`` is given, each diagnostic is also written to it as it is found.
    """

    def __init__(self, err: Optional[TextIO] = None) -> None:
        self._err = err
        self.diagnostics: list[Diagnostic] = []

    def analyze(self, program: Iterable[Node]) -> list[Diagnostic]:
        """Check every top-level node and return the diagnostics found."""
        self.diagnostics = []
        methods = SymbolTable()
        variables = SymbolTable()
        self._visit_all(program, methods, variables)
        return list(self.diagnostics)

    def _error(self, node: Node, message: str) -> None:
        diagnostic = Diagnostic(node.lineno, message)
        self.diagnostics.append(diagnostic)
        if self._err is not None:
            self._err.write(f"{diagnostic}\n")

    def _visit_all(
        self, nodes: Iterable[Node], methods: SymbolTable, variables: SymbolTable
    ) -> None:
        for node in nodes:
            self._visit(node, methods, variables)

    @staticmethod
    def _attach(node: Node, methods: SymbolTable, variables: SymbolTable) -> None:
        node.methods = methods
        node.variables = variables

    def _visit(self, node: Node, methods: SymbolTable, variables: SymbolTable) -> None:
        match node:
            case Num():
                node.type = Type.INT
                self._attach(node, methods, variables)
            case StringLiteral():
                node.type = Type.STRING
                self._attach(node, methods, variables)
            case BinaryExpr():
                self._binary(node, methods, variables)
            case Call():
                self._call(node, methods, variables)
            case Assign():
                self._assign(node, methods, variables)
            case ArrayAccess():
                self._attach(node, methods, variables)
                self._visit(node.index, methods, variables)
                if node.index.type != Type.INT:
                    self._error(node, "Array index should be of integer type")
                    node.type = Type.ERR
                else:
                    node.type = Type.INT
            case Variable():
                self._attach(node, methods, variables)
                if variables.lookup(node.name) is None:
                    self._error(node, f"Undefined variable {node.name}")
                    node.type = Type.ERR
                else:
                    node.type = Type.INT
            case Return():
                self._return(node, methods, variables)
            case While():
                self._attach(node, methods, variables)
                self._visit(node.cond, methods, variables)
                self._visit(node.body, methods, variables)
                if node.cond.type != Type.INT:
                    self._error(node, "Predicate to while should be of type int")
            case IfThen():
                self._if_then(node, methods, variables)
            case Compound():
                inner = variables.enter()
                self._attach(node, methods, inner)
                self._visit_all(node.decls, methods, inner)
                self._visit_all(node.stmts, methods, inner)
            case Param():
                variables.add(node.name, node)
                if node.type_spec != Type.VOID:
                    node.type = Type.INT
                else:
                    self._error(node, "Invalid parameter type")
                    node.type = Type.ERR
            case Function():
                methods.add(node.name, node)
                inner = variables.enter()
                self._attach(node, methods, inner)
                self._visit_all(node.params, methods, inner)
                self._visit(node.body, methods, inner)
                node.type = node.body.type
            case VarDecl():
                variables.add(node.name, node)
                self._attach(node, methods, variables)
                if node.type_spec != Type.INT:
                    self._error(node, "Type of a variable should be int")
                    node.type = Type.ERR
                else:
                    node.type = Type.INT
            case Print():
                self._print(node, methods, variables)
            case _:
                raise TypeError(f"unknown node kind: {type(node).__name__}")

    def _binary(self, node: BinaryExpr, methods: SymbolTable, variables: SymbolTable) -> None:
        self._visit(node.lhs, methods, variables)
        self._visit(node.rhs, methods, variables)
        self._attach(node, methods, variables)
        if node.lhs.type == Type.INT and node.rhs.type == Type.INT:
            node.type = Type.INT
        else:
            self._error(node, f"Type to {node.op.symbol} should be integer")
            node.type = Type.ERR

    def _call(self, node: Call, methods: SymbolTable, variables: SymbolTable) -> None:
        self._attach(node, methods, variables)
        target = methods.lookup(node.name)
        if not isinstance(target, Function):
            self._error(node, "Function not declared")
            node.type = Type.ERR
        else:
            node.type = Type.INT
        self._visit_all(node.args, methods, variables)

    def _assign(self, node: Assign, methods: SymbolTable, variables: SymbolTable) -> None:
        self._attach(node, methods, variables)
        self._visit(node.target, methods, variables)
        self._visit(node.expr, methods, variables)
        if node.expr.type != Type.INT or node.target.type != Type.INT:
            source = Type(node.expr.type).spelling()
            target = Type(node.target.type).spelling()
            self._error(node, f"Mismatch type, Cannot assign {source} to {target}")
            node.type = Type.ERR
        else:
            node.type = Type.INT

    def _return(self, node: Return, methods: SymbolTable, variables: SymbolTable) -> None:
        self._attach(node, methods, variables)
        if node.expr is None:
            node.type = Type.VOID
            return
        self._visit(node.expr, methods, variables)
        if node.expr.type != Type.INT:
            self._error(node, "Return type should be int")
            node.type = Type.ERR
        else:
            node.type = Type.INT

    def _if_then(self, node: IfThen, methods: SymbolTable, variables: SymbolTable) -> None:
        self._attach(node, methods, variables)
        self._visit(node.cond, methods, variables)
        self._visit(node.then, methods, variables)
        if node.otherwise is not None:
            self._visit(node.otherwise, methods, variables)
        if node.cond.type != Type.INT:
            node.type = Type.ERR
            self._error(node, "Predicate to if should be int")
        else:
            node.type = Type.INT

    def _print(self, node: Print, methods: SymbolTable, variables: SymbolTable) -> None:
        self._attach(node, methods, variables)
        self._visit_all(node.args, methods, variables)
        for arg in node.args:
            if arg.type not in (Type.INT, Type.STRING):
                self._error(arg, "Invalid type in print (must be int or string)")
        node.type = Type.VOID


def analyze(program: Iterable[Node]) -> list[Diagnostic]:
    """Analyse a program, reporting each diagnostic on standard error."""
    return Analyzer(err=sys.stderr).analyze(program)