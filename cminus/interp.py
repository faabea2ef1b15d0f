"""Tree-walking interpreter for analysed C-minus programs."""

from __future__ import annotations

import sys
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
    Print,
    Return,
    VarDecl,
    Variable,
    While,
)

ARRAY_CAPACITY = 100


class Interpreter:
    """Evaluates statements and expressions against one global variable store.

    Scalars and arrays live in a single flat namespace shared by every
    function. Reading an unknown scalar or array element gives 0; writing
    an element of an undeclared array is ignored.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err
        self.scalars: dict[str, int] = {}
        self.arrays: dict[str, list[int]] = {}

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def _warn(self, text: str) -> None:
        (self._err if self._err is not None else sys.stderr).write(text + "\n")

    def _array_slot(self, name: str, index: int) -> tuple[Optional[list[int]], int]:
        array = self.arrays.get(name)
        if array is not None and not 0 <= index < len(array):
            raise IndexError(f"index {index} out of range for array {name}")
        return array, index

    def _get_element(self, name: str, index: int) -> int:
        array, index = self._array_slot(name, index)
        return 0 if array is None else array[index]

    def _set_element(self, name: str, index: int, value: int) -> None:
        array, index = self._array_slot(name, index)
        if array is not None:
            array[index] = value

    def _call(self, expr: Call) -> int:
        target = expr.methods.lookup(expr.name) if expr.methods is not None else None
        if not isinstance(target, Function):
            self._warn(f"Unknown or unsupported function call: {expr.name}")
            return 0
        for arg, param in zip(expr.args, target.params):
            self.scalars[param.name] = self.eval_expr(arg)
        return self.exec_stmt(target.body)

    def eval_expr(self, expr: Node) -> int:
        """Evaluate an expression and return its integer value."""
        match expr:
            case Num():
                return expr.value
            case Assign():
                value = self.eval_expr(expr.expr)
                self.scalars[expr.target.name] = value
                return value
            case Variable():
                return self.scalars.get(expr.name, 0)
            case Call():
                return self._call(expr)
            case ArrayAccess():
                return self._get_element(expr.name, self.eval_expr(expr.index))
            case BinaryExpr():
                lhs = self.eval_expr(expr.lhs)
                rhs = self.eval_expr(expr.rhs)
                return expr.op.apply(lhs, rhs)
            case _:
                self._warn(f"Unsupported expression kind {type(expr).__name__}")
                return 0

    def exec_stmt(self, stmt: Node) -> int:
        """Execute a statement; the value of a reached return is passed back."""
        match stmt:
            case Compound():
                for decl in stmt.decls:
                    self.exec_stmt(decl)
                for inner in stmt.stmts:
                    result = self.exec_stmt(inner)
                    if isinstance(inner, Return):
                        return result
            case VarDecl():
                if stmt.size > 0:
                    self.arrays.setdefault(stmt.name, [0] * ARRAY_CAPACITY)
                else:
                    self.scalars[stmt.name] = 0
            case Assign():
                if isinstance(stmt.target, ArrayAccess):
                    index = self.eval_expr(stmt.target.index)
                    self._set_element(stmt.target.name, index, self.eval_expr(stmt.expr))
                else:
                    self.scalars[stmt.target.name] = self.eval_expr(stmt.expr)
            case Print():
                for arg in stmt.args:
                    self._write(f"{self.eval_expr(arg)}\n")
            case IfThen():
                if self.eval_expr(stmt.cond):
                    return self.exec_stmt(stmt.then)
                if stmt.otherwise is not None:
                    return self.exec_stmt(stmt.otherwise)
            case While():
                while self.eval_expr(stmt.cond):
                    result = self.exec_stmt(stmt.body)
                    if isinstance(stmt.body, Return):
                        return result
            case Function():
                return self.exec_stmt(stmt.body)
            case Return():
                return 0 if stmt.expr is None else self.eval_expr(stmt.expr)
            case _:
                self._warn(f"Unsupported statement kind {type(stmt).__name__}")
        return 0

    def run(self, program: Iterable[Node]) -> None:
        """Execute each top-level node in order."""
        for node in program:
            self.exec_stmt(node)


def interpret_program(program: Iterable[Node], out: Optional[TextIO] = None) -> None:
    """Run a program, printing to ``out`` (standard output by default)."""
    Interpreter(out=out).run(program)