"""Indentation, symbol-table dumping and assembly text emission."""

from __future__ import annotations

import itertools
import sys
from typing import Optional, TextIO

from .symtab import SymbolTable


def indentation(indent: int) -> str:
    """Return ``indent`` spaces (none for zero or negative)."""
    return " " * max(indent, 0)


def dump_symtab(table: Optional[SymbolTable]) -> str:
    """Render a scope chain, innermost first, each scope indented further."""
    if table is None:
        return ""
    lines = []
    for depth, scope in enumerate(table.scopes()):
        indent = depth * 4
        lines.append(f"{indentation(indent)}scope begins:\n")
        lines.extend(f"{indentation(indent + 2)}{name}\n" for name, _ in scope.entries)
    return "".join(lines)


class Emitter:
    """Writes assembly-style text to a stream (standard output by default)."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self._labels = itertools.count()

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def emit(self, op: str, *args: str) -> None:
        """Write an instruction; operands after the first are comma separated."""
        line = f"\t{op}"
        if args:
            line += " " + ", ".join(args)
        self._write(line + "\n")

    def emit_label(self, name: str) -> None:
        self._write(f"{name}:\n")

    def new_label(self) -> str:
        """Return a fresh local label, ``.L0``, ``.L1`` and so on."""
        return f".L{next(self._labels)}"

    def emit_string(self, label: str, text: str) -> None:
        """Write a labelled read-only string and switch back to text."""
        self._write(
            "\t.section .rodata\n"
            f"{label}:\n"
            f'\t.asciz "{text}"\n'
            "\t.text\n"
        )

    def emit_comment(self, text: str) -> None:
        self._write(f"\t# {text}\n")