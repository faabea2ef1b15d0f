"""Syntax tree, semantic analysis, tree printing and interpretation for a small C-like language."""

__version__ = "0.1.0"

__all__ = ["ast", "interp", "pretty_print", "semant", "symtab", "types", "utils"]