"""Chained symbol tables for nested scopes."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class SymbolTable:
    """One scope of names, linked to its enclosing scope."""

    def __init__(self, parent: Optional[SymbolTable] = None) -> None:
        self.parent = parent
        self.entries: list[tuple[str, Any]] = []

    def enter(self) -> SymbolTable:
        """Return a new, empty scope nested in this one."""
        return SymbolTable(self)

    def exit(self) -> Optional[SymbolTable]:
        """Return the enclosing scope (None for the outermost)."""
        return self.parent

    def probe(self, name: str) -> Any:
        """Find ``name`` in this scope only; the earliest entry wins."""
        return next((node for entry, node in self.entries if entry == name), None)

    def lookup(self, name: str) -> Any:
        """Find ``name`` here or in any enclosing scope, innermost first."""
        for scope in self.scopes():
            found = scope.probe(name)
            if found is not None:
                return found
        return None

    def add(self, name: str, node: Any) -> SymbolTable:
        """Add a symbol to this scope and return the scope."""
        self.entries.append((name, node))
        return self

    def scopes(self) -> Iterator[SymbolTable]:
        """Yield this scope and then each enclosing one, outermost last."""
        scope: Optional[SymbolTable] = self
        while scope is not None:
            yield scope
            scope = scope.parent