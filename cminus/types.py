"""Value types known to the analyser and interpreter."""

from __future__ import annotations

import enum


class Type(enum.IntEnum):
    """Type of an expression or declaration."""

    INT = 0
    VOID = 1
    ERR = 2
    STRING = 3

    def spelling(self) -> str:
        """Return the keyword used when a declaration is shown ("int" or "void")."""
        return "int" if self is Type.INT else "void"