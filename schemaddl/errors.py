# ============================================================================
# DDL EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Typed failures surfaced to callers
# PURPOSE: Unresolved references, interleave cycles, unknown dialects
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: DDLError, UnresolvedReferenceError, CyclicInterleavingError,
#          UnsupportedDialectError
# ============================================================================
"""
DDL compiler exceptions.

Callers (CLI commands, report writers) catch DDLError to keep running for
other tables when one table cannot be rendered.
"""

from typing import Any, List, Optional


class DDLError(Exception):
    """Base exception for DDL generation."""
    pass


class UnresolvedReferenceError(DDLError):
    """Raised when a table or column id is absent from the schema."""

    def __init__(self, message: str, table_id: Optional[str] = None, reference: Optional[str] = None):
        self.table_id = table_id
        self.reference = reference
        super().__init__(message)


class CyclicInterleavingError(DDLError):
    """Raised when a chain of interleaving parents loops back on itself."""

    def __init__(self, cycle: List[str]):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic interleaving detected: {' -> '.join(self.cycle)}")


class UnsupportedDialectError(DDLError):
    """Raised when no rendering policy is registered for a dialect."""

    def __init__(self, dialect: Any):
        self.dialect = dialect
        super().__init__(f"Unsupported dialect: {dialect!r}")


__all__ = [
    "DDLError",
    "UnresolvedReferenceError",
    "CyclicInterleavingError",
    "UnsupportedDialectError",
]
