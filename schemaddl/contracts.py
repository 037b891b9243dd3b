# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Core enums shared by models and renderers
# PURPOSE: Define dialect, generation and layout enums for DDL rendering
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Dialect, GenerationType, PrimaryKeyPlacement, ArrayStyle
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the schema-to-DDL compiler.

These enums cross every boundary of the compiler:
- Config (which dialect to render)
- Schema model (how a column value is generated)
- Dialect policy (how a table is laid out)
"""

from enum import Enum


# ============================================================================
# DIALECTS
# ============================================================================

class Dialect(str, Enum):
    """
    Target SQL dialects.

    GOOGLE_SQL and POSTGRESQL are the two flavors Spanner accepts.
    MYSQL_SOURCE re-prints the *source* schema for reports and prompts.
    """
    GOOGLE_SQL = "google_standard_sql"
    POSTGRESQL = "postgresql"
    MYSQL_SOURCE = "mysql"

    def is_spanner(self) -> bool:
        """Check if this dialect targets Spanner."""
        return self in (Dialect.GOOGLE_SQL, Dialect.POSTGRESQL)


# ============================================================================
# AUTO-GENERATION
# ============================================================================

class GenerationType(str, Enum):
    """
    How a column value is produced by the database.

    Values match the labels the migration UI stores on columns.
    """
    NONE = ""                        # Writer supplies the value
    PRE_DEFINED = "Pre-defined"      # Built-in expression, e.g. UUID
    SEQUENCE = "Sequence"            # Backed by a named sequence
    AUTO_INCREMENT = "Auto Increment"  # Source-side auto increment


# Name of the pre-defined UUID generator
UUID = "UUID"


# ============================================================================
# LAYOUT
# ============================================================================

class PrimaryKeyPlacement(str, Enum):
    """
    Where the PRIMARY KEY clause goes in CREATE TABLE.

    TRAILING: after the closing parenthesis (GoogleSQL)
    INLINE:   last item inside the column list (PostgreSQL, MySQL)
    """
    TRAILING = "trailing"
    INLINE = "inline"


class ArrayStyle(str, Enum):
    """How array column types are spelled."""
    ANGLE = "angle"      # ARRAY<INT64>
    BOUNDED = "bounded"  # INT8[3], text[]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "Dialect",
    "GenerationType",
    "UUID",
    "PrimaryKeyPlacement",
    "ArrayStyle",
]
