# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for the schema model
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models describing the schema snapshot handed to the compiler.
"""

from schemaddl.models.schema import (
    Schema,
    TableDef,
    ColumnDef,
    ColumnType,
    AutoGen,
    KeyPart,
    ForeignKeyDef,
    IndexDef,
    CheckConstraintDef,
    get_table,
    ordered_keys,
)
from schemaddl.models.sequence import SequenceDef

__all__ = [
    # Schema
    "Schema",
    "TableDef",
    "ColumnDef",
    "ColumnType",
    "AutoGen",
    "KeyPart",
    "ForeignKeyDef",
    "IndexDef",
    "CheckConstraintDef",
    "get_table",
    "ordered_keys",
    # Sequences
    "SequenceDef",
]
