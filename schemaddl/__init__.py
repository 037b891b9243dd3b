# ============================================================================
# SCHEMADDL PACKAGE
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Export contracts, models, config and the DDL generator
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================

from schemaddl.__version__ import __version__
from schemaddl.contracts import Dialect, GenerationType, PrimaryKeyPlacement
from schemaddl.errors import (
    DDLError,
    UnresolvedReferenceError,
    CyclicInterleavingError,
    UnsupportedDialectError,
)
from schemaddl.config import Config
from schemaddl.models import (
    Schema,
    TableDef,
    ColumnDef,
    ColumnType,
    AutoGen,
    KeyPart,
    ForeignKeyDef,
    IndexDef,
    CheckConstraintDef,
    SequenceDef,
)
from schemaddl.ddl import SchemaToDDL, DDLResult, get_ddl, join_ddl, order_tables

__all__ = [
    "__version__",
    # Enums
    "Dialect",
    "GenerationType",
    "PrimaryKeyPlacement",
    # Errors
    "DDLError",
    "UnresolvedReferenceError",
    "CyclicInterleavingError",
    "UnsupportedDialectError",
    # Config
    "Config",
    # Models
    "Schema",
    "TableDef",
    "ColumnDef",
    "ColumnType",
    "AutoGen",
    "KeyPart",
    "ForeignKeyDef",
    "IndexDef",
    "CheckConstraintDef",
    "SequenceDef",
    # Generator
    "SchemaToDDL",
    "DDLResult",
    "get_ddl",
    "join_ddl",
    "order_tables",
]
