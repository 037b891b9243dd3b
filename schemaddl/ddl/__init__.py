# ============================================================================
# DDL MODULE
# ============================================================================
# STATUS: Core - DDL generation from the schema model
# PURPOSE: Render Schema snapshots as Spanner / MySQL DDL
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================

from schemaddl.ddl.ddl_utils import (
    ColumnBuilder,
    KeyBuilder,
    CheckConstraintBuilder,
    IndexBuilder,
    ForeignKeyBuilder,
    SequenceBuilder,
    render,
)
from schemaddl.ddl.dialects import DialectPolicy, POLICIES, get_policy, resolve_policy
from schemaddl.ddl.ordering import InterleaveOrderer, order_tables
from schemaddl.ddl.sql_generator import SchemaToDDL, DDLResult, get_ddl, join_ddl

__all__ = [
    # Generator
    "SchemaToDDL",
    "DDLResult",
    "get_ddl",
    "join_ddl",
    # Ordering
    "InterleaveOrderer",
    "order_tables",
    # Dialects
    "DialectPolicy",
    "POLICIES",
    "get_policy",
    "resolve_policy",
    # Builders
    "ColumnBuilder",
    "KeyBuilder",
    "CheckConstraintBuilder",
    "IndexBuilder",
    "ForeignKeyBuilder",
    "SequenceBuilder",
    "render",
]
