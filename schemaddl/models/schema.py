# ============================================================================
# SCHEMA MODEL
# ============================================================================
# STATUS: Core model - Abstract relational schema snapshot
# PURPOSE: Tables, columns, keys, indexes, foreign keys and interleaving
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: Schema, TableDef, ColumnDef, ColumnType, AutoGen, KeyPart,
#          ForeignKeyDef, IndexDef, CheckConstraintDef, ordered_keys
# DEPENDENCIES: pydantic
# ============================================================================
"""
Schema Model

Immutable description of a relational schema, built upstream by schema
extraction and consumed read-only by the DDL renderers.

Key concept:
- Ids are stable identifiers (tables, columns)
- Names are display names and may change under renaming rules
- Every ordered thing carries its order explicitly (column_order,
  KeyPart.order); mapping iteration order is never meaningful

Schema is a plain Dict[str, TableDef] keyed by table id.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from schemaddl.contracts import GenerationType
from schemaddl.errors import UnresolvedReferenceError


class ColumnType(BaseModel):
    """
    Semantic column type.

    name is the abstract type name (INT64, STRING, ...) for Spanner schemas
    and the source type name (varchar, int, ...) for source schemas.
    """
    name: str = Field(..., description="Semantic type name")
    mods: List[int] = Field(default_factory=list, description="Length/precision modifiers in declared order")
    array_bounds: List[int] = Field(
        default_factory=list,
        description="One entry per array dimension; -1 is an unbounded dimension"
    )

    model_config = {"frozen": True}

    @property
    def is_array(self) -> bool:
        return len(self.array_bounds) > 0


class AutoGen(BaseModel):
    """Auto-generation rule for a column."""
    name: str = ""
    generation_type: GenerationType = GenerationType.NONE

    model_config = {"frozen": True}


class ColumnDef(BaseModel):
    """A single column."""
    name: str
    id: str
    type: ColumnType
    not_null: bool = False
    auto_gen: Optional[AutoGen] = None
    default_value: Optional[str] = Field(default=None, description="Default literal/expression text")
    comment: Optional[str] = None

    model_config = {"frozen": True}


class KeyPart(BaseModel):
    """
    One column reference within a primary key or index key.

    order is the explicit 1-based position of the key part.
    """
    column_id: str
    desc: bool = False
    order: int = Field(default=1, ge=1)

    model_config = {"frozen": True}


class ForeignKeyDef(BaseModel):
    """Foreign key from the owning table to refer_table_id."""
    name: str = ""
    id: str = ""
    column_ids: List[str]
    refer_table_id: str
    refer_column_ids: List[str]
    on_delete: str = ""
    on_update: str = ""

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_column_counts(self) -> "ForeignKeyDef":
        if len(self.column_ids) != len(self.refer_column_ids):
            raise ValueError(
                f"Foreign key '{self.name or self.id}' has {len(self.column_ids)} columns "
                f"but references {len(self.refer_column_ids)}"
            )
        return self


class IndexDef(BaseModel):
    """Secondary index on a table."""
    name: str
    id: str = ""
    table_id: str
    unique: bool = False
    keys: List[KeyPart]
    storing_column_ids: List[str] = Field(
        default_factory=list,
        description="Non-key columns stored in the index"
    )

    model_config = {"frozen": True}


class CheckConstraintDef(BaseModel):
    """Check constraint; name may be empty."""
    name: str = ""
    id: str = ""
    expression: str

    model_config = {"frozen": True}


class TableDef(BaseModel):
    """
    A table.

    Interleaving:
        parent_id names the table this one is interleaved in. The child's
        primary key is expected to start with the parent's key columns;
        that rule is validated upstream and not re-checked here.
    """
    name: str
    id: str
    column_order: List[str] = Field(default_factory=list, description="Column ids in declaration order")
    columns: Dict[str, ColumnDef] = Field(default_factory=dict)
    primary_key: List[KeyPart] = Field(default_factory=list)
    foreign_keys: List[ForeignKeyDef] = Field(default_factory=list)
    indexes: List[IndexDef] = Field(default_factory=list)
    check_constraints: List[CheckConstraintDef] = Field(default_factory=list)
    parent_id: Optional[str] = None
    parent_on_delete: str = ""
    comment: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("parent_id", mode="before")
    @classmethod
    def empty_parent_is_root(cls, v):
        """Treat an empty parent id as no parent."""
        if v == "":
            return None
        return v

    @property
    def is_interleaved(self) -> bool:
        return self.parent_id is not None

    def get_column(self, column_id: str) -> ColumnDef:
        """
        Look up a column by id.

        Raises:
            UnresolvedReferenceError: If the id is not a column of this table
        """
        if column_id not in self.columns:
            raise UnresolvedReferenceError(
                f"Column '{column_id}' not found in table '{self.name}' ({self.id})",
                table_id=self.id,
                reference=column_id,
            )
        return self.columns[column_id]

    def ordered_columns(self) -> List[ColumnDef]:
        """Columns in declaration order (column_order)."""
        return [self.get_column(col_id) for col_id in self.column_order]


Schema = Dict[str, TableDef]


def get_table(schema: Schema, table_id: str, referenced_by: Optional[str] = None) -> TableDef:
    """
    Look up a table by id.

    Args:
        schema: Full schema mapping
        table_id: Id to resolve
        referenced_by: Id of the table holding the reference (error context)

    Raises:
        UnresolvedReferenceError: If the id is not in the schema
    """
    if table_id not in schema:
        raise UnresolvedReferenceError(
            f"Table '{table_id}' not found in schema",
            table_id=referenced_by or table_id,
            reference=table_id,
        )
    return schema[table_id]


def ordered_keys(keys: List[KeyPart]) -> List[KeyPart]:
    """
    Sort key parts by explicit order.

    sorted() is stable, so equal orders keep their original sequence position.
    """
    return sorted(keys, key=lambda k: k.order)


__all__ = [
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
]
