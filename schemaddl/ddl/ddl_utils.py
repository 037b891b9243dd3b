# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - Entity renderers for DDL generation
# PURPOSE: Column, key, check, index, foreign key and sequence builders
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ColumnBuilder, KeyBuilder, CheckConstraintBuilder, IndexBuilder,
#          ForeignKeyBuilder, SequenceBuilder, identifier, render
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Utilities - Entity Renderers.

Each builder turns one schema entity into one DDL fragment or statement.
All methods return psycopg.sql.Composed objects; render() turns them into
text. Identifiers are quoted by the dialect policy, so the SQL objects used
here are plain sql.SQL fragments (psycopg's Identifier always double-quotes,
which is wrong for GoogleSQL and the MySQL profile).

Usage:
    from schemaddl.ddl.ddl_utils import IndexBuilder, render

    stmt = IndexBuilder.create(policy, table, index)
    print(render(stmt))
"""

from typing import List, Optional, Sequence

from psycopg import sql

from schemaddl.ddl.dialects import DialectPolicy
from schemaddl.logging import ComponentType, get_logger
from schemaddl.models.schema import (
    CheckConstraintDef,
    ColumnDef,
    ForeignKeyDef,
    IndexDef,
    KeyPart,
    Schema,
    TableDef,
    get_table,
    ordered_keys,
)
from schemaddl.models.sequence import SequenceDef

logger = get_logger(__name__, ComponentType.RENDERER)


def identifier(policy: DialectPolicy, name: str) -> sql.SQL:
    """Quote an identifier per the dialect policy."""
    return sql.SQL(policy.quote(name))


def render(statement: sql.Composable) -> str:
    """Render a composed statement to text (no connection needed)."""
    return statement.as_string(None)


# ============================================================================
# COLUMN BUILDER
# ============================================================================

class ColumnBuilder:
    """Builder for column definitions inside CREATE TABLE."""

    @staticmethod
    def definition(policy: DialectPolicy, column: ColumnDef) -> sql.Composed:
        """
        Render "<name> <type>[ NOT NULL][<autogen>][ DEFAULT <expr>]".

        An auto-gen suffix replaces the explicit default.
        """
        parts = [
            identifier(policy, column.name),
            sql.SQL(" "),
            sql.SQL(policy.type_name(column.type)),
        ]

        if column.not_null:
            parts.append(sql.SQL(" NOT NULL"))

        auto_gen = policy.auto_gen_expression(column.auto_gen)
        if auto_gen:
            parts.append(sql.SQL(auto_gen))
            if column.default_value:
                logger.debug(f"Column {column.id}: auto-generation replaces default '{column.default_value}'")
        elif column.default_value:
            parts.append(sql.SQL(policy.default_expression(column.default_value)))

        return sql.Composed(parts)


# ============================================================================
# KEY BUILDER
# ============================================================================

class KeyBuilder:
    """Builder for primary key and index key lists."""

    @staticmethod
    def key_part(policy: DialectPolicy, table: TableDef, key: KeyPart) -> sql.Composed:
        """Render "<col>[ DESC]"; ASC is the default and never printed."""
        col = identifier(policy, table.get_column(key.column_id).name)
        if key.desc:
            return sql.Composed([col, sql.SQL(" DESC")])
        return sql.Composed([col])

    @staticmethod
    def key_list(policy: DialectPolicy, table: TableDef, keys: Sequence[KeyPart]) -> sql.Composed:
        """Render key parts ordered by KeyPart.order, comma separated."""
        return sql.SQL(", ").join(
            KeyBuilder.key_part(policy, table, key) for key in ordered_keys(list(keys))
        )

    @staticmethod
    def primary_key(policy: DialectPolicy, table: TableDef) -> sql.Composed:
        """Render "PRIMARY KEY (<keys>)"."""
        return sql.SQL("PRIMARY KEY ({keys})").format(
            keys=KeyBuilder.key_list(policy, table, table.primary_key)
        )

    @staticmethod
    def column_list(policy: DialectPolicy, table: TableDef, column_ids: Sequence[str]) -> sql.Composed:
        """Render a plain column name list in the given order."""
        return sql.SQL(", ").join(
            identifier(policy, table.get_column(col_id).name) for col_id in column_ids
        )


# ============================================================================
# CHECK CONSTRAINT BUILDER
# ============================================================================

class CheckConstraintBuilder:
    """Builder for CHECK constraints inside CREATE TABLE."""

    @staticmethod
    def clause(policy: DialectPolicy, check: CheckConstraintDef) -> sql.Composed:
        """Render "CONSTRAINT <name> CHECK (<expr>)" or "CHECK (<expr>)"."""
        if check.name:
            return sql.SQL("CONSTRAINT {name} CHECK ({expr})").format(
                name=identifier(policy, check.name),
                expr=sql.SQL(check.expression),
            )
        return sql.SQL("CHECK ({expr})").format(expr=sql.SQL(check.expression))


# ============================================================================
# INDEX BUILDER
# ============================================================================

class IndexBuilder:
    """Builder for CREATE INDEX statements."""

    @staticmethod
    def create(policy: DialectPolicy, table: TableDef, index: IndexDef) -> sql.Composed:
        """
        Render "CREATE [UNIQUE] INDEX <name> ON <table> (<keys>)".

        Stored columns render as STORING (GoogleSQL) or INCLUDE (PostgreSQL);
        dialects without a storing keyword drop them.

        Raises:
            UnresolvedReferenceError: If a key column is not in the table
        """
        stmt = sql.SQL("CREATE {unique}INDEX {name} ON {table} ({keys})").format(
            unique=sql.SQL("UNIQUE " if index.unique else ""),
            name=identifier(policy, index.name),
            table=identifier(policy, table.name),
            keys=KeyBuilder.key_list(policy, table, index.keys),
        )

        if index.storing_column_ids and policy.storing_keyword:
            stmt = sql.SQL("{} {} ({})").format(
                stmt,
                sql.SQL(policy.storing_keyword),
                KeyBuilder.column_list(policy, table, index.storing_column_ids),
            )

        return sql.Composed([stmt, sql.SQL(policy.statement_terminator)])


# ============================================================================
# FOREIGN KEY BUILDER
# ============================================================================

class ForeignKeyBuilder:
    """Builder for ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY statements."""

    @staticmethod
    def alter_table(
        policy: DialectPolicy,
        schema: Schema,
        table_id: str,
        fk: ForeignKeyDef,
    ) -> sql.Composed:
        """
        Render the ALTER TABLE statement for one foreign key.

        Column names are resolved by id in the owning table and in the
        referenced table, so both may use unrelated id namespaces.

        Raises:
            UnresolvedReferenceError: If a table or column id is missing
        """
        table = get_table(schema, table_id)
        refer_table = get_table(schema, fk.refer_table_id, referenced_by=table_id)

        name = sql.SQL("")
        if fk.name:
            name = sql.SQL("{} ").format(identifier(policy, fk.name))

        stmt = sql.SQL(
            "ALTER TABLE {table} ADD CONSTRAINT {name}FOREIGN KEY ({cols}) REFERENCES {refer_table} ({refer_cols})"
        ).format(
            table=identifier(policy, table.name),
            name=name,
            cols=KeyBuilder.column_list(policy, table, fk.column_ids),
            refer_table=identifier(policy, refer_table.name),
            refer_cols=KeyBuilder.column_list(policy, refer_table, fk.refer_column_ids),
        )

        actions: List[sql.Composable] = [stmt]
        if fk.on_delete:
            actions.append(sql.SQL(f" ON DELETE {fk.on_delete.upper()}"))
        if fk.on_update:
            actions.append(sql.SQL(f" ON UPDATE {fk.on_update.upper()}"))
        actions.append(sql.SQL(policy.statement_terminator))

        return sql.Composed(actions)


# ============================================================================
# SEQUENCE BUILDER
# ============================================================================

class SequenceBuilder:
    """Builder for CREATE SEQUENCE statements (Spanner dialects)."""

    @staticmethod
    def create(policy: DialectPolicy, sequence: SequenceDef) -> Optional[sql.Composed]:
        """
        Render CREATE SEQUENCE, or None if the dialect has no sequences.
        """
        syntax = policy.sequence_syntax
        if syntax is None:
            return None

        kind = sequence.sequence_kind.lower() if syntax.lowercase_kind else sequence.sequence_kind.upper()
        clauses = [sql.SQL(syntax.kind).format(kind=sql.SQL(kind))]

        if sequence.has_skip_range:
            clauses.append(sql.SQL(syntax.skip_range).format(
                min=sql.SQL(str(sequence.skip_range_min)),
                max=sql.SQL(str(sequence.skip_range_max)),
            ))
        if sequence.start_with_counter is not None:
            clauses.append(sql.SQL(syntax.start_counter).format(
                start=sql.SQL(str(sequence.start_with_counter)),
            ))

        body = sql.SQL(syntax.wrapper).format(clauses=sql.SQL(syntax.joiner).join(clauses))

        return sql.SQL("CREATE SEQUENCE {name}{body}").format(
            name=identifier(policy, sequence.name),
            body=body,
        )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "identifier",
    "render",
    "ColumnBuilder",
    "KeyBuilder",
    "CheckConstraintBuilder",
    "IndexBuilder",
    "ForeignKeyBuilder",
    "SequenceBuilder",
]
