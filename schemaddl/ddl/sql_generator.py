# ============================================================================
# SCHEMA TO DDL GENERATOR
# ============================================================================
# STATUS: Core - DDL assembly from the schema model
# PURPOSE: Generate CREATE TABLE / CREATE INDEX / ALTER TABLE statements
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: SchemaToDDL, DDLResult, get_ddl, join_ddl
# DEPENDENCIES: psycopg
# ============================================================================
"""
Schema to DDL Generator.

Renders a Schema snapshot into an ordered list of DDL statements for one
dialect. The schema is never mutated.

Statement order:
    1. CREATE SEQUENCE (Spanner dialects, sorted by name)
    2. Per table, parents before interleaved children:
         CREATE TABLE, then its CREATE INDEX statements in declared order
    3. ALTER TABLE ... FOREIGN KEY, tables sorted by id, keys in declared order

Usage:
    generator = SchemaToDDL(Config(dialect=Dialect.POSTGRESQL))
    statements = generator.generate_all(schema)
    print(join_ddl(statements))
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Union

from psycopg import sql

from schemaddl.config import Config
from schemaddl.contracts import PrimaryKeyPlacement
from schemaddl.ddl.ddl_utils import (
    CheckConstraintBuilder,
    ColumnBuilder,
    ForeignKeyBuilder,
    IndexBuilder,
    KeyBuilder,
    SequenceBuilder,
    identifier,
    render,
)
from schemaddl.ddl.dialects import DialectPolicy, resolve_policy
from schemaddl.ddl.ordering import InterleaveOrderer
from schemaddl.errors import DDLError, UnresolvedReferenceError
from schemaddl.logging import ComponentType, get_logger, log_context
from schemaddl.models.schema import Schema, TableDef, get_table
from schemaddl.models.sequence import SequenceDef

logger = get_logger(__name__, ComponentType.GENERATOR)

Sequences = Union[Dict[str, SequenceDef], Iterable[SequenceDef]]


@dataclass
class DDLResult:
    """Result of a generation call."""
    # Statements in emission order
    statements: List[str] = field(default_factory=list)

    # Errors collected when skip_failed_tables is set
    errors: List[DDLError] = field(default_factory=list)

    # Table ids whose statements were left out
    skipped_tables: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class SchemaToDDL:
    """
    Convert a Schema snapshot to DDL statements.

    The dialect policy is resolved once, in the constructor, so an unknown
    dialect fails before any rendering starts.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the generator.

        Args:
            config: Rendering configuration (defaults to Config())

        Raises:
            UnsupportedDialectError: If config.dialect has no policy
        """
        self.config = config or Config()
        self.policy: DialectPolicy = resolve_policy(self.config)
        self.orderer = InterleaveOrderer()

    # =========================================================================
    # TABLE GENERATION
    # =========================================================================

    def generate_table(self, schema: Schema, table: TableDef) -> sql.Composed:
        """
        Generate CREATE TABLE for one table.

        Args:
            schema: Full schema (resolves the interleave parent's name)
            table: Table to render

        Returns:
            sql.Composed CREATE TABLE statement

        Raises:
            UnresolvedReferenceError: If a column, key or parent id is missing
        """
        policy = self.policy
        show_comments = self.config.comments and policy.supports_comments

        items = [(ColumnBuilder.definition(policy, col), col.comment) for col in table.ordered_columns()]
        items.extend((CheckConstraintBuilder.clause(policy, check), None) for check in table.check_constraints)

        has_pk = len(table.primary_key) > 0
        inline_pk = policy.primary_key_placement == PrimaryKeyPlacement.INLINE
        if has_pk and inline_pk:
            items.append((KeyBuilder.primary_key(policy, table), None))

        parts: List[sql.Composable] = []
        if show_comments and table.comment:
            parts.append(sql.SQL(f"--\n-- {_one_line(table.comment)}\n--\n"))

        parts.append(sql.SQL("CREATE TABLE {name} (\n").format(name=identifier(policy, table.name)))
        parts.append(self._layout_items(items, show_comments))
        parts.append(sql.SQL(policy.close_prefix + ")"))

        if has_pk and not inline_pk:
            parts.append(sql.SQL(" "))
            parts.append(KeyBuilder.primary_key(policy, table))

        if table.is_interleaved and policy.supports_interleave:
            parent = get_table(schema, table.parent_id, referenced_by=table.id)
            separator = " " if inline_pk else ",\n"
            parts.append(sql.SQL(separator + "INTERLEAVE IN PARENT {parent}").format(
                parent=identifier(policy, parent.name)
            ))
            if table.parent_on_delete:
                parts.append(sql.SQL(f" ON DELETE {table.parent_on_delete.upper()}"))

        parts.append(sql.SQL(policy.statement_terminator))
        return sql.Composed(parts)

    def _layout_items(self, items, show_comments: bool) -> sql.SQL:
        """
        Lay out the column list items per the policy.

        A comment goes at the end of its item's line, before any newline
        that closes the line. Comments are padded to the longest item line
        so they line up in one column.
        """
        policy = self.policy
        last = len(items) - 1

        lines = []
        for i, (item, comment) in enumerate(items):
            trailer = (policy.item_separator if i < last else "") + policy.item_terminator
            newline = "\n" if trailer.endswith("\n") else ""
            text = policy.item_indent + render(item) + trailer[:len(trailer) - len(newline)]
            lines.append((text, newline, comment))

        width = max((len(text) for text, _, _ in lines), default=0)

        pieces = []
        for text, newline, comment in lines:
            if show_comments and comment:
                text = text.ljust(width) + f" -- {_one_line(comment)}"
            pieces.append(text + newline)

        return sql.SQL("".join(pieces))

    # =========================================================================
    # INDEX / FOREIGN KEY / SEQUENCE GENERATION
    # =========================================================================

    def generate_indexes(self, table: TableDef) -> List[sql.Composed]:
        """Generate CREATE INDEX statements in declared index order."""
        return [IndexBuilder.create(self.policy, table, index) for index in table.indexes]

    def generate_foreign_keys(self, schema: Schema, table_id: str) -> List[sql.Composed]:
        """Generate ALTER TABLE statements for one table's foreign keys."""
        table = get_table(schema, table_id)
        return [
            ForeignKeyBuilder.alter_table(self.policy, schema, table_id, fk)
            for fk in table.foreign_keys
        ]

    def generate_sequences(self, sequences: Optional[Sequences]) -> List[sql.Composed]:
        """Generate CREATE SEQUENCE statements sorted by sequence name."""
        if not sequences:
            return []
        values = sequences.values() if isinstance(sequences, dict) else sequences

        result = []
        for sequence in sorted(values, key=lambda s: (s.name, s.id)):
            stmt = SequenceBuilder.create(self.policy, sequence)
            if stmt is not None:
                result.append(stmt)
        return result

    # =========================================================================
    # COMPLETE SCHEMA GENERATION
    # =========================================================================

    def generate(self, schema: Schema, sequences: Optional[Sequences] = None) -> DDLResult:
        """
        Generate DDL for the whole schema.

        With config.skip_failed_tables, tables (and foreign keys) with
        unresolved references are skipped and their errors collected in the
        result; otherwise the first error is raised.

        Raises:
            UnresolvedReferenceError: Strict mode, on the first missing id
            CyclicInterleavingError: If interleave parents form a cycle
        """
        result = DDLResult()
        dialect = self.policy.dialect.value

        with log_context(dialect=dialect, operation="generate_ddl"):
            if self.config.emit_tables:
                for stmt in self.generate_sequences(sequences):
                    result.statements.append(render(stmt))

                for table_id in self.orderer.order(schema):
                    with log_context(table_id=table_id):
                        try:
                            table = schema[table_id]
                            stmts = [self.generate_table(schema, table)]
                            stmts.extend(self.generate_indexes(table))
                        except UnresolvedReferenceError as e:
                            self._record_failure(result, table_id, e)
                            continue
                        result.statements.extend(render(stmt) for stmt in stmts)
                        logger.debug(f"Rendered table with {len(stmts) - 1} indexes")

            if self.config.emit_foreign_keys:
                self._generate_all_foreign_keys(schema, result)

        logger.info(
            f"Generated {len(result.statements)} DDL statements",
            extra={"dialect": dialect, "skipped_tables": len(result.skipped_tables)},
        )
        return result

    def generate_all(self, schema: Schema, sequences: Optional[Sequences] = None) -> List[str]:
        """Generate DDL and return only the statements."""
        return self.generate(schema, sequences).statements

    def _generate_all_foreign_keys(self, schema: Schema, result: DDLResult) -> None:
        """ALTER TABLE pass; table order is by id, independent of interleaving."""
        skipped: Set[str] = set(result.skipped_tables)

        for table_id in sorted(schema):
            if table_id in skipped:
                continue
            with log_context(table_id=table_id, operation="foreign_keys"):
                for fk in schema[table_id].foreign_keys:
                    if fk.refer_table_id in skipped:
                        logger.warning(
                            f"Skipping foreign key '{fk.name or fk.id}': referenced table '{fk.refer_table_id}' was skipped"
                        )
                        continue
                    try:
                        stmt = ForeignKeyBuilder.alter_table(self.policy, schema, table_id, fk)
                    except UnresolvedReferenceError as e:
                        self._record_failure(result, table_id, e, skip_table=False)
                        continue
                    result.statements.append(render(stmt))

    def _record_failure(
        self,
        result: DDLResult,
        table_id: str,
        error: UnresolvedReferenceError,
        skip_table: bool = True,
    ) -> None:
        """Raise in strict mode; otherwise log and collect the error."""
        if not self.config.skip_failed_tables:
            raise error
        logger.warning(f"Skipping: {error}")
        result.errors.append(error)
        if skip_table and table_id not in result.skipped_tables:
            result.skipped_tables.append(table_id)


def _one_line(text: str) -> str:
    return " ".join(text.splitlines())


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def get_ddl(
    schema: Schema,
    config: Optional[Config] = None,
    sequences: Optional[Sequences] = None,
) -> List[str]:
    """
    Render a schema to an ordered list of DDL statements.

    Args:
        schema: Table id -> TableDef
        config: Rendering configuration (GoogleSQL, tables + foreign keys)
        sequences: Optional sequences referenced by auto-generated columns

    Returns:
        List of statement strings
    """
    return SchemaToDDL(config).generate_all(schema, sequences)


def join_ddl(statements: List[str], separator: str = "\n\n") -> str:
    """Join statements for a report or a .sql file."""
    return separator.join(statements)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["SchemaToDDL", "DDLResult", "get_ddl", "join_ddl"]
