# ============================================================================
# DIALECT POLICIES
# ============================================================================
# STATUS: Core - Per-dialect rendering rules
# PURPOSE: Quoting, type spellings, PK placement, auto-gen templates, layout
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: DialectPolicy, SequenceSyntax, POLICIES, get_policy, resolve_policy
# DEPENDENCIES: schemaddl.contracts
# ============================================================================
"""
Dialect Policies.

Every dialect difference the renderers care about lives in one frozen
DialectPolicy record. Renderers never branch on the dialect itself; they
ask the policy.

Profiles:
    GOOGLE_SQL    Spanner GoogleSQL. PRIMARY KEY after the column list,
                  INTERLEAVE IN PARENT after the key, ARRAY<T> types.
    POSTGRESQL    Spanner PostgreSQL. PRIMARY KEY inside the column list,
                  INTERLEAVE IN PARENT after the closing parenthesis.
    MYSQL_SOURCE  Source schema re-printed for reports. Backtick quoting,
                  compact single-line column list, ';' terminators.

Usage:
    policy = resolve_policy(config)
    policy.quote("Singers")        # Singers or `Singers`
    policy.type_name(column.type)  # INT64 / INT8 / int
"""

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional, Union

from schemaddl.contracts import (
    ArrayStyle,
    Dialect,
    GenerationType,
    PrimaryKeyPlacement,
    UUID,
)
from schemaddl.errors import UnsupportedDialectError
from schemaddl.logging import ComponentType, get_logger
from schemaddl.models.schema import AutoGen, ColumnType

logger = get_logger(__name__, ComponentType.RENDERER)


# ============================================================================
# TYPE NAME TABLES
# ============================================================================

GOOGLE_SQL_TYPES = {
    "BOOL": "BOOL",
    "INT64": "INT64",
    "FLOAT32": "FLOAT32",
    "FLOAT64": "FLOAT64",
    "NUMERIC": "NUMERIC",
    "STRING": "STRING",
    "BYTES": "BYTES",
    "DATE": "DATE",
    "TIMESTAMP": "TIMESTAMP",
    "JSON": "JSON",
}

POSTGRESQL_TYPES = {
    "BOOL": "BOOL",
    "INT64": "INT8",
    "FLOAT32": "FLOAT4",
    "FLOAT64": "FLOAT8",
    "NUMERIC": "NUMERIC",
    "STRING": "VARCHAR",
    "BYTES": "BYTEA",
    "DATE": "DATE",
    "TIMESTAMP": "TIMESTAMPTZ",
    "JSON": "JSONB",
}


# ============================================================================
# POLICY RECORDS
# ============================================================================

@dataclass(frozen=True)
class SequenceSyntax:
    """
    CREATE SEQUENCE clause templates.

    Templates are psycopg.sql format strings; the renderer fills the
    placeholders and joins the present clauses with `joiner` before
    wrapping them with `wrapper`.
    """
    kind: str
    skip_range: str
    start_counter: str
    joiner: str
    wrapper: str
    lowercase_kind: bool = False


@dataclass(frozen=True)
class DialectPolicy:
    """
    Rendering rules for one dialect.

    Layout of the CREATE TABLE item list:
        "(\\n" + items + close_prefix + ")"
    where each item is item_indent + text, items are separated by
    item_separator and each item is followed by item_terminator.
    """
    dialect: Dialect

    # Identifiers
    quote_char: str
    always_quote: bool = False

    # Types
    type_names: Dict[str, str] = field(default_factory=dict)
    max_length_types: FrozenSet[str] = frozenset()
    array_style: ArrayStyle = ArrayStyle.BOUNDED
    # Print bounds as declared, so an unbounded dimension shows as [-1]
    literal_array_bounds: bool = False

    # CREATE TABLE layout
    primary_key_placement: PrimaryKeyPlacement = PrimaryKeyPlacement.INLINE
    item_indent: str = "\t"
    item_separator: str = ",\n"
    item_terminator: str = ""
    close_prefix: str = "\n"
    statement_terminator: str = ""
    supports_comments: bool = False
    supports_interleave: bool = False

    # Column clauses
    default_template: str = " DEFAULT ({})"
    uuid_template: Optional[str] = None
    sequence_template: Optional[str] = None
    auto_increment_template: Optional[str] = None
    auto_increment_requires_name: bool = False

    # Index clauses
    storing_keyword: Optional[str] = None

    # Sequences (None: dialect has no sequences to emit)
    sequence_syntax: Optional[SequenceSyntax] = None

    # -------------------------------------------------------------------------
    # Identifiers
    # -------------------------------------------------------------------------

    def quote(self, identifier: str) -> str:
        """Quote an identifier when the policy requires it."""
        if self.always_quote:
            return f"{self.quote_char}{identifier}{self.quote_char}"
        return identifier

    def with_protected_ids(self, protect_ids: bool) -> "DialectPolicy":
        """Return a policy that quotes every identifier if protect_ids is set."""
        if protect_ids and not self.always_quote:
            return replace(self, always_quote=True)
        return self

    # -------------------------------------------------------------------------
    # Types
    # -------------------------------------------------------------------------

    def type_name(self, column_type: ColumnType) -> str:
        """
        Spell a column type.

        Unknown names pass through unchanged, so source schemas print their
        own type names verbatim.
        """
        base = self.type_names.get(column_type.name.upper(), column_type.name)

        if column_type.mods:
            base += "(" + ", ".join(str(m) for m in column_type.mods) + ")"
        elif base in self.max_length_types:
            base += "(MAX)"

        if not column_type.is_array:
            return base
        if self.array_style == ArrayStyle.ANGLE:
            return f"ARRAY<{base}>"
        if self.literal_array_bounds:
            return base + "".join(f"[{b}]" for b in column_type.array_bounds)
        return base + "".join("[]" if b < 0 else f"[{b}]" for b in column_type.array_bounds)

    # -------------------------------------------------------------------------
    # Column clauses
    # -------------------------------------------------------------------------

    def auto_gen_expression(self, auto_gen: Optional[AutoGen]) -> str:
        """
        Suffix for an auto-generated column, or "" when there is none.

        The UUID and sequence suffixes are DEFAULT clauses themselves.
        """
        if auto_gen is None:
            return ""

        gen_type = auto_gen.generation_type
        if gen_type == GenerationType.PRE_DEFINED:
            if auto_gen.name.upper() == UUID and self.uuid_template:
                return self.uuid_template
            if auto_gen.name:
                logger.debug(f"No {self.dialect.value} expression for pre-defined generator '{auto_gen.name}'")
            return ""
        if gen_type == GenerationType.SEQUENCE and self.sequence_template:
            return self.sequence_template.format(self.quote(auto_gen.name))
        if gen_type == GenerationType.AUTO_INCREMENT and self.auto_increment_template:
            if self.auto_increment_requires_name and not auto_gen.name:
                return ""
            return self.auto_increment_template
        return ""

    def default_expression(self, expression: Optional[str]) -> str:
        """DEFAULT clause for an explicit default value."""
        if expression is None or expression == "":
            return ""
        return self.default_template.format(expression)


# ============================================================================
# REGISTRY
# ============================================================================

_IDENTITY = " GENERATED BY DEFAULT AS IDENTITY (BIT_REVERSED_POSITIVE)"

POLICIES: Dict[Dialect, DialectPolicy] = {
    Dialect.GOOGLE_SQL: DialectPolicy(
        dialect=Dialect.GOOGLE_SQL,
        quote_char="`",
        type_names=GOOGLE_SQL_TYPES,
        max_length_types=frozenset({"STRING", "BYTES"}),
        array_style=ArrayStyle.ANGLE,
        primary_key_placement=PrimaryKeyPlacement.TRAILING,
        item_indent="\t",
        item_separator="",
        item_terminator=",\n",
        close_prefix="",
        supports_comments=True,
        supports_interleave=True,
        uuid_template=" DEFAULT (GENERATE_UUID())",
        sequence_template=" DEFAULT (GET_NEXT_SEQUENCE_VALUE(SEQUENCE {}))",
        auto_increment_template=_IDENTITY,
        storing_keyword="STORING",
        sequence_syntax=SequenceSyntax(
            kind="sequence_kind='{kind}'",
            skip_range="skip_range_min = {min}, skip_range_max = {max}",
            start_counter="start_with_counter = {start}",
            joiner=", ",
            wrapper=" OPTIONS ({clauses})",
            lowercase_kind=True,
        ),
    ),
    Dialect.POSTGRESQL: DialectPolicy(
        dialect=Dialect.POSTGRESQL,
        quote_char='"',
        type_names=POSTGRESQL_TYPES,
        array_style=ArrayStyle.BOUNDED,
        primary_key_placement=PrimaryKeyPlacement.INLINE,
        item_indent="\t",
        item_separator=",\n",
        item_terminator="",
        close_prefix="\n",
        supports_comments=True,
        supports_interleave=True,
        uuid_template=" DEFAULT (spanner.generate_uuid())",
        sequence_template=" DEFAULT nextval('{}')",
        auto_increment_template=_IDENTITY,
        storing_keyword="INCLUDE",
        sequence_syntax=SequenceSyntax(
            kind="{kind}",
            skip_range="SKIP RANGE {min} {max}",
            start_counter="START COUNTER WITH {start}",
            joiner=" ",
            wrapper=" {clauses}",
        ),
    ),
    Dialect.MYSQL_SOURCE: DialectPolicy(
        dialect=Dialect.MYSQL_SOURCE,
        quote_char="`",
        always_quote=True,
        array_style=ArrayStyle.BOUNDED,
        primary_key_placement=PrimaryKeyPlacement.INLINE,
        item_indent="",
        item_separator=", ",
        item_terminator="",
        close_prefix="",
        statement_terminator=";",
        default_template=" DEFAULT {}",
        auto_increment_template=" AUTO_INCREMENT",
        auto_increment_requires_name=True,
        literal_array_bounds=True,
    ),
}


def get_policy(dialect: Union[Dialect, str]) -> DialectPolicy:
    """
    Look up the policy for a dialect.

    Args:
        dialect: Dialect enum member or its string value

    Raises:
        UnsupportedDialectError: If no policy is registered for the dialect
    """
    try:
        key = Dialect(dialect)
    except ValueError:
        raise UnsupportedDialectError(dialect)

    policy = POLICIES.get(key)
    if policy is None:
        raise UnsupportedDialectError(dialect)
    return policy


def resolve_policy(config) -> DialectPolicy:
    """Resolve the policy for a Config once per generation call."""
    return get_policy(config.dialect).with_protected_ids(config.protect_ids)


__all__ = [
    "DialectPolicy",
    "SequenceSyntax",
    "POLICIES",
    "GOOGLE_SQL_TYPES",
    "POSTGRESQL_TYPES",
    "get_policy",
    "resolve_policy",
]
