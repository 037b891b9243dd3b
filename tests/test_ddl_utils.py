# ============================================================================
# DDL UTILITIES TESTS
# ============================================================================
# STATUS: Tests - Entity renderers
# PURPOSE: Verify column, key, check, index, foreign key, sequence builders
# CREATED: 18 OCT 2026
# ============================================================================
"""
DDL Utilities Tests

Each builder is exercised directly against a dialect policy and rendered
with render().

Run with:
    pytest tests/test_ddl_utils.py -v
"""

import pytest

from schemaddl.contracts import Dialect, GenerationType
from schemaddl.ddl.ddl_utils import (
    CheckConstraintBuilder,
    ColumnBuilder,
    ForeignKeyBuilder,
    IndexBuilder,
    KeyBuilder,
    SequenceBuilder,
    render,
)
from schemaddl.ddl.dialects import POLICIES
from schemaddl.errors import UnresolvedReferenceError
from schemaddl.models import (
    AutoGen,
    CheckConstraintDef,
    ColumnDef,
    ColumnType,
    ForeignKeyDef,
    IndexDef,
    KeyPart,
    SequenceDef,
    TableDef,
)


GSQL = POLICIES[Dialect.GOOGLE_SQL]
PG = POLICIES[Dialect.POSTGRESQL]
MYSQL = POLICIES[Dialect.MYSQL_SOURCE]


@pytest.fixture
def singers():
    return TableDef(
        id="t1",
        name="Singers",
        column_order=["c1", "c2", "c3"],
        columns={
            "c1": ColumnDef(id="c1", name="SingerId", type=ColumnType(name="INT64"), not_null=True),
            "c2": ColumnDef(id="c2", name="FirstName", type=ColumnType(name="STRING", mods=[1024])),
            "c3": ColumnDef(id="c3", name="LastName", type=ColumnType(name="STRING", mods=[1024])),
        },
        primary_key=[KeyPart(column_id="c1", order=1)],
    )


# ============================================================================
# COLUMNS
# ============================================================================


class TestColumnBuilder:
    def test_plain(self):
        col = ColumnDef(id="c", name="a", type=ColumnType(name="INT64"))
        assert render(ColumnBuilder.definition(GSQL, col)) == "a INT64"

    def test_not_null_and_default(self):
        col = ColumnDef(id="c", name="n", type=ColumnType(name="INT64"), not_null=True, default_value="0")
        assert render(ColumnBuilder.definition(GSQL, col)) == "n INT64 NOT NULL DEFAULT (0)"
        assert render(ColumnBuilder.definition(PG, col)) == "n INT8 NOT NULL DEFAULT (0)"

    def test_auto_gen_replaces_default(self):
        col = ColumnDef(
            id="c", name="id", type=ColumnType(name="STRING", mods=[36]),
            auto_gen=AutoGen(name="UUID", generation_type=GenerationType.PRE_DEFINED),
            default_value="'ignored'",
        )
        assert render(ColumnBuilder.definition(GSQL, col)) == "id STRING(36) DEFAULT (GENERATE_UUID())"
        assert render(ColumnBuilder.definition(PG, col)) == "id VARCHAR(36) DEFAULT (spanner.generate_uuid())"

    def test_default_kept_when_auto_gen_renders_nothing(self):
        col = ColumnDef(
            id="c", name="id", type=ColumnType(name="varchar", mods=[36]),
            auto_gen=AutoGen(name="UUID", generation_type=GenerationType.PRE_DEFINED),
            default_value="(uuid())",
        )
        assert render(ColumnBuilder.definition(MYSQL, col)) == "`id` varchar(36) DEFAULT (uuid())"

    def test_mysql_auto_increment(self):
        col = ColumnDef(
            id="c", name="id", type=ColumnType(name="bigint"), not_null=True,
            auto_gen=AutoGen(name="id", generation_type=GenerationType.AUTO_INCREMENT),
        )
        assert render(ColumnBuilder.definition(MYSQL, col)) == "`id` bigint NOT NULL AUTO_INCREMENT"

    def test_array_column(self):
        col = ColumnDef(id="c", name="tags", type=ColumnType(name="STRING", array_bounds=[-1]), not_null=True)
        assert render(ColumnBuilder.definition(GSQL, col)) == "tags ARRAY<STRING(MAX)> NOT NULL"
        assert render(ColumnBuilder.definition(PG, col)) == "tags VARCHAR[] NOT NULL"


# ============================================================================
# KEYS
# ============================================================================


class TestKeyBuilder:
    def test_primary_key(self, singers):
        assert render(KeyBuilder.primary_key(GSQL, singers)) == "PRIMARY KEY (SingerId)"

    def test_keys_sorted_by_order_with_stable_ties(self, singers):
        keys = [
            KeyPart(column_id="c3", order=2),
            KeyPart(column_id="c2", order=1, desc=True),
            KeyPart(column_id="c1", order=2),
        ]
        assert render(KeyBuilder.key_list(GSQL, singers, keys)) == "FirstName DESC, LastName, SingerId"

    def test_unknown_column(self, singers):
        with pytest.raises(UnresolvedReferenceError):
            KeyBuilder.key_list(GSQL, singers, [KeyPart(column_id="nope")])


# ============================================================================
# CHECK CONSTRAINTS
# ============================================================================


class TestCheckConstraintBuilder:
    def test_named(self):
        check = CheckConstraintDef(name="ck_age", expression="age > 0")
        assert render(CheckConstraintBuilder.clause(GSQL, check)) == "CONSTRAINT ck_age CHECK (age > 0)"
        assert render(CheckConstraintBuilder.clause(MYSQL, check)) == "CONSTRAINT `ck_age` CHECK (age > 0)"

    def test_unnamed(self):
        check = CheckConstraintDef(expression="age > 0")
        assert render(CheckConstraintBuilder.clause(PG, check)) == "CHECK (age > 0)"

    def test_expression_with_braces_is_literal(self):
        check = CheckConstraintDef(expression="JSON_VALUE(doc, '$.a{0}') IS NOT NULL")
        assert render(CheckConstraintBuilder.clause(GSQL, check)) == (
            "CHECK (JSON_VALUE(doc, '$.a{0}') IS NOT NULL)"
        )


# ============================================================================
# INDEXES
# ============================================================================


class TestIndexBuilder:
    def test_plain_index(self, singers):
        index = IndexDef(name="SingersByName", table_id="t1", keys=[
            KeyPart(column_id="c3", order=1), KeyPart(column_id="c2", order=2),
        ])
        assert render(IndexBuilder.create(GSQL, singers, index)) == (
            "CREATE INDEX SingersByName ON Singers (LastName, FirstName)"
        )

    def test_unique_desc(self, singers):
        index = IndexDef(name="ix", table_id="t1", unique=True, keys=[KeyPart(column_id="c2", desc=True)])
        assert render(IndexBuilder.create(PG, singers, index)) == "CREATE UNIQUE INDEX ix ON Singers (FirstName DESC)"

    def test_storing_clause(self, singers):
        index = IndexDef(
            name="ix", table_id="t1", keys=[KeyPart(column_id="c3")], storing_column_ids=["c2"],
        )
        assert render(IndexBuilder.create(GSQL, singers, index)) == "CREATE INDEX ix ON Singers (LastName) STORING (FirstName)"
        assert render(IndexBuilder.create(PG, singers, index)) == "CREATE INDEX ix ON Singers (LastName) INCLUDE (FirstName)"
        assert render(IndexBuilder.create(MYSQL, singers, index)) == "CREATE INDEX `ix` ON `Singers` (`LastName`);"


# ============================================================================
# FOREIGN KEYS
# ============================================================================


class TestForeignKeyBuilder:
    @pytest.fixture
    def schema(self, singers):
        albums = TableDef(
            id="t2",
            name="Albums",
            column_order=["a1", "a2"],
            columns={
                "a1": ColumnDef(id="a1", name="AlbumId", type=ColumnType(name="INT64")),
                "a2": ColumnDef(id="a2", name="Singer", type=ColumnType(name="INT64")),
            },
            primary_key=[KeyPart(column_id="a1")],
        )
        return {"t1": singers, "t2": albums}

    def test_unnamed_with_actions(self, schema):
        fk = ForeignKeyDef(
            column_ids=["a2"], refer_table_id="t1", refer_column_ids=["c1"],
            on_delete="cascade", on_update="no action",
        )
        assert render(ForeignKeyBuilder.alter_table(GSQL, schema, "t2", fk)) == (
            "ALTER TABLE Albums ADD CONSTRAINT FOREIGN KEY (Singer) REFERENCES Singers (SingerId) "
            "ON DELETE CASCADE ON UPDATE NO ACTION"
        )

    def test_multi_column_order_preserved(self, schema):
        fk = ForeignKeyDef(
            name="fk_multi", column_ids=["a2", "a1"], refer_table_id="t1", refer_column_ids=["c3", "c2"],
        )
        assert render(ForeignKeyBuilder.alter_table(PG, schema, "t2", fk)) == (
            "ALTER TABLE Albums ADD CONSTRAINT fk_multi FOREIGN KEY (Singer, AlbumId) "
            "REFERENCES Singers (LastName, FirstName)"
        )

    def test_unknown_owner_table(self, schema):
        fk = ForeignKeyDef(column_ids=["a2"], refer_table_id="t1", refer_column_ids=["c1"])
        with pytest.raises(UnresolvedReferenceError) as exc:
            ForeignKeyBuilder.alter_table(GSQL, schema, "t9", fk)
        assert exc.value.reference == "t9"


# ============================================================================
# SEQUENCES
# ============================================================================


class TestSequenceBuilder:
    def test_googlesql_full(self):
        seq = SequenceDef(id="s", name="seq", skip_range_min=1, skip_range_max=1000, start_with_counter=50)
        assert render(SequenceBuilder.create(GSQL, seq)) == (
            "CREATE SEQUENCE seq OPTIONS (sequence_kind='bit_reversed_positive', "
            "skip_range_min = 1, skip_range_max = 1000, start_with_counter = 50)"
        )

    def test_postgresql_full(self):
        seq = SequenceDef(id="s", name="seq", skip_range_min=1, skip_range_max=1000, start_with_counter=50)
        assert render(SequenceBuilder.create(PG, seq)) == (
            "CREATE SEQUENCE seq BIT_REVERSED_POSITIVE SKIP RANGE 1 1000 START COUNTER WITH 50"
        )

    def test_half_skip_range_ignored(self):
        seq = SequenceDef(id="s", name="seq", skip_range_min=1)
        assert render(SequenceBuilder.create(PG, seq)) == "CREATE SEQUENCE seq BIT_REVERSED_POSITIVE"

    def test_mysql_has_no_sequences(self):
        assert SequenceBuilder.create(MYSQL, SequenceDef(id="s", name="seq")) is None
