"""
Unit tests for per-level query composition.
"""

import pytest

from report_engine.query.builder import QueryBuilder, compile_query_to_sql, describe_parameters
from report_engine.query.schemas import ColumnMapping, HierarchyLevel, LevelDefinition
from report_engine.reporting.definitions import BALANCE_SHEET, TELLER_TRANSACTIONS
from report_engine.reporting.schemas import Operator, QueryParameter


TELLER_ROOT, TRANSACTION_CHILD = TELLER_TRANSACTIONS.levels
LEDGER_ROOT = BALANCE_SHEET.levels[0]


@pytest.fixture
def builder():
    return QueryBuilder()


def sql_of(query) -> str:
    return " ".join(compile_query_to_sql(query).split())


class TestQueryBuilder:
    """One SELECT per level"""

    def test_columns_follow_mapping_order_not_request_order(self, builder):
        preview = builder.build_preview(TELLER_ROOT, ["Teller", "Teller Id"], page_index=0, size=10)

        assert preview.columns == ["teller.id", "teller.identifier"]
        assert sql_of(builder.build_query(TELLER_ROOT, ["Teller", "Teller Id"])).startswith(
            "SELECT teller.id, teller.identifier FROM tajet_teller AS teller"
        )

    def test_nothing_mapped_at_level_builds_no_query(self, builder):
        assert builder.build_query(TRANSACTION_CHILD, ["Teller Id", "Teller"], parent_identifier=1) is None
        assert builder.build_preview(TRANSACTION_CHILD, []) is None

    def test_root_is_ordered_and_paginated(self, builder):
        query = builder.build_query(TELLER_ROOT, ["Teller Id"], page_index=2, size=5)

        sql = sql_of(query)
        assert "ORDER BY teller.id ASC" in sql
        assert "LIMIT 5 OFFSET 10" in sql

    def test_root_without_size_is_not_paginated(self, builder):
        sql = sql_of(builder.build_query(TELLER_ROOT, ["Teller Id"]))

        assert "LIMIT" not in sql
        assert "OFFSET" not in sql

    def test_child_is_keyed_to_parent_and_never_paginated(self, builder):
        query = builder.build_query(
            TRANSACTION_CHILD, ["Status"], parent_identifier=7, page_index=3, size=5
        )

        sql = sql_of(query)
        assert "WHERE trx.teller_id = 7" in sql
        assert "ORDER BY trx.id ASC" in sql
        assert "LIMIT" not in sql

    def test_filter_without_value_changes_nothing(self, builder):
        unfiltered = builder.build_query(TRANSACTION_CHILD, ["Status"], parent_identifier=1)
        empty_filter = builder.build_query(
            TRANSACTION_CHILD,
            ["Status"],
            [QueryParameter(name="Status", operator=Operator.IN, value="")],
            parent_identifier=1,
        )

        assert sql_of(empty_filter) == sql_of(unfiltered)

    def test_delimiter_only_in_filter_changes_nothing(self, builder):
        unfiltered = builder.build_query(TRANSACTION_CHILD, ["Status"], parent_identifier=1)
        delimiters_only = builder.build_query(
            TRANSACTION_CHILD,
            ["Status"],
            [QueryParameter(name="Status", operator=Operator.IN, value=" , ")],
            parent_identifier=1,
        )

        assert sql_of(delimiters_only) == sql_of(unfiltered)
        assert "IN" not in sql_of(delimiters_only)

    def test_filters_at_same_level_are_anded(self, builder):
        parameters = [
            QueryParameter(name="Status", operator=Operator.IN, value="CONFIRMED,PENDING"),
            QueryParameter(
                name="Transaction Date", operator=Operator.BETWEEN, value="2024-01-01,2024-01-31"
            ),
        ]

        sql = sql_of(builder.build_query(TRANSACTION_CHILD, ["Amount"], parameters, parent_identifier=1))

        assert "trx.teller_id = 1 AND trx.a_state IN ('CONFIRMED', 'PENDING') AND" in sql
        assert "trx.transaction_date BETWEEN '2024-01-01' AND '2024-01-31'" in sql

    def test_filters_mapped_at_other_levels_are_ignored(self, builder):
        parameters = [QueryParameter(name="Status", operator=Operator.IN, value="CONFIRMED")]

        sql = sql_of(builder.build_query(TELLER_ROOT, ["Teller"], parameters, page_index=0, size=5))

        assert "a_state" not in sql
        assert "WHERE" not in sql

    def test_fixed_condition_is_always_applied(self, builder):
        sql = sql_of(builder.build_query(LEDGER_ROOT, ["Identifier"], page_index=0, size=20))

        assert "WHERE ledger.parent_ledger_id IS NULL" in sql

    def test_preview_keeps_values_as_parameters(self, builder):
        parameters = [QueryParameter(name="Teller", value="T-001")]

        preview = builder.build_preview(TELLER_ROOT, ["Teller"], parameters, page_index=0, size=5)

        assert "teller.identifier = 'T-001'" in preview.sql
        assert "T-001" in preview.parameters.values()


class TestLevelConfiguration:
    """Immutable configuration types"""

    def test_mapping_rejects_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ColumnMapping.of(("A", "t.a"), ("A", "t.b"))

    def test_mapping_lookup(self):
        mapping = ColumnMapping.of(("A", "t.a"), ("B", "t.b"))

        assert mapping.column_for("B") == "t.b"
        assert mapping.column_for("C") is None
        assert "A" in mapping
        assert len(mapping) == 2
        assert mapping.map_fields(["B", "C", "A"]) == ["t.a", "t.b"]

    def test_child_level_requires_parent_key(self):
        with pytest.raises(ValueError, match="parent key"):
            LevelDefinition(
                level=HierarchyLevel.CHILD,
                table_name="t",
                alias="t",
                mapping=ColumnMapping.of(("A", "t.a")),
                order_by="t.a",
            )

    def test_root_level_cannot_have_parent_key(self):
        with pytest.raises(ValueError, match="Root level"):
            LevelDefinition(
                level=HierarchyLevel.ROOT,
                table_name="t",
                alias="t",
                mapping=ColumnMapping.of(("A", "t.a")),
                order_by="t.a",
                parent_key="t.parent",
            )


def test_describe_parameters():
    parameters = [QueryParameter(name="Status", operator=Operator.IN, value="A,B")]

    assert describe_parameters(parameters) == {"Status": {"operator": "IN", "value": "A,B"}}
