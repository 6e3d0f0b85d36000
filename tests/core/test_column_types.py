"""
Tests for column_types.py - column type registry.
"""

import pytest

from table_reader.core.column_types import (
    PARTITIONABLE_TYPES,
    ColumnType,
    get_column_type,
    get_partitionable_types,
)


class TestColumnType:

    def test_numeric_and_temporal_types_are_partitionable(self):
        for column_type in (ColumnType.INTEGER, ColumnType.BIGINT, ColumnType.DECIMAL,
                            ColumnType.DATE, ColumnType.TIME, ColumnType.TIMESTAMP):
            assert column_type.is_partitionable

    def test_unordered_types_are_not_partitionable(self):
        for column_type in (ColumnType.VARCHAR, ColumnType.BLOB, ColumnType.BOOLEAN,
                            ColumnType.UUID, ColumnType.JSON, ColumnType.OTHER):
            assert not column_type.is_partitionable

    def test_of_accepts_member_and_name(self):
        assert ColumnType.of(ColumnType.DATE) is ColumnType.DATE
        assert ColumnType.of("timestamp") is ColumnType.TIMESTAMP
        assert ColumnType.of(" bigint ") is ColumnType.BIGINT

    @pytest.mark.parametrize("value", ["serial", "", 4, None])
    def test_of_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            ColumnType.of(value)


class TestPostgresMapping:

    @pytest.mark.parametrize(
        "pg_type,expected",
        [
            ("integer", ColumnType.INTEGER),
            ("bigint", ColumnType.BIGINT),
            ("numeric", ColumnType.NUMERIC),
            ("double precision", ColumnType.DOUBLE),
            ("character varying", ColumnType.VARCHAR),
            ("text", ColumnType.LONGVARCHAR),
            ("timestamp without time zone", ColumnType.TIMESTAMP),
            ("timestamp with time zone", ColumnType.TIMESTAMP_WITH_TIMEZONE),
            ("date", ColumnType.DATE),
            ("boolean", ColumnType.BOOLEAN),
            ("ARRAY", ColumnType.ARRAY),
            ("INTEGER", ColumnType.INTEGER),
        ],
    )
    def test_known_types(self, pg_type, expected):
        assert get_column_type(pg_type) is expected

    def test_unknown_type_maps_to_other(self):
        assert get_column_type("tsvector") is ColumnType.OTHER


def test_get_partitionable_types_is_sorted_registry():
    types = get_partitionable_types()

    assert set(types) == PARTITIONABLE_TYPES
    assert [t.value for t in types] == sorted(t.value for t in PARTITIONABLE_TYPES)
