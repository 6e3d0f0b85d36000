"""
Column Types Module

Defines the closed set of column types understood by the table reader and
the subset of them that can be range-partitioned.
"""

from enum import Enum
from typing import List, Union


class ColumnType(str, Enum):
    """Column types of offset columns"""
    BIT = "BIT"
    BOOLEAN = "BOOLEAN"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    FLOAT = "FLOAT"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    NUMERIC = "NUMERIC"
    DECIMAL = "DECIMAL"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    LONGVARCHAR = "LONGVARCHAR"
    NCHAR = "NCHAR"
    NVARCHAR = "NVARCHAR"
    CLOB = "CLOB"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    BLOB = "BLOB"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    TIME_WITH_TIMEZONE = "TIME_WITH_TIMEZONE"
    TIMESTAMP_WITH_TIMEZONE = "TIMESTAMP_WITH_TIMEZONE"
    UUID = "UUID"
    JSON = "JSON"
    ARRAY = "ARRAY"
    OTHER = "OTHER"

    @property
    def is_partitionable(self) -> bool:
        """Check if the type has a total order usable for range partitions"""
        return self in PARTITIONABLE_TYPES

    @classmethod
    def of(cls, value: Union["ColumnType", str]) -> "ColumnType":
        """
        Coerce a ColumnType or a type name into a ColumnType

        Args:
            value: ColumnType member or its name (case-insensitive)

        Returns:
            ColumnType enum

        Raises:
            ValueError: If the value does not name a known type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown column type: {value!r}")


# Ordered numeric, date and time types. Text, binary, boolean and
# timezone-carrying types have no usable range arithmetic here.
PARTITIONABLE_TYPES = frozenset({
    ColumnType.TINYINT,
    ColumnType.SMALLINT,
    ColumnType.INTEGER,
    ColumnType.BIGINT,
    ColumnType.FLOAT,
    ColumnType.REAL,
    ColumnType.DOUBLE,
    ColumnType.NUMERIC,
    ColumnType.DECIMAL,
    ColumnType.DATE,
    ColumnType.TIME,
    ColumnType.TIMESTAMP,
})


# information_schema.columns.data_type -> ColumnType (PostgreSQL)
PG_DATA_TYPE_MAP = {
    "bit": ColumnType.BIT,
    "bit varying": ColumnType.BIT,
    "boolean": ColumnType.BOOLEAN,
    "smallint": ColumnType.SMALLINT,
    "integer": ColumnType.INTEGER,
    "bigint": ColumnType.BIGINT,
    "real": ColumnType.REAL,
    "double precision": ColumnType.DOUBLE,
    "numeric": ColumnType.NUMERIC,
    "decimal": ColumnType.DECIMAL,
    "character": ColumnType.CHAR,
    "character varying": ColumnType.VARCHAR,
    "text": ColumnType.LONGVARCHAR,
    "bytea": ColumnType.BINARY,
    "date": ColumnType.DATE,
    "time without time zone": ColumnType.TIME,
    "time with time zone": ColumnType.TIME_WITH_TIMEZONE,
    "timestamp without time zone": ColumnType.TIMESTAMP,
    "timestamp with time zone": ColumnType.TIMESTAMP_WITH_TIMEZONE,
    "uuid": ColumnType.UUID,
    "json": ColumnType.JSON,
    "jsonb": ColumnType.JSON,
    "ARRAY": ColumnType.ARRAY,
}


def get_column_type(pg_data_type: str) -> ColumnType:
    """
    Get ColumnType from a PostgreSQL data type name

    Args:
        pg_data_type: information_schema data type (e.g., 'character varying')

    Returns:
        ColumnType enum, OTHER for unrecognized names
    """
    if pg_data_type in PG_DATA_TYPE_MAP:
        return PG_DATA_TYPE_MAP[pg_data_type]
    return PG_DATA_TYPE_MAP.get(pg_data_type.lower(), ColumnType.OTHER)


def get_partitionable_types() -> List[ColumnType]:
    """Get list of partitionable column types"""
    return sorted(PARTITIONABLE_TYPES, key=lambda column_type: column_type.value)
