"""
읽기 대상 테이블 탐색 및 오프셋 컨텍스트 생성
"""

import logging
import re
from typing import TYPE_CHECKING, Any, Optional

import psycopg
from psycopg import sql

from .column_types import ColumnType, get_column_type
from .exceptions import TableDiscoveryError
from .partitioning_mode import PartitioningMode
from .table_context import TableContext
from .table_naming import get_qualified_table_name

if TYPE_CHECKING:
    from table_reader.models.table_config import TableConfig

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "public"


class TableDiscovery:
    """테이블 탐색 클래스

    information_schema에서 테이블과 오프셋 컬럼 타입을 조회하고,
    파티셔닝이 비활성화되지 않은 테이블은 오프셋 컬럼의 최소값을 함께 조회합니다.
    """

    def __init__(self, connection_config: dict[str, Any]):
        self.connection_config = connection_config

    def create_table_contexts(self, table_configs: list["TableConfig"]) -> list[TableContext]:
        """설정된 모든 테이블 그룹의 컨텍스트 생성

        Args:
            table_configs: 테이블 그룹 설정 리스트

        Returns:
            TableContext 리스트 (같은 테이블은 처음 매칭된 설정만 사용)

        Raises:
            TableDiscoveryError: DB 조회 실패 또는 오프셋 컬럼을 결정할 수 없는 경우
        """
        contexts: dict[str, TableContext] = {}

        try:
            conn = self._create_connection()
            try:
                with conn.cursor() as cur:
                    for table_config in table_configs:
                        for schema, table_name in self.discover_tables(cur, table_config):
                            qualified_name = get_qualified_table_name(schema, table_name)
                            if qualified_name in contexts:
                                logger.warning(
                                    "Table %s matched more than one table config; keeping the first",
                                    qualified_name,
                                )
                                continue
                            contexts[qualified_name] = self._create_table_context(
                                cur, schema, table_name, table_config
                            )
            finally:
                conn.close()

        except psycopg.Error as e:
            raise TableDiscoveryError(f"테이블 탐색 오류: {str(e)}") from e

        logger.info("Discovered %d tables", len(contexts))
        return list(contexts.values())

    def discover_tables(self, cursor, table_config: "TableConfig") -> list[tuple[str, str]]:
        """스키마와 LIKE 패턴에 맞는 테이블 조회 (제외 패턴 적용)"""
        schema = table_config.schema or DEFAULT_SCHEMA
        cursor.execute(
            """
            SELECT table_schema, table_name
            FROM information_schema.tables
            WHERE table_schema = %s
            AND table_name LIKE %s
            AND table_type = 'BASE TABLE'
            ORDER BY table_name
        """,
            (schema, table_config.table_pattern),
        )
        tables = [(row[0], row[1]) for row in cursor.fetchall()]

        if table_config.table_exclusion_pattern:
            exclusion = re.compile(table_config.table_exclusion_pattern)
            tables = [(s, t) for s, t in tables if not exclusion.fullmatch(t)]

        return tables

    def get_primary_key_columns(self, cursor, schema: str, table_name: str) -> list[str]:
        """기본 키 컬럼 조회 (키 순서 유지)"""
        cursor.execute(
            """
            SELECT kcu.column_name
            FROM information_schema.table_constraints tc
            JOIN information_schema.key_column_usage kcu
                ON tc.constraint_name = kcu.constraint_name
                AND tc.table_schema = kcu.table_schema
                AND tc.table_name = kcu.table_name
            WHERE tc.constraint_type = 'PRIMARY KEY'
            AND tc.table_schema = %s
            AND tc.table_name = %s
            ORDER BY kcu.ordinal_position
        """,
            (schema, table_name),
        )
        return [row[0] for row in cursor.fetchall()]

    def get_offset_column_types(
        self, cursor, schema: str, table_name: str, offset_columns: list[str]
    ) -> dict[str, ColumnType]:
        """오프셋 컬럼 타입 조회 (offset_columns 순서 유지)"""
        cursor.execute(
            """
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_schema = %s
            AND table_name = %s
            ORDER BY ordinal_position
        """,
            (schema, table_name),
        )
        column_to_data_type = {row[0]: row[1] for row in cursor.fetchall()}

        offset_column_to_type = {}
        for column in offset_columns:
            if column not in column_to_data_type:
                raise TableDiscoveryError(
                    f"오프셋 컬럼 {column}이(가) 테이블 "
                    f"{get_qualified_table_name(schema, table_name)}에 없습니다."
                )
            offset_column_to_type[column] = get_column_type(column_to_data_type[column])
        return offset_column_to_type

    def get_min_values(
        self, cursor, schema: str, table_name: str, columns: list[str]
    ) -> dict[str, str]:
        """컬럼별 최소값 조회 (행이 없으면 해당 컬럼은 제외)"""
        min_values = {}
        for column in columns:
            cursor.execute(
                sql.SQL("SELECT MIN({}) FROM {}.{}").format(
                    sql.Identifier(column), sql.Identifier(schema), sql.Identifier(table_name)
                )
            )
            row = cursor.fetchone()
            if row and row[0] is not None:
                min_values[column] = str(row[0])
        return min_values

    def _create_table_context(
        self, cursor, schema: str, table_name: str, table_config: "TableConfig"
    ) -> TableContext:
        """테이블 하나의 컨텍스트 생성"""
        qualified_name = get_qualified_table_name(schema, table_name)

        if table_config.override_default_offset_columns:
            offset_columns = list(table_config.offset_columns)
        else:
            offset_columns = self.get_primary_key_columns(cursor, schema, table_name)

        if not offset_columns:
            raise TableDiscoveryError(
                f"테이블 {qualified_name}에 기본 키가 없고 오프셋 컬럼도 지정되지 않았습니다."
            )

        offset_column_to_type = self.get_offset_column_types(
            cursor, schema, table_name, offset_columns
        )

        min_values: Optional[dict[str, str]] = None
        if table_config.partitioning_mode != PartitioningMode.DISABLED:
            min_values = self.get_min_values(cursor, schema, table_name, offset_columns)

        start_offsets = {
            column: offset
            for column, offset in table_config.offset_column_to_initial_offset.items()
            if column in offset_column_to_type
        }

        context = TableContext(
            schema,
            table_name,
            offset_column_to_type,
            offset_column_to_start_offset=start_offsets,
            offset_column_to_partition_offset_adjustments=table_config.offset_column_to_partition_offset_adjustments,
            offset_column_to_min_values=min_values,
            partitioning_mode=table_config.partitioning_mode,
            max_num_active_partitions=table_config.max_num_active_partitions,
            extra_offset_column_conditions=table_config.extra_offset_column_conditions,
        )
        logger.debug(
            "Table %s: offset columns %s, partitionable=%s",
            qualified_name,
            list(offset_column_to_type),
            context.partitionable,
        )
        return context

    def _create_connection(self) -> psycopg.Connection:
        """데이터베이스 연결 생성"""
        config = self.connection_config

        conn_params = {
            "host": config["host"],
            "port": config["port"],
            "dbname": config["database"],
            "user": config["username"],
            "password": config["password"],
        }

        if config.get("ssl"):
            conn_params["sslmode"] = "require"

        return psycopg.connect(**conn_params)
