"""
테이블 읽기 설정 모델
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from table_reader.core.partitioning_mode import DEFAULT_PARTITIONING_MODE, PartitioningMode
from table_reader.core.table_context import DEFAULT_MAX_NUM_ACTIVE_PARTITIONS


def _int_or_default(value: Any, default: int) -> int:
    """None이면 기본값, 아니면 정수 변환 (0은 그대로 유지)"""
    if value is None:
        return default
    return int(value)


@dataclass
class TableConfig:
    """테이블 그룹 설정

    schema와 table_pattern(SQL LIKE 문법)으로 읽을 테이블을 고르고,
    table_exclusion_pattern(정규식)으로 제외합니다.
    """
    schema: Optional[str] = None
    table_pattern: str = "%"
    table_exclusion_pattern: Optional[str] = None
    override_default_offset_columns: bool = False
    offset_columns: list[str] = field(default_factory=list)
    offset_column_to_initial_offset: dict[str, str] = field(default_factory=dict)
    offset_column_to_partition_offset_adjustments: dict[str, str] = field(default_factory=dict)
    extra_offset_column_conditions: Optional[str] = None
    partitioning_mode: PartitioningMode = DEFAULT_PARTITIONING_MODE
    max_num_active_partitions: int = DEFAULT_MAX_NUM_ACTIVE_PARTITIONS

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "schema": self.schema,
            "table_pattern": self.table_pattern,
            "table_exclusion_pattern": self.table_exclusion_pattern,
            "override_default_offset_columns": self.override_default_offset_columns,
            "offset_columns": list(self.offset_columns),
            "offset_column_to_initial_offset": dict(self.offset_column_to_initial_offset),
            "offset_column_to_partition_offset_adjustments": dict(
                self.offset_column_to_partition_offset_adjustments
            ),
            "extra_offset_column_conditions": self.extra_offset_column_conditions,
            "partitioning_mode": self.partitioning_mode.value,
            "max_num_active_partitions": self.max_num_active_partitions,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableConfig":
        """딕셔너리에서 생성 (누락 항목은 기본값)"""
        return cls(
            schema=data.get("schema"),
            table_pattern=data.get("table_pattern") or "%",
            table_exclusion_pattern=data.get("table_exclusion_pattern"),
            override_default_offset_columns=bool(data.get("override_default_offset_columns", False)),
            offset_columns=list(data.get("offset_columns") or []),
            offset_column_to_initial_offset=dict(data.get("offset_column_to_initial_offset") or {}),
            offset_column_to_partition_offset_adjustments=dict(
                data.get("offset_column_to_partition_offset_adjustments") or {}
            ),
            extra_offset_column_conditions=data.get("extra_offset_column_conditions"),
            partitioning_mode=PartitioningMode(
                data.get("partitioning_mode") or DEFAULT_PARTITIONING_MODE.value
            ),
            max_num_active_partitions=_int_or_default(
                data.get("max_num_active_partitions"), DEFAULT_MAX_NUM_ACTIVE_PARTITIONS
            ),
        )
