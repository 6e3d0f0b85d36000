"""
테이블별 오프셋 컨텍스트

하나의 논리 테이블에 대한 오프셋 컬럼 메타데이터와 파티셔닝 판정 결과를 보관합니다.
여러 워커 스레드가 공유하며, 시작 오프셋 맵만 변경 가능합니다.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .column_types import ColumnType
from .partitionability import PartitionabilityResult, evaluate_partitionability
from .partitioning_mode import DEFAULT_PARTITIONING_MODE, PartitioningMode
from .table_naming import get_qualified_table_name

logger = logging.getLogger(__name__)

# 스케줄러가 활성 파티션 수를 결정
DEFAULT_MAX_NUM_ACTIVE_PARTITIONS = -1

_EMPTY_OFFSETS: Mapping[str, str] = MappingProxyType({})


def _frozen_copy(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """호출자 맵과 분리된 읽기 전용 사본"""
    if not mapping:
        return _EMPTY_OFFSETS
    return MappingProxyType(dict(mapping))


class TableContext:
    """테이블 오프셋 컨텍스트

    식별자(schema, table_name)로만 비교/해시되며, 생성 시점에 파티셔닝
    가능 여부를 한 번 계산해 고정합니다. 이후 시작 오프셋을 바꿔도
    판정은 다시 계산되지 않습니다.

    시작 오프셋 맵은 잠금으로 보호되는 참조 교체 방식으로 관리되므로,
    읽는 쪽은 항상 완전히 설정된 맵 또는 빈 맵 중 하나만 관찰합니다.

    Examples:
        >>> context = TableContext(
        ...     "dbo", "orders",
        ...     {"order_id": ColumnType.INTEGER},
        ...     offset_column_to_min_values={"order_id": "1"},
        ... )
        >>> context.qualified_name
        'dbo.orders'
        >>> context.partitionable
        True
    """

    __slots__ = (
        "_schema",
        "_table_name",
        "_offset_column_to_type",
        "_offset_column_to_start_offset",
        "_offset_column_to_partition_offset_adjustments",
        "_offset_column_to_min_values",
        "_partitioning_mode",
        "_max_num_active_partitions",
        "_extra_offset_column_conditions",
        "_partitionability",
        "_start_offset_lock",
    )

    def __init__(
        self,
        schema: Optional[str],
        table_name: str,
        offset_column_to_type: Mapping[str, Union[ColumnType, str]],
        offset_column_to_start_offset: Optional[Mapping[str, str]] = None,
        offset_column_to_partition_offset_adjustments: Optional[Mapping[str, str]] = None,
        offset_column_to_min_values: Optional[Mapping[str, str]] = None,
        partitioning_mode: PartitioningMode = DEFAULT_PARTITIONING_MODE,
        max_num_active_partitions: int = DEFAULT_MAX_NUM_ACTIVE_PARTITIONS,
        extra_offset_column_conditions: Optional[str] = None,
    ):
        """컨텍스트 초기화

        Args:
            schema: 스키마 이름 (None 허용)
            table_name: 테이블 이름
            offset_column_to_type: 순서가 있는 오프셋 컬럼 -> 타입 맵 (첫 컬럼이 주 정렬 키)
            offset_column_to_start_offset: 컬럼별 시작 오프셋 (운영자 지정 또는 재개 값)
            offset_column_to_partition_offset_adjustments: 파티션 경계 계산용 보정값
            offset_column_to_min_values: 탐색 시점의 컬럼별 최소값
            partitioning_mode: 파티셔닝 전략
            max_num_active_partitions: 동시 활성 파티션 상한 (스케줄러가 적용)
            extra_offset_column_conditions: 범위 쿼리에 덧붙일 추가 조건

        Raises:
            ValueError: 테이블 이름 또는 타입 맵이 없거나 알 수 없는 타입인 경우
            TypeError: partitioning_mode가 PartitioningMode가 아닌 경우
        """
        if not table_name:
            raise ValueError("테이블 이름은 필수 입력 항목입니다.")
        if offset_column_to_type is None:
            raise ValueError(f"오프셋 컬럼 타입 맵이 없습니다: {table_name}")
        if not isinstance(partitioning_mode, PartitioningMode):
            raise TypeError(f"잘못된 파티셔닝 모드입니다: {partitioning_mode!r}")

        self._schema = schema
        self._table_name = table_name
        self._offset_column_to_type = MappingProxyType(
            {column: ColumnType.of(column_type) for column, column_type in offset_column_to_type.items()}
        )
        self._offset_column_to_start_offset = _frozen_copy(offset_column_to_start_offset)
        self._offset_column_to_partition_offset_adjustments = _frozen_copy(
            offset_column_to_partition_offset_adjustments
        )
        self._offset_column_to_min_values = _frozen_copy(offset_column_to_min_values)
        self._partitioning_mode = partitioning_mode
        self._max_num_active_partitions = max_num_active_partitions
        self._extra_offset_column_conditions = extra_offset_column_conditions
        self._start_offset_lock = threading.Lock()

        # 생성 시 한 번만 판정 (이후 재계산하지 않음)
        self._partitionability = evaluate_partitionability(self, collect_all=True)

    @property
    def schema(self) -> Optional[str]:
        return self._schema

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def qualified_name(self) -> str:
        return get_qualified_table_name(self._schema, self._table_name)

    @property
    def offset_column_to_type(self) -> Mapping[str, ColumnType]:
        """오프셋 컬럼 -> 타입 (읽기 전용, 순서 유지)"""
        return self._offset_column_to_type

    @property
    def offset_columns(self) -> tuple[str, ...]:
        return tuple(self._offset_column_to_type)

    @property
    def has_offset_columns(self) -> bool:
        return bool(self._offset_column_to_type)

    def get_offset_column_type(self, column: str) -> ColumnType:
        """오프셋 컬럼 타입 조회 (오프셋 컬럼이 아니면 KeyError)"""
        return self._offset_column_to_type[column]

    @property
    def offset_column_to_start_offset(self) -> Mapping[str, str]:
        """현재 시작 오프셋 스냅샷 (읽기 전용)"""
        with self._start_offset_lock:
            return self._offset_column_to_start_offset

    @property
    def is_offset_overridden(self) -> bool:
        return bool(self.offset_column_to_start_offset)

    def set_offset_column_to_start_offset(self, offset_column_to_start_offset: Optional[Mapping[str, str]]):
        """시작 오프셋 맵 전체 교체 (병합하지 않음)

        재시작 후 재개 오프셋을 주입하거나 값을 정정할 때 사용합니다.
        None 또는 빈 맵은 오버라이드가 없는 것과 같습니다.
        """
        snapshot = _frozen_copy(offset_column_to_start_offset)
        with self._start_offset_lock:
            self._offset_column_to_start_offset = snapshot
        logger.debug("Start offsets replaced for table %s: %s", self.qualified_name, dict(snapshot))

    def clear_start_offset(self):
        """시작 오프셋 제거

        첫 배치를 읽은 뒤 호출하여 이후 파티션 생성이 초기 값이 아닌
        실제 상태를 기준으로 하도록 합니다. 반복 호출해도 결과는 같습니다.
        """
        with self._start_offset_lock:
            self._offset_column_to_start_offset = _EMPTY_OFFSETS

    @property
    def offset_column_to_partition_offset_adjustments(self) -> Mapping[str, str]:
        return self._offset_column_to_partition_offset_adjustments

    @property
    def offset_column_to_min_values(self) -> Mapping[str, str]:
        return self._offset_column_to_min_values

    @property
    def partitioning_mode(self) -> PartitioningMode:
        return self._partitioning_mode

    @property
    def max_num_active_partitions(self) -> int:
        return self._max_num_active_partitions

    @property
    def extra_offset_column_conditions(self) -> Optional[str]:
        return self._extra_offset_column_conditions

    @property
    def partitionable(self) -> bool:
        """생성 시점에 고정된 파티셔닝 가능 여부"""
        return self._partitionability.partitionable

    @property
    def partitionability(self) -> PartitionabilityResult:
        """생성 시점 판정 결과 (모든 불가 사유 포함)"""
        return self._partitionability

    def _identity(self) -> tuple[str, str]:
        return (self._schema or "", self._table_name)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TableContext):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return f"TableContext(schema={self._schema!r}, table_name={self._table_name!r})"
