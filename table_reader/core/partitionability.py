"""
테이블 파티셔닝 가능 여부 판정

오프셋 컬럼 구성을 검사하여 테이블을 범위 파티션으로 나눠
병렬로 읽을 수 있는지 결정합니다. 판정 사유는 호출자가 넘긴
리스트(output_reasons)로 수집되며, 모듈 로거에는 DEBUG로만 남깁니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from .column_types import PARTITIONABLE_TYPES, ColumnType

logger = logging.getLogger(__name__)


class OffsetColumnSource(Protocol):
    """판정에 필요한 최소 속성 (TableContext 또는 탐색 단계의 후보)"""

    @property
    def qualified_name(self) -> str: ...

    @property
    def offset_column_to_type(self) -> Mapping[str, ColumnType]: ...

    @property
    def offset_column_to_min_values(self) -> Mapping[str, Any]: ...


@dataclass(frozen=True)
class PartitionabilityResult:
    """파티셔닝 가능 여부와 불가 사유"""

    partitionable: bool
    reasons: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.partitionable


def _multiple_offset_columns_reason(table_name: str) -> str:
    return (
        f"Table {table_name} is not partitionable because it has more than one offset column"
    )


def _unsupported_type_reason(table_name: str, column: str, column_type: ColumnType) -> str:
    return (
        f"Table {table_name} is not partitionable because {column} column "
        f"(type {column_type.value}) is not partitionable"
    )


def _missing_min_value_reason(table_name: str, column: str, column_type: ColumnType) -> str:
    return (
        f"Table {table_name} is not partitionable because {column} column "
        f"(type {column_type.value}) did not have a minimum value available at pipeline "
        "start time; only tables with at least one row can be partitioned"
    )


def evaluate_partitionability(
    context: OffsetColumnSource,
    output_reasons: Optional[list[str]] = None,
    collect_all: bool = False,
) -> PartitionabilityResult:
    """파티셔닝 가능 여부 판정

    규칙은 순서대로 평가됩니다.
    1. 오프셋 컬럼이 2개 이상이면 불가
    2. 오프셋 컬럼 타입이 PARTITIONABLE_TYPES에 없으면 불가
    3. 오프셋 컬럼의 최소값이 없으면 불가 (행이 없거나 통계 수집 실패)

    Args:
        context: qualified_name, offset_column_to_type,
            offset_column_to_min_values를 제공하는 객체
        output_reasons: 불가 사유를 추가할 리스트 (선택)
        collect_all: True면 첫 실패에서 멈추지 않고 모든 사유를 수집

    Returns:
        PartitionabilityResult (판정 결과와 사유 튜플)

    Examples:
        >>> reasons = []
        >>> result = evaluate_partitionability(context, reasons)
        >>> result.partitionable, reasons
    """
    table_name = context.qualified_name
    offset_column_to_type = context.offset_column_to_type
    min_values = context.offset_column_to_min_values
    reasons: list[str] = []

    def reject(reason: str) -> None:
        logger.debug(reason)
        reasons.append(reason)
        if output_reasons is not None:
            output_reasons.append(reason)

    if not offset_column_to_type:
        # 오프셋 컬럼이 없으면 범위를 나눌 기준이 없음 (판정상 통과)
        logger.debug("Table %s has no offset columns; nothing to partition on", table_name)
        return PartitionabilityResult(True)

    if len(offset_column_to_type) > 1:
        reject(_multiple_offset_columns_reason(table_name))
        if not collect_all:
            return PartitionabilityResult(False, tuple(reasons))

    for column, column_type in offset_column_to_type.items():
        if column_type not in PARTITIONABLE_TYPES:
            reject(_unsupported_type_reason(table_name, column, column_type))
            if not collect_all:
                return PartitionabilityResult(False, tuple(reasons))

        if min_values.get(column) is None:
            reject(_missing_min_value_reason(table_name, column, column_type))
            if not collect_all:
                return PartitionabilityResult(False, tuple(reasons))

    return PartitionabilityResult(not reasons, tuple(reasons))


def is_partitionable(
    context: OffsetColumnSource, output_reasons: Optional[list[str]] = None
) -> bool:
    """첫 번째 실패 사유에서 멈추는 판정 (편의 함수)"""
    return evaluate_partitionability(context, output_reasons).partitionable
