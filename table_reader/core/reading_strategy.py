"""
테이블 읽기 전략 결정

파티셔닝 모드와 생성 시 판정 결과를 조합하여 테이블을 파티션 단위로
병렬 읽기할지, 단일 워커로 전체를 읽을지 결정합니다.
"""

import logging
from enum import Enum

from .exceptions import PartitioningRequiredError
from .partitioning_mode import PartitioningMode
from .table_context import TableContext

logger = logging.getLogger(__name__)


class ReadingStrategy(str, Enum):
    """테이블 읽기 전략"""
    PARTITIONED = "PARTITIONED"
    WHOLE_TABLE = "WHOLE_TABLE"


def resolve_reading_strategy(context: TableContext) -> ReadingStrategy:
    """읽기 전략 결정

    Args:
        context: 테이블 오프셋 컨텍스트

    Returns:
        ReadingStrategy

    Raises:
        PartitioningRequiredError: REQUIRED 모드인데 파티셔닝 불가능한 경우
    """
    table_name = context.qualified_name

    if context.partitioning_mode == PartitioningMode.DISABLED:
        return ReadingStrategy.WHOLE_TABLE

    if not context.has_offset_columns:
        logger.info("Table %s has no offset columns; reading it as a whole table", table_name)
        return ReadingStrategy.WHOLE_TABLE

    if context.partitionable:
        return ReadingStrategy.PARTITIONED

    reasons = context.partitionability.reasons
    if context.partitioning_mode == PartitioningMode.REQUIRED:
        raise PartitioningRequiredError(table_name, reasons)

    logger.info(
        "Table %s falls back to whole-table reading: %s", table_name, "; ".join(reasons)
    )
    return ReadingStrategy.WHOLE_TABLE
