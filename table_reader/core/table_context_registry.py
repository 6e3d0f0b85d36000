"""
테이블 컨텍스트 레지스트리

오케스트레이터가 읽기 대상 테이블의 컨텍스트를 식별자 기준으로 보관합니다.
"""

import logging
import threading
from typing import Optional

from .partitioning_mode import PartitioningMode
from .table_context import TableContext

logger = logging.getLogger(__name__)


class TableContextRegistry:
    """스레드 안전한 TableContext 보관소

    같은 테이블을 다시 탐색하면 새 인스턴스가 기존 인스턴스를 대체합니다.

    Examples:
        >>> registry = TableContextRegistry()
        >>> registry.register(context)
        >>> registry.get("dbo.orders")
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._contexts: dict[str, TableContext] = {}

    def register(self, context: TableContext) -> Optional[TableContext]:
        """컨텍스트 등록

        Returns:
            대체된 기존 컨텍스트 또는 None
        """
        with self._lock:
            previous = self._contexts.get(context.qualified_name)
            self._contexts[context.qualified_name] = context

        if previous is not None:
            logger.debug("Table context superseded: %s", context.qualified_name)
        return previous

    def remove(self, qualified_name: str) -> Optional[TableContext]:
        """테이블을 읽기 대상에서 제외"""
        with self._lock:
            return self._contexts.pop(qualified_name, None)

    def get(self, qualified_name: str) -> Optional[TableContext]:
        with self._lock:
            return self._contexts.get(qualified_name)

    def contexts(self) -> list[TableContext]:
        """등록 순서대로 전체 컨텍스트 반환"""
        with self._lock:
            return list(self._contexts.values())

    def partitionable_contexts(self) -> list[TableContext]:
        return [context for context in self.contexts() if context.partitionable]

    def non_partitionable_reasons(self) -> dict[str, tuple[str, ...]]:
        """파티셔닝 불가 테이블별 사유 (검증 화면용)

        설정으로 파티셔닝을 끈 테이블(DISABLED)은 최소값을 조회하지 않으므로 제외합니다.
        """
        return {
            context.qualified_name: context.partitionability.reasons
            for context in self.contexts()
            if not context.partitionable
            and context.partitioning_mode != PartitioningMode.DISABLED
        }

    def clear_start_offsets(self):
        """첫 배치 이후 모든 테이블의 시작 오프셋 제거"""
        for context in self.contexts():
            context.clear_start_offset()

    def __contains__(self, qualified_name: object) -> bool:
        with self._lock:
            return qualified_name in self._contexts

    def __len__(self) -> int:
        with self._lock:
            return len(self._contexts)
