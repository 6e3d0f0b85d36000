"""
테이블 오프셋 저장 모델 및 관리자

파이프라인 재시작 시 마지막으로 기록된 오프셋을 읽어
TableContext의 시작 오프셋으로 주입합니다.
"""
import json
import logging
from datetime import datetime
from typing import Dict, List, Optional

from table_reader.core.table_context import TableContext
from table_reader.database.local_db import TableOffset
from table_reader.database.repository import TableOffsetRepository

logger = logging.getLogger(__name__)


class TableOffsetItem:
    """테이블 오프셋 데이터 클래스"""

    def __init__(self, id: Optional[int] = None, qualified_name: str = "",
                 offsets: Optional[Dict[str, str]] = None,
                 updated_at: Optional[datetime] = None):
        self.id = id
        self.qualified_name = qualified_name
        self.offsets = offsets or {}
        self.updated_at = updated_at

    @classmethod
    def from_db_model(cls, db_offset: TableOffset) -> 'TableOffsetItem':
        """DB 모델에서 생성"""
        return cls(
            id=db_offset.id,
            qualified_name=db_offset.qualified_name,
            offsets=json.loads(db_offset.offsets) if db_offset.offsets else {},
            updated_at=db_offset.updated_at
        )


class OffsetStoreManager:
    """오프셋 저장소 관리자 클래스 (TableOffsetRepository 활용)"""

    def __init__(self, repo: Optional[TableOffsetRepository] = None):
        self.repo = repo or TableOffsetRepository()

    def save_offsets(self, qualified_name: str, offsets: Dict[str, str]) -> TableOffsetItem:
        """테이블의 현재 오프셋 저장 (전체 교체)"""
        db_offset = self.repo.upsert(
            qualified_name,
            json.dumps({column: str(value) for column, value in offsets.items()}, sort_keys=True)
        )
        return TableOffsetItem.from_db_model(db_offset)

    def load_offsets(self, qualified_name: str) -> Dict[str, str]:
        """저장된 오프셋 조회 (없으면 빈 딕셔너리)"""
        db_offset = self.repo.get_by_qualified_name(qualified_name)
        if db_offset:
            return TableOffsetItem.from_db_model(db_offset).offsets
        return {}

    def get_all_offsets(self) -> List[TableOffsetItem]:
        """모든 테이블 오프셋 조회"""
        return [
            TableOffsetItem.from_db_model(o)
            for o in self.repo.get_all_by_name()
        ]

    def delete_offsets(self, qualified_name: str) -> bool:
        """오프셋 초기화 (테이블을 처음부터 다시 읽음)"""
        return self.repo.delete_by(qualified_name=qualified_name)

    def restore_start_offsets(self, context: TableContext) -> bool:
        """저장된 오프셋을 컨텍스트의 시작 오프셋으로 주입

        오프셋 컬럼이 아닌 항목은 무시합니다.

        Returns:
            주입 여부 (저장된 오프셋이 없으면 False, 컨텍스트는 변경하지 않음)
        """
        offsets = self.load_offsets(context.qualified_name)
        resumed = {
            column: value
            for column, value in offsets.items()
            if column in context.offset_column_to_type
        }
        if not resumed:
            return False

        context.set_offset_column_to_start_offset(resumed)
        logger.info("Resuming table %s from offsets %s", context.qualified_name, resumed)
        return True
