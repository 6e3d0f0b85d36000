"""베이스 리포지토리 패턴

CRUD 공통 로직을 제공하는 베이스 리포지토리와
엔티티별 전용 리포지토리를 정의합니다.
"""

from contextlib import contextmanager
from typing import Generic, Optional, TypeVar

from .local_db import TableOffset, get_db

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """CRUD 공통 로직을 제공하는 베이스 리포지토리

    Args:
        model_class: SQLAlchemy 모델 클래스
        db: 데이터베이스 인스턴스 (테스트용 주입 가능)
    """

    def __init__(self, model_class: type[T], db=None):
        self.model_class = model_class
        self.db = db or get_db()

    @contextmanager
    def _session_scope(self):
        """트랜잭션 컨텍스트 매니저"""
        with self.db.session_scope() as session:
            yield session

    # CREATE
    def create(self, **kwargs) -> T:
        """엔티티 생성"""
        with self._session_scope() as session:
            obj = self.model_class(**kwargs)
            session.add(obj)
            session.flush()  # ID 생성
            session.refresh(obj)
            # 세션이 닫히기 전에 분리 (Detached 접근 허용)
            session.expunge(obj)
            return obj

    # READ
    def get_one_by(self, **filters) -> Optional[T]:
        """조건으로 단건 조회"""
        with self._session_scope() as session:
            obj = session.query(self.model_class).filter_by(**filters).first()
            if obj:
                session.expunge(obj)
            return obj

    def get_all(self, order_by=None) -> list[T]:
        """전체 조회"""
        with self._session_scope() as session:
            query = session.query(self.model_class)
            if order_by is not None:
                query = query.order_by(order_by)
            results = query.all()
            for obj in results:
                session.expunge(obj)
            return results

    # DELETE
    def delete_by(self, **filters) -> bool:
        """조건으로 삭제

        Returns:
            삭제 여부
        """
        with self._session_scope() as session:
            obj = session.query(self.model_class).filter_by(**filters).first()
            if obj:
                session.delete(obj)
                return True
            return False

    def count(self, **filters) -> int:
        """개수 세기"""
        with self._session_scope() as session:
            query = session.query(self.model_class)
            if filters:
                query = query.filter_by(**filters)
            return query.count()


class TableOffsetRepository(BaseRepository[TableOffset]):
    """TableOffset 전용 리포지토리"""

    def __init__(self, db=None):
        super().__init__(TableOffset, db)

    def get_by_qualified_name(self, qualified_name: str) -> Optional[TableOffset]:
        """테이블 식별자로 조회"""
        return self.get_one_by(qualified_name=qualified_name)

    def upsert(self, qualified_name: str, offsets: str) -> TableOffset:
        """오프셋 저장 (없으면 생성, 있으면 갱신)

        Args:
            qualified_name: 테이블 식별자
            offsets: JSON 직렬화된 오프셋 맵
        """
        with self._session_scope() as session:
            obj = session.query(TableOffset).filter_by(qualified_name=qualified_name).first()
            if obj is None:
                obj = TableOffset(qualified_name=qualified_name, offsets=offsets)
                session.add(obj)
            else:
                obj.offsets = offsets
            session.flush()
            session.refresh(obj)
            session.expunge(obj)
            return obj

    def get_all_by_name(self) -> list[TableOffset]:
        """식별자 오름차순 전체 조회"""
        return self.get_all(order_by=TableOffset.qualified_name)
