"""
로컬 SQLite 오프셋 저장소
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from table_reader.utils.app_paths import AppPaths

Base = declarative_base()


class TableOffset(Base):
    """테이블별 마지막 오프셋 (재개용)"""

    __tablename__ = "table_offsets"

    id = Column(Integer, primary_key=True)
    qualified_name = Column(String(255), unique=True, nullable=False, index=True)
    offsets = Column(Text, nullable=False)  # JSON: 컬럼 -> 오프셋 문자열
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class LocalDatabase:
    """로컬 데이터베이스 관리 클래스"""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or self._get_db_path()
        self.engine = None
        self.Session = None

    def _get_db_path(self):
        """데이터베이스 파일 경로 가져오기 (AppPaths 활용)"""
        return str(AppPaths.get_db_path())

    def initialize(self):
        """데이터베이스 초기화"""
        self.engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

        # 테이블 생성
        Base.metadata.create_all(self.engine)

        # 세션 팩토리 생성
        self.Session = sessionmaker(bind=self.engine)

    def get_session(self):
        """데이터베이스 세션 반환"""
        if not self.Session:
            raise RuntimeError("데이터베이스가 초기화되지 않았습니다.")
        return self.Session()

    @contextmanager
    def session_scope(self):
        """트랜잭션 컨텍스트 매니저

        자동으로 commit/rollback/close를 처리합니다.

        Usage:
            with self.db.session_scope() as session:
                session.add(obj)
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """데이터베이스 연결 종료"""
        if self.engine:
            self.engine.dispose()


# 전역 데이터베이스 인스턴스
_db_instance = None


def get_db():
    """데이터베이스 인스턴스 반환"""
    global _db_instance
    if _db_instance is None:
        _db_instance = LocalDatabase()
        _db_instance.initialize()
    return _db_instance
