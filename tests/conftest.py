"""
pytest 설정 및 공통 픽스처
"""

import os
import tempfile

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from table_reader.core.column_types import ColumnType
from table_reader.core.table_context import TableContext
from table_reader.database.local_db import Base, LocalDatabase


@pytest.fixture(scope="function")
def temp_db():
    """임시 테스트 데이터베이스 픽스처"""
    # 임시 데이터베이스 파일 생성
    temp_fd, temp_path = tempfile.mkstemp(suffix=".db")

    test_db = LocalDatabase(db_path=temp_path)
    try:
        test_db.engine = create_engine(f"sqlite:///{temp_path}", echo=False)

        # 테이블 생성
        Base.metadata.create_all(test_db.engine)

        # 세션 팩토리 생성
        test_db.Session = sessionmaker(bind=test_db.engine)

        yield test_db

    finally:
        # 정리
        if test_db.engine:
            test_db.engine.dispose()
        os.close(temp_fd)
        os.unlink(temp_path)


@pytest.fixture
def orders_context():
    """파티셔닝 가능한 단일 오프셋 컬럼 테이블"""
    return TableContext(
        "dbo",
        "orders",
        {"order_id": ColumnType.INTEGER},
        offset_column_to_start_offset={"order_id": "100"},
        offset_column_to_min_values={"order_id": "1"},
    )


@pytest.fixture
def sample_connection_config():
    """샘플 연결 설정"""
    return {
        "host": "source.example.com",
        "port": 5432,
        "database": "source_db",
        "username": "source_user",
        "password": "source_pass",
        "ssl": False,
    }
