"""
입력 검증 유틸리티
"""

import re
from typing import TYPE_CHECKING, Any

from table_reader.core.partitioning_mode import PartitioningMode

if TYPE_CHECKING:
    from table_reader.models.table_config import TableConfig


class ConnectionValidator:
    """연결 정보 검증"""

    @staticmethod
    def validate_connection_config(config: dict[str, Any]) -> tuple[bool, str]:
        """연결 설정 검증"""
        # 필수 필드 확인
        required_fields = ["host", "port", "database", "username"]
        for field in required_fields:
            if not config.get(field):
                return False, f"{field}는 필수 입력 항목입니다."

        # 호스트 검증
        host = config["host"]
        if len(host) > 255:
            return False, "올바른 호스트 주소를 입력하세요."

        # 포트 검증
        port = config["port"]
        if not isinstance(port, int) or port < 1 or port > 65535:
            return False, "포트는 1-65535 사이의 숫자여야 합니다."

        # 데이터베이스명 검증
        database = config["database"]
        if not re.match(r"^[a-zA-Z0-9_.]+$", database):
            return False, "데이터베이스명은 영문자, 숫자, 언더스코어, 점만 사용 가능합니다."

        # 사용자명 검증
        username = config["username"]
        if not re.match(r"^[a-zA-Z0-9_]+$", username):
            return False, "사용자명은 영문자, 숫자, 언더스코어만 사용 가능합니다."

        return True, ""


class TableConfigValidator:
    """테이블 그룹 설정 검증"""

    @staticmethod
    def validate_table_config(table_config: "TableConfig") -> tuple[bool, str]:
        """테이블 설정 검증

        Returns:
            (유효 여부, 오류 메시지)
        """
        if not table_config.table_pattern or not table_config.table_pattern.strip():
            return False, "테이블 이름 패턴을 입력하세요."

        if table_config.table_exclusion_pattern:
            try:
                re.compile(table_config.table_exclusion_pattern)
            except re.error as e:
                return False, f"제외 패턴이 올바른 정규식이 아닙니다: {e}"

        if table_config.override_default_offset_columns and not table_config.offset_columns:
            return False, "오프셋 컬럼 재정의 시 최소 1개의 오프셋 컬럼을 지정해야 합니다."

        if len(set(table_config.offset_columns)) != len(table_config.offset_columns):
            return False, "오프셋 컬럼이 중복되었습니다."

        if table_config.override_default_offset_columns:
            unknown = [
                column
                for column in table_config.offset_column_to_initial_offset
                if column not in table_config.offset_columns
            ]
            if unknown:
                return False, f"초기 오프셋이 오프셋 컬럼이 아닌 컬럼에 지정되었습니다: {', '.join(unknown)}"

        if not isinstance(table_config.partitioning_mode, PartitioningMode):
            return False, f"잘못된 파티셔닝 모드입니다: {table_config.partitioning_mode}"

        max_partitions = table_config.max_num_active_partitions
        if isinstance(max_partitions, bool) or not isinstance(max_partitions, int):
            return False, "최대 활성 파티션 수는 정수여야 합니다."
        if max_partitions == 0 or max_partitions < -1:
            return False, "최대 활성 파티션 수는 양수 또는 -1(자동)이어야 합니다."

        return True, ""
