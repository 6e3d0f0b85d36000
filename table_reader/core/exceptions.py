"""
테이블 리더 예외 정의
"""

from typing import Sequence


class TableReaderError(Exception):
    """테이블 리더 공통 예외"""


class PartitioningRequiredError(TableReaderError):
    """파티셔닝이 필수(REQUIRED)이지만 테이블이 파티셔닝 불가능한 경우"""

    def __init__(self, qualified_name: str, reasons: Sequence[str]):
        self.qualified_name = qualified_name
        self.reasons = tuple(reasons)
        message = (
            f"Partitioning was set to required, but table {qualified_name} "
            f"is not partitionable: {'; '.join(self.reasons)}"
        )
        super().__init__(message)


class TableDiscoveryError(TableReaderError):
    """테이블/컬럼 탐색 오류"""
