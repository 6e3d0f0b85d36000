"""로그 민감정보 마스킹

연결 설정이 로그에 남을 때 비밀번호와 연결 문자열을 가립니다.
"""

import logging
import re


class SensitiveDataMasker:
    """민감정보 마스킹 유틸리티

    Examples:
        >>> SensitiveDataMasker.mask("password=secret123")
        'password=sec***'
    """

    # 마스킹 패턴 (패턴, 치환 문자열) 쌍
    PATTERNS = [
        # password=value 형태
        (r"(password|pwd|pass)=([^\s]{0,3})([^\s]*)", r"\1=\2***"),
        # "password": "value" 또는 'password': 'value' 형태
        (r"""(["'])(password|pwd|pass)\1:\s*(["'])([^"']{0,3})([^"']*)\3""", r"\1\2\1: \3\4***\3"),
        # PostgreSQL 연결 문자열
        (r"(postgresql://[^:]+:)([^@]{0,3})([^@]*)(@)", r"\1\2***\4"),
    ]

    @classmethod
    def mask(cls, message: str) -> str:
        """민감한 데이터 마스킹

        Args:
            message: 원본 메시지

        Returns:
            마스킹된 메시지
        """
        masked = message
        for pattern, replacement in cls.PATTERNS:
            masked = re.sub(pattern, replacement, masked, flags=re.IGNORECASE)
        return masked


class MaskingFilter(logging.Filter):
    """핸들러에 붙여 레코드 메시지를 마스킹하는 필터

    메시지 포맷팅에 실패하면 레코드를 그대로 통과시켜
    emit 단계의 Handler.handleError가 처리하게 합니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            return True
        record.msg = SensitiveDataMasker.mask(message)
        record.args = None
        return True
