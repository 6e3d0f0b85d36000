"""
테이블 식별자 유틸리티

점(.)이나 큰따옴표가 들어간 이름은 PostgreSQL 방식으로 큰따옴표를 씌워
서로 다른 (스키마, 테이블) 쌍이 같은 식별자로 합쳐지지 않게 합니다.
"""

from typing import Optional

_QUOTE = '"'


def _quote_part(name: str) -> str:
    if "." not in name and _QUOTE not in name:
        return name
    return _QUOTE + name.replace(_QUOTE, _QUOTE * 2) + _QUOTE


def get_qualified_table_name(schema: Optional[str], table_name: str) -> str:
    """스키마를 포함한 테이블 식별자 생성

    Args:
        schema: 스키마 이름 (None 또는 빈 문자열 허용)
        table_name: 테이블 이름

    Returns:
        '<schema>.<table_name>' 또는 스키마가 없으면 '<table_name>'

    Raises:
        ValueError: 테이블 이름이 비어있는 경우

    Examples:
        >>> get_qualified_table_name("dbo", "orders")
        'dbo.orders'
        >>> get_qualified_table_name(None, "orders")
        'orders'
        >>> get_qualified_table_name("a.b", "c")
        '"a.b".c'
    """
    if not table_name:
        raise ValueError("테이블 이름은 필수 입력 항목입니다.")

    if not schema:
        return _quote_part(table_name)
    return f"{_quote_part(schema)}.{_quote_part(table_name)}"


def _read_part(qualified_name: str, start: int) -> tuple[str, int]:
    """start 위치의 이름 하나를 읽고 (이름, 다음 위치) 반환"""
    if not qualified_name.startswith(_QUOTE, start):
        end = qualified_name.find(".", start)
        if end == -1:
            end = len(qualified_name)
        part = qualified_name[start:end]
        if _QUOTE in part:
            raise ValueError(f"잘못된 테이블 식별자입니다: {qualified_name}")
        return part, end

    chars = []
    pos = start + 1
    while pos < len(qualified_name):
        char = qualified_name[pos]
        if char == _QUOTE:
            if qualified_name.startswith(_QUOTE, pos + 1):
                chars.append(_QUOTE)
                pos += 2
                continue
            return "".join(chars), pos + 1
        chars.append(char)
        pos += 1
    raise ValueError(f"닫히지 않은 따옴표가 있습니다: {qualified_name}")


def split_qualified_table_name(qualified_name: str) -> tuple[Optional[str], str]:
    """식별자를 (스키마, 테이블 이름)으로 분리

    get_qualified_table_name의 역함수입니다. 따옴표로 감싼 이름 안의 점은
    구분자로 보지 않으며, 스키마가 없으면 None을 반환합니다.
    """
    if not qualified_name:
        raise ValueError("테이블 식별자가 비어있습니다.")

    first, pos = _read_part(qualified_name, 0)
    if pos == len(qualified_name):
        schema, table_name = None, first
    elif qualified_name[pos] == ".":
        table_name, end = _read_part(qualified_name, pos + 1)
        if end != len(qualified_name):
            raise ValueError(f"잘못된 테이블 식별자입니다: {qualified_name}")
        schema = first
    else:
        raise ValueError(f"잘못된 테이블 식별자입니다: {qualified_name}")

    if not table_name:
        raise ValueError(f"테이블 이름이 비어있습니다: {qualified_name}")
    return schema or None, table_name
