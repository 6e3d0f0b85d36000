"""
파티셔닝 가능 여부 판정 테스트
"""

from types import SimpleNamespace

import pytest

from table_reader.core.column_types import PARTITIONABLE_TYPES, ColumnType
from table_reader.core.partitionability import (
    PartitionabilityResult,
    evaluate_partitionability,
    is_partitionable,
)


def make_candidate(offset_column_to_type, min_values=None, qualified_name="dbo.orders"):
    """판정 입력용 경량 객체"""
    return SimpleNamespace(
        qualified_name=qualified_name,
        offset_column_to_type=offset_column_to_type,
        offset_column_to_min_values=min_values or {},
    )


class TestEvaluatePartitionability:
    """규칙별 판정 검증"""

    def test_single_integer_column_with_min_value(self):
        """정수 오프셋 컬럼 + 최소값 → 파티셔닝 가능"""
        candidate = make_candidate({"order_id": ColumnType.INTEGER}, {"order_id": "1"})

        result = evaluate_partitionability(candidate)

        assert result.partitionable is True
        assert result.reasons == ()
        assert bool(result) is True

    def test_more_than_one_offset_column(self):
        """오프셋 컬럼이 2개면 불가"""
        candidate = make_candidate(
            {"order_id": ColumnType.INTEGER, "order_date": ColumnType.DATE},
            {"order_id": "1", "order_date": "2024-01-01"},
        )

        result = evaluate_partitionability(candidate)

        assert result.partitionable is False
        assert len(result.reasons) == 1
        assert "more than one offset column" in result.reasons[0]
        assert "dbo.orders" in result.reasons[0]

    def test_unsupported_type(self):
        """VARCHAR 오프셋 컬럼은 불가, 사유에 타입 이름 포함"""
        candidate = make_candidate({"notes": ColumnType.VARCHAR}, {"notes": "a"})

        result = evaluate_partitionability(candidate)

        assert result.partitionable is False
        assert "not partitionable" in result.reasons[0]
        assert "VARCHAR" in result.reasons[0]
        assert "notes" in result.reasons[0]

    @pytest.mark.parametrize(
        "column_type",
        [ColumnType.BOOLEAN, ColumnType.BLOB, ColumnType.CHAR, ColumnType.TIMESTAMP_WITH_TIMEZONE],
    )
    def test_types_outside_registry(self, column_type):
        """레지스트리 밖의 타입은 모두 불가"""
        candidate = make_candidate({"col": column_type}, {"col": "x"})

        result = evaluate_partitionability(candidate)

        assert result.partitionable is False
        assert column_type.value in result.reasons[0]

    @pytest.mark.parametrize("column_type", sorted(PARTITIONABLE_TYPES, key=lambda t: t.value))
    def test_types_inside_registry(self, column_type):
        """레지스트리 안의 타입은 최소값이 있으면 가능"""
        candidate = make_candidate({"col": column_type}, {"col": "1"})

        assert evaluate_partitionability(candidate).partitionable is True

    def test_missing_min_value(self):
        """최소값이 없으면 (빈 테이블) 불가"""
        candidate = make_candidate({"order_id": ColumnType.INTEGER}, {})

        result = evaluate_partitionability(candidate)

        assert result.partitionable is False
        assert "minimum value" in result.reasons[0]
        assert "INTEGER" in result.reasons[0]

    def test_none_min_value_counts_as_missing(self):
        """최소값이 None이면 없는 것으로 취급"""
        candidate = make_candidate({"order_id": ColumnType.INTEGER}, {"order_id": None})

        assert evaluate_partitionability(candidate).partitionable is False

    def test_zero_offset_columns_is_degenerate_but_partitionable(self):
        """오프셋 컬럼이 없으면 판정상 가능, 사유 없음"""
        candidate = make_candidate({})

        result = evaluate_partitionability(candidate)

        assert result == PartitionabilityResult(True, ())


class TestReasonCollection:
    """사유 수집 모드 검증"""

    def test_output_reasons_receives_reason(self):
        """호출자 리스트에 사유가 추가됨"""
        candidate = make_candidate({"notes": ColumnType.VARCHAR})
        reasons = ["existing"]

        evaluate_partitionability(candidate, reasons)

        assert reasons[0] == "existing"
        assert len(reasons) == 2
        assert "VARCHAR" in reasons[1]

    def test_stop_at_first_failure(self):
        """기본 모드는 첫 실패에서 멈춤"""
        candidate = make_candidate({"a": ColumnType.VARCHAR, "b": ColumnType.BLOB})

        result = evaluate_partitionability(candidate)

        assert len(result.reasons) == 1
        assert "more than one offset column" in result.reasons[0]

    def test_collect_all_reasons(self):
        """collect_all 모드는 모든 사유를 수집"""
        candidate = make_candidate(
            {"a": ColumnType.VARCHAR, "b": ColumnType.INTEGER},
            {"a": "x"},
        )

        result = evaluate_partitionability(candidate, collect_all=True)

        assert result.partitionable is False
        assert len(result.reasons) == 3
        assert "more than one offset column" in result.reasons[0]
        assert "a column (type VARCHAR) is not partitionable" in result.reasons[1]
        assert "b column (type INTEGER)" in result.reasons[2]
        assert "minimum value" in result.reasons[2]

    def test_collect_all_unsupported_type_and_missing_min(self):
        """한 컬럼에서 타입과 최소값 사유가 모두 수집됨"""
        candidate = make_candidate({"notes": ColumnType.VARCHAR})

        result = evaluate_partitionability(candidate, collect_all=True)

        assert len(result.reasons) == 2
        assert "not partitionable" in result.reasons[0]
        assert "minimum value" in result.reasons[1]

    def test_collect_all_same_verdict_as_stop_at_first(self):
        """두 모드의 판정 결과는 같음"""
        candidates = [
            make_candidate({"order_id": ColumnType.INTEGER}, {"order_id": "1"}),
            make_candidate({"order_id": ColumnType.INTEGER}),
            make_candidate({"a": ColumnType.INTEGER, "b": ColumnType.INTEGER}, {"a": "1", "b": "1"}),
        ]

        for candidate in candidates:
            assert (
                evaluate_partitionability(candidate).partitionable
                == evaluate_partitionability(candidate, collect_all=True).partitionable
            )

    def test_idempotent(self):
        """같은 입력이면 같은 결과"""
        candidate = make_candidate({"notes": ColumnType.VARCHAR})

        first = evaluate_partitionability(candidate)
        second = evaluate_partitionability(candidate)

        assert first == second

    def test_reasons_logged_at_debug(self, caplog):
        """사유는 DEBUG 로그로 남음"""
        candidate = make_candidate({"order_id": ColumnType.INTEGER})

        with caplog.at_level("DEBUG", logger="table_reader.core.partitionability"):
            evaluate_partitionability(candidate)

        assert any("minimum value" in record.getMessage() for record in caplog.records)


class TestIsPartitionable:
    """편의 함수 검증"""

    def test_returns_bool(self):
        assert is_partitionable(make_candidate({"id": ColumnType.BIGINT}, {"id": "5"})) is True
        assert is_partitionable(make_candidate({"id": ColumnType.BIGINT})) is False

    def test_fills_reasons(self):
        reasons = []

        is_partitionable(make_candidate({"id": ColumnType.UUID}, {"id": "x"}), reasons)

        assert len(reasons) == 1
        assert "UUID" in reasons[0]
