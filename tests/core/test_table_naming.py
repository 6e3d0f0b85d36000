"""
테이블 식별자 유틸리티 테스트
"""

import pytest

from table_reader.core.table_naming import get_qualified_table_name, split_qualified_table_name


class TestQualifiedTableName:

    def test_schema_and_table(self):
        assert get_qualified_table_name("dbo", "orders") == "dbo.orders"

    def test_missing_and_empty_schema_resolve_identically(self):
        assert get_qualified_table_name(None, "orders") == "orders"
        assert get_qualified_table_name("", "orders") == "orders"

    @pytest.mark.parametrize("table_name", [None, ""])
    def test_missing_table_name(self, table_name):
        with pytest.raises(ValueError):
            get_qualified_table_name("dbo", table_name)

    def test_deterministic(self):
        assert get_qualified_table_name("dbo", "orders") == get_qualified_table_name("dbo", "orders")


class TestSplitQualifiedTableName:

    def test_with_schema(self):
        assert split_qualified_table_name("dbo.orders") == ("dbo", "orders")

    def test_without_schema(self):
        assert split_qualified_table_name("orders") == (None, "orders")

    def test_inverse_of_qualified_name(self):
        schema, table_name = split_qualified_table_name(get_qualified_table_name("sales", "orders"))

        assert get_qualified_table_name(schema, table_name) == "sales.orders"

    def test_empty(self):
        with pytest.raises(ValueError):
            split_qualified_table_name("")


class TestDottedIdentifiers:
    """점이 포함된 이름은 따옴표로 구분되어 서로 충돌하지 않음"""

    def test_dotted_names_do_not_collide(self):
        first = get_qualified_table_name("a.b", "c")
        second = get_qualified_table_name("a", "b.c")

        assert first == '"a.b".c'
        assert second == 'a."b.c"'
        assert first != second

    @pytest.mark.parametrize(
        "schema,table_name",
        [("a.b", "c"), ("a", "b.c"), (None, "x.y"), ("we\"ird", "t"), ("s", 'q"."r')],
    )
    def test_split_restores_parts(self, schema, table_name):
        qualified_name = get_qualified_table_name(schema, table_name)

        assert split_qualified_table_name(qualified_name) == (schema, table_name)

    def test_quote_escaping(self):
        assert get_qualified_table_name(None, 'x"y') == '"x""y"'

    @pytest.mark.parametrize("qualified_name", ['"a.b', "a.b.c", 'a"b', '"a"b.c', "dbo."])
    def test_malformed(self, qualified_name):
        with pytest.raises(ValueError):
            split_qualified_table_name(qualified_name)
