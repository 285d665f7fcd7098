"""
목적: 구조화 조건 빌더와 WHERE 절 렌더링을 검증한다.
설명: 소유자 조건, 다중 컬럼 검색 그룹, 두 조건의 결합 순서와 바인딩 값 순서를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/definition_store/integrations/db/query_builder/filter_builder.py, src/definition_store/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

import pytest

from definition_store.core.definitions import build_task_definition_schema
from definition_store.integrations.db.base import FilterLogic, FilterOperator
from definition_store.integrations.db.engines.sql_common import (
    SQLConditionBuilder,
    SQLIdentifierHelper,
)
from definition_store.integrations.db.query_builder import FilterBuilder
from definition_store.shared.exceptions import InvalidArgumentError

_SCHEMA = build_task_definition_schema()


def _render(expression, placeholder: str = "?"):
    builder = SQLConditionBuilder(SQLIdentifierHelper(), placeholder)
    return builder.render(expression, _SCHEMA)


def test_no_conditions_renders_empty_clause() -> None:
    """조건이 없으면 WHERE 절과 바인딩 값이 모두 비는지 확인한다."""

    expression = FilterBuilder.scoped_search("CREATOR", None, [], None)
    rendered = _render(expression)

    assert expression is None
    assert rendered.sql == ""
    assert rendered.params == []


def test_owner_only() -> None:
    """소유자 조건만 있을 때의 WHERE 절을 확인한다."""

    rendered = _render(FilterBuilder.scoped_search("CREATOR", "alice"))

    assert rendered.sql == 'WHERE "CREATOR" = ?'
    assert rendered.params == ["alice"]


def test_search_only_is_parenthesized() -> None:
    """검색 그룹만 있을 때도 괄호로 감싸지는지 확인한다."""

    rendered = _render(
        FilterBuilder.scoped_search(
            "CREATOR", None, ["DEFINITION_NAME", "DEFINITION"], "foo"
        )
    )

    assert rendered.sql == (
        'WHERE (lower("DEFINITION_NAME") LIKE lower(?) '
        'OR lower("DEFINITION") LIKE lower(?))'
    )
    assert rendered.params == ["%foo%", "%foo%"]


def test_owner_and_search_order() -> None:
    """소유자 조건이 먼저, 검색 그룹이 다음에 결합되는지 확인한다."""

    rendered = _render(
        FilterBuilder.scoped_search(
            "CREATOR", "alice", ["DEFINITION_NAME", "DEFINITION"], "foo"
        )
    )

    assert rendered.sql == (
        'WHERE "CREATOR" = ? AND (lower("DEFINITION_NAME") LIKE lower(?) '
        'OR lower("DEFINITION") LIKE lower(?))'
    )
    assert rendered.params == ["alice", "%foo%", "%foo%"]
    assert rendered.sql.count("?") == len(rendered.params)


def test_postgres_placeholder() -> None:
    """PostgreSQL 자리표시자로 렌더링되는지 확인한다."""

    rendered = _render(
        FilterBuilder.scoped_search("CREATOR", "bob", ["DEFINITION"], "x"),
        placeholder="%s",
    )

    assert rendered.sql == 'WHERE "CREATOR" = %s AND (lower("DEFINITION") LIKE lower(%s))'
    assert rendered.params == ["bob", "%x%"]


@pytest.mark.parametrize("text", [None, ""])
def test_empty_search_text_matches_all(text) -> None:
    """검색어가 없거나 빈 문자열이면 검색 그룹을 만들지 않는지 확인한다."""

    expression = FilterBuilder.scoped_search("CREATOR", "alice", ["DEFINITION"], text)

    assert expression is not None
    assert len(expression.groups) == 1
    assert expression.groups[0].conditions[0].operator == FilterOperator.EQ


def test_whitespace_search_text_is_a_real_substring() -> None:
    """공백만 있는 검색어도 부분 일치 패턴으로 바인딩되는지 확인한다."""

    rendered = _render(FilterBuilder.scoped_search("CREATOR", "alice", ["DEFINITION"], " "))

    assert rendered.sql == 'WHERE "CREATOR" = ? AND (lower("DEFINITION") LIKE lower(?))'
    assert rendered.params == ["alice", "% %"]


def test_search_group_structure() -> None:
    """검색 그룹이 컬럼별 ILIKE 조건의 OR 그룹인지 확인한다."""

    expression = FilterBuilder().search(["A", "B"], "q").build()

    group = expression.groups[0]
    assert group.logic == FilterLogic.OR
    assert [c.field for c in group.conditions] == ["A", "B"]
    assert all(c.operator == FilterOperator.ILIKE for c in group.conditions)
    assert all(c.value == "%q%" for c in group.conditions)


def test_wildcards_in_search_text_pass_through() -> None:
    """검색어 안의 LIKE 와일드카드는 그대로 전달되는지 확인한다."""

    rendered = _render(FilterBuilder().search(["DEFINITION"], "50%_off").build())

    assert rendered.params == ["%50%_off%"]


def test_search_value_is_never_interpolated() -> None:
    """검색어가 SQL 문자열에 포함되지 않는지 확인한다."""

    hostile = "x') OR 1=1 --"
    rendered = _render(FilterBuilder().search(["DEFINITION"], hostile).build())

    assert hostile not in rendered.sql
    assert rendered.params == [f"%{hostile}%"]


def test_unknown_column_is_rejected() -> None:
    """스키마에 없는 컬럼은 렌더링 시 거부되는지 확인한다."""

    expression = FilterBuilder().search(["NOT_A_COLUMN"], "x").build()

    with pytest.raises(InvalidArgumentError):
        _render(expression)


def test_where_in_requires_values() -> None:
    """IN 조건은 빈 값 목록을 거부하는지 확인한다."""

    with pytest.raises(InvalidArgumentError):
        FilterBuilder().where_in("DEFINITION_NAME", [])

    rendered = _render(FilterBuilder().where_in("definition_name", ["a", "b"]).build())
    assert rendered.sql == 'WHERE "DEFINITION_NAME" IN (?, ?)'
    assert rendered.params == ["a", "b"]
